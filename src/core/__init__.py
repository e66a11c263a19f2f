"""
Core business logic package for the emergency dispatcher.

All business logic, event decoding and push-client integration live here.
Handlers in src/handlers/ are thin wrappers that call into core/.
"""

__all__: list[str] = []
