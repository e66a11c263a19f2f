"""
Business services for the emergency dispatcher.

- notification.py: skill topic derivation and concurrent FCM fan-out
"""

__all__: list[str] = []
