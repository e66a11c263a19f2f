"""
Pydantic models for the emergency dispatcher.
"""

from core.models.emergency import EmergencyRequest, NotificationMessage

__all__ = ["EmergencyRequest", "NotificationMessage"]
