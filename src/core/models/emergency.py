import logging

from firebase_admin import messaging
from pydantic import BaseModel, ConfigDict, Field, field_validator

EMERGENCY_TYPE = "emergency"
EMERGENCY_CHANNEL_ID = "emergency_channel"
CLICK_ACTION = "FLUTTER_NOTIFICATION_CLICK"

logger = logging.getLogger(__name__)


class EmergencyRequest(BaseModel):
    """Newly created emergency request document.

    Display fields are not validated: a missing title or requester
    degrades to an empty string in the outgoing notification.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    title: str = ""
    requester_id: str = Field(default="", alias="requesterId")
    requester_name: str = Field(default="", alias="requesterName")
    required_skills: list[str] = Field(default_factory=list, alias="requiredSkills")

    @field_validator("title", "requester_id", "requester_name", mode="before")
    @classmethod
    def none_as_empty(cls, value: object) -> object:
        return "" if value is None else str(value)

    @field_validator("required_skills", mode="before")
    @classmethod
    def text_skills_only(cls, value: object) -> object:
        if value is None:
            return []
        if not isinstance(value, list):
            return value
        skills = [skill for skill in value if isinstance(skill, str)]
        if len(skills) != len(value):
            logger.warning("Ignoring %d non-text required skills", len(value) - len(skills))
        return skills


class NotificationMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    topic: str
    title: str
    body: str
    data: dict[str, str]

    def to_fcm(self) -> messaging.Message:
        return messaging.Message(
            notification=messaging.Notification(title=self.title, body=self.body),
            data=dict(self.data),
            topic=self.topic,
        )
