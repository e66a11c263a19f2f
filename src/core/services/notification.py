"""Skill-topic notification fan-out for new emergency requests."""

import logging
import re
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from typing import Any

from core.models.emergency import CLICK_ACTION, EMERGENCY_CHANNEL_ID, EMERGENCY_TYPE, EmergencyRequest, NotificationMessage

logger = logging.getLogger(__name__)

TOPIC_PREFIX = "skill_"
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class DispatchFailure:
    topic: str
    error: BaseException


@dataclass
class DispatchResult:
    sent: list[str] = field(default_factory=list)
    failures: list[DispatchFailure] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.sent) + len(self.failures)


def derive_topic(skill: str) -> str:
    """Map a free-text skill to its FCM topic, e.g. "Water Rescue" -> "skill_water_rescue"."""
    return TOPIC_PREFIX + _WHITESPACE.sub("_", skill.lower())


def build_messages(request: EmergencyRequest) -> list[NotificationMessage]:
    """One message per required skill, duplicates included."""
    return [
        NotificationMessage(
            topic=derive_topic(skill),
            title=f"Emergency Request: {request.title}",
            body=f"{request.requester_name} needs help with {skill}",
            data={
                "type": EMERGENCY_TYPE,
                "requestId": request.id,
                "requesterId": request.requester_id,
                "requesterName": request.requester_name,
                "skill": skill,
                "channel_id": EMERGENCY_CHANNEL_ID,
                "isOwnRequest": "false",
                "click_action": CLICK_ACTION,
            },
        )
        for skill in request.required_skills
    ]


def dispatch_messages(messages: list[NotificationMessage], client: Any) -> DispatchResult:
    """Send every message concurrently and wait for all of them to settle.

    A failed send never cancels the others.
    """
    result = DispatchResult()
    if not messages:
        return result

    with ThreadPoolExecutor(max_workers=len(messages)) as pool:
        futures = {pool.submit(_send, client, message): message for message in messages}
        wait(futures)

    for future, message in futures.items():
        error = future.exception()
        if error is None:
            result.sent.append(future.result())
        else:
            result.failures.append(DispatchFailure(topic=message.topic, error=error))
    return result


def _send(client: Any, message: NotificationMessage) -> str:
    logger.info("Sending notification to topic: %s", message.topic)
    return client.send(message.to_fcm())


def notify_skill_subscribers(request: EmergencyRequest, client: Any) -> DispatchResult | None:
    """Notify subscribers of every skill the request needs.

    Returns None when the request lists no skills. Delivery failures are
    logged, not raised.
    """
    if not request.required_skills:
        logger.info("No required skills specified for request %s", request.id)
        return None

    result = dispatch_messages(build_messages(request), client)

    if result.failures:
        for failure in result.failures:
            logger.error("Error sending emergency notification to %s: %s", failure.topic, failure.error)
        logger.error(
            "%d of %d emergency notifications failed for request %s",
            len(result.failures),
            result.attempted,
            request.id,
        )
    else:
        logger.info("Successfully sent %d emergency notifications", len(result.sent))

    return result
