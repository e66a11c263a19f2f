"""Firestore onCreate handler for emergencyRequests documents."""

import logging
from typing import Any

from core.clients import get_messaging_client
from core.config import get_config
from core.events import parse_document_created
from core.models import EmergencyRequest
from core.services.notification import notify_skill_subscribers

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object, messaging_client: Any = None) -> None:
    """Fan out skill notifications for a newly created emergency request.

    Always returns None. Errors are logged, never raised, so the trigger
    platform does not retry the whole invocation.
    """
    try:
        config = get_config()

        request_id, fields = parse_document_created(event, config.emergency_requests_collection)
        logger.info("New emergency request created: %s", request_id)

        request = EmergencyRequest.model_validate({**fields, "id": request_id})
        notify_skill_subscribers(request, messaging_client or get_messaging_client())
    except Exception:
        logger.exception("Error sending emergency notifications")

    return None
