"""Lazy-initialized Firebase clients, reused across warm invocations."""

import json
import logging
from functools import lru_cache
from typing import Any

import firebase_admin
from firebase_admin import credentials, exceptions, messaging

from core.config import get_config
from core.errors import DeliveryError

logger = logging.getLogger(__name__)


class MessagingClient:
    """Thin wrapper around ``firebase_admin.messaging.send`` bound to one app."""

    def __init__(self, app: Any, dry_run: bool = False):
        self._app = app
        self.dry_run = dry_run

    def send(self, message: messaging.Message) -> str:
        """Send one message and return its FCM message id."""
        try:
            return messaging.send(message, dry_run=self.dry_run, app=self._app)
        except (exceptions.FirebaseError, ValueError) as exc:
            # ValueError covers topics FCM rejects before any request is made
            raise DeliveryError(f"Send to topic {message.topic} failed: {exc}") from exc


@lru_cache(maxsize=1)
def get_firebase_app() -> Any:
    """Initialize the default Firebase app once per process."""
    config = get_config()

    if config.firebase_credentials:
        cred: Any = credentials.Certificate(json.loads(config.firebase_credentials))
    else:
        cred = credentials.ApplicationDefault()

    options = {"projectId": config.firebase_project_id} if config.firebase_project_id else None
    app = firebase_admin.initialize_app(cred, options)
    logger.info("Initialized Firebase app for project %s", config.firebase_project_id or "<default>")
    return app


@lru_cache(maxsize=1)
def get_messaging_client() -> MessagingClient:
    config = get_config()
    return MessagingClient(get_firebase_app(), dry_run=config.fcm_dry_run)
