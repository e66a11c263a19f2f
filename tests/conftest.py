"""Shared test fixtures for the emergency dispatcher."""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unit tests never reach real Firebase or Secrets Manager
for var in ("FIREBASE_CREDENTIALS_SECRET_ARN", "AWS_PROFILE"):
    os.environ.pop(var, None)

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

DOCUMENT_ROOT = "projects/demo-project/databases/(default)/documents"


@pytest.fixture(autouse=True)
def _clear_config_cache():
    from core.config import _reset_config

    _reset_config()
    yield
    _reset_config()


@pytest.fixture
def created_event():
    """Build a Firestore document-created payload."""

    def _build(request_id, fields, collection="emergencyRequests"):
        return {
            "oldValue": {},
            "updateMask": {},
            "value": {
                "name": f"{DOCUMENT_ROOT}/{collection}/{request_id}",
                "fields": fields,
                "createTime": "2026-10-19T08:00:00.000000Z",
                "updateTime": "2026-10-19T08:00:00.000000Z",
            },
        }

    return _build


@pytest.fixture
def emergency_fields():
    return {
        "title": {"stringValue": "Flooded basement"},
        "requesterId": {"stringValue": "user-42"},
        "requesterName": {"stringValue": "Dana"},
        "requiredSkills": {
            "arrayValue": {"values": [{"stringValue": "Water Rescue"}, {"stringValue": "First Aid"}]},
        },
        "createdAt": {"timestampValue": "2026-10-19T08:00:00Z"},
    }


@pytest.fixture
def messaging_client():
    """Push client stub that records every message it is asked to send."""
    client = MagicMock()
    client.send.side_effect = lambda message: f"projects/demo-project/messages/{message.topic}"
    return client
