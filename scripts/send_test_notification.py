#!/usr/bin/env python3
"""Send a sample emergency request through the dispatch handler.

Builds a Firestore document-created event and runs the onCreate handler
against the configured Firebase project. Set FCM_DRY_RUN=true to have FCM
validate the messages without delivering them.

Usage:
    FCM_DRY_RUN=true python scripts/send_test_notification.py "Water Rescue" "First Aid"
"""

import logging
import sys
import uuid
from pathlib import Path

# Add src to path for handler import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import get_config
from handlers.emergency_request_created import handler


def build_event(collection: str, skills: list[str]) -> dict:
    request_id = f"local-{uuid.uuid4().hex[:8]}"
    return {
        "oldValue": {},
        "value": {
            "name": f"projects/local/databases/(default)/documents/{collection}/{request_id}",
            "fields": {
                "title": {"stringValue": "Local test request"},
                "requesterId": {"stringValue": "local-user"},
                "requesterName": {"stringValue": "Local Tester"},
                "requiredSkills": {"arrayValue": {"values": [{"stringValue": s} for s in skills]}},
            },
        },
    }


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    skills = sys.argv[1:] or ["First Aid"]
    config = get_config()

    print(f"Dispatching {len(skills)} skill(s) to project {config.firebase_project_id or '<default>'}")
    if config.fcm_dry_run:
        print("FCM dry run: messages are validated, not delivered")

    handler(build_event(config.emergency_requests_collection, skills), None)


if __name__ == "__main__":
    main()
