"""HTTP health endpoint."""

from typing import Any

GREETING = "Hello from Firebase!"


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    """Acknowledge any request. Headers and body are ignored."""
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "text/plain"},
        "body": GREETING,
    }
