from os import environ

import boto3
from pydantic import BaseModel, ConfigDict

from core.errors import CredentialsError

_cached_firebase_credentials: str | None = None


def _resolve_firebase_credentials() -> str | None:
    """Fetch the Firebase service-account JSON at runtime, with caching.

    Returns None when neither source is configured, in which case
    Application Default Credentials are used.
    """
    global _cached_firebase_credentials
    if _cached_firebase_credentials is not None:
        return _cached_firebase_credentials

    # Local dev: use env var directly
    direct = environ.get("FIREBASE_CREDENTIALS_JSON", "")
    if direct:
        _cached_firebase_credentials = direct
        return direct

    # Deployed: fetch from Secrets Manager by ARN
    arn = environ.get("FIREBASE_CREDENTIALS_SECRET_ARN", "")
    if not arn:
        return None

    client = boto3.client("secretsmanager")
    try:
        secret = client.get_secret_value(SecretId=arn)["SecretString"]
    except Exception as exc:
        raise CredentialsError(f"Could not read Firebase credentials from {arn}") from exc
    _cached_firebase_credentials = secret
    return secret


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    environment: str
    aws_region: str
    firebase_project_id: str | None = None
    firebase_credentials: str | None = None
    emergency_requests_collection: str = "emergencyRequests"
    fcm_dry_run: bool = False


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config — for testing only."""
    global _cached_config, _cached_firebase_credentials
    _cached_config = None
    _cached_firebase_credentials = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        environment=environ.get("ENVIRONMENT", "local"),
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        firebase_project_id=environ.get("FIREBASE_PROJECT_ID") or None,
        firebase_credentials=_resolve_firebase_credentials(),
        emergency_requests_collection=environ.get("EMERGENCY_REQUESTS_COLLECTION", "emergencyRequests"),
        fcm_dry_run=environ.get("FCM_DRY_RUN", "false").lower() in ("1", "true", "yes"),
    )
    return _cached_config
