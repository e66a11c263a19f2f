"""Unit tests for configuration management."""

import os
from unittest.mock import MagicMock, patch

import pydantic
import pytest

from core.config import get_config
from core.errors import CredentialsError, ErrorCode


def test_get_config_defaults():
    """Test that get_config provides sensible defaults."""
    with patch.dict(os.environ, {}, clear=True):
        config = get_config()
        assert config.environment == "local"
        assert config.aws_region == "us-east-1"
        assert config.emergency_requests_collection == "emergencyRequests"
        assert config.firebase_project_id is None
        assert config.firebase_credentials is None
        assert config.fcm_dry_run is False


def test_get_config_is_cached():
    with patch.dict(os.environ, {}, clear=True):
        assert get_config() is get_config()


def test_fcm_dry_run_flag_parsing():
    with patch.dict(os.environ, {"FCM_DRY_RUN": "True"}, clear=True):
        assert get_config().fcm_dry_run is True


def test_credentials_from_env_skip_secrets_manager():
    env = {"FIREBASE_CREDENTIALS_JSON": '{"type": "service_account"}', "FIREBASE_CREDENTIALS_SECRET_ARN": "arn:x"}
    with patch.dict(os.environ, env, clear=True), patch("core.config.boto3") as mock_boto3:
        config = get_config()

        assert config.firebase_credentials == '{"type": "service_account"}'
        mock_boto3.client.assert_not_called()


def test_credentials_from_secrets_manager():
    arn = "arn:aws:secretsmanager:us-east-1:123456789012:secret:firebase"
    with patch.dict(os.environ, {"FIREBASE_CREDENTIALS_SECRET_ARN": arn}, clear=True), patch("core.config.boto3") as mock_boto3:
        mock_client = MagicMock()
        mock_client.get_secret_value.return_value = {"SecretString": '{"project_id": "demo-project"}'}
        mock_boto3.client.return_value = mock_client

        config = get_config()

        mock_boto3.client.assert_called_once_with("secretsmanager")
        mock_client.get_secret_value.assert_called_once_with(SecretId=arn)
        assert config.firebase_credentials == '{"project_id": "demo-project"}'


def test_secrets_manager_failure_raises_credentials_error():
    with patch.dict(os.environ, {"FIREBASE_CREDENTIALS_SECRET_ARN": "arn:missing"}, clear=True), patch(
        "core.config.boto3"
    ) as mock_boto3:
        mock_boto3.client.return_value.get_secret_value.side_effect = Exception("AccessDenied")

        with pytest.raises(CredentialsError) as exc_info:
            get_config()

        assert exc_info.value.code == ErrorCode.CREDENTIALS_UNAVAILABLE


def test_config_is_immutable():
    with patch.dict(os.environ, {}, clear=True):
        config = get_config()
        with pytest.raises(pydantic.ValidationError):
            config.environment = "prod"  # type: ignore[misc]
