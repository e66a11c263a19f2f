"""
Custom exceptions for the emergency dispatcher.

Defines application-specific exceptions with error codes so failures raised
in core/ can be logged consistently by the handlers.

Usage:
    from core.errors import InvalidEventError, ErrorCode

    raise InvalidEventError("Event has no document name", code=ErrorCode.INVALID_EVENT)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes attached to dispatcher failures."""

    # Trigger payload errors
    INVALID_EVENT = "INVALID_EVENT"

    # Push-client errors
    CREDENTIALS_UNAVAILABLE = "CREDENTIALS_UNAVAILABLE"
    DELIVERY_FAILED = "DELIVERY_FAILED"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DispatcherError(Exception):
    """Base exception for all dispatcher errors."""

    default_code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, code: ErrorCode | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"


class InvalidEventError(DispatcherError):
    """Trigger payload could not be decoded into a created document."""

    default_code = ErrorCode.INVALID_EVENT


class CredentialsError(DispatcherError):
    """Push-client credentials could not be resolved."""

    default_code = ErrorCode.CREDENTIALS_UNAVAILABLE


class DeliveryError(DispatcherError):
    """One or more push-send calls were rejected."""

    default_code = ErrorCode.DELIVERY_FAILED
