"""
Exceptions raised by the transmitter action.

Every error carries an ErrorCode so the hosting framework and the error
classifier can tell validation failures apart from transport failures.

Usage:
    from caep.errors import ValidationError, ErrorCode

    raise ValidationError("audience is required", code=ErrorCode.MISSING_PARAMETER)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes attached to every action error."""

    # Parameter errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_PARAMETER = "MISSING_PARAMETER"
    INVALID_SUBJECT = "INVALID_SUBJECT"
    INVALID_CHANGE_DIRECTION = "INVALID_CHANGE_DIRECTION"

    # Secret errors
    MISSING_SECRET = "MISSING_SECRET"
    SECRET_LOOKUP_FAILED = "SECRET_LOOKUP_FAILED"

    # Signing errors
    SIGNING_FAILED = "SIGNING_FAILED"

    # Transmission errors
    TRANSMISSION_FAILED = "TRANSMISSION_FAILED"
    RETRYABLE_STATUS = "RETRYABLE_STATUS"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ActionError(Exception):
    """Base exception for all transmitter action errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(ActionError):
    """Parameter validation failed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.VALIDATION_ERROR):
        super().__init__(message, code=code)


class SecretConfigurationError(ActionError):
    """A required secret is missing or could not be fetched."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.MISSING_SECRET):
        super().__init__(message, code=code)


class SigningError(ActionError):
    """The SET could not be signed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.SIGNING_FAILED):
        super().__init__(message, code=code)


class TransmissionError(ActionError):
    """Delivering the SET to the receiver failed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.TRANSMISSION_FAILED):
        super().__init__(message, code=code)
