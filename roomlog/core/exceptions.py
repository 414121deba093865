"""Error taxonomy for RoomLog.

Services raise these; the API layer turns them into the
``{"success": false, "message": ...}`` envelope.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Machine-readable failure kinds."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    DUPLICATE_IDENTITY = "DUPLICATE_IDENTITY"
    NOT_FOUND = "NOT_FOUND"
    INVALID_CREDENTIAL = "INVALID_CREDENTIAL"
    STORE_ERROR = "STORE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class RoomLogError(Exception):
    """Base exception for all RoomLog errors."""

    code: ErrorCode = ErrorCode.VALIDATION_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(RoomLogError):
    """Raised when a required field is missing or has an unusable value."""

    code = ErrorCode.VALIDATION_ERROR


class DuplicateIdentity(RoomLogError):
    """Raised when a unique identity field (userId, secretKey) already exists."""

    code = ErrorCode.DUPLICATE_IDENTITY

    def __init__(self, field: str, message: str | None = None):
        """Initialize the exception.

        Args:
            field: Name of the conflicting field as exposed over the API.
            message: Optional override for the default message.
        """
        self.field = field
        super().__init__(message or f"{field} already exists")


class NotFound(RoomLogError):
    """Raised when a lookup or delete target does not exist."""

    code = ErrorCode.NOT_FOUND


class InvalidCredential(RoomLogError):
    """Raised when a password does not match the stored digest."""

    code = ErrorCode.INVALID_CREDENTIAL
