"""
Application exceptions and their client-facing error codes.

Services raise these; the handlers installed in ``backpacker.main``
turn them into JSON error responses of the form::

    {"code": "VALIDATION_ERROR", "message": "...", "errors": {...}}

Usage:
    from backpacker.core.errors import NotFound

    raise NotFound("Review not found.")
"""
from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    """Error codes returned to API clients."""

    # Request shape
    MISSING_FIELDS = "MISSING_FIELDS"
    MISSING_FILTER = "MISSING_FILTER"
    INVALID_REFERENCE = "INVALID_REFERENCE"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_UPDATE_FIELDS = "INVALID_UPDATE_FIELDS"

    # Identity
    DUPLICATE_IDENTITY = "DUPLICATE_IDENTITY"
    WEAK_CREDENTIAL = "WEAK_CREDENTIAL"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"

    # Lookup and access
    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"

    # System
    SERVER_ERROR = "SERVER_ERROR"


class BackpackerError(Exception):
    """Base exception for all application errors."""

    code: ErrorCode = ErrorCode.SERVER_ERROR
    status_code: int = 500

    def __init__(self, message: str, errors: Optional[Any] = None):
        self.message = message
        self.errors = errors
        super().__init__(message)


class MissingFields(BackpackerError):
    """One or more required inputs were not supplied."""

    code = ErrorCode.MISSING_FIELDS
    status_code = 400


class MissingFilter(BackpackerError):
    """A listing was requested without any filter criterion."""

    code = ErrorCode.MISSING_FILTER
    status_code = 400


class InvalidReference(BackpackerError):
    """An identity or resource reference is not well formed."""

    code = ErrorCode.INVALID_REFERENCE
    status_code = 400


class ValidationError(BackpackerError):
    """Field-level validation failed; ``errors`` maps field to message."""

    code = ErrorCode.VALIDATION_ERROR
    status_code = 400


class InvalidUpdateFields(BackpackerError):
    """A partial update named fields outside the resource's allow-list."""

    code = ErrorCode.INVALID_UPDATE_FIELDS
    status_code = 400

    def __init__(self, fields, allowed):
        self.fields = list(fields)
        self.allowed = sorted(allowed)
        super().__init__(
            f"Invalid update fields: {', '.join(self.fields)}. "
            f"Allowed fields: {', '.join(self.allowed)}.",
            errors=self.fields,
        )


class DuplicateIdentity(BackpackerError):
    code = ErrorCode.DUPLICATE_IDENTITY
    status_code = 400


class WeakCredential(BackpackerError):
    code = ErrorCode.WEAK_CREDENTIAL
    status_code = 400


class InvalidCredentials(BackpackerError):
    code = ErrorCode.INVALID_CREDENTIALS
    status_code = 400


class NotAuthenticated(BackpackerError):
    code = ErrorCode.NOT_AUTHENTICATED
    status_code = 401


class NotFound(BackpackerError):
    code = ErrorCode.NOT_FOUND
    status_code = 404


class OwnerNotFound(NotFound):
    """The identity a new resource should belong to does not exist."""


class Forbidden(BackpackerError):
    code = ErrorCode.FORBIDDEN
    status_code = 403


class ServerError(BackpackerError):
    """Persistence or connectivity failure; details stay in the logs."""

    code = ErrorCode.SERVER_ERROR
    status_code = 500
