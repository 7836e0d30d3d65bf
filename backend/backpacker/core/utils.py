"""
Utility functions for the application.
"""
from typing import Any, Dict, Optional
from datetime import datetime, timezone
import uuid

from backpacker.core.errors import InvalidReference


def new_reference() -> str:
    """Generate a new record reference (canonical UUID string)."""
    return str(uuid.uuid4())


def is_valid_reference(value: Any) -> bool:
    """Check whether a value is a well-formed record reference."""
    if not isinstance(value, str):
        return False
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


def parse_reference(value: Any, label: str = "Record") -> str:
    """
    Normalize a record reference or raise InvalidReference.
    Runs before any lookup so malformed ids never reach the store.
    """
    if not is_valid_reference(value):
        raise InvalidReference(f"Invalid {label} ID format.")
    return str(uuid.UUID(value))


def utcnow() -> datetime:
    """Naive UTC timestamp for database columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def format_error(code: str, message: str, errors: Optional[Any] = None) -> Dict[str, Any]:
    """Format error response."""
    response = {"code": code, "message": message}
    if errors:
        response["errors"] = errors
    return response
