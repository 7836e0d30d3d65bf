"""
Shared schema building blocks.
"""
from typing import Annotated, Any, Dict, Iterable, Optional
from datetime import datetime
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from backpacker.core.utils import is_valid_reference, parse_reference

# Error type emitted for malformed identity references in request bodies
INVALID_REFERENCE_ERROR = "invalid_reference"


def _check_user_reference(value: str) -> str:
    if not is_valid_reference(value):
        raise PydanticCustomError(INVALID_REFERENCE_ERROR, "Invalid User ID format.")
    return parse_reference(value, "User")


UserReference = Annotated[str, AfterValidator(_check_user_reference)]
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
LongText = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]
ImagePath = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]

# Numbers are strict: booleans and numeric strings are rejected
Price = Annotated[float, Field(strict=True, ge=0)]
Latitude = Annotated[float, Field(strict=True, ge=-90, le=90)]
Longitude = Annotated[float, Field(strict=True, ge=-180, le=180)]
Rating = Annotated[float, Field(strict=True, ge=1, le=5)]


class CamelModel(BaseModel):
    """Base schema with camelCase wire names."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class OwnerSummary(CamelModel):
    """Display form of a resource owner."""
    id: str
    username: str


class ResourceResponse(CamelModel):
    """Fields every stored resource reports."""
    id: str
    user: OwnerSummary
    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseModel):
    message: str
    id: Optional[str] = None


def _field_name(loc: Iterable[Any]) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "body"


def field_errors(errors: Iterable[Dict[str, Any]]) -> Dict[str, str]:
    """Collapse pydantic errors into one message per field (first error wins)."""
    messages: Dict[str, str] = {}
    for error in errors:
        messages.setdefault(_field_name(error.get("loc", ())), error.get("msg", "Invalid value"))
    return messages


def is_missing_error(error: Dict[str, Any]) -> bool:
    """A required value that is absent, null or blank counts as missing."""
    if error.get("type") == "missing":
        return True
    if error.get("input", "") is None:
        return True
    return error.get("type") == "string_too_short" and error.get("ctx", {}).get("min_length") == 1


def missing_fields(errors: Iterable[Dict[str, Any]]) -> list:
    names = []
    for error in errors:
        if is_missing_error(error):
            name = _field_name(error.get("loc", ()))
            if name not in names:
                names.append(name)
    return names
