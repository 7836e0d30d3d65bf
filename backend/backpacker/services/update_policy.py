"""
Partial update (PATCH) rules shared by saved trips and reviews.

``authorize_update`` decides whether an update may proceed and which
attributes change, without touching the database. ``apply_update``
performs the single write once a decision has been made.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Mapping, Optional, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from backpacker.core.errors import Forbidden, InvalidUpdateFields, ValidationError
from backpacker.schemas.common import field_errors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdatePolicy:
    """Update rules for one resource type.

    ``schema`` is the enumerated update shape; the wire names of its
    fields form the allow-list.
    """
    resource_name: str
    schema: Type[BaseModel]
    requires_owner: bool = True

    @property
    def allowed_fields(self) -> FrozenSet[str]:
        return frozenset(
            field.alias or name for name, field in self.schema.model_fields.items()
        )


def authorize_update(
    policy: UpdatePolicy,
    owner_id: str,
    requested_fields: Mapping[str, Any],
    acting_identity: Optional[str],
) -> Dict[str, Any]:
    """
    Check a partial update against ``policy``.

    Returns the attribute name -> new value changes to apply. Raises
    ValidationError for an empty request or bad values,
    InvalidUpdateFields naming every field outside the allow-list, and
    Forbidden when the acting identity does not own the resource.
    """
    if not requested_fields:
        raise ValidationError(
            f"No fields provided to update the {policy.resource_name}.",
            errors={"body": "At least one field is required."},
        )

    allowed = policy.allowed_fields
    disallowed = [name for name in requested_fields if name not in allowed]
    if disallowed:
        raise InvalidUpdateFields(disallowed, allowed)

    try:
        update = policy.schema.model_validate(dict(requested_fields))
    except PydanticValidationError as exc:
        raise ValidationError(
            f"Validation Error updating {policy.resource_name}",
            errors=field_errors(exc.errors()),
        ) from exc

    if policy.requires_owner and (acting_identity is None or acting_identity != owner_id):
        logger.warning(f"Refused {policy.resource_name} update by {acting_identity}; owner is {owner_id}")
        raise Forbidden(f"You are not allowed to modify this {policy.resource_name}.")

    return update.model_dump(exclude_unset=True)


def apply_update(db: Session, resource: Any, changes: Mapping[str, Any]) -> Any:
    """Write the authorized changes to ``resource`` in one commit."""
    for name, value in changes.items():
        setattr(resource, name, value)
    db.commit()
    db.refresh(resource)
    return resource
