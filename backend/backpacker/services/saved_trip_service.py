"""
Saved trip service for trip bookmarking logic.
"""
import logging
from typing import Any, List, Mapping, Optional
from sqlalchemy.orm import Session
from backpacker.core.errors import Forbidden, MissingFields, NotFound, OwnerNotFound
from backpacker.core.utils import parse_reference
from backpacker.models.saved_trip import SavedTrip
from backpacker.models.user import User
from backpacker.schemas.saved_trip import SavedTripCreate, SavedTripUpdate
from backpacker.services.update_policy import UpdatePolicy, apply_update, authorize_update

logger = logging.getLogger(__name__)

SAVED_TRIP_POLICY = UpdatePolicy(resource_name="saved trip", schema=SavedTripUpdate)


def create_trip(db: Session, payload: SavedTripCreate, acting_user_id: Optional[str]) -> SavedTrip:
    """Save a new trip for its owner."""
    owner = db.query(User).filter(User.id == payload.user_id).first()
    if not owner:
        raise OwnerNotFound("User not found.")

    if acting_user_id != owner.id:
        raise Forbidden("You can only save trips to your own account.")

    trip = SavedTrip(
        user_id=owner.id,
        city=payload.city,
        country=payload.country,
        price=payload.price,
        lat=payload.lat,
        lon=payload.lon,
        image_path=payload.image_path,
        notes=payload.notes
    )
    db.add(trip)
    db.commit()
    db.refresh(trip)

    logger.info(f"User {owner.id} saved trip {trip.id} ({trip.city}, {trip.country})")
    return trip


def list_trips(db: Session, user_id: Optional[str]) -> List[SavedTrip]:
    """All trips saved by a user, newest first."""
    if not user_id:
        raise MissingFields("Please provide a userId to list saved trips.")
    user_id = parse_reference(user_id, "User")

    return db.query(SavedTrip).filter(
        SavedTrip.user_id == user_id
    ).order_by(SavedTrip.created_at.desc()).all()


def get_trip(db: Session, trip_id: str) -> SavedTrip:
    trip_id = parse_reference(trip_id, "Saved Trip")
    trip = db.query(SavedTrip).filter(SavedTrip.id == trip_id).first()
    if not trip:
        raise NotFound("Saved trip not found.")
    return trip


def update_trip(
    db: Session,
    trip_id: str,
    requested_fields: Mapping[str, Any],
    acting_user_id: Optional[str]
) -> SavedTrip:
    """Apply a partial update (notes, imagePath, price) to a saved trip."""
    trip = get_trip(db, trip_id)
    changes = authorize_update(SAVED_TRIP_POLICY, trip.user_id, requested_fields, acting_user_id)
    trip = apply_update(db, trip, changes)

    logger.info(f"Updated saved trip {trip.id}: {', '.join(changes)}")
    return trip
