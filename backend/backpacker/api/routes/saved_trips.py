"""
Saved trip routes.
"""
from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional
from backpacker.db.session import get_db
from backpacker.models.user import User
from backpacker.schemas.saved_trip import SavedTripCreate, SavedTripResponse
from backpacker.services import saved_trip_service
from backpacker.api.dependencies import get_current_user

router = APIRouter(prefix="/savedtrips", tags=["saved trips"])


@router.post("", response_model=SavedTripResponse, status_code=status.HTTP_201_CREATED)
async def create_saved_trip(
    trip_data: SavedTripCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Save a new trip for the current user."""
    trip = saved_trip_service.create_trip(db, trip_data, current_user.id)
    return SavedTripResponse.model_validate(trip)


@router.get("", response_model=List[SavedTripResponse])
async def list_saved_trips(
    user_id: Optional[str] = Query(None, alias="userId"),
    db: Session = Depends(get_db)
):
    """List trips saved by a user, newest first."""
    trips = saved_trip_service.list_trips(db, user_id)
    return [SavedTripResponse.model_validate(trip) for trip in trips]


@router.get("/{trip_id}", response_model=SavedTripResponse)
async def get_saved_trip(trip_id: str, db: Session = Depends(get_db)):
    """Get a saved trip by ID."""
    return SavedTripResponse.model_validate(saved_trip_service.get_trip(db, trip_id))


@router.patch("/{trip_id}", response_model=SavedTripResponse)
async def update_saved_trip(
    trip_id: str,
    changes: Dict[str, Any] = Body(...),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update notes, imagePath or price of a saved trip."""
    trip = saved_trip_service.update_trip(db, trip_id, changes, current_user.id)
    return SavedTripResponse.model_validate(trip)
