"""
Location review routes.
"""
from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional
from backpacker.db.session import get_db
from backpacker.models.user import User
from backpacker.schemas.common import MessageResponse
from backpacker.schemas.review import ReviewCreate, ReviewResponse
from backpacker.services import review_service
from backpacker.api.dependencies import get_current_user

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
async def create_review(
    review_data: ReviewCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a new review."""
    review = review_service.create_review(db, review_data, current_user.id)
    return ReviewResponse.model_validate(review)


@router.get("", response_model=List[ReviewResponse])
async def list_reviews(
    city: Optional[str] = Query(None),
    country: Optional[str] = Query(None),
    user_id: Optional[str] = Query(None, alias="userId"),
    db: Session = Depends(get_db)
):
    """List reviews filtered by city, country and/or userId."""
    reviews = review_service.list_reviews(db, city=city, country=country, user_id=user_id)
    return [ReviewResponse.model_validate(review) for review in reviews]


@router.get("/{review_id}", response_model=ReviewResponse)
async def get_review(review_id: str, db: Session = Depends(get_db)):
    """Get a single review by its ID."""
    return ReviewResponse.model_validate(review_service.get_review(db, review_id))


@router.patch("/{review_id}", response_model=ReviewResponse)
async def update_review(
    review_id: str,
    changes: Dict[str, Any] = Body(...),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update the rating or comment of your own review."""
    review = review_service.update_review(db, review_id, changes, current_user.id)
    return ReviewResponse.model_validate(review)


@router.delete("/{review_id}", response_model=MessageResponse)
async def delete_review(
    review_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete your own review."""
    deleted_id = review_service.delete_review(db, review_id, current_user.id)
    return MessageResponse(message="Review deleted successfully.", id=deleted_id)
