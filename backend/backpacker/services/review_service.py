"""
Review service for location review logic.
"""
import logging
from typing import Any, List, Mapping, Optional
from sqlalchemy.orm import Session, joinedload
from backpacker.core.errors import Forbidden, MissingFilter, NotFound, OwnerNotFound
from backpacker.core.utils import parse_reference
from backpacker.models.review import Review, location_key
from backpacker.models.user import User
from backpacker.schemas.review import ReviewCreate, ReviewUpdate
from backpacker.services.update_policy import UpdatePolicy, apply_update, authorize_update

logger = logging.getLogger(__name__)

REVIEW_POLICY = UpdatePolicy(resource_name="review", schema=ReviewUpdate)


def create_review(db: Session, payload: ReviewCreate, acting_user_id: Optional[str]) -> Review:
    """Create a review owned by ``payload.user_id``."""
    owner = db.query(User).filter(User.id == payload.user_id).first()
    if not owner:
        raise OwnerNotFound("User not found.")

    if acting_user_id != owner.id:
        raise Forbidden("You can only post reviews from your own account.")

    review = Review(
        user_id=owner.id,
        city=payload.city,
        country=payload.country,
        rating=payload.rating,
        comment=payload.comment
    )
    db.add(review)
    db.commit()
    db.refresh(review)

    logger.info(f"User {owner.id} reviewed {review.city}, {review.country} ({review.rating})")
    return review


def list_reviews(
    db: Session,
    city: Optional[str] = None,
    country: Optional[str] = None,
    user_id: Optional[str] = None
) -> List[Review]:
    """
    Reviews matching every given criterion, newest first.

    City and country must equal the stored value ignoring case; a
    partial name does not match.
    """
    city = (city or "").strip()
    country = (country or "").strip()
    query = db.query(Review).options(joinedload(Review.user))

    if city:
        query = query.filter(Review.city_key == location_key(city))
    if country:
        query = query.filter(Review.country_key == location_key(country))
    if user_id:
        query = query.filter(Review.user_id == parse_reference(user_id, "User"))

    if not (city or country or user_id):
        raise MissingFilter("Please provide filter criteria (e.g., city and country, or userId).")

    return query.order_by(Review.created_at.desc()).all()


def get_review(db: Session, review_id: str) -> Review:
    review_id = parse_reference(review_id, "Review")
    review = db.query(Review).filter(Review.id == review_id).first()
    if not review:
        raise NotFound("Review not found.")
    return review


def update_review(
    db: Session,
    review_id: str,
    requested_fields: Mapping[str, Any],
    acting_user_id: Optional[str]
) -> Review:
    """Apply a partial update (rating, comment) to a review."""
    review = get_review(db, review_id)
    changes = authorize_update(REVIEW_POLICY, review.user_id, requested_fields, acting_user_id)
    review = apply_update(db, review, changes)

    logger.info(f"Updated review {review.id}: {', '.join(changes)}")
    return review


def delete_review(db: Session, review_id: str, acting_user_id: Optional[str]) -> str:
    """Delete a review. Only its owner may do so."""
    review = get_review(db, review_id)
    if acting_user_id is None or acting_user_id != review.user_id:
        logger.warning(f"Refused deletion of review {review.id} by {acting_user_id}")
        raise Forbidden("You are not allowed to delete this review.")

    deleted_id = review.id
    db.delete(review)
    db.commit()

    logger.info(f"Deleted review {deleted_id}")
    return deleted_id
