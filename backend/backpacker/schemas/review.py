"""
Pydantic schemas for Review entity.
"""
from typing import Optional
from pydantic import ConfigDict
from backpacker.schemas.common import (
    CamelModel, ResourceResponse, UserReference, RequiredText, LongText, Rating,
)


class ReviewCreate(CamelModel):
    """Schema for review creation."""
    user_id: UserReference
    city: RequiredText
    country: RequiredText
    rating: Rating
    comment: Optional[LongText] = None


class ReviewUpdate(CamelModel):
    """Fields a review accepts in a partial update. Rating may not be null."""
    model_config = ConfigDict(extra="forbid")

    rating: Rating = None
    comment: Optional[LongText] = None


class ReviewResponse(ResourceResponse):
    """Schema for review response with the owner resolved."""
    city: str
    country: str
    rating: float
    comment: Optional[str] = None
