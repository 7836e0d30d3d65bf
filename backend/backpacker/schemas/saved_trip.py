"""
Pydantic schemas for SavedTrip entity.
"""
from typing import Optional
from pydantic import ConfigDict
from backpacker.schemas.common import (
    CamelModel, ResourceResponse, UserReference, RequiredText, LongText,
    ImagePath, Price, Latitude, Longitude,
)


class SavedTripCreate(CamelModel):
    """Schema for saving a trip."""
    user_id: UserReference
    city: RequiredText
    country: RequiredText
    price: Price
    lat: Latitude
    lon: Longitude
    image_path: Optional[ImagePath] = None
    notes: Optional[LongText] = None


class SavedTripUpdate(CamelModel):
    """
    Fields a saved trip accepts in a partial update.
    Unknown keys are rejected; price may not be set to null.
    """
    model_config = ConfigDict(extra="forbid")

    notes: Optional[LongText] = None
    image_path: Optional[ImagePath] = None
    price: Price = None


class SavedTripResponse(ResourceResponse):
    """Schema for saved trip response."""
    city: str
    country: str
    price: float
    lat: float
    lon: float
    image_path: Optional[str] = None
    notes: Optional[str] = None
