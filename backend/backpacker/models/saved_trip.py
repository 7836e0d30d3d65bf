"""
Saved trip model: a destination a user bookmarked with its rough cost.
"""
from sqlalchemy import Column, String, Float, Text, ForeignKey
from sqlalchemy.orm import relationship
from backpacker.db.base import BaseModel


class SavedTrip(BaseModel):
    """Trip saved by a user. ``user_id`` is set at creation and never reassigned."""
    __tablename__ = "saved_trips"

    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    city = Column(String(100), nullable=False)
    country = Column(String(100), nullable=False)
    price = Column(Float, nullable=False)
    lat = Column(Float, nullable=False)
    lon = Column(Float, nullable=False)
    image_path = Column(String(500), nullable=True)
    notes = Column(Text, nullable=True)  # max 500 chars, enforced by schemas

    # Relationships
    user = relationship("User", back_populates="saved_trips")
