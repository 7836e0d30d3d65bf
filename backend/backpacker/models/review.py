"""
Review model for location reviews.
"""
from sqlalchemy import Column, String, Float, Text, ForeignKey, Index
from sqlalchemy.orm import relationship, validates
from backpacker.db.base import BaseModel


def location_key(value):
    """Case-folded form used for case-insensitive exact matching."""
    return value.casefold() if value is not None else None


class Review(BaseModel):
    """Review of a city written by a user."""
    __tablename__ = "reviews"
    __table_args__ = (
        Index("ix_reviews_city_country_key", "city_key", "country_key"),
    )

    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    city = Column(String(100), nullable=False)
    country = Column(String(100), nullable=False)
    # Folding can lengthen a name (e.g. "ß" -> "ss")
    city_key = Column(String(300), nullable=False)
    country_key = Column(String(300), nullable=False)
    rating = Column(Float, nullable=False)  # 1-5
    comment = Column(Text, nullable=True)

    # Relationships
    user = relationship("User", back_populates="reviews")

    @validates("city", "country")
    def _set_location_key(self, key, value):
        setattr(self, f"{key}_key", location_key(value))
        return value
