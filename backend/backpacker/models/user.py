"""
User model for registration and login.
"""
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from backpacker.db.base import BaseModel

# Column sizes; schemas validate against the same limits
USERNAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 254


class User(BaseModel):
    """Registered identity. Only the salted hash of the password is stored."""
    __tablename__ = "users"

    username = Column(String(USERNAME_MAX_LENGTH), unique=True, nullable=False, index=True)
    email = Column(String(EMAIL_MAX_LENGTH), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)

    # Relationships
    saved_trips = relationship("SavedTrip", back_populates="user", cascade="all, delete-orphan")
    reviews = relationship("Review", back_populates="user", cascade="all, delete-orphan")
