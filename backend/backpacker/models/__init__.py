"""Models package - Import all models for SQLAlchemy registration."""
from backpacker.models.user import User
from backpacker.models.saved_trip import SavedTrip
from backpacker.models.review import Review

__all__ = [
    "User",
    "SavedTrip",
    "Review",
]
