"""
Declarative base and shared columns for all models.
"""
from sqlalchemy import Column, String, DateTime
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import declarative_base
from backpacker.core.utils import new_reference, utcnow

Base = declarative_base()

# MySQL DATETIME drops fractions by default; keep microseconds for newest-first ordering
Timestamp = DateTime().with_variant(mysql.DATETIME(fsp=6), "mysql")


class BaseModel(Base):
    """Abstract base with reference id and timestamps."""
    __abstract__ = True

    id = Column(String(36), primary_key=True, default=new_reference)
    created_at = Column(Timestamp, default=utcnow, nullable=False, index=True)
    updated_at = Column(Timestamp, default=utcnow, onupdate=utcnow, nullable=False)
