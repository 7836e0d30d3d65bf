"""
User service for registration and login.
"""
import logging
from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from backpacker.core.config import Settings
from backpacker.core.errors import (
    DuplicateIdentity, InvalidCredentials, MissingFields, NotFound, WeakCredential,
)
from backpacker.core.security import hash_secret, verify_secret
from backpacker.core.utils import parse_reference
from backpacker.models.user import User
from backpacker.schemas.user import UserCreate

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def register(db: Session, payload: UserCreate, settings: Settings) -> User:
    """Create a new identity with a salted password hash."""
    username = (payload.username or "").strip()
    email = (payload.email or "").strip().lower()
    password = payload.password or ""
    if not username or not email or not password:
        raise MissingFields("Please provide username, email, and password")

    if len(password) < MIN_PASSWORD_LENGTH:
        raise WeakCredential(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")

    existing = db.query(User).filter(
        or_(User.email == email, User.username == username)
    ).first()
    if existing:
        message = "Email already in use" if existing.email == email else "Username already taken"
        raise DuplicateIdentity(message)

    user = User(
        username=username,
        email=email,
        hashed_password=hash_secret(password, rounds=settings.BCRYPT_ROUNDS)
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"Registered user {user.id} ({user.username})")
    return user


def authenticate(db: Session, identifier: Optional[str], password: Optional[str]) -> User:
    """
    Verify credentials. The identifier may be a username or an email.
    Every failure raises the same InvalidCredentials error.
    """
    identifier = (identifier or "").strip()
    if not identifier or not password:
        raise MissingFields("Please provide email/username and password")

    user = db.query(User).filter(
        or_(User.email == identifier.lower(), User.username == identifier)
    ).first()

    if not user or not verify_secret(password, user.hashed_password):
        raise InvalidCredentials("Invalid Credentials")

    return user


def list_users(db: Session) -> List[User]:
    """All users, newest first."""
    return db.query(User).order_by(User.created_at.desc()).all()


def get_user(db: Session, user_id: str) -> User:
    """Look up a user by reference."""
    user_id = parse_reference(user_id, "User")
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFound("User not found.")
    return user
