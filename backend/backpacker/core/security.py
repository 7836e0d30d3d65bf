"""
Security utilities for JWT authentication and password hashing.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
import hashlib
import bcrypt
from jose import JWTError, jwt
from backpacker.core.config import Settings


def _pre_hash_secret(secret: str) -> bytes:
    """
    Pre-hash a secret with SHA256 so secrets longer than 72 bytes
    still fit bcrypt's input limit.
    """
    return hashlib.sha256(secret.encode("utf-8")).digest()


def verify_secret(plain_secret: str, hashed_secret: str) -> bool:
    """Verify a secret against its stored hash."""
    pre_hashed = _pre_hash_secret(plain_secret)
    try:
        return bcrypt.checkpw(pre_hashed, hashed_secret.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def hash_secret(secret: str, rounds: int = 12) -> str:
    """
    Hash a secret with a fresh per-identity salt.
    The result embeds the salt, so it is all that needs storing.
    """
    pre_hashed = _pre_hash_secret(secret)
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(pre_hashed, salt).decode("utf-8")


def create_access_token(data: dict, settings: Settings, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token."""
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> Optional[dict]:
    """Decode and verify a JWT token. Returns None when invalid or expired."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
