"""
FastAPI dependencies for settings and authentication.
"""
from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from backpacker.core.config import Settings
from backpacker.core.errors import NotAuthenticated
from backpacker.core.security import decode_access_token
from backpacker.core.utils import is_valid_reference
from backpacker.db.session import get_db
from backpacker.models.user import User

# Missing credentials are reported through NotAuthenticated, not FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
    db: Session = Depends(get_db)
) -> User:
    """Resolve the verified acting identity from the bearer token."""
    if not credentials:
        raise NotAuthenticated("Not authenticated")

    payload = decode_access_token(credentials.credentials, settings)
    if not payload:
        raise NotAuthenticated("Invalid or expired token")

    user_id = payload.get("sub")
    if not is_valid_reference(user_id):
        raise NotAuthenticated("Invalid or expired token")

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotAuthenticated("User not found")
    return user
