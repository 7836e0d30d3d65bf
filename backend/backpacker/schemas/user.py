"""
Pydantic schemas for User entity.
"""
from typing import Annotated, Optional
from datetime import datetime
from pydantic import EmailStr, StringConstraints
from backpacker.models.user import USERNAME_MAX_LENGTH
from backpacker.schemas.common import CamelModel

# Passwords are never stripped; an empty string counts as missing
Secret = Annotated[str, StringConstraints(min_length=1, max_length=128)]
Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=USERNAME_MAX_LENGTH)]


class UserCreate(CamelModel):
    """Schema for registration."""
    username: Username
    email: EmailStr
    password: Secret


class UserLogin(CamelModel):
    """Schema for login. Either email or username identifies the user."""
    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None


class UserResponse(CamelModel):
    """Schema for user response. Never carries the password hash."""
    id: str
    username: str
    email: str
    created_at: datetime


class RegisterResponse(CamelModel):
    message: str
    user: UserResponse


class LoginResponse(CamelModel):
    message: str
    user: UserResponse
    access_token: str
    token_type: str = "bearer"
