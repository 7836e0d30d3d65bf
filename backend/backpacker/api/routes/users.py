"""
User routes for registration, login and listing.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from backpacker.db.session import get_db
from backpacker.core.config import Settings
from backpacker.core.security import create_access_token
from backpacker.schemas.user import (
    UserCreate, UserLogin, UserResponse, RegisterResponse, LoginResponse
)
from backpacker.models.user import User
from backpacker.services import user_service
from backpacker.api.dependencies import get_current_user, get_settings

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserCreate,
    settings: Settings = Depends(get_settings),
    db: Session = Depends(get_db)
):
    """Register a new user."""
    user = user_service.register(db, user_data, settings)
    return RegisterResponse(
        message="User registered successfully",
        user=UserResponse.model_validate(user)
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: UserLogin,
    settings: Settings = Depends(get_settings),
    db: Session = Depends(get_db)
):
    """Log in with email or username and get a bearer token."""
    identifier = credentials.email or credentials.username
    user = user_service.authenticate(db, identifier, credentials.password)
    access_token = create_access_token(data={"sub": user.id, "username": user.username}, settings=settings)
    return LoginResponse(
        message="Login successful",
        user=UserResponse.model_validate(user),
        access_token=access_token
    )


@router.get("", response_model=List[UserResponse])
async def list_users(db: Session = Depends(get_db)):
    """List all users without their password hashes."""
    return [UserResponse.model_validate(user) for user in user_service.list_users(db)]


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get current user information."""
    return UserResponse.model_validate(current_user)
