"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from backpacker.api.routes import users, saved_trips, reviews

api_router = APIRouter()

# Include all route modules
api_router.include_router(users.router)
api_router.include_router(saved_trips.router)
api_router.include_router(reviews.router)
