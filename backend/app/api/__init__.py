"""API routes."""
from fastapi import APIRouter

from app.api.books import router as books_router

# Create main API router
api_router = APIRouter()

# Include all route modules
api_router.include_router(books_router)

__all__ = ["api_router"]
