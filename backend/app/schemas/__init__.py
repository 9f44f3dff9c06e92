"""Pydantic schemas."""
from app.schemas.book import BookCreate, BookResponse, BookUpdate
from app.schemas.common import ErrorResponse, HealthResponse, MessageResponse

__all__ = [
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
]
