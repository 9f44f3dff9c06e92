"""Common Pydantic schemas."""
from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    app: str
    books: int
