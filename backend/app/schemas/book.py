"""Book schemas."""
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.common import BaseSchema


class BookBase(BaseModel):
    """Base book schema. All fields are required and non-empty."""

    title: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)
    isbn: str = Field(..., min_length=1)

    # Unknown keys such as a client-supplied ``id`` are dropped
    model_config = ConfigDict(extra="ignore")

    @field_validator("title", "author", "isbn")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v


class BookCreate(BookBase):
    """Schema for adding a book."""

    pass


class BookUpdate(BookBase):
    """Schema for replacing a book's fields. Full replacement, no partials."""

    pass


class BookResponse(BaseSchema):
    """Schema for book response."""

    id: int
    title: str
    author: str
    isbn: str
