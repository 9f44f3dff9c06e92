"""In-memory data models."""
from app.models.book import Book

__all__ = ["Book"]
