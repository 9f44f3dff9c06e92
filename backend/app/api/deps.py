"""FastAPI dependencies."""
from fastapi import Request

from app.services.book_store import BookStore


def get_book_store(request: Request) -> BookStore:
    """Return the store owned by the running application."""
    return request.app.state.book_store
