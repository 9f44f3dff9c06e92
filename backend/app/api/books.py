"""Book API routes."""
from typing import Annotated

from fastapi import APIRouter, Depends, Path

from app.api.deps import get_book_store
from app.core.logging import get_logger
from app.schemas.book import BookCreate, BookResponse, BookUpdate
from app.schemas.common import ErrorResponse, MessageResponse
from app.services.book_store import BookStore

logger = get_logger("api.books")

router = APIRouter(prefix="/books", tags=["Books"])

BookId = Annotated[int, Path(ge=0, description="Book id, a non-negative integer")]

NOT_FOUND = {404: {"model": MessageResponse, "description": "Book not found"}}
BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Malformed request"}}


@router.get("", response_model=list[BookResponse])
async def list_books(
    store: BookStore = Depends(get_book_store),
) -> list[dict]:
    """List all books in insertion order."""
    return [book.to_dict() for book in store.list()]


@router.post("", response_model=BookResponse, responses=BAD_REQUEST)
async def add_book(
    book_data: BookCreate,
    store: BookStore = Depends(get_book_store),
) -> dict:
    """Add a book. The id is assigned by the store."""
    book = store.add(book_data.model_dump())
    logger.info(f"Created book {book.id}: {book.title!r}")
    return book.to_dict()


@router.get("/{book_id}", response_model=BookResponse, responses={**BAD_REQUEST, **NOT_FOUND})
async def get_book(
    book_id: BookId,
    store: BookStore = Depends(get_book_store),
) -> dict:
    """Get a single book by id."""
    return store.get_by_id(book_id).to_dict()


@router.put("/{book_id}", response_model=BookResponse, responses={**BAD_REQUEST, **NOT_FOUND})
async def update_book(
    book_id: BookId,
    book_data: BookUpdate,
    store: BookStore = Depends(get_book_store),
) -> dict:
    """Replace title, author and isbn of an existing book."""
    book = store.update_by_id(book_id, book_data.model_dump())
    logger.info(f"Updated book {book_id}")
    return book.to_dict()


@router.delete("/{book_id}", response_model=MessageResponse, responses={**BAD_REQUEST, **NOT_FOUND})
async def delete_book(
    book_id: BookId,
    store: BookStore = Depends(get_book_store),
) -> dict:
    """Delete a book by id."""
    store.delete_by_id(book_id)
    logger.info(f"Deleted book {book_id}")
    return {"message": "Book deleted"}
