"""In-memory book collection with id assignment and CRUD operations."""
from threading import RLock
from typing import Any, List, Mapping, Optional

from app.core.exceptions import InvariantViolationError, NotFoundError
from app.core.logging import get_logger
from app.core.utils import IDGenerator
from app.models.book import Book

logger = get_logger("store")

BOOK_FIELDS = ("title", "author", "isbn")


class BookStore:
    """
    List-based in-memory store for books, kept in insertion order.

    Every public method takes the store lock, so readers and writers are
    serialized. Records handed out are copies; mutating them does not
    touch the collection.
    """

    def __init__(self, id_gen: Optional[IDGenerator] = None):
        self._books: List[Book] = []
        self._id_gen = id_gen or IDGenerator()
        self._lock = RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def list(self) -> List[Book]:
        """Return all books in insertion order."""
        with self._lock:
            return [book.copy() for book in self._books]

    def add(self, candidate: Mapping[str, Any]) -> Book:
        """
        Store a new book and return it with its assigned id.

        Any ``id`` carried by the candidate is ignored.
        """
        with self._lock:
            book_id = self._id_gen.next_id()
            if any(book.id == book_id for book in self._books):
                raise InvariantViolationError(
                    f"Duplicate book id {book_id} generated", id=book_id
                )
            book = Book(book_id, *(candidate[field] for field in BOOK_FIELDS))
            self._books.append(book)
            logger.debug(f"Added book {book_id}")
            return book.copy()

    def find_index_by_id(self, book_id: int) -> int:
        """Return the position of the book with ``book_id``."""
        with self._lock:
            for idx, book in enumerate(self._books):
                if book.id == book_id:
                    return idx
        raise NotFoundError("Book", book_id)

    def get_by_id(self, book_id: int) -> Book:
        with self._lock:
            return self._books[self.find_index_by_id(book_id)].copy()

    def update_by_id(self, book_id: int, replacement: Mapping[str, Any]) -> Book:
        """
        Replace title, author and isbn of an existing book in place.

        The stored id and position never change.
        """
        with self._lock:
            book = self._books[self.find_index_by_id(book_id)]
            for field in BOOK_FIELDS:
                setattr(book, field, replacement[field])
            logger.debug(f"Updated book {book_id}")
            return book.copy()

    def delete_by_id(self, book_id: int) -> None:
        with self._lock:
            del self._books[self.find_index_by_id(book_id)]
            logger.debug(f"Deleted book {book_id}")
