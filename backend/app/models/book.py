"""
Book data model for the in-memory store.
"""


class Book:
    """
    A single book record. ``id`` is assigned by the store.
    """
    def __init__(self, id: int, title: str, author: str, isbn: str):
        self.id = id
        self.title = title
        self.author = author
        self.isbn = isbn

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "isbn": self.isbn,
        }

    def copy(self) -> "Book":
        return Book(**self.to_dict())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Book(id={self.id!r}, title={self.title!r}, author={self.author!r}, isbn={self.isbn!r})"
