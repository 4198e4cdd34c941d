"""Book domain entity.

This module defines the Book entity and the filter used when listing books.
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Book:
    """Book domain entity.

    Matches the books table structure. ``id`` is None until the store
    assigns one on create.
    """

    id: Optional[int]
    title: str
    author: str
    isbn: str

    def __post_init__(self):
        """Post-initialization validation."""
        if not self.title or not self.title.strip():
            raise ValueError("Book title cannot be empty")
        if not self.author or not self.author.strip():
            raise ValueError("Book author cannot be empty")

    def with_changes(self, **fields) -> "Book":
        """Return a copy with the given fields replaced."""
        return replace(self, **fields)

    def with_id(self, book_id: int) -> "Book":
        return replace(self, id=book_id)


@dataclass(frozen=True)
class BookFilter:
    """Case-insensitive substring filter over book fields."""

    title: Optional[str] = None
    author: Optional[str] = None
    isbn: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not (self.title or self.author or self.isbn)

    def matches(self, book: Book) -> bool:
        """Check whether book satisfies every set criterion."""
        for criterion, value in (
            (self.title, book.title),
            (self.author, book.author),
            (self.isbn, book.isbn),
        ):
            if criterion and criterion.lower() not in (value or "").lower():
                return False
        return True

    def __call__(self, book: Book) -> bool:
        return self.matches(book)
