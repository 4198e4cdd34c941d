"""Book entities."""

from .book import Book, BookFilter

__all__ = [
    "Book",
    "BookFilter",
]
