"""Book services."""

from .book_service import BookService, book_cache_key, create_book_service

__all__ = [
    "BookService",
    "book_cache_key",
    "create_book_service",
]
