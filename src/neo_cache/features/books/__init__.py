"""Books feature - a book inventory served through the two-tier cache."""

from .entities import Book, BookFilter
from .repositories import InMemoryBookStore, PostgresBookStore, create_database_pool
from .services import BookService, book_cache_key, create_book_service

__all__ = [
    "Book",
    "BookFilter",
    "InMemoryBookStore",
    "PostgresBookStore",
    "create_database_pool",
    "BookService",
    "book_cache_key",
    "create_book_service",
]
