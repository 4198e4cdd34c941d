"""Book API models."""

from .requests import AddBookRequest, UpdateBookRequest
from .responses import AddBookResponse, BookResponse, BookNotFoundResponse, BookListResponse

__all__ = [
    "AddBookRequest",
    "UpdateBookRequest",
    "AddBookResponse",
    "BookResponse",
    "BookNotFoundResponse",
    "BookListResponse",
]
