"""Book routers."""

from .books_router import router
from .dependencies import get_book_service

__all__ = [
    "router",
    "get_book_service",
]
