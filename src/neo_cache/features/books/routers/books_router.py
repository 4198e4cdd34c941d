"""Books router.

Single-book reads, updates and deletes are served through the two-tier
cache; listing reads the store directly. Service errors propagate to the
application's ``NeoCacheError`` handler.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status
from fastapi.responses import JSONResponse, Response

from ..entities.book import BookFilter
from ....core.exceptions import EntityNotFoundError
from ..models.requests import AddBookRequest, UpdateBookRequest
from ..models.responses import (
    AddBookResponse,
    BookResponse,
    BookNotFoundResponse,
    BookListResponse,
)
from ..services.book_service import BookService
from .dependencies import get_book_service


router = APIRouter(
    tags=["Books"],
    responses={
        400: {"description": "Invalid arguments"},
        503: {"description": "Book store unavailable"}
    }
)


def _not_found(book_id: int) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=BookNotFoundResponse(book_id=book_id).model_dump()
    )


@router.post(
    "/addBook",
    response_model=AddBookResponse,
    summary="Add book"
)
async def add_book(
    request: AddBookRequest,
    service: BookService = Depends(get_book_service)
) -> AddBookResponse:
    """Create a book. It is cached on first read."""
    book_id = await service.add_book(request.title, request.author, request.isbn)
    return AddBookResponse(book_id=book_id)


@router.get(
    "/books/{book_id}",
    response_model=BookResponse,
    summary="Get book by ID",
    responses={404: {"model": BookNotFoundResponse}}
)
async def get_book(
    book_id: int = Path(..., description="Book ID"),
    service: BookService = Depends(get_book_service)
):
    """Get a book through the cache."""
    book = await service.get_book(book_id)
    if book is None:
        return _not_found(book_id)
    return BookResponse.from_entity(book)


@router.put(
    "/books/{book_id}",
    response_model=BookResponse,
    summary="Update book",
    responses={404: {"model": BookNotFoundResponse}}
)
async def update_book(
    request: UpdateBookRequest,
    book_id: int = Path(..., description="Book ID"),
    service: BookService = Depends(get_book_service)
):
    """Update a book and refresh both cache tiers."""
    try:
        book = await service.update_book(book_id, **request.model_dump(exclude_unset=True))
    except EntityNotFoundError:
        return _not_found(book_id)
    return BookResponse.from_entity(book)


@router.delete(
    "/books/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete book",
    responses={404: {"model": BookNotFoundResponse}}
)
async def delete_book(
    book_id: int = Path(..., description="Book ID"),
    service: BookService = Depends(get_book_service)
):
    """Delete a book and evict it from both cache tiers."""
    try:
        await service.remove_book(book_id)
    except EntityNotFoundError:
        return _not_found(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/books",
    response_model=BookListResponse,
    summary="List books"
)
async def list_books(
    page: int = Query(1, description="Page number, starting at 1"),
    page_size: int = Query(10, description="Books per page (1-100)"),
    title: Optional[str] = Query(None, description="Title contains"),
    author: Optional[str] = Query(None, description="Author contains"),
    isbn: Optional[str] = Query(None, description="ISBN contains"),
    service: BookService = Depends(get_book_service)
) -> BookListResponse:
    """List books ordered by id."""
    book_filter = BookFilter(title=title, author=author, isbn=isbn)
    books = await service.list_books(
        page=page,
        page_size=page_size,
        book_filter=None if book_filter.is_empty else book_filter
    )
    return BookListResponse(
        items=[BookResponse.from_entity(book) for book in books],
        page=page,
        page_size=page_size
    )
