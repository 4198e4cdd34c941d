"""Book response models."""

from typing import List

from pydantic import BaseModel, Field

from ..entities.book import Book


class AddBookResponse(BaseModel):
    """Response for a created book."""

    book_id: int = Field(..., description="Id assigned to the new book")


class BookResponse(BaseModel):
    """Full book response model."""

    id: int = Field(..., description="Book ID")
    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Book author")
    isbn: str = Field(..., description="ISBN")

    @classmethod
    def from_entity(cls, book: Book) -> "BookResponse":
        """Create response from domain entity."""
        return cls(id=book.id, title=book.title, author=book.author, isbn=book.isbn)


class BookNotFoundResponse(BaseModel):
    """Body returned when a book id does not exist."""

    message: str = "Book not found"
    book_id: int


class BookListResponse(BaseModel):
    """One page of books."""

    items: List[BookResponse] = Field(default_factory=list, description="Books on this page")
    page: int = Field(..., description="Page number, starting at 1")
    page_size: int = Field(..., description="Requested page size")
