"""Book request models."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class AddBookRequest(BaseModel):
    """Request model for adding a book."""

    title: str = Field(..., min_length=1, description="Book title")
    author: str = Field(..., min_length=1, description="Book author")
    isbn: str = Field("", description="ISBN")

    @field_validator("title", "author")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class UpdateBookRequest(BaseModel):
    """Request model for updating a book. Omitted fields are left unchanged."""

    title: Optional[str] = Field(None, min_length=1, description="Book title")
    author: Optional[str] = Field(None, min_length=1, description="Book author")
    isbn: Optional[str] = Field(None, description="ISBN")
