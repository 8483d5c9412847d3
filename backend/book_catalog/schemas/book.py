"""Book Pydantic schemas."""
from pydantic import BaseModel, Field

from book_catalog.models.book import GenreTag
from book_catalog.schemas.common import BaseSchema


class BookCreate(BaseModel):
    """Schema for creating a book.

    Range checks on ``year`` and ``price`` are left to the store so that
    they are reported as conflicts rather than payload errors.
    """

    title: str = Field(..., min_length=1)
    author: str
    year: int
    price: float
    genres: list[GenreTag] = Field(..., min_length=1)


class BookView(BaseSchema):
    """Public view of a book."""

    id: int
    title: str
    author: str
    price: float
    year: int
    genres: list[GenreTag]
