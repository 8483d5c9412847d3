"""Domain models."""
from book_catalog.models.book import MAX_YEAR, MIN_YEAR, Book, GenreTag

__all__ = [
    "Book",
    "GenreTag",
    "MIN_YEAR",
    "MAX_YEAR",
]
