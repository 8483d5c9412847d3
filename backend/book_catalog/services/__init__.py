"""Business logic services."""
from book_catalog.services.book_store import BookStore
from book_catalog.services.query_engine import BookCriteria, QueryEngine

__all__ = [
    "BookCriteria",
    "BookStore",
    "QueryEngine",
]
