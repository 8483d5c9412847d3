"""
FastAPI dependencies for the book store, query engine and log channels.
"""
from typing import Optional

from fastapi import Depends, Query, Request

from book_catalog.core.logging import BOOKS_CHANNEL, CorrelatedLogger, LogLevelRegistry
from book_catalog.services.book_store import BookStore
from book_catalog.services.query_engine import BookCriteria, QueryEngine


def get_book_store(request: Request) -> BookStore:
    """
    Dependency to get the application's BookStore instance.
    """
    return request.app.state.book_store


def get_query_engine(store: BookStore = Depends(get_book_store)) -> QueryEngine:
    return QueryEngine(store)


def get_log_registry(request: Request) -> LogLevelRegistry:
    """
    Dependency to get the application's log level registry.
    """
    return request.app.state.log_registry


def get_books_logger(
    request: Request,
    registry: LogLevelRegistry = Depends(get_log_registry),
) -> CorrelatedLogger:
    """
    Books channel logger bound to the current request number.
    """
    return registry.bind(BOOKS_CHANNEL, getattr(request.state, "request_number", None))


def get_book_criteria(
    genres: Optional[str] = Query(None),
    author: Optional[str] = Query(None),
    price_bigger_than: Optional[str] = Query(None, alias="price-bigger-than"),
    price_less_than: Optional[str] = Query(None, alias="price-less-than"),
    year_bigger_than: Optional[str] = Query(None, alias="year-bigger-than"),
    year_less_than: Optional[str] = Query(None, alias="year-less-than"),
) -> BookCriteria:
    """
    Collect filter query parameters without parsing the numeric bounds.
    """
    return BookCriteria(
        genres=genres,
        author=author,
        price_bigger_than=price_bigger_than,
        price_less_than=price_less_than,
        year_bigger_than=year_bigger_than,
        year_less_than=year_less_than,
    )
