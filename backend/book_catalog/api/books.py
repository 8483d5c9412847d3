"""Book API routes."""
from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from book_catalog.core.logging import CorrelatedLogger
from book_catalog.dependencies import (
    get_book_criteria,
    get_book_store,
    get_books_logger,
    get_query_engine,
)
from book_catalog.schemas.book import BookCreate, BookView
from book_catalog.schemas.common import ErrorResponse, ResultResponse
from book_catalog.services.book_store import BookStore
from book_catalog.services.query_engine import BookCriteria, QueryEngine

router = APIRouter(tags=["Books"])


@router.get("/books/health", response_class=PlainTextResponse)
async def health_check() -> str:
    """Health check endpoint."""
    return "OK"


@router.post(
    "/book",
    response_model=ResultResponse[int],
    responses={
        409: {"model": ErrorResponse, "description": "Duplicate title, bad year or price."},
    },
)
async def create_book(
    book: BookCreate,
    store: BookStore = Depends(get_book_store),
    log: CorrelatedLogger = Depends(get_books_logger),
) -> dict:
    """Create a new book and return its id."""
    existing = store.count()
    book_id = store.create(
        title=book.title,
        author=book.author,
        year=book.year,
        price=book.price,
        genres=book.genres,
    )
    log.info("Creating new Book with Title [%s]", book.title)
    log.debug(
        "Currently there are %d Books in the system. New Book will be assigned with id %d",
        existing,
        book_id,
    )
    return {"result": book_id}


@router.get(
    "/books/total",
    response_model=ResultResponse[int],
    responses={400: {"model": ErrorResponse, "description": "Invalid genre."}},
)
async def count_books(
    criteria: BookCriteria = Depends(get_book_criteria),
    engine: QueryEngine = Depends(get_query_engine),
    log: CorrelatedLogger = Depends(get_books_logger),
) -> dict:
    """Count the books matching the filters."""
    total = engine.filtered_count(criteria)
    log.info("Total Books found for requested filters is %d", total)
    return {"result": total}


@router.get(
    "/books",
    response_model=ResultResponse[list[BookView]],
    responses={400: {"model": ErrorResponse, "description": "Invalid genre."}},
)
async def list_books(
    criteria: BookCriteria = Depends(get_book_criteria),
    engine: QueryEngine = Depends(get_query_engine),
    log: CorrelatedLogger = Depends(get_books_logger),
) -> dict:
    """List the books matching the filters, ordered by title."""
    books = engine.filtered_list(criteria)
    log.info("Total Books found for requested filters is %d", len(books))
    return {"result": books}


@router.get(
    "/book",
    response_model=ResultResponse[BookView],
    responses={404: {"model": ErrorResponse, "description": "Book not found."}},
)
async def get_book(
    book_id: int = Query(..., alias="id"),
    store: BookStore = Depends(get_book_store),
    log: CorrelatedLogger = Depends(get_books_logger),
) -> dict:
    """Get a single book by id."""
    book = store.get(book_id)
    log.debug("Fetching book id %d details", book_id)
    return {"result": book.to_dict()}


@router.put(
    "/book",
    response_model=ResultResponse[float],
    responses={
        404: {"model": ErrorResponse, "description": "Book not found."},
        409: {"model": ErrorResponse, "description": "Non-positive price."},
    },
)
async def update_book_price(
    book_id: int = Query(..., alias="id"),
    price: float = Query(...),
    store: BookStore = Depends(get_book_store),
    log: CorrelatedLogger = Depends(get_books_logger),
) -> dict:
    """Change a book's price and return the old one."""
    old_price = store.update_price(book_id, price)
    book = store.get(book_id)
    log.info("Update Book id [%d] price to %s", book_id, price)
    log.debug("Book [%s] price change: %s --> %s", book.title, old_price, price)
    return {"result": old_price}


@router.delete(
    "/book",
    response_model=ResultResponse[int],
    responses={404: {"model": ErrorResponse, "description": "Book not found."}},
)
async def delete_book(
    book_id: int = Query(..., alias="id"),
    store: BookStore = Depends(get_book_store),
    log: CorrelatedLogger = Depends(get_books_logger),
) -> dict:
    """Delete a book and return how many remain."""
    title = store.get(book_id).title
    remaining = store.delete(book_id)
    log.info("Removing book [%s]", title)
    log.debug(
        "After removing book [%s] id: [%d] there are %d books in the system",
        title,
        book_id,
        remaining,
    )
    return {"result": remaining}
