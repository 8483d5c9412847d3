"""In-memory book store."""
from threading import Lock
from typing import Iterable, Optional

from book_catalog.core.exceptions import (
    DuplicateTitleError,
    InvalidGenreError,
    InvalidPriceError,
    InvalidYearError,
    NotFoundError,
)
from book_catalog.models.book import MAX_YEAR, MIN_YEAR, Book, GenreTag


class BookStore:
    """
    Thread-safe in-memory book store.

    Records keep insertion order. Identifiers come from a counter that only
    moves forward, so an id freed by ``delete`` is never handed out again.
    """

    def __init__(self, start_id: int = 1):
        self._books: list[Book] = []
        self._next_id = start_id
        self.lock = Lock()

    def _find(self, book_id: int) -> Optional[Book]:
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def create(
        self,
        title: str,
        author: str,
        year: int,
        price: float,
        genres: Iterable[str],
    ) -> int:
        """Add a new book and return its id."""
        with self.lock:
            title_key = title.casefold()
            if any(book.title_key == title_key for book in self._books):
                raise DuplicateTitleError(title)
            if year < MIN_YEAR or year > MAX_YEAR:
                raise InvalidYearError(year, MIN_YEAR, MAX_YEAR)
            if not price > 0:
                raise InvalidPriceError(price)
            genre_list = list(genres)
            if not all(GenreTag.is_valid(genre) for genre in genre_list):
                raise InvalidGenreError(genre_list)

            book = Book(
                id=self._next_id,
                title=title,
                author=author,
                year=year,
                price=price,
                genres=list(dict.fromkeys(GenreTag(genre) for genre in genre_list)),
            )
            self._next_id += 1
            self._books.append(book)
            return book.id

    def get(self, book_id: int) -> Book:
        book = self._find(book_id)
        if book is None:
            raise NotFoundError(book_id)
        return book

    def update_price(self, book_id: int, new_price: float) -> float:
        """Replace a book's price and return the previous one."""
        with self.lock:
            book = self.get(book_id)
            if not new_price > 0:
                raise InvalidPriceError(new_price, book_id=book_id)
            old_price = book.price
            book.price = new_price
            return old_price

    def delete(self, book_id: int) -> int:
        """Remove a book and return how many are left."""
        with self.lock:
            book = self.get(book_id)
            self._books.remove(book)
            return len(self._books)

    def count(self) -> int:
        return len(self._books)

    def all(self) -> list[Book]:
        return list(self._books)
