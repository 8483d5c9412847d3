"""Filtering and counting of catalog books."""
import locale
import math
import unicodedata
from dataclasses import dataclass
from typing import Callable, Optional

from book_catalog.core.exceptions import InvalidGenreError
from book_catalog.models.book import Book, GenreTag
from book_catalog.services.book_store import BookStore


@dataclass
class BookCriteria:
    """Raw filter parameters, exactly as received from the caller."""

    genres: Optional[str] = None
    author: Optional[str] = None
    price_bigger_than: Optional[str] = None
    price_less_than: Optional[str] = None
    year_bigger_than: Optional[str] = None
    year_less_than: Optional[str] = None


def _parse_bound(raw: Optional[str]) -> Optional[float]:
    """Parse a numeric bound; anything unparsable counts as no bound."""
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _parse_genres(raw: Optional[str]) -> Optional[list[GenreTag]]:
    if not raw:
        return None
    names = raw.split(",")
    if not all(GenreTag.is_valid(name) for name in names):
        raise InvalidGenreError(names)
    return [GenreTag(name) for name in names]


def title_sort_key(book: Book) -> tuple[str, str]:
    """Collation key ignoring case and accents; accented forms break ties."""
    folded = book.title.casefold()
    base = "".join(
        char for char in unicodedata.normalize("NFKD", folded)
        if not unicodedata.combining(char)
    )
    return locale.strxfrm(base), folded


class QueryEngine:
    """
    Read-only view over a BookStore that applies filter criteria.
    """

    def __init__(self, store: BookStore):
        self._store = store

    def _predicates(self, criteria: BookCriteria) -> list[Callable[[Book], bool]]:
        predicates: list[Callable[[Book], bool]] = []

        genres = _parse_genres(criteria.genres)
        if genres is not None:
            predicates.append(lambda book: book.has_any_genre(genres))

        if criteria.author:
            author = criteria.author.casefold()
            predicates.append(lambda book: book.author.casefold() == author)

        bounds = (
            (criteria.price_bigger_than, lambda book, x: book.price >= x),
            (criteria.price_less_than, lambda book, x: book.price <= x),
            (criteria.year_bigger_than, lambda book, x: book.year >= x),
            (criteria.year_less_than, lambda book, x: book.year <= x),
        )
        for raw, compare in bounds:
            value = _parse_bound(raw)
            if value is not None:
                predicates.append(lambda book, c=compare, v=value: c(book, v))

        return predicates

    def matching(self, criteria: BookCriteria) -> list[Book]:
        """Books satisfying every criterion, in store order."""
        predicates = self._predicates(criteria)
        return [
            book for book in self._store.all()
            if all(predicate(book) for predicate in predicates)
        ]

    def filtered_count(self, criteria: BookCriteria) -> int:
        return len(self.matching(criteria))

    def filtered_list(self, criteria: BookCriteria) -> list[dict]:
        """Matching books sorted by title, as public views."""
        books = sorted(self.matching(criteria), key=title_sort_key)
        return [book.to_dict() for book in books]
