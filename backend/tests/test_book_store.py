import pytest

from book_catalog.core.exceptions import (
    DuplicateTitleError,
    InvalidGenreError,
    InvalidPriceError,
    InvalidYearError,
    NotFoundError,
)
from book_catalog.models.book import GenreTag


def test_create_returns_sequential_ids(store):
    first = store.create("Book A", "Author", 2000, 10, ["NOVEL"])
    second = store.create("Book B", "Author", 2000, 10, ["NOVEL"])
    assert (first, second) == (1, 2)
    assert store.count() == 2


def test_duplicate_title_is_case_insensitive(store):
    store.create("The Hobbit", "Tolkien", 1950, 20, ["NOVEL"])
    with pytest.raises(DuplicateTitleError):
        store.create("THE HOBBIT", "Someone", 1960, 25, ["HISTORY"])
    assert store.count() == 1


@pytest.mark.parametrize("year", [1939, 2101])
def test_year_out_of_range(store, year):
    with pytest.raises(InvalidYearError):
        store.create("X", "A", year, 10, ["NOVEL"])
    assert store.count() == 0


@pytest.mark.parametrize("year", [1940, 2100])
def test_year_range_is_inclusive(store, year):
    assert store.create(f"Book {year}", "A", year, 10, ["NOVEL"]) >= 1


@pytest.mark.parametrize("price", [0, -5])
def test_non_positive_price_rejected(store, price):
    with pytest.raises(InvalidPriceError):
        store.create("X", "A", 2000, price, ["NOVEL"])


def test_smallest_positive_price_accepted(store):
    book_id = store.create("Cheap", "A", 2000, 0.01, ["NOVEL"])
    assert store.get(book_id).price == 0.01


def test_validation_order_duplicate_before_year_before_price(store):
    store.create("Taken", "A", 2000, 10, ["NOVEL"])
    with pytest.raises(DuplicateTitleError):
        store.create("taken", "A", 1800, -1, ["NOVEL"])
    with pytest.raises(InvalidYearError):
        store.create("Fresh", "A", 1800, -1, ["NOVEL"])


def test_unknown_genre_rejected(store):
    with pytest.raises(InvalidGenreError):
        store.create("X", "A", 2000, 10, ["NOVEL", "POETRY"])


def test_genres_deduplicated_in_order(store):
    book_id = store.create("X", "A", 2000, 10, ["MANGA", "NOVEL", "MANGA"])
    assert store.get(book_id).genres == [GenreTag.MANGA, GenreTag.NOVEL]


def test_ids_never_reused_after_delete(store):
    first = store.create("Book A", "A", 2000, 10, ["NOVEL"])
    store.delete(first)
    second = store.create("Book B", "A", 2000, 10, ["NOVEL"])
    assert second == first + 1


def test_deleted_title_can_be_reused(store):
    first = store.create("Again", "A", 2000, 10, ["NOVEL"])
    store.delete(first)
    assert store.create("again", "A", 2000, 10, ["NOVEL"]) == first + 1


def test_get_missing_book(store):
    with pytest.raises(NotFoundError):
        store.get(42)


def test_update_price_returns_old_price(store):
    book_id = store.create("X", "A", 2000, 30, ["NOVEL"])
    assert store.update_price(book_id, 50) == 30
    assert store.get(book_id).price == 50


def test_update_price_unknown_book(store):
    with pytest.raises(NotFoundError):
        store.update_price(99, 50)


def test_update_price_not_found_checked_first(store):
    with pytest.raises(NotFoundError):
        store.update_price(99, -1)


@pytest.mark.parametrize("price", [0, -3])
def test_update_price_must_stay_positive(store, price):
    book_id = store.create("X", "A", 2000, 30, ["NOVEL"])
    with pytest.raises(InvalidPriceError):
        store.update_price(book_id, price)
    assert store.get(book_id).price == 30


def test_delete_last_book(store):
    book_id = store.create("Only", "A", 2000, 10, ["NOVEL"])
    assert store.delete(book_id) == 0
    with pytest.raises(NotFoundError):
        store.get(book_id)


def test_delete_missing_book(stocked_store):
    with pytest.raises(NotFoundError):
        stocked_store.delete(999)
    assert stocked_store.count() == 5


def test_all_keeps_insertion_order(stocked_store):
    titles = [book.title for book in stocked_store.all()]
    assert titles == ["Dune", "akira", "Clean Code", "Pride and Prejudice", "SPQR"]


def test_all_returns_a_snapshot(stocked_store):
    snapshot = stocked_store.all()
    stocked_store.delete(snapshot[0].id)
    assert len(snapshot) == 5
    assert stocked_store.count() == 4


def test_create_rejects_nan(store):
    with pytest.raises(InvalidPriceError):
        store.create("X", "A", 2000, float("nan"), ["NOVEL"])
    assert store.count() == 0


def test_update_price_rejects_nan(store):
    book_id = store.create("X", "A", 2000, 30, ["NOVEL"])
    with pytest.raises(InvalidPriceError):
        store.update_price(book_id, float("nan"))
    assert store.get(book_id).price == 30
