"""Shared test fixtures."""
import pytest
from httpx import ASGITransport, AsyncClient

from book_catalog.config import Settings
from book_catalog.main import create_app
from book_catalog.models.book import GenreTag
from book_catalog.services.book_store import BookStore


@pytest.fixture
def app():
    """Fresh application with empty state and no log files."""
    return create_app(Settings(log_to_file=False))


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def store():
    return BookStore()


@pytest.fixture
def stocked_store(store):
    """Store with a small mixed catalog."""
    store.create("Dune", "Frank Herbert", 1965, 30, [GenreTag.SCI_FI, GenreTag.NOVEL])
    store.create("akira", "Katsuhiro Otomo", 1982, 15.5, [GenreTag.MANGA, GenreTag.SCI_FI])
    store.create("Clean Code", "Robert C. Martin", 2008, 45, [GenreTag.PROFESSIONAL])
    store.create("Pride and Prejudice", "Jane Austen", 1940, 9.99, [GenreTag.ROMANCE, GenreTag.NOVEL])
    store.create("SPQR", "Mary Beard", 2015, 22, [GenreTag.HISTORY])
    return store
