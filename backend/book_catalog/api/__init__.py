"""API routes."""
from fastapi import APIRouter

from book_catalog.api.books import router as books_router
from book_catalog.api.logs import router as logs_router

api_router = APIRouter()

# Include all route modules
api_router.include_router(books_router)
api_router.include_router(logs_router)

__all__ = ["api_router"]
