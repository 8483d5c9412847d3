"""FastAPI application entry point."""
import itertools
import locale
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from book_catalog.api import api_router
from book_catalog.config import Settings, get_settings
from book_catalog.core.exceptions import AppException
from book_catalog.core.logging import (
    BOOKS_CHANNEL,
    LOGGER_NAMESPACE,
    REQUEST_CHANNEL,
    LogLevelRegistry,
    Severity,
    get_logger,
    setup_logging,
)
from book_catalog.core.sequencer import RequestSequencer
from book_catalog.schemas.common import ErrorResponse
from book_catalog.services.book_store import BookStore

logger = get_logger("main")

# error_code -> HTTP status
ERROR_STATUS_CODES = {
    "DUPLICATE_TITLE": 409,
    "INVALID_YEAR": 409,
    "INVALID_PRICE": 409,
    "NOT_FOUND": 404,
    "INVALID_GENRE": 400,
    "UNKNOWN_CHANNEL": 400,
    "INVALID_SEVERITY": 400,
}

# Log admin endpoints answer in plain text, errors included
PLAIN_TEXT_ERRORS = {"UNKNOWN_CHANNEL", "INVALID_SEVERITY"}

# Each app gets its own channel loggers
_app_numbers = itertools.count(1)


def error_body(description: str) -> dict:
    return ErrorResponse(error_message=f"Error: {description}").model_dump(by_alias=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    settings: Settings = app.state.settings
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logger.warning("System collation locale unavailable, using the C locale")
    setup_logging(
        app.state.log_registry,
        log_dir=settings.log_dir if settings.log_to_file else None,
    )
    logger.info("Book catalog listening on port %d", settings.port)
    yield


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build an application with its own store, sequencer and log registry."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="In-memory book catalog API",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    app.state.settings = settings
    app.state.book_store = BookStore()
    app.state.sequencer = RequestSequencer()
    app.state.log_registry = LogLevelRegistry(
        namespace=f"{LOGGER_NAMESPACE}.app-{next(_app_numbers)}",
        levels={
            REQUEST_CHANNEL: Severity.parse(settings.request_log_level),
            BOOKS_CHANNEL: Severity.parse(settings.books_log_level),
        }
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def sequence_requests(request: Request, call_next):
        """Number each request and log its arrival and duration."""
        number = request.app.state.sequencer.next_number()
        request.state.request_number = number
        log = request.app.state.log_registry.bind(REQUEST_CHANNEL, number)
        started = time.perf_counter()
        log.info(
            "Incoming request | #%d | resource: %s | HTTP Verb %s",
            number,
            request.url.path,
            request.method.upper(),
        )
        response = await call_next(request)
        duration = round((time.perf_counter() - started) * 1000)
        log.debug("request #%d duration: %dms", number, duration)
        return response

    # Exception handlers
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        """Translate domain errors to status codes."""
        status_code = ERROR_STATUS_CODES.get(exc.error_code, 400)
        if exc.error_code in PLAIN_TEXT_ERRORS:
            return PlainTextResponse(f"Error: {exc.message}", status_code=status_code)

        request.app.state.log_registry.bind(
            BOOKS_CHANNEL, getattr(request.state, "request_number", None)
        ).error("Error: %s", exc.message)
        return JSONResponse(status_code=status_code, content=error_body(exc.message))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Report malformed payloads and parameters as bad requests."""
        description = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'][1:])}: {error['msg']}"
            for error in exc.errors()
        )
        return JSONResponse(status_code=400, content=error_body(description))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception("Unhandled exception: %s", exc)

        if settings.debug:
            return JSONResponse(
                status_code=500,
                content={
                    **error_body(str(exc)),
                    "type": type(exc).__name__,
                },
            )

        return JSONResponse(status_code=500, content=error_body("Internal server error"))

    # Include API router
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "book_catalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
