"""Core utilities."""
from book_catalog.core.exceptions import (
    AppException,
    DuplicateTitleError,
    InvalidGenreError,
    InvalidPriceError,
    InvalidSeverityError,
    InvalidYearError,
    NotFoundError,
    UnknownChannelError,
)
from book_catalog.core.logging import (
    BOOKS_CHANNEL,
    CHANNELS,
    REQUEST_CHANNEL,
    CorrelatedLogger,
    LogLevelRegistry,
    Severity,
    get_logger,
    setup_logging,
)
from book_catalog.core.sequencer import RequestSequencer

__all__ = [
    # Logging
    "BOOKS_CHANNEL",
    "CHANNELS",
    "REQUEST_CHANNEL",
    "CorrelatedLogger",
    "LogLevelRegistry",
    "Severity",
    "get_logger",
    "setup_logging",
    # Sequencing
    "RequestSequencer",
    # Exceptions
    "AppException",
    "DuplicateTitleError",
    "InvalidYearError",
    "InvalidPriceError",
    "NotFoundError",
    "InvalidGenreError",
    "UnknownChannelError",
    "InvalidSeverityError",
]
