"""Custom exceptions for the application."""
from typing import Any, Optional


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class DuplicateTitleError(AppException):
    """A live book already uses this title (case-insensitive)."""

    def __init__(self, title: str):
        super().__init__(
            f"Book with the title [{title}] already exists in the system",
            error_code="DUPLICATE_TITLE",
            details={"title": title},
        )


class InvalidYearError(AppException):
    """Publication year outside the accepted range."""

    def __init__(self, year: int, min_year: int, max_year: int):
        super().__init__(
            f"Can’t create new Book that its year [{year}] is not in the "
            f"accepted range [{min_year} -> {max_year}]",
            error_code="INVALID_YEAR",
            details={"year": year},
        )


class InvalidPriceError(AppException):
    """Price is not a positive number."""

    def __init__(self, price: float, book_id: Optional[int] = None):
        if book_id is None:
            message = "Can’t create new Book with negative price"
        else:
            message = f"price update for book [{book_id}] must be a positive integer"
        super().__init__(
            message,
            error_code="INVALID_PRICE",
            details={"price": price, "id": book_id},
        )


class NotFoundError(AppException):
    """Resource not found errors."""

    def __init__(self, book_id: Any):
        super().__init__(
            f"no such Book with id {book_id}",
            error_code="NOT_FOUND",
            details={"id": book_id},
        )


class InvalidGenreError(AppException):
    """Genre filter names a tag outside the catalog."""

    def __init__(self, genres: list[str]):
        super().__init__(
            "Invalid genre value",
            error_code="INVALID_GENRE",
            details={"genres": genres},
        )


class UnknownChannelError(AppException):
    """Logger name is not one of the known channels."""

    def __init__(self, channel: Optional[str]):
        super().__init__(
            f"no such logger [{channel}]",
            error_code="UNKNOWN_CHANNEL",
            details={"channel": channel},
        )


class InvalidSeverityError(AppException):
    """Requested log level is not on the severity scale."""

    def __init__(self, level: Optional[str]):
        super().__init__(
            f"no such logger level [{level}]",
            error_code="INVALID_SEVERITY",
            details={"level": level},
        )
