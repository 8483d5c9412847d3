"""Logging configuration and per-channel severity thresholds."""
import copy
import logging
import sys
import time
from enum import IntEnum
from pathlib import Path
from typing import Any, Optional

from book_catalog.core.exceptions import InvalidSeverityError, UnknownChannelError

LOGGER_NAMESPACE = "book_catalog"

REQUEST_CHANNEL = "request-logger"
BOOKS_CHANNEL = "books-logger"
CHANNELS = (REQUEST_CHANNEL, BOOKS_CHANNEL)

CHANNEL_LOG_FILES = {
    REQUEST_CHANNEL: "requests.log",
    BOOKS_CHANNEL: "books.log",
}

LOG_FORMAT = "%(custom_time)s %(levelname)s: %(message)s | request #%(request_number)s"


class Severity(IntEnum):
    """Ordered severity scale, from least to most verbose."""

    ERROR = logging.ERROR
    WARN = logging.WARNING
    INFO = logging.INFO
    HTTP = 15
    DEBUG = logging.DEBUG

    @classmethod
    def parse(cls, name: Optional[str]) -> "Severity":
        """Look up a severity by name, ignoring case."""
        try:
            return cls[(name or "").upper()]
        except KeyError:
            raise InvalidSeverityError(name) from None


logging.addLevelName(Severity.HTTP, "HTTP")


class RequestFormatter(logging.Formatter):
    """Formatter adding millisecond timestamps and the request number."""

    def format(self, record):
        created = time.localtime(record.created)
        millis = int(record.msecs)
        record.custom_time = f"{time.strftime('%d-%m-%Y %H:%M:%S', created)}.{millis:03d}"
        if not hasattr(record, "request_number"):
            record.request_number = "N/A"
        return super().format(record)


class ColoredFormatter(RequestFormatter):
    """Custom formatter with colors for different log levels."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "HTTP": "\033[34m",      # Blue
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record):
        # Other handlers share the record, so colour a copy.
        record = copy.copy(record)
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]
        record.levelname = f"{color}{record.levelname}{reset}"
        return super().format(record)


class CorrelatedLogger(logging.LoggerAdapter):
    """Logger adapter stamping every record with a request number."""

    def process(self, msg: Any, kwargs: dict) -> tuple[Any, dict]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs

    def http(self, msg: Any, *args, **kwargs) -> None:
        self.log(Severity.HTTP, msg, *args, **kwargs)


class LogLevelRegistry:
    """Holds the minimum severity of each log channel.

    Every channel is backed by a standard ``logging.Logger`` under
    ``namespace``. The logger's own level is the threshold, so records below
    it are dropped by ``Logger.isEnabledFor`` before any handler sees them.
    Registries meant to be independent need distinct namespaces.
    """

    def __init__(
        self,
        namespace: str = LOGGER_NAMESPACE,
        levels: Optional[dict[str, Severity]] = None,
    ):
        levels = levels or {}
        self._loggers = {
            channel: logging.getLogger(f"{namespace}.{channel}")
            for channel in CHANNELS
        }
        for channel, logger in self._loggers.items():
            logger.setLevel(levels.get(channel, Severity.INFO))

    def _check(self, channel: Optional[str]) -> str:
        if channel not in self._loggers:
            raise UnknownChannelError(channel)
        return channel

    def get_level(self, channel: Optional[str]) -> Severity:
        """Return the current threshold of a channel."""
        return Severity(self._loggers[self._check(channel)].level)

    def set_level(self, channel: Optional[str], level_name: Optional[str]) -> Severity:
        """Replace the threshold of a channel and return it."""
        channel = self._check(channel)
        severity = Severity.parse(level_name)
        self._loggers[channel].setLevel(severity)
        return severity

    def is_enabled(self, channel: str, severity: Severity) -> bool:
        """Whether a record of ``severity`` on ``channel`` would be emitted."""
        return self.logger(channel).isEnabledFor(severity)

    def logger(self, channel: str) -> logging.Logger:
        return self._loggers[self._check(channel)]

    def bind(self, channel: str, request_number: Optional[int]) -> CorrelatedLogger:
        """Get a channel logger that tags records with ``request_number``."""
        return CorrelatedLogger(self.logger(channel), {"request_number": request_number})


def setup_logging(
    registry: LogLevelRegistry,
    log_dir: Optional[str] = None,
) -> None:
    """Attach console and file handlers to the channel loggers.

    The request channel writes to the console and ``requests.log``; the
    books channel only writes to ``books.log``. Passing ``log_dir=None``
    keeps the file handlers off.
    """
    formatter = RequestFormatter(LOG_FORMAT)

    for channel in CHANNELS:
        logger = registry.logger(channel)

        # Remove existing handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        if log_dir is not None:
            path = Path(log_dir)
            path.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path / CHANNEL_LOG_FILES[channel], encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        if channel == REQUEST_CHANNEL:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(ColoredFormatter(LOG_FORMAT))
            logger.addHandler(console_handler)

        # Prevent propagation to root logger
        logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
