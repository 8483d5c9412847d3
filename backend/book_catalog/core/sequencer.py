"""Request numbering for log correlation."""
from threading import Lock


class RequestSequencer:
    """
    Thread-safe monotonic request counter used to correlate log records.
    """
    def __init__(self, start: int = 1):
        self._lock = Lock()
        self._current = start - 1

    def next_number(self) -> int:
        """
        Returns the next request number.
        """
        with self._lock:
            self._current += 1
            return self._current

    @property
    def current(self) -> int:
        """
        Last number handed out, 0 before the first request.
        """
        return self._current
