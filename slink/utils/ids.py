"""Identifier sources for history records

Classes:
    MonotonicIdSource:
        Millisecond-timestamp ids that strictly increase within a process.
"""

import time
import threading
from collections.abc import Callable


def epoch_millis() -> int:
    """Return the current UNIX time in whole milliseconds."""
    return time.time_ns() // 1_000_000


class MonotonicIdSource:
    """Strictly increasing id source based on wall-clock milliseconds

    Each call returns the current time in milliseconds, unless that value is
    not greater than the previously issued id, in which case the previous id
    plus one is returned. Two calls within the same millisecond therefore
    never share an id.

    Example:
        >>> ids = MonotonicIdSource(now=lambda: 1000)
        >>> ids(), ids(), ids()
        (1000, 1001, 1002)
    """

    def __init__(self, now: Callable[[], int] = epoch_millis):
        self._now = now
        self._last = None
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            candidate = self._now()
            if self._last is not None and candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return candidate
