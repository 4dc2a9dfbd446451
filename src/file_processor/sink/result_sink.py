"""Thread-safe accumulation of transformed lines."""

import threading
from collections import Counter
from collections.abc import Iterable


class ResultSink:
    """
    Container that workers insert into concurrently.

    Every mutation and read goes through one internal lock, so callers never
    need their own synchronization and no insertion is lost or duplicated.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._lines: list[str] = []

    def add(self, line: str) -> None:
        """Insert a single transformed line."""
        with self._lock:
            self._lines.append(line)

    def extend(self, lines: Iterable[str]) -> None:
        """Insert several lines under one lock acquisition."""
        batch = list(lines)
        with self._lock:
            self._lines.extend(batch)

    def snapshot(self) -> tuple[str, ...]:
        """Return the current contents; insertion order is unspecified."""
        with self._lock:
            return tuple(self._lines)

    def counts(self) -> Counter[str]:
        with self._lock:
            return Counter(self._lines)

    def __len__(self) -> int:
        with self._lock:
            return len(self._lines)
