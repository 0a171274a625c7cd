"""A small lock-protected value shared between threads."""

from __future__ import annotations

import threading
from typing import Any


class LockedValue:
    """A value whose reads and writes are serialised by its own lock."""

    def __init__(self, initial: Any = 0) -> None:
        self._lock = threading.Lock()
        self._value = initial

    def get(self) -> Any:
        with self._lock:
            return self._value

    def set(self, value: Any) -> None:
        with self._lock:
            self._value = value

    def increment(self) -> None:
        with self._lock:
            self._value += 1