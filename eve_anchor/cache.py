"""A thread-safe cache whose entries expire after a fixed time."""

from __future__ import annotations

import threading
import time
from datetime import timedelta
from typing import Any, Callable


class Cache:
    """Maps string keys to values that stay valid for ``ttl`` seconds."""

    def __init__(
        self,
        ttl: float | timedelta,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl.total_seconds() if isinstance(ttl, timedelta) else float(ttl)
        self._clock = clock
        self._store: dict[str, tuple[float, Any]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any:
        """Return the stored value, or None when absent or expired."""
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            stored_at, value = entry
            if self._clock() - stored_at < self._ttl:
                return value
            return None

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any earlier entry."""
        with self._lock:
            self._store[key] = (self._clock(), value)