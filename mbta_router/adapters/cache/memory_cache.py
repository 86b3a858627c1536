"""Thread-safe in-memory cache for provider responses.

Stop listings may be fetched from worker threads, so every access
goes through a lock.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass
class InMemoryCache(Generic[T]):
    """In-memory cache with optional TTL.

    Attributes:
        ttl_seconds: Lifetime of an entry (None = kept for the session)
        name: Cache name for logging

    Example:
        cache = InMemoryCache[list](name="stops")
        stops = cache.get_or_compute("Red", lambda: client.fetch("Red"))
    """

    ttl_seconds: Optional[float] = None
    name: str = "cache"

    _store: Dict[str, Tuple[Any, float]] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)
    _hits: int = field(default=0, repr=False)
    _misses: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"cache.{self.name}")

    def get(self, key: str) -> Optional[T]:
        with self._lock:
            entry = self._store.get(key)
            if entry is not None and time.monotonic() > entry[1]:
                del self._store[key]
                entry = None
            if entry is None:
                self._misses += 1
                return None
            self._hits += 1
            return entry[0]

    def set(self, key: str, value: T) -> None:
        expiry = (
            time.monotonic() + self.ttl_seconds
            if self.ttl_seconds is not None
            else float("inf")
        )
        with self._lock:
            self._store[key] = (value, expiry)

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Return the cached value or compute, store and return it.

        The computation runs outside the lock; two threads missing on
        the same key may both compute it, the last one wins.
        """
        value = self.get(key)
        if value is not None:
            self._logger.debug("Cache hit", extra={"key": key})
            return value

        computed = compute_fn()
        self.set(key, computed)
        return computed

    def clear(self) -> int:
        with self._lock:
            count = len(self._store)
            self._store.clear()
            self._hits = 0
            self._misses = 0
        self._logger.debug("Cache cleared", extra={"entries_cleared": count})
        return count

    def invalidate(self, key: str) -> bool:
        with self._lock:
            removed = self._store.pop(key, None) is not None
        if removed:
            self._logger.debug("Cache entry invalidated", extra={"key": key})
        return removed

    def size(self) -> int:
        with self._lock:
            return len(self._store)

    def stats(self) -> Dict[str, int]:
        """Return hit/miss counts and current size."""
        with self._lock:
            return {"size": len(self._store), "hits": self._hits, "misses": self._misses}
