"""Cache port - Injectable caching abstraction.

Used by the MBTA client to keep per-route stop listings for the
length of a session instead of querying the provider repeatedly.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, TypeVar

T = TypeVar("T")


class CachePort(Protocol[T]):
    """Port for caching.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache)
    - adapters/cache/null_cache.py (NullCache) - Testing
    """

    def get(self, key: str) -> Optional[T]:
        """Return the cached value, or None if absent or expired."""
        ...

    def set(self, key: str, value: T) -> None:
        """Store a value under ``key``."""
        ...

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Return the cached value, computing and storing it on a miss."""
        ...

    def clear(self) -> int:
        """Drop every entry and return how many there were."""
        ...

    def invalidate(self, key: str) -> bool:
        """Remove one entry; return True if it existed."""
        ...

    def size(self) -> int:
        """Return the number of cached entries."""
        ...
