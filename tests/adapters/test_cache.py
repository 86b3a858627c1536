"""Tests for the cache adapters."""

from types import SimpleNamespace

from mbta_router.adapters.cache import InMemoryCache, NullCache, memory_cache


def test_memory_cache_invalidate():
    cache = InMemoryCache(name="test_invalidate")
    cache.set("stops:Red", ["Alewife", "Davis"])
    cache.set("stops:Blue", ["Bowdoin"])

    assert cache.invalidate("stops:Red") is True
    assert cache.invalidate("stops:Red") is False
    assert cache.get("stops:Red") is None
    assert cache.size() == 1


def test_memory_cache_get_or_compute_after_invalidate():
    cache = InMemoryCache(name="test_recompute")
    calls = []

    def compute():
        calls.append(1)
        return ["Alewife"]

    cache.get_or_compute("stops:Red", compute)
    cache.get_or_compute("stops:Red", compute)
    cache.invalidate("stops:Red")
    cache.get_or_compute("stops:Red", compute)

    assert len(calls) == 2
    assert cache.stats()["hits"] == 1


def test_memory_cache_clear_returns_count():
    cache = InMemoryCache(name="test_clear")
    cache.set("a", 1)
    cache.set("b", 2)

    assert cache.clear() == 2
    assert cache.size() == 0


def test_memory_cache_ttl_expiry(monkeypatch):
    now = [100.0]
    monkeypatch.setattr(memory_cache, "time", SimpleNamespace(monotonic=lambda: now[0]))
    cache = InMemoryCache(name="test_ttl", ttl_seconds=5)
    cache.set("stops:Red", ["Alewife"])

    now[0] = 104.0
    assert cache.get("stops:Red") == ["Alewife"]
    now[0] = 106.0
    assert cache.get("stops:Red") is None
    assert cache.size() == 0


def test_null_cache_never_stores():
    cache = NullCache()
    cache.set("a", 1)

    assert cache.get("a") is None
    assert cache.invalidate("a") is False
    assert cache.size() == 0
    assert cache.get_or_compute("a", lambda: 2) == 2
