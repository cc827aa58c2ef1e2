"""Tests for the TTL cache manager.

Tests:
1. Basic cache operations (get, set, invalidate)
2. TTL expiration
3. Cache statistics
"""

import pytest

from services.cache_manager import CacheManager


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return CacheManager(clock=clock)


class TestCacheManager:

    def test_set_and_get(self, cache):
        cache.set("test", "key1", "value1", ttl=60)
        assert cache.get("test", "key1") == "value1"

    def test_miss(self, cache):
        assert cache.get("test", "nonexistent") is None
        assert cache.get("other", "key1") is None

    def test_ttl_expiration(self, cache, clock):
        cache.set("test", "key1", "value1", ttl=2)
        clock.now += 1
        assert cache.get("test", "key1") == "value1"
        clock.now += 1
        assert cache.get("test", "key1") is None

    def test_invalidate_namespace(self, cache):
        cache.set("targets", "a", 1)
        cache.set("targets", "b", 2)
        cache.set("users", "a", 3)

        cache.invalidate_namespace("targets")

        assert cache.get("targets", "a") is None
        assert cache.get("targets", "b") is None
        assert cache.get("users", "a") == 3

    def test_clear(self, cache):
        cache.set("targets", "a", 1)
        cache.set("users", "a", 3)
        cache.clear()
        assert cache.get_stats()["total_entries"] == 0

    def test_stats(self, cache):
        cache.set("targets", "a", 1)
        cache.get("targets", "a")
        cache.get("targets", "a")
        cache.get("targets", "missing")
        cache.set("users", "x", 2)
        cache.invalidate_namespace("users")

        stats = cache.get_stats()
        assert stats["hits"] == 2
        assert stats["misses"] == 1
        assert stats["sets"] == 2
        assert stats["invalidations"] == 1
        assert stats["hit_rate"] == "66.7%"
        assert stats["total_entries"] == 1
        assert stats["namespaces"] == ["targets"]

    def test_stats_with_no_requests(self, cache):
        assert cache.get_stats()["hit_rate"] == "0.0%"
