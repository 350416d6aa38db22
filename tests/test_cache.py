"""
Tests for the caching layer
"""

from unittest.mock import patch

import pytest

from customer_manager.infrastructure.cache.cache_manager import (
    CacheMaintenance,
    CacheManager,
    InMemoryCache,
    cache_key_for_customer,
    cached,
)


class TestInMemoryCache:
    """Test the TTL cache"""

    def test_set_get_and_stats(self):
        """Test hits, misses and stats"""
        cache = InMemoryCache("test", default_ttl=60)
        cache.set("a", 1)

        assert cache.get("a") == 1
        assert cache.get("b") is None

        stats = cache.get_stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["sets"] == 1
        assert stats["hit_rate"] == 50.0
        assert stats["cache_size"] == 1

    @patch("customer_manager.infrastructure.cache.cache_manager.time.time")
    def test_entries_expire(self, mock_time):
        """Test TTL expiry"""
        mock_time.return_value = 1000.0
        cache = InMemoryCache("test", default_ttl=10)
        cache.set("short", "x", ttl=5)
        cache.set("long", "y")

        mock_time.return_value = 1006.0
        assert cache.get("short") is None
        assert cache.get("long") == "y"

        mock_time.return_value = 1011.0
        assert cache.cleanup_expired() == 1
        assert len(cache) == 0

    def test_delete_and_clear(self):
        """Test delete and clear"""
        cache = InMemoryCache("test")
        cache.set("a", 1)
        cache.set("b", 2)

        assert cache.delete("a") is True
        assert cache.delete("a") is False

        cache.clear()
        assert len(cache) == 0
        assert cache.get_stats()["sets"] == 0

    def test_versioned_set_rejected_after_delete(self):
        """Test a write based on an old version loses to a delete"""
        cache = InMemoryCache("test")
        token = cache.version("a")

        cache.delete("a")

        assert cache.set("a", "stale", if_version=token) is False
        assert cache.get("a") is None
        assert cache.get_stats()["stale_writes"] == 1

    def test_versioned_set_rejected_after_newer_write_or_clear(self):
        """Test newer writes and clears also invalidate a version"""
        cache = InMemoryCache("test")
        token = cache.version("a")
        cache.set("a", "fresh")
        assert cache.set("a", "stale", if_version=token) is False
        assert cache.get("a") == "fresh"

        token = cache.version("a")
        cache.clear()
        assert cache.set("a", "stale", if_version=token) is False
        assert len(cache) == 0

    def test_versioned_set_accepted_when_untouched(self):
        """Test a version still current allows the write"""
        cache = InMemoryCache("test")
        cache.set("other", 1)
        token = cache.version("a")

        cache.delete("other")

        assert cache.set("a", "value", if_version=token) is True
        assert cache.get("a") == "value"


class TestCacheManager:
    """Test the named cache registry"""

    def test_configured_names(self):
        """Test caches given at construction are listed in order"""
        manager = CacheManager(["customers", "customer_list"])
        assert manager.get_cache_names() == ["customers", "customer_list"]

    def test_get_cache_creates_on_demand(self):
        """Test unknown names are created"""
        manager = CacheManager()
        assert manager.get_cache_names() == []
        assert not manager.has_cache("extra")

        cache = manager.get_cache("extra")

        assert manager.has_cache("extra")
        assert manager.get_cache("extra") is cache

    def test_evict(self):
        """Test evicting one key"""
        manager = CacheManager(["customers"])
        manager.get_cache("customers").set(cache_key_for_customer(1), "c1")

        assert manager.evict("customers", "customer:1") is True
        assert manager.evict("customers", "customer:1") is False
        assert manager.evict("missing", "customer:1") is False
        assert not manager.has_cache("missing")

    def test_clear_all_and_stats(self):
        """Test clearing every cache"""
        manager = CacheManager(["a", "b"])
        manager.get_cache("a").set("k", 1)
        manager.get_cache("b").set("k", 2)

        manager.clear_all()

        stats = manager.get_all_stats()
        assert set(stats) == {"a", "b"}
        assert all(s["cache_size"] == 0 for s in stats.values())

    @patch("customer_manager.infrastructure.cache.cache_manager.time.time")
    def test_cleanup_all_expired(self, mock_time):
        """Test expired entries are swept per cache"""
        mock_time.return_value = 0.0
        manager = CacheManager(["a", "b"], default_ttl=1)
        manager.get_cache("a").set("k", 1)

        mock_time.return_value = 5.0
        assert manager.cleanup_all_expired() == {"a": 1, "b": 0}


class TestCachedDecorator:
    """Test the coroutine caching decorator"""

    @pytest.mark.asyncio
    async def test_caches_results(self):
        """Test repeated calls are served from the cache"""
        manager = CacheManager()
        calls = []

        @cached(manager, "squares")
        async def square(x):
            calls.append(x)
            return x * x

        assert await square(3) == 9
        assert await square(3) == 9
        assert await square(4) == 16
        assert calls == [3, 4]
        assert manager.get_cache("squares").get("square:3") == 9

    @pytest.mark.asyncio
    async def test_custom_key_and_none_not_cached(self):
        """Test custom keys and that None results are recomputed"""
        manager = CacheManager()
        calls = []

        @cached(manager, "lookups", cache_key_func=lambda key: f"k:{key}")
        async def lookup(key):
            calls.append(key)
            return None

        await lookup("x")
        await lookup("x")
        assert calls == ["x", "x"]

    @pytest.mark.asyncio
    async def test_eviction_during_call_discards_result(self):
        """Test a result computed before an eviction is not stored"""
        manager = CacheManager(["totals"])

        @cached(manager, "totals", cache_key_func=lambda: "all")
        async def total():
            manager.evict("totals", "all")
            return 42

        assert await total() == 42
        assert manager.get_cache("totals").get("all") is None


class TestCacheMaintenance:
    """Test the maintenance sweeper"""

    def test_run_once(self):
        """Test a single sweep reports per-cache counts"""
        manager = CacheManager(["a"])
        maintenance = CacheMaintenance(manager, interval=3600)
        assert maintenance.run_once() == {"a": 0}

    def test_start_and_stop(self):
        """Test the thread lifecycle"""
        maintenance = CacheMaintenance(CacheManager(), interval=3600)

        maintenance.start_maintenance()
        assert maintenance.is_running
        maintenance.start_maintenance()

        maintenance.stop_maintenance()
        assert not maintenance.is_running
