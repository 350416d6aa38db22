"""
Caching layer for customer lookups
"""

import logging
import threading
import time
from functools import wraps
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from customer_manager.infrastructure.utilities.constants import CacheSettings

logger = logging.getLogger(__name__)


class InMemoryCache:
    """
    Simple in-memory cache with TTL support

    Every write or delete bumps a per-key version. Read-through loaders take
    ``version(key)`` before loading and pass it back to ``set`` so a value
    loaded before a newer write or eviction is dropped instead of stored.
    """

    def __init__(self, name: str, default_ttl: int = CacheSettings.DEFAULT_TTL_SECONDS):
        self.name = name
        self._cache: Dict[str, Dict[str, Any]] = {}
        self._default_ttl = default_ttl
        self._lock = threading.RLock()
        self._versions: Dict[str, int] = {}
        self._epoch = 0
        self._stats = {
            "hits": 0,
            "misses": 0,
            "sets": 0,
            "deletes": 0,
            "stale_writes": 0,
        }

    def get(self, key: str) -> Optional[Any]:
        """Get value from cache"""
        with self._lock:
            entry = self._cache.get(key)
            if entry is not None:
                if entry["expires_at"] > time.time():
                    self._stats["hits"] += 1
                    return entry["value"]
                # Remove expired entry
                del self._cache[key]

            self._stats["misses"] += 1
            return None

    def version(self, key: str) -> Tuple[int, int]:
        """Token identifying the current write generation of ``key``"""
        with self._lock:
            return self._epoch, self._versions.get(key, 0)

    def set(
        self,
        key: str,
        value: Any,
        ttl: Optional[int] = None,
        if_version: Optional[Tuple[int, int]] = None,
    ) -> bool:
        """
        Set value in cache

        With ``if_version`` the write only happens if the key has not been
        written, deleted or cleared since that token was taken.

        Returns:
            True if the value was stored
        """
        if ttl is None:
            ttl = self._default_ttl

        now = time.time()
        with self._lock:
            if if_version is not None and if_version != (
                self._epoch,
                self._versions.get(key, 0),
            ):
                self._stats["stale_writes"] += 1
                return False
            self._cache[key] = {
                "value": value,
                "expires_at": now + ttl,
                "created_at": now,
            }
            self._stats["sets"] += 1
            self._bump(key)
            return True

    def delete(self, key: str) -> bool:
        """Delete key from cache"""
        with self._lock:
            self._bump(key)
            if key in self._cache:
                del self._cache[key]
                self._stats["deletes"] += 1
                return True
            return False

    def clear(self) -> None:
        """Clear all cache entries"""
        with self._lock:
            self._cache.clear()
            self._versions.clear()
            self._epoch += 1
            self._stats = {k: 0 for k in self._stats}

    def _bump(self, key: str) -> None:
        self._versions[key] = self._versions.get(key, 0) + 1

    def cleanup_expired(self) -> int:
        """Remove expired entries and return count removed"""
        current_time = time.time()
        with self._lock:
            expired_keys = [
                key
                for key, entry in self._cache.items()
                if entry["expires_at"] <= current_time
            ]
            for key in expired_keys:
                del self._cache[key]

        return len(expired_keys)

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics"""
        with self._lock:
            total_requests = self._stats["hits"] + self._stats["misses"]
            hit_rate = (
                (self._stats["hits"] / total_requests * 100) if total_requests > 0 else 0
            )

            return {
                **self._stats,
                "total_requests": total_requests,
                "hit_rate": round(hit_rate, 2),
                "cache_size": len(self._cache),
            }


class CacheManager:
    """
    Central registry of named caches

    Unknown names are created on first access with the default TTL.
    """

    def __init__(
        self,
        cache_names: Optional[Iterable[str]] = None,
        default_ttl: int = CacheSettings.DEFAULT_TTL_SECONDS,
    ):
        self._default_ttl = default_ttl
        self._caches: Dict[str, InMemoryCache] = {}
        self._lock = threading.Lock()
        self._logger = logging.getLogger(self.__class__.__name__)

        for name in cache_names or ():
            self.get_cache(name)

    def get_cache_names(self) -> List[str]:
        """Names of all known caches"""
        with self._lock:
            return list(self._caches)

    def get_cache(self, name: str) -> InMemoryCache:
        """Get the named cache, creating it if needed"""
        with self._lock:
            cache = self._caches.get(name)
            if cache is None:
                cache = InMemoryCache(name, default_ttl=self._default_ttl)
                self._caches[name] = cache
                self._logger.debug("Created cache %s (ttl=%ss)", name, self._default_ttl)
            return cache

    def has_cache(self, name: str) -> bool:
        """Check whether a cache with this name exists"""
        with self._lock:
            return name in self._caches

    def evict(self, name: str, key: str) -> bool:
        """Remove one entry from a cache, if the cache exists"""
        with self._lock:
            cache = self._caches.get(name)
        return cache.delete(key) if cache is not None else False

    def clear_all(self) -> None:
        """Clear every cache"""
        for name in self.get_cache_names():
            self.get_cache(name).clear()
        self._logger.info("All caches cleared")

    def cleanup_all_expired(self) -> Dict[str, int]:
        """Cleanup expired entries from all caches"""
        return {
            name: self.get_cache(name).cleanup_expired()
            for name in self.get_cache_names()
        }

    def get_all_stats(self) -> Dict[str, Dict[str, Any]]:
        """Get statistics for all caches"""
        return {name: self.get_cache(name).get_stats() for name in self.get_cache_names()}


def cached(
    cache_manager: CacheManager,
    cache_name: str,
    cache_key_func: Optional[Callable[..., str]] = None,
    ttl: Optional[int] = None,
):
    """
    Decorator for caching coroutine results in a named cache

    Args:
        cache_manager: Manager holding the target cache
        cache_name: Name of the cache to store results in
        cache_key_func: Function to generate cache key from function args
        ttl: Time to live in seconds, cache default when omitted
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            if cache_key_func:
                cache_key = cache_key_func(*args, **kwargs)
            else:
                key_parts = [func.__name__]
                key_parts.extend(str(arg) for arg in args)
                key_parts.extend(f"{k}:{v}" for k, v in sorted(kwargs.items()))
                cache_key = ":".join(key_parts)

            cache = cache_manager.get_cache(cache_name)
            cached_result = cache.get(cache_key)
            if cached_result is not None:
                return cached_result

            token = cache.version(cache_key)
            result = await func(*args, **kwargs)
            if result is not None:
                cache.set(cache_key, result, ttl, if_version=token)
            return result

        return wrapper

    return decorator


def cache_key_for_customer(customer_id: int) -> str:
    """Generate cache key for customer"""
    return f"customer:{customer_id}"


class CacheMaintenance:
    """Background task for cache maintenance"""

    def __init__(self, cache_manager: CacheManager, interval: int = 60):
        self._cache_manager = cache_manager
        self._interval = interval
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._logger = logging.getLogger(self.__class__.__name__)

    @property
    def is_running(self) -> bool:
        """True while the maintenance thread is alive"""
        return self._thread is not None and self._thread.is_alive()

    def start_maintenance(self):
        """Start the background maintenance task"""
        if self.is_running:
            self._logger.warning("Maintenance task already running")
            return

        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._maintenance_loop, name="cache-maintenance", daemon=True
        )
        self._thread.start()
        self._logger.info("Cache maintenance task started")

    def stop_maintenance(self):
        """Stop the background maintenance task"""
        self._stop_event.set()
        if self._thread:
            self._thread.join()
            self._thread = None
        self._logger.info("Cache maintenance task stopped")

    def run_once(self) -> Dict[str, int]:
        """Sweep expired entries once"""
        stats = self._cache_manager.cleanup_all_expired()
        self._logger.debug("Cache cleanup stats: %s", stats)
        return stats

    def _maintenance_loop(self):
        """The main loop for cache maintenance"""
        while not self._stop_event.wait(self._interval):
            self.run_once()
