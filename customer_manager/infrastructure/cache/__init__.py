"""
Cache infrastructure module
"""

from .cache_manager import (
    CacheMaintenance,
    CacheManager,
    InMemoryCache,
    cache_key_for_customer,
    cached,
)

__all__ = [
    "CacheManager",
    "InMemoryCache",
    "cached",
    "cache_key_for_customer",
    "CacheMaintenance",
]
