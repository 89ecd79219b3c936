"""Caching layer for CareerPilot."""

from careerpilot.cache.cache_keys import CacheKeys, CacheNamespace
from careerpilot.cache.cache_manager import CacheManager

__all__ = ["CacheKeys", "CacheManager", "CacheNamespace"]
