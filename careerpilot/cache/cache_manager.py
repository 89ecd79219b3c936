"""Cache manager for CareerPilot.

Thin JSON layer over ``RedisClient``. Failures are logged and treated as a
miss; callers always fall back to the database.
"""

import json
from typing import Any, Optional

from careerpilot.cache.cache_keys import CacheKeys
from careerpilot.core.config import get_settings
from careerpilot.database.redis_client import RedisClient
from careerpilot.utils.logger import get_cache_logger

logger = get_cache_logger()
settings = get_settings()


class CacheManager:
    """High-level cache management interface."""

    def __init__(self, redis_client: Optional[Any] = None, enabled: Optional[bool] = None):
        self.redis = redis_client or RedisClient
        self.enabled = settings.ENABLE_CACHE if enabled is None else enabled

    async def get(self, key: str, default: Any = None) -> Any:
        """Get a JSON value from cache, or ``default`` on a miss."""
        if not self.enabled:
            return default

        value = await self.redis.get(key)
        if value is None:
            return default

        try:
            return json.loads(value)
        except (TypeError, json.JSONDecodeError) as e:
            logger.warning(f"Discarding undecodable cache entry {key}: {str(e)}")
            await self.delete(key)
            return default

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        if not self.enabled:
            return True

        try:
            payload = json.dumps(value, default=str)
        except (TypeError, ValueError) as e:
            logger.error(f"Cache set error for key {key}: {str(e)}")
            return False
        return await self.redis.set(key, payload, ttl=ttl)

    async def delete(self, *keys: str) -> int:
        if not self.enabled or not keys:
            return 0
        return await self.redis.delete(*keys)

    # Career catalog

    async def get_catalog(self) -> Optional[list]:
        return await self.get(CacheKeys.career_catalog())

    async def cache_catalog(self, careers: list, ttl: Optional[int] = None) -> bool:
        return await self.set(
            CacheKeys.career_catalog(),
            careers,
            ttl=ttl or settings.CATALOG_CACHE_TTL_SECONDS,
        )

    async def invalidate_catalog(self) -> int:
        """Drop the cached catalog after any catalog write."""
        deleted = await self.delete(CacheKeys.career_catalog())
        logger.info("Career catalog cache invalidated", extra={"deleted": deleted})
        return deleted


__all__ = ["CacheManager"]
