"""Redis client for CareerPilot.

Only the career catalog read path uses Redis. Every operation degrades to a
miss when the client is down, so the service keeps working without a cache.
"""

import asyncio
from typing import Any, Optional, Union

import redis.asyncio as redis
from redis.asyncio.connection import ConnectionPool
from redis.exceptions import (
    ConnectionError as RedisConnectionError,
    RedisError,
    TimeoutError as RedisTimeoutError,
)

from careerpilot.core.config import get_settings
from careerpilot.utils.logger import get_cache_logger

settings = get_settings()
logger = get_cache_logger()


class RedisClient:
    """Redis client manager with connection pooling."""

    _pool: Optional[ConnectionPool] = None
    _client: Optional[redis.Redis] = None
    _initialized: bool = False
    _lock: asyncio.Lock = asyncio.Lock()

    @classmethod
    async def connect(cls, url: Optional[str] = None, **kwargs: Any) -> None:
        """Connect to Redis with connection pooling.

        Args:
            url: Redis connection URL
            **kwargs: Pool overrides (max_connections, socket_connect_timeout)
        """
        async with cls._lock:
            if cls._initialized:
                logger.warning("Redis already connected")
                return

            pool_kwargs = {
                "max_connections": kwargs.get("max_connections", settings.REDIS_MAX_CONNECTIONS),
                "decode_responses": True,
                "encoding": "utf-8",
                "socket_keepalive": True,
                "socket_connect_timeout": kwargs.get("socket_connect_timeout", 5),
                "retry_on_timeout": True,
                "retry_on_error": [RedisConnectionError, RedisTimeoutError],
            }

            try:
                cls._pool = ConnectionPool.from_url(url or settings.REDIS_URL, **pool_kwargs)
                cls._client = redis.Redis(connection_pool=cls._pool)
                await cls._client.ping()
            except RedisError as e:
                cls._pool = None
                cls._client = None
                logger.error(f"Redis connection failed: {str(e)}", exc_info=True)
                raise

            cls._initialized = True
            logger.info(
                "Redis connected successfully",
                extra={"max_connections": pool_kwargs["max_connections"]}
            )

    @classmethod
    async def disconnect(cls) -> None:
        """Disconnect from Redis and release the pool."""
        async with cls._lock:
            if cls._client is None:
                return
            try:
                await cls._client.aclose()
                if cls._pool is not None:
                    await cls._pool.disconnect()
            except RedisError as e:
                logger.error(f"Error disconnecting from Redis: {str(e)}", exc_info=True)
            finally:
                cls._client = None
                cls._pool = None
                cls._initialized = False
            logger.info("Redis disconnected")

    @classmethod
    async def ping(cls) -> bool:
        if not cls._initialized or cls._client is None:
            return False

        try:
            return await cls._client.ping() is True
        except RedisError as e:
            logger.error(f"Redis ping failed: {str(e)}")
            return False

    @classmethod
    def is_connected(cls) -> bool:
        return cls._initialized and cls._client is not None

    @classmethod
    async def get(cls, key: str) -> Optional[str]:
        """Get value by key, or None on a miss or error."""
        if cls._client is None:
            return None

        try:
            return await cls._client.get(key)
        except RedisError as e:
            logger.error(f"Redis GET error for key {key}: {str(e)}")
            return None

    @classmethod
    async def set(
        cls,
        key: str,
        value: Union[str, int, float],
        ttl: Optional[int] = None,
    ) -> bool:
        """Set key-value pair with optional TTL in seconds."""
        if cls._client is None:
            return False

        try:
            return bool(await cls._client.set(key, value, ex=ttl))
        except RedisError as e:
            logger.error(f"Redis SET error for key {key}: {str(e)}")
            return False

    @classmethod
    async def delete(cls, *keys: str) -> int:
        if cls._client is None or not keys:
            return 0

        try:
            return await cls._client.delete(*keys)
        except RedisError as e:
            logger.error(f"Redis DELETE error: {str(e)}")
            return 0


__all__ = ["RedisClient"]
