"""Redis cache operations"""
import logging
from typing import Optional

import redis.asyncio as redis

logger = logging.getLogger(__name__)


class CacheService:
    """
    Thin wrapper over an async Redis client.

    Created once at startup and injected through ``get_cache``. Cache
    failures are logged and reported as a miss; they never fail a request.
    """

    def __init__(self, client: redis.Redis):
        self.client = client

    @classmethod
    def from_url(cls, url: str) -> "CacheService":
        return cls(redis.from_url(url, encoding="utf-8", decode_responses=True))

    async def close(self) -> None:
        """Close Redis connection"""
        await self.client.aclose()

    async def get(self, key: str) -> Optional[str]:
        """
        Get value from cache.

        Args:
            key: Cache key

        Returns:
            Cached value if exists, None otherwise
        """
        try:
            return await self.client.get(key)
        except redis.RedisError as e:
            logger.warning("Cache get error for key '%s': %s", key, e)
            return None

    async def set(self, key: str, value: str, ttl: int = 3600) -> bool:
        """
        Set value in cache with TTL.

        Args:
            key: Cache key
            value: Value to cache
            ttl: Time to live in seconds (default: 3600 = 1 hour)

        Returns:
            True if successful, False otherwise
        """
        try:
            await self.client.setex(key, ttl, value)
            return True
        except redis.RedisError as e:
            logger.warning("Cache set error for key '%s': %s", key, e)
            return False

    async def health_check(self) -> bool:
        """
        Check if Redis connection is healthy.

        Returns:
            True if Redis is accessible, False otherwise
        """
        try:
            await self.client.ping()
            return True
        except redis.RedisError:
            return False
