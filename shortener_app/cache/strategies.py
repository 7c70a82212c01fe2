"""
Cache strategies using Strategy Pattern.

Read-through cache for id -> url lookups. Mappings never change once
stored, so entries only leave the cache through TTL expiry.
Backends: Redis, In-Memory, Null.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Dict

logger = logging.getLogger(__name__)


def mapping_key(url_id: str) -> str:
    """Cache key for a short id."""
    return f"url:{url_id}"


class CacheStrategy(ABC):
    """
    Abstract base class for cache strategies.

    All methods are async because cache operations involve I/O (network for Redis).
    A cache failure must look like a miss to the caller; the store stays
    the source of truth.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Get value from cache.

        Returns:
            Cached value or None on miss
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str, ttl: int = 3600) -> bool:
        """
        Set value in cache with TTL (Time To Live).

        Returns:
            True if stored, False otherwise
        """
        pass


class RedisCache(CacheStrategy):
    """
    Redis cache shared by every app process.

    Redis errors are logged and reported as a miss or a failed write.
    """

    def __init__(self, redis_client):
        """
        Args:
            redis_client: Redis client instance (redis.Redis)
        """
        self.redis = redis_client

    async def get(self, key: str) -> Optional[str]:
        try:
            value = self.redis.get(key)
            return value.decode("utf-8") if value else None
        except Exception as e:
            logger.warning("Redis get failed for %s: %s", key, e)
            return None

    async def set(self, key: str, value: str, ttl: int = 3600) -> bool:
        try:
            return bool(self.redis.setex(key, ttl, value))
        except Exception as e:
            logger.warning("Redis set failed for %s: %s", key, e)
            return False


class InMemoryCache(CacheStrategy):
    """
    Per-process dict cache for development and testing.

    TTL is ignored: entries live until restart, which is safe
    because cached mappings never go stale.
    """

    def __init__(self):
        self._cache: Dict[str, str] = {}

    async def get(self, key: str) -> Optional[str]:
        return self._cache.get(key)

    async def set(self, key: str, value: str, ttl: int = 3600) -> bool:
        self._cache[key] = value
        return True


class NullCache(CacheStrategy):
    """
    Null Object Pattern - cache that does nothing.

    Every lookup is a miss, so every read goes to the store.
    """

    async def get(self, key: str) -> Optional[str]:
        return None

    async def set(self, key: str, value: str, ttl: int = 3600) -> bool:
        return True

