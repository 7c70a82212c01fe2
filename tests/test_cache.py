"""
Tests for cache backends and the cache factory.
"""
import asyncio

import pytest

from shortener_app.cache.factory import CacheBackend, CacheFactory
from shortener_app.cache.strategies import InMemoryCache, NullCache, RedisCache, mapping_key


class BrokenRedis:
    """Redis client stand-in whose every command fails"""

    def __getattr__(self, name):
        def fail(*args, **kwargs):
            raise ConnectionError("redis is down")
        return fail


class TestCacheBackends:

    def test_mapping_key(self):
        assert mapping_key("AAAAAAAA") == "url:AAAAAAAA"

    def test_in_memory_set_then_get(self):
        cache = InMemoryCache()

        assert asyncio.run(cache.get("url:x")) is None
        assert asyncio.run(cache.set("url:x", "https://example.com/"))
        assert asyncio.run(cache.get("url:x")) == "https://example.com/"

    def test_null_cache_always_misses(self):
        cache = NullCache()

        asyncio.run(cache.set("url:x", "https://example.com/"))

        assert asyncio.run(cache.get("url:x")) is None

    def test_redis_errors_look_like_misses(self):
        cache = RedisCache(BrokenRedis())

        assert asyncio.run(cache.get("url:x")) is None
        assert asyncio.run(cache.set("url:x", "https://example.com/")) is False


class TestCacheFactory:

    def setup_method(self):
        CacheFactory.clear_instance()

    def teardown_method(self):
        CacheFactory.clear_instance()

    def test_creates_memory_cache(self):
        assert isinstance(CacheFactory.create(CacheBackend.MEMORY), InMemoryCache)

    def test_creates_null_cache(self):
        assert isinstance(CacheFactory.create(CacheBackend.NULL), NullCache)

    def test_instance_is_reused(self):
        first = CacheFactory.create(CacheBackend.MEMORY)
        second = CacheFactory.create(CacheBackend.NULL)

        assert first is second

    def test_unknown_backend_name(self):
        with pytest.raises(ValueError):
            CacheBackend("memcached")
