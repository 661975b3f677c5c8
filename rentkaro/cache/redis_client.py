"""
Redis client: item detail caching.
Design: single shared client; every failure degrades to a cache miss.
"""

import json
import logging
from typing import Any

from redis.asyncio import Redis

from rentkaro.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

_redis: Redis | None = None


async def get_redis() -> Redis:
    """Lazily create the shared Redis connection pool."""
    global _redis
    if _redis is None:
        _redis = Redis.from_url(
            settings.redis_url,
            encoding="utf-8",
            decode_responses=True,
        )
    return _redis


async def close_redis() -> None:
    global _redis
    if _redis is not None:
        await _redis.aclose()
        _redis = None


async def cache_get(key: str) -> dict[str, Any] | None:
    """Get a JSON value from cache. Returns None on miss, when disabled, or on error."""
    if not settings.cache_enabled:
        return None
    try:
        client = await get_redis()
        raw = await client.get(key)
    except Exception as e:
        logger.warning("cache_get failed: key=%s error=%s", key, e)
        return None
    return json.loads(raw) if raw else None


async def cache_set(key: str, value: dict[str, Any], ttl_seconds: int = 300) -> bool:
    """Set a JSON value with TTL."""
    if not settings.cache_enabled:
        return False
    try:
        client = await get_redis()
        await client.setex(key, ttl_seconds, json.dumps(value))
        return True
    except Exception as e:
        logger.warning("cache_set failed: key=%s error=%s", key, e)
        return False


async def cache_delete(key: str) -> bool:
    """Invalidate cache key (after item update or delete)."""
    if not settings.cache_enabled:
        return False
    try:
        client = await get_redis()
        await client.delete(key)
        return True
    except Exception as e:
        logger.warning("cache_delete failed: key=%s error=%s", key, e)
        return False
