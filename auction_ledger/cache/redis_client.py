"""
Redis client - cache for item detail reads.
Challenge: Connection pooling, fail gracefully when Redis is down.
Design: Single client instance; every failure degrades to a cache miss.
"""

import json
import logging
from typing import Any

from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncSession

from auction_ledger.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

# Shared async Redis client (connection pool managed by redis-py)
_redis: Redis | None = None


def item_key(item_id: int) -> str:
    return f"item:{item_id}"


async def get_redis() -> Redis:
    """Get Redis connection, created on first use."""
    global _redis
    if _redis is None:
        _redis = Redis.from_url(
            settings.redis_url,
            encoding="utf-8",
            decode_responses=True,
        )
    return _redis


async def cache_get(key: str) -> dict[str, Any] | None:
    """Cached JSON document, or None on miss, error, or when caching is off."""
    if not settings.cache_enabled:
        return None
    try:
        client = await get_redis()
        raw = await client.get(key)
    except Exception as e:
        logger.warning("cache_get failed: key=%s error=%s", key, e)
        return None
    return json.loads(raw) if raw else None


async def cache_set(key: str, value: dict[str, Any], ttl_seconds: int | None = None) -> bool:
    """Store a JSON document with TTL."""
    if not settings.cache_enabled:
        return False
    try:
        client = await get_redis()
        await client.setex(key, ttl_seconds or settings.cache_ttl_seconds, json.dumps(value))
        return True
    except Exception as e:
        logger.warning("cache_set failed: key=%s error=%s", key, e)
        return False


async def cache_delete(key: str) -> bool:
    """Invalidate cache key after a mutation."""
    if not settings.cache_enabled:
        return False
    try:
        client = await get_redis()
        await client.delete(key)
        return True
    except Exception as e:
        logger.warning("cache_delete failed: key=%s error=%s", key, e)
        return False


# Keys to drop once the session's transaction is durable
PENDING_INVALIDATIONS = "cache_invalidations"


def invalidate_on_commit(session: AsyncSession, key: str) -> None:
    """
    Queue key for deletion after commit. Dropping it earlier lets a concurrent
    read re-cache the pre-commit row.
    """
    session.info.setdefault(PENDING_INVALIDATIONS, set()).add(key)


async def flush_invalidations(session: AsyncSession) -> None:
    for key in session.info.pop(PENDING_INVALIDATIONS, set()):
        await cache_delete(key)


def discard_invalidations(session: AsyncSession) -> None:
    session.info.pop(PENDING_INVALIDATIONS, None)
