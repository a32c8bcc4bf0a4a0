"""Redis client and connection pool management.

This module provides:
- Async Redis connection pool for the pricing cache
- Connection lifecycle management via lifespan events
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import redis.asyncio as redis
from redis.asyncio.connection import ConnectionPool

from recipes_api.observability.logging import get_logger


if TYPE_CHECKING:
    from redis.asyncio import Redis

    from recipes_api.core.config import Settings

logger = get_logger(__name__)

# Global connection pool and client
_cache_pool: ConnectionPool[Any] | None = None
_cache_client: Redis[Any] | None = None


async def init_redis_pools(settings: Settings) -> None:
    """Initialize the Redis cache connection pool.

    Should be called during application startup (lifespan).
    """
    global _cache_pool, _cache_client  # noqa: PLW0603

    logger.info(
        "Initializing Redis connections",
        host=settings.redis.host,
        port=settings.redis.port,
    )

    _cache_pool = ConnectionPool.from_url(
        settings.redis_cache_url,
        max_connections=settings.redis.max_connections,
        decode_responses=True,
    )
    _cache_client = redis.Redis(connection_pool=_cache_pool)

    # Verify connection
    try:
        await _cache_client.ping()
        logger.info("Redis connections established successfully")
    except redis.ConnectionError:
        logger.exception("Failed to connect to Redis")
        raise


async def close_redis_pools() -> None:
    """Close the Redis connection pool.

    Should be called during application shutdown (lifespan).
    """
    global _cache_pool, _cache_client  # noqa: PLW0603

    logger.info("Closing Redis connections")

    if _cache_client:
        await _cache_client.aclose()
        _cache_client = None

    if _cache_pool:
        await _cache_pool.disconnect()
        _cache_pool = None

    logger.info("Redis connections closed")


def get_cache_client() -> Redis[Any]:
    """Get the cache Redis client.

    Raises:
        RuntimeError: If Redis is not initialized.
    """
    if _cache_client is None:
        msg = "Redis cache client not initialized. Call init_redis_pools() first."
        raise RuntimeError(msg)
    return _cache_client


async def check_redis_health() -> dict[str, str]:
    """Check health of the Redis cache connection.

    Returns:
        Dictionary with health status for the cache instance.
    """
    results: dict[str, str] = {}

    try:
        if _cache_client:
            await _cache_client.ping()
            results["redis_cache"] = "healthy"
        else:
            results["redis_cache"] = "not_initialized"
    except (redis.ConnectionError, redis.TimeoutError):
        results["redis_cache"] = "unhealthy"

    return results
