"""Redis caching layer."""

from recipes_api.cache.redis import (
    check_redis_health,
    close_redis_pools,
    get_cache_client,
    init_redis_pools,
)


__all__ = [
    "check_redis_health",
    "close_redis_pools",
    "get_cache_client",
    "init_redis_pools",
]
