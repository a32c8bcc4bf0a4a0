"""Application lifespan event handlers.

Startup opens the database engine, the Redis cache pool, the auth provider
and the catalog client, and publishes the shared services on ``app.state``.
Shutdown releases them in reverse order.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from recipes_api.auth.providers import initialize_auth_provider, shutdown_auth_provider
from recipes_api.cache.redis import close_redis_pools, get_cache_client, init_redis_pools
from recipes_api.clients.ingredients_catalog import IngredientsCatalogClient
from recipes_api.core.config import Settings, get_settings
from recipes_api.database import close_database, init_database
from recipes_api.observability.logging import get_logger, setup_logging
from recipes_api.services.pricing import IngredientsPricingService


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI
    from redis.asyncio import Redis

logger = get_logger(__name__)


async def _startup(app: FastAPI, settings: Settings) -> None:
    """Initialize all application services during startup."""
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
        log_file=settings.logging.file,
    )

    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        debug=settings.app.debug,
    )

    # Database is critical - raise on failure
    await init_database(settings)

    cache_client = await _init_cache(settings)

    # Auth is critical - raise on failure
    await initialize_auth_provider(settings)

    catalog_client = IngredientsCatalogClient(settings)
    await catalog_client.initialize()
    app.state.catalog_client = catalog_client

    pricing_service = IngredientsPricingService(
        catalog_client,
        cache_client=cache_client,
        settings=settings,
    )
    app.state.pricing_service = pricing_service

    logger.info(
        "Application startup complete",
        pricing_cache=pricing_service.cache_backend,
    )


async def _init_cache(settings: Settings) -> Redis[Any] | None:
    """Initialize Redis cache and return client, or None to cache in-process."""
    if not settings.redis.enabled:
        logger.info("Redis disabled - pricing cache kept in-process")
        return None

    try:
        await init_redis_pools(settings)
        return get_cache_client()
    except Exception:
        logger.exception("Failed to initialize Redis - pricing cache kept in-process")
        await close_redis_pools()
        return None


async def _shutdown(app: FastAPI) -> None:
    """Shutdown all application services."""
    logger.info("Shutting down application")

    catalog_client = getattr(app.state, "catalog_client", None)
    if catalog_client is not None:
        await catalog_client.shutdown()
        app.state.catalog_client = None
    app.state.pricing_service = None

    await shutdown_auth_provider()
    await close_redis_pools()
    await close_database()

    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    Uses the settings the application was created with, falling back to
    ``get_settings()``.
    """
    settings: Settings = getattr(app.state, "settings", None) or get_settings()
    await _startup(app, settings)
    try:
        yield
    finally:
        await _shutdown(app)
