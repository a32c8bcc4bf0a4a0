"""Application factory for creating FastAPI instances.

This module provides the create_app factory function that:
- Configures the FastAPI application with appropriate settings
- Sets up the middleware stack in the correct order
- Registers exception handlers
- Mounts the versioned API routers and health probes
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from recipes_api.api import health
from recipes_api.api.v1.router import router as v1_router
from recipes_api.api.v2.router import router as v2_router
from recipes_api.core.config import Settings, get_settings
from recipes_api.core.events import lifespan
from recipes_api.core.exceptions import setup_exception_handlers
from recipes_api.core.middleware import (
    LoggingMiddleware,
    RequestIDMiddleware,
    TimingMiddleware,
)
from recipes_api.observability.metrics import setup_metrics


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure a FastAPI application instance.

    Args:
        settings: Optional settings override. If not provided, uses get_settings().

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=settings.app.name,
        version=settings.app.version,
        description="Recipes API - recipes, ratings, groups and catalog pricing",
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_url="/openapi.json" if not settings.is_production else None,
        debug=settings.app.debug,
    )

    # Lifespan and dependencies read settings from here
    app.state.settings = settings

    setup_exception_handlers(app)
    _setup_middleware(app, settings)
    _setup_routers(app, settings)

    # After routes are mounted
    setup_metrics(app, settings)

    return app


def _setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure middleware stack.

    Middleware runs in reverse order of addition. From the request's
    perspective:
    1. RequestIDMiddleware (correlation id, fresh logging context)
    2. TimingMiddleware
    3. LoggingMiddleware
    4. GZipMiddleware
    5. CORSMiddleware (only when origins are configured)
    """
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["Location", "X-Request-ID", "X-Process-Time"],
        )

    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)


def _setup_routers(app: FastAPI, settings: Settings) -> None:
    """Mount API routers."""
    app.include_router(health.router)
    app.include_router(v1_router, prefix=settings.api.v1_prefix)
    app.include_router(v2_router, prefix=settings.api.v2_prefix)
