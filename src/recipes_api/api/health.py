"""Health check endpoints.

Provides liveness and readiness probes for Kubernetes and load balancers.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from recipes_api.api.dependencies import get_app_settings
from recipes_api.cache.redis import check_redis_health
from recipes_api.core.config import Settings
from recipes_api.database import check_database_health
from recipes_api.schemas import (
    HealthResponse,
    HealthStatus,
    ReadinessResponse,
    ReadinessStatus,
)


router = APIRouter(tags=["Health"])

# Reported on /ready but never turns the service unready
_INFORMATIONAL = frozenset({"ingredients_catalog"})


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
)
async def health_check(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> HealthResponse:
    """Report that the process is up; dependencies are not checked."""
    return HealthResponse(
        status=HealthStatus.HEALTHY,
        version=settings.app.version,
        environment=settings.APP_ENV,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness probe",
)
async def readiness_check(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> ReadinessResponse:
    """Check the database, the Redis cache and the catalog host.

    The service is ready when the database and (if enabled) Redis are
    healthy. The catalog ping is informational only.
    """
    dependencies: dict[str, HealthStatus] = {}

    database = (await check_database_health())["database"]
    dependencies["database"] = (
        HealthStatus.HEALTHY if database == "healthy" else HealthStatus.UNHEALTHY
    )

    if settings.redis.enabled:
        redis_status = (await check_redis_health())["redis_cache"]
        dependencies["redis"] = (
            HealthStatus.HEALTHY
            if redis_status == "healthy"
            else HealthStatus.UNHEALTHY
        )
    else:
        dependencies["redis"] = HealthStatus.NOT_CONFIGURED

    catalog = getattr(request.app.state, "catalog_client", None)
    if catalog is None:
        dependencies["ingredients_catalog"] = HealthStatus.NOT_CONFIGURED
    else:
        dependencies["ingredients_catalog"] = (
            HealthStatus.HEALTHY
            if await catalog.is_healthy()
            else HealthStatus.UNHEALTHY
        )

    ready = all(
        state in (HealthStatus.HEALTHY, HealthStatus.NOT_CONFIGURED)
        for name, state in dependencies.items()
        if name not in _INFORMATIONAL
    )

    return ReadinessResponse(
        status=ReadinessStatus.READY if ready else ReadinessStatus.DEGRADED,
        version=settings.app.version,
        environment=settings.APP_ENV,
        dependencies=dependencies,
    )
