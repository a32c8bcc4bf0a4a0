"""Health check schemas."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field

from recipes_api.schemas.base import APIResponse
from recipes_api.schemas.enums import HealthStatus, ReadinessStatus


class HealthResponse(APIResponse):
    """Liveness probe response."""

    status: HealthStatus = Field(..., description="Health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Deployment environment")


class ReadinessResponse(APIResponse):
    """Readiness probe response with dependency status."""

    status: ReadinessStatus
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    version: str
    environment: str
    dependencies: dict[str, HealthStatus] = Field(default_factory=dict)
