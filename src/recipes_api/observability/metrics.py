"""Prometheus metrics instrumentation.

This module provides:
- FastAPI request metrics via prometheus-fastapi-instrumentator
- Counters for ingredient catalog calls and pricing cache lookups
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prometheus_client import Counter
from prometheus_fastapi_instrumentator import Instrumentator, metrics

from recipes_api.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import FastAPI

    from recipes_api.core.config import Settings

logger = get_logger(__name__)

METRIC_NAMESPACE = "recipes_api"

CATALOG_REQUESTS = Counter(
    "catalog_requests_total",
    "Batch-get requests sent to the ingredients catalog",
    labelnames=("outcome",),
    namespace=METRIC_NAMESPACE,
)

PRICING_CACHE_LOOKUPS = Counter(
    "pricing_cache_lookups_total",
    "Ingredient pricing cache lookups",
    labelnames=("result",),
    namespace=METRIC_NAMESPACE,
)


def setup_metrics(app: FastAPI, settings: Settings) -> Instrumentator:
    """Instrument the application and expose ``/metrics``.

    Args:
        app: The FastAPI application instance.
        settings: Application settings.

    Returns:
        Configured Instrumentator instance.
    """
    if not settings.metrics.enabled:
        logger.info("Metrics collection disabled")
        return Instrumentator()

    instrumentator = Instrumentator(
        should_group_status_codes=True,
        should_ignore_untemplated=True,
        excluded_handlers=["/health", "/ready", "/metrics"],
    )
    instrumentator.add(
        metrics.default(
            metric_namespace=METRIC_NAMESPACE,
            metric_subsystem="http",
        )
    )
    instrumentator.instrument(app)
    instrumentator.expose(app, endpoint="/metrics", tags=["Monitoring"])

    logger.info("Prometheus metrics configured", endpoint="/metrics")
    return instrumentator


__all__ = ["CATALOG_REQUESTS", "PRICING_CACHE_LOOKUPS", "setup_metrics"]
