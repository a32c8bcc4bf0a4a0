"""Logging and metrics for the Recipes API."""

from recipes_api.observability.logging import (
    bind_context,
    clear_context,
    get_logger,
    setup_logging,
)


__all__ = [
    "bind_context",
    "clear_context",
    "get_logger",
    "setup_logging",
]
