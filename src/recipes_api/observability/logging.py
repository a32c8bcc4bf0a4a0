"""Logging configuration using Loguru.

This module provides:
- Structured JSON logging for production
- Human-readable colorized output for development
- Request-scoped context (request id, method, path) via a ContextVar
- Interception of standard library logging (uvicorn, SQLAlchemy, httpx)
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING

import orjson
from loguru import logger


if TYPE_CHECKING:
    from typing import Any


_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})

# Libraries that are chatty at INFO level
_NOISY_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "sqlalchemy.engine",
    "aiosqlite",
    "httpx",
    "httpcore",
    "asyncio",
)


class InterceptHandler(logging.Handler):
    """Forward standard library log records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record by forwarding to Loguru."""
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk back to the frame that issued the logging call
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _format_record(record: dict[str, Any]) -> str:
    """Serialize a record, merged with the request context, as one JSON line."""
    record["extra"].update(_log_context.get())

    fields: dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "logger": record["extra"].pop("name", record["name"]),
        "function": record["function"],
        "line": record["line"],
        **record["extra"],
    }

    exception = record["exception"]
    if exception:
        fields["exception"] = {
            "type": exception.type.__name__ if exception.type else None,
            "value": str(exception.value) if exception.value else None,
        }

    # Loguru treats the returned string as a format template
    line = orjson.dumps(fields, default=str).decode()
    return line.replace("{", "{{").replace("}", "}}") + "\n"


def _format_record_dev(record: dict[str, Any]) -> str:
    """Format log record for development (human-readable with context)."""
    context = _log_context.get()
    extra = {k: v for k, v in record["extra"].items() if k != "name"}

    context_str = ""
    if context or extra:
        parts = [f"{k}={v}" for k, v in {**context, **extra}.items()]
        context_str = " | " + " ".join(parts).replace("{", "{{").replace("}", "}}")

    fmt = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        f"<level>{{message}}</level>{context_str}\n"
    )

    if record["exception"]:
        fmt += "{exception}\n"

    return fmt


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    *,
    is_development: bool = False,
    log_file: Path | str | None = None,
) -> None:
    """Configure Loguru sinks.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format ("json" or "text")
        is_development: Force human-readable output
        log_file: Optional file path for rotated JSON output
    """
    logger.remove()

    if log_format == "json" and not is_development:
        logger.add(
            sys.stdout,
            format=_format_record,
            level=log_level.upper(),
            colorize=False,
            backtrace=True,
            diagnose=False,
        )
    else:
        logger.add(
            sys.stdout,
            format=_format_record_dev,
            level=log_level.upper(),
            colorize=True,
            backtrace=True,
            diagnose=True,
        )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=_format_record,
            level=log_level.upper(),
            rotation="100 MB",
            retention="7 days",
            compression="gz",
            backtrace=True,
            diagnose=False,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    for logger_name in _NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """Get a Loguru logger bound to ``name`` (typically ``__name__``)."""
    return logger.bind(name=name)


def bind_context(**kwargs: Any) -> None:
    """Add key/value pairs to every log entry of the current request.

    Example:
        bind_context(request_id="abc-123", user_id="user-456")
    """
    current = _log_context.get().copy()
    current.update(kwargs)
    _log_context.set(current)


def clear_context() -> None:
    """Drop all request-scoped logging context."""
    _log_context.set({})


def get_context() -> dict[str, Any]:
    """Return a copy of the current logging context."""
    return _log_context.get().copy()


__all__ = [
    "bind_context",
    "clear_context",
    "get_context",
    "get_logger",
    "logger",
    "setup_logging",
]
