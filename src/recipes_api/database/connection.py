"""Relational store connection management.

This module provides:
- Async SQLAlchemy engine and session factory management
- Connection lifecycle management via lifespan events
- A FastAPI dependency yielding one session per request
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from recipes_api.database.models import BaseDatabaseModel
from recipes_api.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from sqlalchemy.ext.asyncio import AsyncEngine

    from recipes_api.core.config import Settings

logger = get_logger(__name__)

# Global engine and session factory
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _engine_options(url: str, settings: Settings) -> dict[str, Any]:
    if url.startswith("sqlite"):
        options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url:
            # One shared connection, otherwise every checkout sees an empty DB
            options["poolclass"] = StaticPool
        return options

    return {
        "pool_pre_ping": True,
        "pool_size": settings.database.pool_size,
        "max_overflow": settings.database.max_overflow,
        "pool_recycle": settings.database.pool_recycle,
    }


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


async def init_database(settings: Settings) -> None:
    """Create the engine and session factory.

    Should be called during application startup (lifespan).
    """
    global _engine, _session_factory  # noqa: PLW0603

    url = settings.database_url
    logger.info(
        "Initializing database engine",
        dialect=url.split(":", 1)[0],
        create_schema=settings.database.create_schema,
    )

    _engine = create_async_engine(
        url,
        echo=settings.database.echo,
        **_engine_options(url, settings),
    )
    if url.startswith("sqlite"):
        event.listen(_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    _session_factory = async_sessionmaker(
        _engine,
        expire_on_commit=False,
        autoflush=False,
    )

    if settings.database.create_schema:
        async with _engine.begin() as conn:
            await conn.run_sync(BaseDatabaseModel.metadata.create_all)
        logger.info("Database schema ensured")


async def close_database() -> None:
    """Dispose of the engine and its pooled connections.

    Should be called during application shutdown (lifespan).
    """
    global _engine, _session_factory  # noqa: PLW0603

    logger.info("Closing database engine")

    if _engine:
        await _engine.dispose()
        _engine = None
    _session_factory = None

    logger.info("Database engine closed")


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get the session factory.

    Raises:
        RuntimeError: If the database is not initialized.
    """
    if _session_factory is None:
        msg = "Database not initialized. Call init_database() first."
        raise RuntimeError(msg)
    return _session_factory


async def get_session() -> AsyncGenerator[AsyncSession]:
    """Yield a session scoped to a single request.

    Uncommitted work is rolled back when the request fails.
    """
    async with get_session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def check_database_health() -> dict[str, str]:
    """Check health of the database connection.

    Returns:
        Dictionary with health status.
    """
    results: dict[str, str] = {}

    try:
        if _engine:
            async with _engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            results["database"] = "healthy"
        else:
            results["database"] = "not_initialized"
    except (SQLAlchemyError, OSError):
        logger.warning("Database health check failed")
        results["database"] = "unhealthy"

    return results
