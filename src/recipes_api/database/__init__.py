"""Relational persistence: engine lifecycle, ORM models and repositories."""

from recipes_api.database.connection import (
    check_database_health,
    close_database,
    get_session,
    get_session_factory,
    init_database,
)


__all__ = [
    "check_database_health",
    "close_database",
    "get_session",
    "get_session_factory",
    "init_database",
]
