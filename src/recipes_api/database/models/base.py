"""Declarative base shared by all ORM models."""

from __future__ import annotations

from sqlalchemy import inspect
from sqlalchemy.orm import DeclarativeBase


class BaseDatabaseModel(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models.

    All models share one MetaData, so ``BaseDatabaseModel.metadata`` describes
    the complete schema.
    """

    def __repr__(self) -> str:
        """Render the class name and primary key, e.g. ``Recipe(id=3)``."""
        state = inspect(self)
        identity = state.identity or ()
        keys = [column.key for column in state.mapper.primary_key]
        pairs = ", ".join(f"{k}={v!r}" for k, v in zip(keys, identity, strict=False))
        return f"{type(self).__name__}({pairs or 'transient'})"
