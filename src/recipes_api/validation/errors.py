"""Validation result type."""

from __future__ import annotations

from enum import StrEnum
from typing import NamedTuple


class FieldError(NamedTuple):
    """A single rule violation: the offending field and a readable message."""

    field: str
    message: str


def enum_member_error(
    field: str,
    value: str | None,
    enum_cls: type[StrEnum],
) -> FieldError | None:
    """Return an error when ``value`` is set but not a member of ``enum_cls``."""
    if value is None or value in enum_cls._value2member_map_:
        return None
    allowed = ", ".join(m.value for m in enum_cls)
    return FieldError(field, f"'{value}' is not a valid {field}. Allowed: {allowed}")
