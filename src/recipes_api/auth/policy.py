"""Resource ownership policy.

Recipes and groups may only be changed by the user who created them.
"""

from __future__ import annotations

from recipes_api.core.exceptions import UnauthorizedError


def is_owner(caller_id: str, owner_id: str) -> bool:
    """Return True when ``caller_id`` owns a resource owned by ``owner_id``."""
    return caller_id == owner_id


def ensure_owner(caller_id: str, owner_id: str, resource: str = "resource") -> None:
    """Raise UnauthorizedError unless the caller owns the resource."""
    if not is_owner(caller_id, owner_id):
        msg = f"Only the owner can modify this {resource}"
        raise UnauthorizedError(msg)
