"""Recipe group service module."""

from recipes_api.services.groups.service import GroupService


__all__ = ["GroupService"]
