"""Recipe group repository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from recipes_api.database.models import RecipeGroup
from recipes_api.observability.logging import get_logger


if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from recipes_api.schemas.group import GroupSearchCriteria

logger = get_logger(__name__)


class GroupRepository:
    """Repository for recipe group persistence."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, group: RecipeGroup) -> int:
        """Insert a group and its recipe links; returns the generated id."""
        self._session.add(group)
        await self._session.commit()
        logger.debug("Group inserted", group_id=group.id)
        return group.id

    async def get(self, group_id: int) -> RecipeGroup | None:
        """Fetch a group with its recipes loaded."""
        stmt = (
            select(RecipeGroup)
            .where(RecipeGroup.id == group_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, group: RecipeGroup) -> None:
        await self._session.commit()
        logger.debug("Group updated", group_id=group.id)

    async def delete(self, group: RecipeGroup) -> None:
        """Delete a group; the linked recipes are left untouched."""
        group_id = group.id
        await self._session.delete(group)
        await self._session.commit()
        logger.debug("Group deleted", group_id=group_id)

    async def search(self, criteria: GroupSearchCriteria) -> list[RecipeGroup]:
        """Return one page of groups matching ``criteria``, ordered by id."""
        stmt = select(RecipeGroup)

        if criteria.course is not None:
            stmt = stmt.where(RecipeGroup.course == criteria.course)
        if criteria.diet is not None:
            stmt = stmt.where(RecipeGroup.diet == criteria.diet)

        stmt = stmt.order_by(RecipeGroup.id).offset(criteria.skip).limit(criteria.take)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())
