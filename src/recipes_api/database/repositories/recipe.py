"""Recipe repository.

Data access for recipes and their owned ingredients and ratings, through the
async SQLAlchemy ORM.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError

from recipes_api.database.models import Rating, Recipe
from recipes_api.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy.ext.asyncio import AsyncSession

    from recipes_api.schemas.recipe import RecipeSearchCriteria

logger = get_logger(__name__)


class RecipeRepository:
    """Repository for recipe persistence.

    Every mutating method commits, so one call is one transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository.

        Args:
            session: Request-scoped async session.
        """
        self._session = session

    async def create(self, recipe: Recipe) -> int:
        """Insert a recipe with its ingredients.

        Returns:
            The generated recipe id.
        """
        self._session.add(recipe)
        await self._session.commit()
        logger.debug("Recipe inserted", recipe_id=recipe.id)
        return recipe.id

    async def get(self, recipe_id: int) -> Recipe | None:
        """Fetch a recipe with its ingredients and ratings loaded."""
        stmt = (
            select(Recipe)
            .where(Recipe.id == recipe_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_many(self, recipe_ids: Sequence[int]) -> list[Recipe]:
        """Fetch the recipes whose ids are given; unknown ids are skipped."""
        if not recipe_ids:
            return []
        stmt = select(Recipe).where(Recipe.id.in_(recipe_ids)).order_by(Recipe.id)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, recipe: Recipe) -> None:
        """Flush the full state of a loaded recipe.

        Ingredients removed from the collection are deleted, new ones are
        inserted.
        """
        await self._session.commit()
        logger.debug("Recipe updated", recipe_id=recipe.id)

    async def delete(self, recipe: Recipe) -> None:
        """Delete a recipe; ingredients, ratings and group links go with it."""
        recipe_id = recipe.id
        await self._session.delete(recipe)
        await self._session.commit()
        logger.debug("Recipe deleted", recipe_id=recipe_id)

    async def upsert_rating(self, recipe: Recipe, user_id: str, value: int) -> None:
        """Set ``user_id``'s rating of ``recipe``, creating it on first use."""
        recipe_id = recipe.id
        existing = recipe.rating_by(user_id)
        if existing is not None:
            existing.value = value
        else:
            recipe.ratings.append(Rating(user_id=user_id, value=value))

        try:
            await self._session.commit()
        except IntegrityError:
            # Another request created the row between our read and commit
            await self._session.rollback()
            await self._session.execute(
                update(Rating)
                .where(Rating.recipe_id == recipe_id, Rating.user_id == user_id)
                .values(value=value)
            )
            await self._session.commit()
            logger.debug("Concurrent rating insert resolved", recipe_id=recipe_id)

    async def search(self, criteria: RecipeSearchCriteria) -> list[Recipe]:
        """Return one page of recipes matching ``criteria``, ordered by id."""
        stmt = select(Recipe)

        if criteria.course is not None:
            stmt = stmt.where(Recipe.course == criteria.course)
        if criteria.diet is not None:
            stmt = stmt.where(Recipe.diet == criteria.diet)
        if criteria.difficulty_from is not None:
            stmt = stmt.where(Recipe.difficulty >= criteria.difficulty_from)
        if criteria.difficulty_to is not None:
            stmt = stmt.where(Recipe.difficulty <= criteria.difficulty_to)
        if criteria.user_id is not None:
            stmt = stmt.where(Recipe.user_id == criteria.user_id)

        stmt = stmt.order_by(Recipe.id).offset(criteria.skip).limit(criteria.take)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())
