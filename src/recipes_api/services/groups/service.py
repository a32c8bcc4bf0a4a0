"""Recipe group service."""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipes_api.auth.policy import ensure_owner
from recipes_api.core.exceptions import FieldValidationError, NotFoundError
from recipes_api.database.models import RecipeGroup
from recipes_api.mappers import to_group_dto
from recipes_api.observability.logging import get_logger
from recipes_api.schemas import Course, Diet
from recipes_api.validation import FieldError, validate_group_request


if TYPE_CHECKING:
    from collections.abc import Sequence

    from recipes_api.database.models import Recipe
    from recipes_api.database.repositories import GroupRepository, RecipeRepository
    from recipes_api.schemas import (
        CreateOrUpdateGroupRequest,
        GroupDto,
        GroupSearchCriteria,
    )

logger = get_logger(__name__)


class GroupService:
    """Service for the recipe group API operations."""

    def __init__(
        self,
        repository: GroupRepository,
        recipe_repository: RecipeRepository,
    ) -> None:
        self._repository = repository
        self._recipes = recipe_repository

    async def create(
        self,
        request: CreateOrUpdateGroupRequest,
        caller_id: str,
    ) -> GroupDto:
        """Create a group owned by the caller.

        Raises:
            FieldValidationError: If the payload is invalid or names an
                unknown recipe.
        """
        errors = validate_group_request(request)
        if errors:
            raise FieldValidationError(errors)

        recipes = await self._resolve_recipes(request.recipe_ids)
        group = RecipeGroup(
            name=request.name,
            diet=Diet(request.diet) if request.diet is not None else None,
            course=Course(request.course) if request.course is not None else None,
            user_id=caller_id,
            recipes=recipes,
        )
        group_id = await self._repository.create(group)

        logger.info("Group created", group_id=group_id, recipes=len(recipes))
        return to_group_dto(group)

    async def read_single(self, group_id: int) -> GroupDto:
        return to_group_dto(await self._get_or_404(group_id))

    async def search(self, criteria: GroupSearchCriteria) -> list[GroupDto]:
        groups = await self._repository.search(criteria)
        return [to_group_dto(g) for g in groups]

    async def update(
        self,
        group_id: int,
        request: CreateOrUpdateGroupRequest,
        caller_id: str,
    ) -> GroupDto:
        """Replace a group's fields and recipe links (owner only)."""
        errors = validate_group_request(request)
        if errors:
            raise FieldValidationError(errors)

        group = await self._get_or_404(group_id)
        ensure_owner(caller_id, group.user_id, "group")

        recipes = await self._resolve_recipes(request.recipe_ids)
        group.name = request.name or group.name
        group.diet = Diet(request.diet) if request.diet is not None else None
        group.course = Course(request.course) if request.course is not None else None
        group.recipes = recipes
        await self._repository.update(group)

        logger.info("Group updated", group_id=group_id)
        return to_group_dto(group)

    async def delete(self, group_id: int, caller_id: str) -> None:
        """Delete a group (owner only); its recipes are kept."""
        group = await self._get_or_404(group_id)
        ensure_owner(caller_id, group.user_id, "group")

        await self._repository.delete(group)
        logger.info("Group deleted", group_id=group_id)

    async def _get_or_404(self, group_id: int) -> RecipeGroup:
        group = await self._repository.get(group_id)
        if group is None:
            raise NotFoundError("Group", group_id)
        return group

    async def _resolve_recipes(self, recipe_ids: Sequence[int]) -> list[Recipe]:
        """Load the recipes to link; every id must exist."""
        recipes = await self._recipes.get_many(recipe_ids)
        missing = sorted(set(recipe_ids) - {r.id for r in recipes})
        if missing:
            unknown = ", ".join(str(i) for i in missing)
            raise FieldValidationError(
                [FieldError("recipeIds", f"Unknown recipe ids: {unknown}.")]
            )
        return recipes
