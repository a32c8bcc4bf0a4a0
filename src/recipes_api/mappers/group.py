"""Recipe group mappers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipes_api.schemas import GroupDto, RecipeSummaryDto


if TYPE_CHECKING:
    from recipes_api.database.models import Recipe, RecipeGroup


def to_recipe_summary_dto(recipe: Recipe) -> RecipeSummaryDto:
    return RecipeSummaryDto(
        id=recipe.id,
        name=recipe.name,
        difficulty=recipe.difficulty,
    )


def to_group_dto(group: RecipeGroup) -> GroupDto:
    """Map a group entity, with its recipes in id order, to the response DTO."""
    return GroupDto(
        id=group.id,
        name=group.name,
        diet=group.diet,
        course=group.course,
        user_id=group.user_id,
        recipes=[to_recipe_summary_dto(r) for r in group.recipes],
    )
