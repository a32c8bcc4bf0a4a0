"""Recipe-related data mappers.

This module contains functions for transforming recipe data between
different representations (catalog records, ORM entities, API responses).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipes_api.database.models import Ingredient
from recipes_api.schemas import IngredientDto, RecipeDto, RecipeV1Dto


if TYPE_CHECKING:
    from collections.abc import Sequence

    from recipes_api.clients.ingredients_catalog import ExternalIngredient
    from recipes_api.database.models import Recipe


def build_ingredients(
    ingredient_ids: Sequence[str],
    records: Sequence[ExternalIngredient],
) -> list[Ingredient]:
    """Copy catalog records into ingredient snapshots.

    Snapshots follow the order of ``ingredient_ids``; an id requested twice
    yields two snapshots. Ids without a catalog record are skipped.

    Args:
        ingredient_ids: Catalog ids in the order the client sent them.
        records: Records returned by the catalog for those ids.

    Returns:
        Unsaved Ingredient entities with ``position`` set.
    """
    by_id = {record.id: record for record in records}
    ingredients: list[Ingredient] = []

    for ingredient_id in ingredient_ids:
        record = by_id.get(ingredient_id)
        if record is None:
            continue
        ingredients.append(
            Ingredient(
                position=len(ingredients),
                name=record.supplier_friendly_name,
                category=record.category,
                description=record.description,
                external_id=record.id,
                supplier_name=record.supplier_friendly_name,
                cost=record.cost,
                quantity=1,
            )
        )

    return ingredients


def to_ingredient_dto(ingredient: Ingredient) -> IngredientDto:
    return IngredientDto(
        id=ingredient.id,
        name=ingredient.name,
        category=ingredient.category,
        description=ingredient.description,
        external_id=ingredient.external_id,
        supplier_name=ingredient.supplier_name,
        cost=ingredient.cost,
        quantity=ingredient.quantity,
    )


def to_recipe_dto(recipe: Recipe) -> RecipeDto:
    """Map a recipe entity to the v2 response DTO.

    ``averageRating`` is the mean of all rating values rounded to two
    places, or 0 for an unrated recipe.
    """
    return RecipeDto(
        id=recipe.id,
        name=recipe.name,
        instructions=recipe.instructions,
        difficulty=recipe.difficulty,
        average_rating=recipe.average_rating,
        diet=recipe.diet,
        course=recipe.course,
        user_id=recipe.user_id,
        ingredients=[to_ingredient_dto(i) for i in recipe.ingredients],
    )


def to_recipe_v1_dto(recipe: Recipe) -> RecipeV1Dto:
    """Map a recipe entity to the read-only v1 response DTO."""
    return RecipeV1Dto(
        id=recipe.id,
        name=recipe.name,
        instructions=recipe.instructions,
        diet=recipe.diet,
        course=recipe.course,
        created=recipe.created_at,
        last_updated=recipe.updated_at,
        created_by=recipe.user_id,
    )
