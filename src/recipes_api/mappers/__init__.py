"""Data mappers between catalog records, ORM entities and API responses."""

from recipes_api.mappers.group import to_group_dto, to_recipe_summary_dto
from recipes_api.mappers.recipe import (
    build_ingredients,
    to_ingredient_dto,
    to_recipe_dto,
    to_recipe_v1_dto,
)


__all__ = [
    "build_ingredients",
    "to_group_dto",
    "to_ingredient_dto",
    "to_recipe_dto",
    "to_recipe_summary_dto",
    "to_recipe_v1_dto",
]
