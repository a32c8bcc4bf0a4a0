"""ORM models for the relational store."""

from .base import BaseDatabaseModel
from .group import RecipeGroup, recipe_group_recipes
from .ingredient import Ingredient
from .rating import Rating
from .recipe import Recipe


__all__ = [
    "BaseDatabaseModel",
    "Ingredient",
    "Rating",
    "Recipe",
    "RecipeGroup",
    "recipe_group_recipes",
]
