"""Database repositories."""

from recipes_api.database.repositories.group import GroupRepository
from recipes_api.database.repositories.recipe import RecipeRepository


__all__ = ["GroupRepository", "RecipeRepository"]
