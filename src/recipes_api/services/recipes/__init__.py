"""Recipe request handling module."""

from recipes_api.services.recipes.service import RecipeService, catalog_errors


__all__ = ["RecipeService", "catalog_errors"]
