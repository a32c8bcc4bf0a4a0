"""Ingredients catalog client module."""

from recipes_api.clients.ingredients_catalog.client import IngredientsCatalogClient
from recipes_api.clients.ingredients_catalog.exceptions import (
    CatalogError,
    CatalogResponseError,
    CatalogTimeoutError,
    CatalogUnavailableError,
)
from recipes_api.clients.ingredients_catalog.schemas import (
    BatchGetIngredientsRequest,
    ExternalIngredient,
)


__all__ = [
    "BatchGetIngredientsRequest",
    "CatalogError",
    "CatalogResponseError",
    "CatalogTimeoutError",
    "CatalogUnavailableError",
    "ExternalIngredient",
    "IngredientsCatalogClient",
]
