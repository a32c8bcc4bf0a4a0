"""Ingredient pricing service module."""

from recipes_api.services.pricing.service import IngredientsPricingService


__all__ = ["IngredientsPricingService"]
