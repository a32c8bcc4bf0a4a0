"""Schemas for the ingredients catalog API."""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field

from recipes_api.schemas.base import DownstreamRequest, DownstreamResponse


class BatchGetIngredientsRequest(DownstreamRequest):
    """Body of POST /ingredients/batch-get."""

    ids: list[str] = Field(..., description="Catalog ingredient ids")


class ExternalIngredient(DownstreamResponse):
    """Ingredient record as published by the catalog."""

    id: str
    supplier_friendly_name: str
    category: str = ""
    description: str | None = None
    cost: Decimal = Decimal(0)
