"""Recipe schemas: request payloads, search criteria and response DTOs."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import Field, PlainSerializer

from recipes_api.schemas.base import APIRequest, APIResponse
from recipes_api.schemas.enums import Course, Diet


# Decimals leave the API as JSON numbers, not strings
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


# =============================================================================
# Requests
# =============================================================================


class CreateOrUpdateRecipeRequest(APIRequest):
    """Body of POST and PUT /recipes.

    Fields are deliberately loose (plain strings and ints); the recipe
    validator turns bad values into field errors.
    """

    name: str | None = Field(default=None, description="Recipe name")
    instructions: str = Field(default="", description="Preparation steps")
    difficulty: int = Field(default=0, description="Difficulty from 1 to 5")
    diet: str | None = Field(default=None, description="Diet classification")
    course: str | None = Field(default=None, description="Course classification")
    ingredient_ids: list[str] = Field(
        default_factory=list,
        description="Catalog ids of the ingredients, in display order",
    )


class CreateOrUpdateRatingRequest(APIRequest):
    """Body of PATCH /recipes/{id}/rating."""

    rating: int = Field(..., description="Rating value from 1 to 5")


class RecipeSearchCriteria(APIRequest):
    """Repository-level search criteria (already converted to skip/take)."""

    skip: int = 0
    take: int = 20
    course: Course | None = None
    diet: Diet | None = None
    difficulty_from: int | None = None
    difficulty_to: int | None = None
    user_id: str | None = None


# =============================================================================
# Responses
# =============================================================================


class IngredientDto(APIResponse):
    """Ingredient snapshot stored with a recipe."""

    id: int
    name: str
    category: str
    description: str | None = None
    external_id: str
    supplier_name: str
    cost: Money
    quantity: int


class RecipeDto(APIResponse):
    """Recipe as returned by the v2 API."""

    id: int
    name: str
    instructions: str
    difficulty: int
    average_rating: Money
    diet: Diet | None = None
    course: Course | None = None
    user_id: str
    ingredients: list[IngredientDto] = Field(default_factory=list)


class RecipeV1Dto(APIResponse):
    """Recipe as returned by the read-only v1 API."""

    id: int
    name: str
    instructions: str
    diet: Diet | None = None
    course: Course | None = None
    created: datetime
    last_updated: datetime
    created_by: str


class PriceDto(APIResponse):
    """Aggregate catalog price of a recipe."""

    value: Money
