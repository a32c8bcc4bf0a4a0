"""Pydantic schemas for request/response validation."""

from recipes_api.schemas.auth import TokenRequest, TokenResponse
from recipes_api.schemas.base import (
    APIRequest,
    APIResponse,
    DownstreamRequest,
    DownstreamResponse,
)
from recipes_api.schemas.enums import Course, Diet, HealthStatus, ReadinessStatus
from recipes_api.schemas.group import (
    CreateOrUpdateGroupRequest,
    GroupDto,
    GroupSearchCriteria,
    RecipeSummaryDto,
)
from recipes_api.schemas.health import HealthResponse, ReadinessResponse
from recipes_api.schemas.recipe import (
    CreateOrUpdateRatingRequest,
    CreateOrUpdateRecipeRequest,
    IngredientDto,
    PriceDto,
    RecipeDto,
    RecipeSearchCriteria,
    RecipeV1Dto,
)


__all__ = [
    "APIRequest",
    "APIResponse",
    "Course",
    "CreateOrUpdateGroupRequest",
    "CreateOrUpdateRatingRequest",
    "CreateOrUpdateRecipeRequest",
    "Diet",
    "DownstreamRequest",
    "DownstreamResponse",
    "GroupDto",
    "GroupSearchCriteria",
    "HealthResponse",
    "HealthStatus",
    "IngredientDto",
    "PriceDto",
    "ReadinessResponse",
    "ReadinessStatus",
    "RecipeDto",
    "RecipeSearchCriteria",
    "RecipeSummaryDto",
    "RecipeV1Dto",
    "TokenRequest",
    "TokenResponse",
]
