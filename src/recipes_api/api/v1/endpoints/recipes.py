"""Recipe endpoints (v1, read-only).

The v1 shape carries creation metadata instead of ingredients and ratings.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from recipes_api.api.dependencies import get_recipe_search_criteria, get_recipe_service
from recipes_api.core.exceptions import ErrorResponse
from recipes_api.schemas import RecipeSearchCriteria, RecipeV1Dto
from recipes_api.services.recipes import RecipeService


router = APIRouter(prefix="/recipes", tags=["Recipes (v1)"])

Service = Annotated[RecipeService, Depends(get_recipe_service)]


@router.get(
    "/{recipe_id}",
    response_model=RecipeV1Dto,
    summary="Get a recipe (v1)",
    responses={404: {"model": ErrorResponse, "description": "Recipe not found"}},
)
async def read_recipe_v1(
    recipe_id: Annotated[int, Path(description="Recipe identifier")],
    service: Service,
) -> RecipeV1Dto:
    return await service.read_single_v1(recipe_id)


@router.get("", response_model=list[RecipeV1Dto], summary="Search recipes (v1)")
async def search_recipes_v1(
    criteria: Annotated[RecipeSearchCriteria, Depends(get_recipe_search_criteria)],
    service: Service,
) -> list[RecipeV1Dto]:
    return await service.search_v1(criteria)
