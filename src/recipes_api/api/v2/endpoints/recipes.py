"""Recipe endpoints (v2).

Provides:
- POST /recipes, PUT/DELETE /recipes/{id} for the owner's recipes
- GET /recipes/{id} and GET /recipes for reading and searching
- GET /recipes/{id}/price for the aggregate catalog price
- PATCH /recipes/{id}/rating for the caller's rating
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, Response, status

from recipes_api.api.dependencies import get_recipe_search_criteria, get_recipe_service
from recipes_api.auth.dependencies import CurrentUser, get_current_user
from recipes_api.core.exceptions import ErrorResponse
from recipes_api.schemas import (
    CreateOrUpdateRatingRequest,
    CreateOrUpdateRecipeRequest,
    PriceDto,
    RecipeDto,
    RecipeSearchCriteria,
)
from recipes_api.services.recipes import RecipeService


router = APIRouter(prefix="/recipes", tags=["Recipes"])

RecipeId = Annotated[int, Path(description="Recipe identifier")]
Service = Annotated[RecipeService, Depends(get_recipe_service)]
Caller = Annotated[CurrentUser, Depends(get_current_user)]

_CATALOG_ERRORS = {
    502: {"model": ErrorResponse, "description": "Catalog returned an error"},
    503: {"model": ErrorResponse, "description": "Catalog unavailable"},
}


@router.post(
    "",
    response_model=RecipeDto,
    status_code=status.HTTP_201_CREATED,
    summary="Create a recipe",
    responses={
        401: {"model": ErrorResponse, "description": "Authentication required"},
        422: {"model": ErrorResponse, "description": "Validation failed"},
        **_CATALOG_ERRORS,
    },
)
async def create_recipe(
    body: CreateOrUpdateRecipeRequest,
    request: Request,
    response: Response,
    service: Service,
    user: Caller,
) -> RecipeDto:
    """Create a recipe owned by the caller.

    Ingredient ids are resolved through the catalog and copied into the
    recipe; the Location header points at the new recipe.
    """
    dto = await service.create(body, user.id)
    response.headers["Location"] = request.app.url_path_for(
        "read_recipe", recipe_id=dto.id
    )
    return dto


@router.get(
    "/{recipe_id}",
    response_model=RecipeDto,
    summary="Get a recipe",
    responses={404: {"model": ErrorResponse, "description": "Recipe not found"}},
)
async def read_recipe(recipe_id: RecipeId, service: Service) -> RecipeDto:
    return await service.read_single(recipe_id)


@router.get(
    "/{recipe_id}/price",
    response_model=PriceDto,
    summary="Get the price of a recipe",
    responses={
        404: {"model": ErrorResponse, "description": "Recipe not found"},
        **_CATALOG_ERRORS,
    },
)
async def get_recipe_price(recipe_id: RecipeId, service: Service) -> PriceDto:
    """Sum the current catalog cost of the recipe's ingredients."""
    return await service.get_price(recipe_id)


@router.get(
    "",
    response_model=list[RecipeDto],
    summary="Search recipes",
)
async def search_recipes(
    criteria: Annotated[RecipeSearchCriteria, Depends(get_recipe_search_criteria)],
    service: Service,
) -> list[RecipeDto]:
    """Return one page of recipes ordered by id.

    Filters combine with AND; the difficulty bounds are inclusive.
    """
    return await service.search(criteria)


@router.put(
    "/{recipe_id}",
    response_model=RecipeDto,
    summary="Update a recipe",
    responses={
        401: {"model": ErrorResponse, "description": "Caller is not the owner"},
        404: {"model": ErrorResponse, "description": "Recipe not found"},
        422: {"model": ErrorResponse, "description": "Validation failed"},
        **_CATALOG_ERRORS,
    },
)
async def update_recipe(
    recipe_id: RecipeId,
    body: CreateOrUpdateRecipeRequest,
    service: Service,
    user: Caller,
) -> RecipeDto:
    """Replace the recipe, including its whole ingredient list."""
    return await service.update(recipe_id, body, user.id)


@router.delete(
    "/{recipe_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a recipe",
    responses={
        401: {"model": ErrorResponse, "description": "Caller is not the owner"},
        404: {"model": ErrorResponse, "description": "Recipe not found"},
    },
)
async def delete_recipe(recipe_id: RecipeId, service: Service, user: Caller) -> None:
    await service.delete(recipe_id, user.id)


@router.patch(
    "/{recipe_id}/rating",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Rate a recipe",
    responses={
        404: {"model": ErrorResponse, "description": "Recipe not found"},
        422: {"model": ErrorResponse, "description": "Rating out of range"},
    },
)
async def rate_recipe(
    recipe_id: RecipeId,
    body: CreateOrUpdateRatingRequest,
    service: Service,
    user: Caller,
) -> None:
    """Create or replace the caller's rating of the recipe."""
    await service.create_or_update_rating(recipe_id, body.rating, user.id)
