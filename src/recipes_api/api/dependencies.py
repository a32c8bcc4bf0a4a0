"""FastAPI dependencies for service access.

Shared services are created during application startup and stored in
``app.state``; request-scoped services are assembled here around the
session of the current request.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from recipes_api.clients.ingredients_catalog import IngredientsCatalogClient
from recipes_api.core.config import Settings, get_settings
from recipes_api.core.exceptions import FieldValidationError, ServiceUnavailableError
from recipes_api.database import get_session
from recipes_api.database.repositories import GroupRepository, RecipeRepository
from recipes_api.schemas import Course, Diet, GroupSearchCriteria, RecipeSearchCriteria
from recipes_api.services.groups import GroupService
from recipes_api.services.pricing import IngredientsPricingService
from recipes_api.services.recipes import RecipeService
from recipes_api.validation import FieldError


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    settings: Settings | None = getattr(request.app.state, "settings", None)
    return settings or get_settings()


async def get_catalog_client(request: Request) -> IngredientsCatalogClient:
    """Get the ingredients catalog client from app state.

    Raises:
        ServiceUnavailableError: 503 if the client is not initialized.
    """
    client: IngredientsCatalogClient | None = getattr(
        request.app.state, "catalog_client", None
    )
    if client is None:
        raise ServiceUnavailableError("Ingredients catalog client not available")
    return client


async def get_pricing_service(request: Request) -> IngredientsPricingService:
    """Get the ingredient pricing service from app state.

    Raises:
        ServiceUnavailableError: 503 if the service is not initialized.
    """
    service: IngredientsPricingService | None = getattr(
        request.app.state, "pricing_service", None
    )
    if service is None:
        raise ServiceUnavailableError("Pricing service not available")
    return service


async def get_recipe_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    catalog_client: Annotated[IngredientsCatalogClient, Depends(get_catalog_client)],
    pricing_service: Annotated[
        IngredientsPricingService, Depends(get_pricing_service)
    ],
) -> RecipeService:
    return RecipeService(RecipeRepository(session), catalog_client, pricing_service)


async def get_group_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> GroupService:
    return GroupService(GroupRepository(session), RecipeRepository(session))


def _page_window(page: int, page_size: int | None, settings: Settings) -> tuple[int, int]:
    """Convert page/pageSize to skip/take, rejecting out-of-range values."""
    size = settings.pagination.default_page_size if page_size is None else page_size
    max_size = settings.pagination.max_page_size

    errors: list[FieldError] = []
    if page < 1:
        errors.append(
            FieldError("page", f"'page' must be 1 or greater. You entered {page}.")
        )
    if not 1 <= size <= max_size:
        errors.append(
            FieldError(
                "pageSize",
                f"'pageSize' must be between 1 and {max_size}. You entered {size}.",
            )
        )
    if errors:
        raise FieldValidationError(errors)

    return (page - 1) * size, size


async def get_recipe_search_criteria(
    settings: Annotated[Settings, Depends(get_app_settings)],
    page: Annotated[int, Query(description="1-based page number")] = 1,
    page_size: Annotated[int | None, Query(alias="pageSize")] = None,
    course: Annotated[Course | None, Query()] = None,
    diet: Annotated[Diet | None, Query()] = None,
    difficulty_from: Annotated[int | None, Query(alias="difficultyFrom")] = None,
    difficulty_to: Annotated[int | None, Query(alias="difficultyTo")] = None,
    user_id: Annotated[str | None, Query(alias="userId")] = None,
) -> RecipeSearchCriteria:
    """Build recipe search criteria from the query string."""
    skip, take = _page_window(page, page_size, settings)
    return RecipeSearchCriteria(
        skip=skip,
        take=take,
        course=course,
        diet=diet,
        difficulty_from=difficulty_from,
        difficulty_to=difficulty_to,
        user_id=user_id,
    )


async def get_group_search_criteria(
    settings: Annotated[Settings, Depends(get_app_settings)],
    page: Annotated[int, Query(description="1-based page number")] = 1,
    page_size: Annotated[int | None, Query(alias="pageSize")] = None,
    course: Annotated[Course | None, Query()] = None,
    diet: Annotated[Diet | None, Query()] = None,
) -> GroupSearchCriteria:
    """Build group search criteria from the query string."""
    skip, take = _page_window(page, page_size, settings)
    return GroupSearchCriteria(skip=skip, take=take, course=course, diet=diet)
