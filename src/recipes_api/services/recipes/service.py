"""Recipe request handling.

RecipeService carries each recipe API operation from a validated payload to
a response DTO: field validation, ingredient resolution through the
catalog, ownership checks, persistence and mapping.
"""

from __future__ import annotations

from contextlib import contextmanager
from decimal import Decimal
from typing import TYPE_CHECKING

from recipes_api.auth.policy import ensure_owner
from recipes_api.clients.ingredients_catalog.exceptions import (
    CatalogResponseError,
    CatalogUnavailableError,
)
from recipes_api.core.exceptions import (
    BadGatewayError,
    FieldValidationError,
    NotFoundError,
    ServiceUnavailableError,
)
from recipes_api.database.models import Recipe
from recipes_api.mappers import build_ingredients, to_recipe_dto, to_recipe_v1_dto
from recipes_api.observability.logging import get_logger
from recipes_api.schemas import Course, Diet, PriceDto
from recipes_api.validation import validate_rating, validate_recipe_request


if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from recipes_api.clients.ingredients_catalog import IngredientsCatalogClient
    from recipes_api.database.models import Ingredient
    from recipes_api.database.repositories import RecipeRepository
    from recipes_api.schemas import (
        CreateOrUpdateRecipeRequest,
        RecipeDto,
        RecipeSearchCriteria,
        RecipeV1Dto,
    )
    from recipes_api.services.pricing import IngredientsPricingService

logger = get_logger(__name__)


@contextmanager
def catalog_errors() -> Iterator[None]:
    """Translate catalog client failures into API errors.

    Unreachable catalog → 503 CATALOG_UNAVAILABLE; error response → 502
    CATALOG_ERROR.
    """
    try:
        yield
    except CatalogUnavailableError as e:
        logger.warning("Ingredients catalog unavailable", error=str(e))
        raise ServiceUnavailableError(
            "Ingredients catalog is unavailable",
            error="CATALOG_UNAVAILABLE",
        ) from None
    except CatalogResponseError as e:
        logger.warning(
            "Ingredients catalog rejected request",
            status_code=e.status_code,
        )
        raise BadGatewayError(
            "CATALOG_ERROR",
            "Ingredients catalog returned an error",
        ) from None


class RecipeService:
    """Service for the recipe API operations.

    Instances are request-scoped: the repository wraps the session of the
    current request, while the catalog client and the pricing service are
    shared application-wide.
    """

    def __init__(
        self,
        repository: RecipeRepository,
        catalog_client: IngredientsCatalogClient,
        pricing_service: IngredientsPricingService,
    ) -> None:
        self._repository = repository
        self._catalog = catalog_client
        self._pricing = pricing_service

    async def create(
        self,
        request: CreateOrUpdateRecipeRequest,
        caller_id: str,
    ) -> RecipeDto:
        """Create a recipe owned by the caller.

        Raises:
            FieldValidationError: If the payload breaks a field rule.
            ServiceUnavailableError: If the catalog cannot be reached.
            BadGatewayError: If the catalog answers with an error.
        """
        errors = validate_recipe_request(request)
        if errors:
            raise FieldValidationError(errors)

        ingredients = await self._resolve_ingredients(request.ingredient_ids)

        recipe = Recipe(
            name=request.name,
            instructions=request.instructions,
            difficulty=request.difficulty,
            diet=Diet(request.diet) if request.diet is not None else None,
            course=Course(request.course) if request.course is not None else None,
            user_id=caller_id,
            ingredients=ingredients,
            ratings=[],
        )
        recipe_id = await self._repository.create(recipe)

        logger.info(
            "Recipe created",
            recipe_id=recipe_id,
            user_id=caller_id,
            ingredients=len(ingredients),
        )
        return to_recipe_dto(recipe)

    async def read_single(self, recipe_id: int) -> RecipeDto:
        """Return one recipe.

        Raises:
            NotFoundError: If no recipe has this id.
        """
        return to_recipe_dto(await self._get_or_404(recipe_id))

    async def read_single_v1(self, recipe_id: int) -> RecipeV1Dto:
        """Return one recipe in the v1 shape."""
        return to_recipe_v1_dto(await self._get_or_404(recipe_id))

    async def get_price(self, recipe_id: int) -> PriceDto:
        """Sum the catalog cost of every ingredient of a recipe.

        An external id held twice is counted twice; a recipe without
        ingredients costs 0.
        """
        recipe = await self._get_or_404(recipe_id)
        external_ids = [i.external_id for i in recipe.ingredients]
        if not external_ids:
            return PriceDto(value=Decimal(0))

        with catalog_errors():
            total = await self._pricing.total_cost(external_ids)

        logger.debug("Recipe priced", recipe_id=recipe_id, total=str(total))
        return PriceDto(value=total)

    async def search(self, criteria: RecipeSearchCriteria) -> list[RecipeDto]:
        """Return one page of recipes, ordered by id."""
        recipes = await self._repository.search(criteria)
        return [to_recipe_dto(r) for r in recipes]

    async def search_v1(self, criteria: RecipeSearchCriteria) -> list[RecipeV1Dto]:
        recipes = await self._repository.search(criteria)
        return [to_recipe_v1_dto(r) for r in recipes]

    async def update(
        self,
        recipe_id: int,
        request: CreateOrUpdateRecipeRequest,
        caller_id: str,
    ) -> RecipeDto:
        """Replace a recipe's fields and its whole ingredient set.

        Checks run in order: payload, existence, ownership.

        Raises:
            FieldValidationError: If the payload breaks a field rule.
            NotFoundError: If no recipe has this id.
            UnauthorizedError: If the caller does not own the recipe.
        """
        errors = validate_recipe_request(request)
        if errors:
            raise FieldValidationError(errors)

        recipe = await self._get_or_404(recipe_id)
        ensure_owner(caller_id, recipe.user_id, "recipe")

        ingredients = await self._resolve_ingredients(request.ingredient_ids)

        recipe.name = request.name or recipe.name
        recipe.instructions = request.instructions
        recipe.difficulty = request.difficulty
        recipe.diet = Diet(request.diet) if request.diet is not None else None
        recipe.course = Course(request.course) if request.course is not None else None
        recipe.ingredients = ingredients
        await self._repository.update(recipe)

        logger.info("Recipe updated", recipe_id=recipe_id, user_id=caller_id)
        return to_recipe_dto(recipe)

    async def delete(self, recipe_id: int, caller_id: str) -> None:
        """Delete a recipe owned by the caller.

        Raises:
            NotFoundError: If no recipe has this id.
            UnauthorizedError: If the caller does not own the recipe.
        """
        recipe = await self._get_or_404(recipe_id)
        ensure_owner(caller_id, recipe.user_id, "recipe")

        await self._repository.delete(recipe)
        logger.info("Recipe deleted", recipe_id=recipe_id, user_id=caller_id)

    async def create_or_update_rating(
        self,
        recipe_id: int,
        value: int,
        caller_id: str,
    ) -> None:
        """Record the caller's rating of a recipe.

        The first rating per caller is created; later ones overwrite it.
        Any caller may rate any recipe.
        """
        errors = validate_rating(value)
        if errors:
            raise FieldValidationError(errors)

        recipe = await self._get_or_404(recipe_id)
        await self._repository.upsert_rating(recipe, caller_id, value)
        logger.info("Recipe rated", recipe_id=recipe_id, user_id=caller_id)

    async def _get_or_404(self, recipe_id: int) -> Recipe:
        recipe = await self._repository.get(recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe", recipe_id)
        return recipe

    async def _resolve_ingredients(
        self,
        ingredient_ids: Sequence[str],
    ) -> list[Ingredient]:
        """Fetch catalog records for the ids and copy them into snapshots."""
        if not ingredient_ids:
            return []

        with catalog_errors():
            records = await self._catalog.batch_get(ingredient_ids)

        ingredients = build_ingredients(ingredient_ids, records)
        if len(ingredients) < len(ingredient_ids):
            logger.warning(
                "Catalog has no record for some ingredients",
                requested=len(ingredient_ids),
                resolved=len(ingredients),
            )
        return ingredients
