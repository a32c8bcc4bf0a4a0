"""Unit tests for the search query dependencies."""

from __future__ import annotations

import pytest

from recipes_api.api.dependencies import (
    get_group_search_criteria,
    get_recipe_search_criteria,
)
from recipes_api.core.config import Settings
from recipes_api.core.config.settings import PaginationSettings
from recipes_api.core.exceptions import FieldValidationError
from recipes_api.schemas import Course, Diet
from tests.factories.settings import SettingsFactory


pytestmark = pytest.mark.unit


@pytest.fixture
def settings() -> Settings:
    """Settings with a small page size limit."""
    return SettingsFactory.build(
        pagination=PaginationSettings(default_page_size=10, max_page_size=50)
    )


class TestRecipeSearchCriteria:
    """Tests for get_recipe_search_criteria."""

    async def test_first_page_uses_default_size(self, settings: Settings) -> None:
        """Should start at zero and take the configured default."""
        criteria = await get_recipe_search_criteria(settings)

        assert criteria.skip == 0
        assert criteria.take == 10

    async def test_page_is_converted_to_skip(self, settings: Settings) -> None:
        """Should skip (page - 1) * pageSize rows."""
        criteria = await get_recipe_search_criteria(settings, page=3, page_size=7)

        assert (criteria.skip, criteria.take) == (14, 7)

    async def test_filters_are_passed_through(self, settings: Settings) -> None:
        """Should carry every filter into the criteria."""
        criteria = await get_recipe_search_criteria(
            settings,
            course=Course.MAIN,
            diet=Diet.VEGAN,
            difficulty_from=2,
            difficulty_to=4,
            user_id="alice",
        )

        assert criteria.course == "MAIN"
        assert criteria.diet == "VEGAN"
        assert (criteria.difficulty_from, criteria.difficulty_to) == (2, 4)
        assert criteria.user_id == "alice"

    @pytest.mark.parametrize(
        ("page", "page_size", "fields"),
        [
            (0, None, ["page"]),
            (1, 0, ["pageSize"]),
            (1, 51, ["pageSize"]),
            (0, 51, ["page", "pageSize"]),
        ],
    )
    async def test_out_of_range_paging_is_rejected(
        self,
        settings: Settings,
        page: int,
        page_size: int | None,
        fields: list[str],
    ) -> None:
        """Should reject page < 1 and pageSize outside 1..max."""
        with pytest.raises(FieldValidationError) as exc_info:
            await get_recipe_search_criteria(settings, page=page, page_size=page_size)

        assert exc_info.value.details is not None
        assert [d.field for d in exc_info.value.details] == fields


class TestGroupSearchCriteria:
    """Tests for get_group_search_criteria."""

    async def test_page_window(self, settings: Settings) -> None:
        """Should page groups like recipes."""
        criteria = await get_group_search_criteria(settings, page=2, page_size=5)

        assert (criteria.skip, criteria.take) == (5, 5)
