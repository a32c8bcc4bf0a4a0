"""Unit tests for recipe group mappers."""

from __future__ import annotations

import pytest

from recipes_api.database.models import Recipe, RecipeGroup
from recipes_api.mappers import to_group_dto
from recipes_api.schemas import Course


pytestmark = pytest.mark.unit


class TestToGroupDto:
    """Tests for to_group_dto."""

    def test_lists_recipe_summaries(self) -> None:
        """Should map linked recipes to id, name and difficulty."""
        group = RecipeGroup(
            id=3,
            name="Weeknight dinners",
            course=Course.MAIN,
            diet=None,
            user_id="alice",
            recipes=[
                Recipe(id=1, name="Chili", difficulty=2, user_id="alice"),
                Recipe(id=2, name="Curry", difficulty=3, user_id="bob"),
            ],
        )

        data = to_group_dto(group).model_dump(mode="json")

        assert data["id"] == 3
        assert data["course"] == "MAIN"
        assert data["userId"] == "alice"
        assert data["recipes"] == [
            {"id": 1, "name": "Chili", "difficulty": 2},
            {"id": 2, "name": "Curry", "difficulty": 3},
        ]
