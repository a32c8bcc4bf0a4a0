"""Unit tests for recipe payload validation."""

from __future__ import annotations

import pytest

from recipes_api.schemas import CreateOrUpdateRecipeRequest
from recipes_api.validation import (
    INSTRUCTIONS_MAX_LENGTH,
    validate_rating,
    validate_recipe_request,
)


pytestmark = pytest.mark.unit


def _request(**overrides: object) -> CreateOrUpdateRecipeRequest:
    data: dict[str, object] = {
        "name": "Pancakes",
        "instructions": "Mix and fry.",
        "difficulty": 2,
        "diet": "VEGETARIAN",
        "course": "BREAKFAST",
        "ingredientIds": ["ing-1"],
    }
    data.update(overrides)
    return CreateOrUpdateRecipeRequest.model_validate(data)


class TestValidateRecipeRequest:
    """Tests for validate_recipe_request."""

    def test_valid_payload_has_no_errors(self) -> None:
        """Should accept a complete, valid payload."""
        assert validate_recipe_request(_request()) == []

    def test_optional_enums_may_be_omitted(self) -> None:
        """Should accept a payload without diet and course."""
        assert validate_recipe_request(_request(diet=None, course=None)) == []

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_name_is_required(self, name: str | None) -> None:
        """Should reject a missing or blank name."""
        errors = validate_recipe_request(_request(name=name))

        assert [e.field for e in errors] == ["name"]

    def test_long_name_is_accepted(self) -> None:
        """Should not cap the length of a name."""
        assert validate_recipe_request(_request(name="x" * 1000)) == []

    def test_instructions_at_limit_are_accepted(self) -> None:
        """Should accept instructions of exactly the maximum length."""
        request = _request(instructions="x" * INSTRUCTIONS_MAX_LENGTH)

        assert validate_recipe_request(request) == []

    def test_instructions_over_limit_are_rejected(self) -> None:
        """Should reject instructions one character over the limit."""
        request = _request(instructions="x" * (INSTRUCTIONS_MAX_LENGTH + 1))

        errors = validate_recipe_request(request)

        assert [e.field for e in errors] == ["instructions"]
        assert "501" in errors[0].message

    @pytest.mark.parametrize("difficulty", [1, 3, 5])
    def test_difficulty_in_range_is_accepted(self, difficulty: int) -> None:
        """Should accept difficulty between 1 and 5 inclusive."""
        assert validate_recipe_request(_request(difficulty=difficulty)) == []

    @pytest.mark.parametrize("difficulty", [0, 6, -1])
    def test_difficulty_out_of_range_is_rejected(self, difficulty: int) -> None:
        """Should reject difficulty outside 1..5."""
        errors = validate_recipe_request(_request(difficulty=difficulty))

        assert [e.field for e in errors] == ["difficulty"]

    def test_unknown_course_is_rejected(self) -> None:
        """Should reject a course that is not a known value."""
        errors = validate_recipe_request(_request(course="BRUNCH"))

        assert [e.field for e in errors] == ["course"]
        assert "BRUNCH" in errors[0].message

    def test_unknown_diet_is_rejected(self) -> None:
        """Should reject a diet that is not a known value."""
        errors = validate_recipe_request(_request(diet="CARNIVORE"))

        assert [e.field for e in errors] == ["diet"]

    def test_reports_every_violation_in_order(self) -> None:
        """Should report all violations, in rule order."""
        request = _request(
            name="",
            instructions="x" * 600,
            difficulty=9,
            course="BRUNCH",
            diet="CARNIVORE",
        )

        errors = validate_recipe_request(request)

        assert [e.field for e in errors] == [
            "name",
            "instructions",
            "difficulty",
            "course",
            "diet",
        ]


class TestValidateRating:
    """Tests for validate_rating."""

    @pytest.mark.parametrize("value", [1, 5])
    def test_bounds_are_accepted(self, value: int) -> None:
        """Should accept ratings at both bounds."""
        assert validate_rating(value) == []

    @pytest.mark.parametrize("value", [0, 6])
    def test_out_of_range_is_rejected(self, value: int) -> None:
        """Should reject ratings outside 1..5."""
        errors = validate_rating(value)

        assert len(errors) == 1
        assert errors[0].field == "rating"
