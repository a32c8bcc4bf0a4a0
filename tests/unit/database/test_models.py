"""Unit tests for the ORM table definitions."""

from __future__ import annotations

import pytest
from sqlalchemy import String, Text

from recipes_api.database.models import Ingredient, Rating, Recipe, RecipeGroup
from recipes_api.validation import INSTRUCTIONS_MAX_LENGTH


pytestmark = pytest.mark.unit


class TestColumnTypes:
    """Tests for column lengths of the stored text."""

    @pytest.mark.parametrize(
        ("model", "column"),
        [
            (Recipe, "name"),
            (Recipe, "user_id"),
            (RecipeGroup, "name"),
            (RecipeGroup, "user_id"),
            (Rating, "user_id"),
            (Ingredient, "name"),
            (Ingredient, "category"),
            (Ingredient, "description"),
            (Ingredient, "external_id"),
            (Ingredient, "supplier_name"),
        ],
    )
    def test_unbounded_text(self, model: type, column: str) -> None:
        """Should store names and catalog fields without a length limit."""
        assert isinstance(model.__table__.c[column].type, Text)

    def test_instructions_match_validation_limit(self) -> None:
        """Should size instructions to the longest accepted value."""
        column_type = Recipe.__table__.c["instructions"].type

        assert isinstance(column_type, String)
        assert column_type.length == INSTRUCTIONS_MAX_LENGTH
