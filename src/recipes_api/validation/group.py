"""Rules for recipe group payloads."""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipes_api.schemas.enums import Course, Diet
from recipes_api.validation.errors import FieldError, enum_member_error


if TYPE_CHECKING:
    from recipes_api.schemas.group import CreateOrUpdateGroupRequest


def validate_group_request(request: CreateOrUpdateGroupRequest) -> list[FieldError]:
    """Check a group payload; existence of the recipes is checked by the service."""
    errors: list[FieldError] = []

    if not request.name or not request.name.strip():
        errors.append(FieldError("name", "'name' must not be empty."))

    for error in (
        enum_member_error("course", request.course, Course),
        enum_member_error("diet", request.diet, Diet),
    ):
        if error is not None:
            errors.append(error)

    if len(set(request.recipe_ids)) != len(request.recipe_ids):
        errors.append(FieldError("recipeIds", "'recipeIds' must not repeat a recipe."))

    return errors
