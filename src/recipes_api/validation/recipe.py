"""Rules for recipe create/update payloads and ratings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from recipes_api.schemas.enums import Course, Diet
from recipes_api.validation.errors import FieldError, enum_member_error


if TYPE_CHECKING:
    from recipes_api.schemas.recipe import CreateOrUpdateRecipeRequest

INSTRUCTIONS_MAX_LENGTH: Final[int] = 500
DIFFICULTY_MIN: Final[int] = 1
DIFFICULTY_MAX: Final[int] = 5
RATING_MIN: Final[int] = 1
RATING_MAX: Final[int] = 5


def validate_recipe_request(request: CreateOrUpdateRecipeRequest) -> list[FieldError]:
    """Check a recipe payload.

    Rules, in reporting order:
    - name is required and not blank
    - instructions are at most 500 characters
    - difficulty is between 1 and 5 inclusive
    - course and diet, when given, are members of their enumerations

    Args:
        request: The create or update payload.

    Returns:
        Ordered list of violations; empty when the payload is valid.
    """
    errors: list[FieldError] = []

    if not request.name or not request.name.strip():
        errors.append(FieldError("name", "'name' must not be empty."))

    if len(request.instructions) > INSTRUCTIONS_MAX_LENGTH:
        errors.append(
            FieldError(
                "instructions",
                f"'instructions' must be {INSTRUCTIONS_MAX_LENGTH} characters or "
                f"fewer. You entered {len(request.instructions)} characters.",
            )
        )

    if not DIFFICULTY_MIN <= request.difficulty <= DIFFICULTY_MAX:
        errors.append(
            FieldError(
                "difficulty",
                f"'difficulty' must be between {DIFFICULTY_MIN} and "
                f"{DIFFICULTY_MAX}. You entered {request.difficulty}.",
            )
        )

    for error in (
        enum_member_error("course", request.course, Course),
        enum_member_error("diet", request.diet, Diet),
    ):
        if error is not None:
            errors.append(error)

    return errors


def validate_rating(value: int) -> list[FieldError]:
    """Check a rating value."""
    if RATING_MIN <= value <= RATING_MAX:
        return []
    return [
        FieldError(
            "rating",
            f"'rating' must be between {RATING_MIN} and {RATING_MAX}. "
            f"You entered {value}.",
        )
    ]
