"""Field-level validation of request payloads.

Validators are pure functions: payload in, ordered list of FieldError out.
An empty list means the payload is valid.
"""

from recipes_api.validation.errors import FieldError
from recipes_api.validation.group import validate_group_request
from recipes_api.validation.recipe import (
    INSTRUCTIONS_MAX_LENGTH,
    validate_rating,
    validate_recipe_request,
)


__all__ = [
    "INSTRUCTIONS_MAX_LENGTH",
    "FieldError",
    "validate_group_request",
    "validate_rating",
    "validate_recipe_request",
]
