"""Recipe group schemas."""

from __future__ import annotations

from pydantic import Field

from recipes_api.schemas.base import APIRequest, APIResponse
from recipes_api.schemas.enums import Course, Diet


class CreateOrUpdateGroupRequest(APIRequest):
    """Body of POST and PUT /groups."""

    name: str | None = None
    diet: str | None = None
    course: str | None = None
    recipe_ids: list[int] = Field(default_factory=list)


class GroupSearchCriteria(APIRequest):
    """Repository-level group search criteria."""

    skip: int = 0
    take: int = 20
    course: Course | None = None
    diet: Diet | None = None


class RecipeSummaryDto(APIResponse):
    """Short form of a recipe listed inside a group."""

    id: int
    name: str
    difficulty: int


class GroupDto(APIResponse):
    """Recipe group as returned by the API."""

    id: int
    name: str
    diet: Diet | None = None
    course: Course | None = None
    user_id: str
    recipes: list[RecipeSummaryDto] = Field(default_factory=list)
