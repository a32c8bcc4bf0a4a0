"""Recipe group model definition."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import Column, DateTime
from sqlalchemy import Enum as SAEnum
from sqlalchemy import ForeignKey, Integer, Table, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from recipes_api.database.models.base import BaseDatabaseModel
from recipes_api.schemas.enums import Course, Diet


if TYPE_CHECKING:
    from recipes_api.database.models.recipe import Recipe


# Deleting either side removes the link row only
recipe_group_recipes = Table(
    "recipe_group_recipes",
    BaseDatabaseModel.metadata,
    Column(
        "group_id",
        Integer,
        ForeignKey("recipe_groups.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "recipe_id",
        Integer,
        ForeignKey("recipes.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class RecipeGroup(BaseDatabaseModel):
    """SQLAlchemy ORM model for the 'recipe_groups' table."""

    __tablename__ = "recipe_groups"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    diet: Mapped[Diet | None] = mapped_column(
        SAEnum(Diet, name="diet_enum", native_enum=False, length=32),
        nullable=True,
    )
    course: Mapped[Course | None] = mapped_column(
        SAEnum(Course, name="course_enum", native_enum=False, length=32),
        nullable=True,
    )
    user_id: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        server_default=func.now(),
    )
    recipes: Mapped[list[Recipe]] = relationship(
        "Recipe",
        secondary=recipe_group_recipes,
        order_by="Recipe.id",
        lazy="selectin",
        passive_deletes=True,
    )
