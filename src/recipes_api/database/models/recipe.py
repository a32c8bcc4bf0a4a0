"""Recipe model definition.

A recipe owns its ingredient snapshots and its ratings: both collections are
loaded with the recipe and deleted with it.
"""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import DateTime
from sqlalchemy import Enum as SAEnum
from sqlalchemy import Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from recipes_api.database.models.base import BaseDatabaseModel
from recipes_api.schemas.enums import Course, Diet


if TYPE_CHECKING:
    from recipes_api.database.models.ingredient import Ingredient
    from recipes_api.database.models.rating import Rating


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Recipe(BaseDatabaseModel):
    """SQLAlchemy ORM model for the 'recipes' table."""

    __tablename__ = "recipes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    instructions: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    difficulty: Mapped[int] = mapped_column(Integer, nullable=False)
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
        default=_utcnow,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        server_default=func.now(),
    )
    ingredients: Mapped[list[Ingredient]] = relationship(
        "Ingredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="Ingredient.position",
        lazy="selectin",
    )
    ratings: Mapped[list[Rating]] = relationship(
        "Rating",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="Rating.id",
        lazy="selectin",
    )

    @property
    def average_rating(self) -> Decimal:
        """Mean rating value rounded to two places; zero when unrated."""
        if not self.ratings:
            return Decimal(0)
        total = Decimal(sum(r.value for r in self.ratings))
        return (total / len(self.ratings)).quantize(Decimal("0.01"))

    def rating_by(self, user_id: str) -> Rating | None:
        """Return the rating left by ``user_id``, if any."""
        return next((r for r in self.ratings if r.user_id == user_id), None)
