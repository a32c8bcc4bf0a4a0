"""Rating model definition."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from recipes_api.database.models.base import BaseDatabaseModel


if TYPE_CHECKING:
    from recipes_api.database.models.recipe import Recipe


class Rating(BaseDatabaseModel):
    """SQLAlchemy ORM model for the 'ratings' table.

    A user rates a recipe at most once; later ratings update the same row.
    """

    __tablename__ = "ratings"
    __table_args__ = (
        UniqueConstraint("recipe_id", "user_id", name="uq_ratings_recipe_user"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    recipe_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("recipes.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[str] = mapped_column(Text, nullable=False)
    value: Mapped[int] = mapped_column(Integer, nullable=False)
    recipe: Mapped[Recipe] = relationship("Recipe", back_populates="ratings")
