"""Ingredient model definition.

Rows are snapshots of catalog records copied when a recipe is saved.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from recipes_api.database.models.base import BaseDatabaseModel


if TYPE_CHECKING:
    from recipes_api.database.models.recipe import Recipe


class Ingredient(BaseDatabaseModel):
    """SQLAlchemy ORM model for the 'ingredients' table."""

    __tablename__ = "ingredients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    recipe_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("recipes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    external_id: Mapped[str] = mapped_column(Text, nullable=False)
    supplier_name: Mapped[str] = mapped_column(Text, nullable=False)
    cost: Mapped[Decimal] = mapped_column(
        Numeric(18, 2),
        nullable=False,
        default=Decimal(0),
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    recipe: Mapped[Recipe] = relationship("Recipe", back_populates="ingredients")
