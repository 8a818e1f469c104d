"""Component model: one catalog entry (drone, goggles, radio, battery or accessory)."""

from sqlalchemy import Boolean, Enum, Float, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.builder.types import ComponentCategory
from app.models.base import Base


class Component(Base):
    """A product in the catalog.

    ``specifications`` is a JSON object of free-form scalar attributes
    (voltage, capacity, protocol ...).  ``compatible_with`` is a JSON list of
    compatibility tags; the tag ``"all"`` matches everything.  Both default to
    empty collections and are never NULL.
    """

    __tablename__ = "components"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[ComponentCategory] = mapped_column(
        Enum(ComponentCategory), nullable=False, index=True
    )
    price: Mapped[float] = mapped_column(Float, nullable=False)
    image: Mapped[str] = mapped_column(Text, nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    # Grams; None when the vendor does not publish it
    weight: Mapped[float | None] = mapped_column(Float, nullable=True, default=None)
    in_stock: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    specifications: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    compatible_with: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    purchase_url: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
