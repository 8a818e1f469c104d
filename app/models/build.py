from datetime import datetime

from sqlalchemy import DateTime, Integer, JSON, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base


class Build(Base):
    """A saved build: references catalog components by id, never copies them.

    component_ids maps each singular category ("drone", "goggles", "radio",
    "battery") to a component id or None, and "accessories" to a list of ids.
    """

    __tablename__ = "builds"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    component_ids: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
