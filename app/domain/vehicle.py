"""SQLAlchemy ORM model for catalogued vehicles."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Vehicle(Base):
    __tablename__ = "vehicles"

    # Registration number is the immutable natural key
    reg_num: Mapped[str] = mapped_column(String(32), primary_key=True)
    mark: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    model: Mapped[str] = mapped_column(String(100), nullable=False)
    # NULL means the year is unknown
    year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    owner_id: Mapped[int] = mapped_column(
        ForeignKey("owners.id"), nullable=False, index=True
    )

    owner: Mapped["Owner"] = relationship(back_populates="vehicles", lazy="raise")

    def __repr__(self) -> str:
        return f"Vehicle(reg_num={self.reg_num!r}, mark={self.mark!r}, model={self.model!r})"
