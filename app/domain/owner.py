"""SQLAlchemy ORM model for registered vehicle owners.

Owner rows are append-only: they are created by identity resolution and are
never edited or deleted afterwards. Identity is ``(name, surname, patronymic)``
where a NULL patronymic is its own value, distinct from any string.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Owner(Base):
    __tablename__ = "owners"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    surname: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    patronymic: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    vehicles: Mapped[List["Vehicle"]] = relationship(
        back_populates="owner", lazy="raise"
    )

    def __repr__(self) -> str:
        return f"Owner(id={self.id!r}, name={self.name!r}, surname={self.surname!r})"
