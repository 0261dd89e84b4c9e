"""Generic async repository bound to one session (and so to one transaction)."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository.

    Repositories never commit: the session they are given belongs to a
    transaction opened by the caller (see ``app.db.transaction``).
    """

    model: type[ModelT]
    key: str = "id"

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @property
    def _key_column(self):
        return getattr(self.model, self.key)

    @property
    def _dialect(self) -> str:
        return self._session.get_bind().dialect.name

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def exists(self, entity_id: Any) -> bool:
        result = await self._session.execute(
            select(self._key_column).where(self._key_column == entity_id)
        )
        return result.first() is not None

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        instance = self.model(**kwargs)
        self._session.add(instance)
        await self._session.flush()  # populate id
        return instance

    async def update(self, entity_id: Any, **kwargs: Any) -> bool:
        kwargs.pop(self.key, None)
        if not kwargs:
            return False
        result = await self._session.execute(
            update(self.model).where(self._key_column == entity_id).values(**kwargs)
        )
        return result.rowcount > 0

    async def delete(self, entity_id: Any) -> bool:
        result = await self._session.execute(
            delete(self.model).where(self._key_column == entity_id)
        )
        return result.rowcount > 0
