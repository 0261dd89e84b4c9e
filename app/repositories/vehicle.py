"""Vehicle repository — row-level operations on the vehicles table."""

from __future__ import annotations

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from app.domain.vehicle import Vehicle
from app.repositories.base import BaseRepository
from app.repositories.search import build_search_query
from app.schemas.vehicle import VehicleFilter

# Dialects with native INSERT ... ON CONFLICT DO NOTHING
_CONFLICT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class VehicleRepository(BaseRepository[Vehicle]):
    model = Vehicle
    key = "reg_num"

    async def insert_ignore(
        self,
        *,
        reg_num: str,
        mark: str,
        model: str,
        year: int | None,
        owner_id: int,
    ) -> bool:
        """Insert a vehicle unless its registration number is already taken.

        Returns ``True`` when a row was written.
        """
        try:
            insert = _CONFLICT_INSERTS[self._dialect]
        except KeyError:
            raise NotImplementedError(
                f"ON CONFLICT inserts are not supported for dialect {self._dialect!r}"
            ) from None

        stmt = (
            insert(Vehicle)
            .values(
                reg_num=reg_num,
                mark=mark,
                model=model,
                year=year or None,
                owner_id=owner_id,
            )
            .on_conflict_do_nothing(index_elements=[Vehicle.reg_num])
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def search(self, filters: VehicleFilter, offset: int, limit: int) -> list[Vehicle]:
        result = await self._session.execute(build_search_query(filters, offset, limit))
        return list(result.scalars().all())
