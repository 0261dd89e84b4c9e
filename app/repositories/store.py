"""Vehicle store — transactional façade over the owner and vehicle repositories.

Every public method is one unit of work: it opens its own transaction from
the shared session factory and finishes it (commit or rollback) before
returning. The store keeps no other state, so one instance can serve any
number of concurrent callers.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.exceptions import ValidationError
from app.db.transaction import transaction
from app.domain.vehicle import Vehicle
from app.repositories.owner import OwnerRepository
from app.repositories.vehicle import VehicleRepository
from app.schemas.vehicle import OwnerPatch, VehicleCreate, VehicleFilter, VehicleUpdate

logger = logging.getLogger(__name__)


def owner_identity(patch: OwnerPatch | None) -> tuple[str, str, str | None] | None:
    """Return the owner identity a partial update asks for, or ``None`` to keep the current owner.

    Name and surname must be supplied together and non-blank; a
    half-specified identity raises :class:`ValidationError`. Without a name
    and surname the patronymic alone changes nothing.
    """
    if patch is None or (patch.name is None and patch.surname is None):
        return None
    if not patch.name or not patch.surname:
        raise ValidationError("owner name and surname must be supplied together")
    return patch.name, patch.surname, patch.patronymic


class VehicleStore:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def add_all(self, vehicles: Sequence[VehicleCreate]) -> int:
        """Insert vehicles in order, skipping registration numbers that already exist.

        All-or-nothing: any failure rolls back the whole batch. Returns the
        number of rows actually inserted.
        """
        if not vehicles:
            return 0

        inserted = 0
        async with transaction(self._session_factory) as session:
            owners = OwnerRepository(session)
            repo = VehicleRepository(session)
            for vehicle in vehicles:
                owner = vehicle.owner
                owner_id = await owners.resolve(owner.name, owner.surname, owner.patronymic)
                written = await repo.insert_ignore(
                    reg_num=vehicle.reg_num,
                    mark=vehicle.mark,
                    model=vehicle.model,
                    year=vehicle.year,
                    owner_id=owner_id,
                )
                if written:
                    inserted += 1
                else:
                    logger.debug("vehicle %s already catalogued, skipped", vehicle.reg_num)

        logger.info("added %d of %d vehicles", inserted, len(vehicles))
        return inserted

    async def delete(self, reg_num: str) -> None:
        if not reg_num:
            raise ValidationError("registration number is empty")

        async with transaction(self._session_factory) as session:
            deleted = await VehicleRepository(session).delete(reg_num)
        logger.debug("delete %s: %s", reg_num, "removed" if deleted else "not found")

    async def update(self, patch: VehicleUpdate) -> bool:
        """Merge the supplied fields into an existing vehicle.

        Returns ``False`` when no vehicle has that registration number; in
        that case nothing is written, not even a new owner.
        """
        if not patch.reg_num:
            raise ValidationError("registration number is empty")
        identity = owner_identity(patch.owner)
        values = patch.changes()

        async with transaction(self._session_factory) as session:
            repo = VehicleRepository(session)
            if not await repo.exists(patch.reg_num):
                logger.debug("update %s: vehicle not found", patch.reg_num)
                return False

            if identity is not None:
                values["owner_id"] = await OwnerRepository(session).resolve(*identity)
            if values:
                await repo.update(patch.reg_num, **values)

        logger.debug("updated %s with %s", patch.reg_num, sorted(values))
        return True

    async def get_all(self, filters: VehicleFilter, offset: int, limit: int) -> list[Vehicle]:
        async with transaction(self._session_factory) as session:
            vehicles = await VehicleRepository(session).search(filters, offset, limit)
        logger.debug("search %s returned %d vehicles", filters.model_dump(exclude_none=True), len(vehicles))
        return vehicles
