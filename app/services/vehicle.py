"""Vehicle service — business rules between the HTTP layer and the store.

Rule: No SQLAlchemy / no FastAPI here. Pure Python business logic.
"""


import logging

from pydantic import ValidationError as SchemaValidationError

from app.core.exceptions import ValidationError
from app.domain.vehicle import Vehicle
from app.repositories.store import VehicleStore
from app.schemas.vehicle import VehicleCreate, VehicleFilter, VehicleUpdate
from app.services.vehicle_info import VehicleInfoClient

logger = logging.getLogger(__name__)

class VehicleService:
    def __init__(self, store: VehicleStore, info_client: VehicleInfoClient):
        self._store = store
        self._info = info_client

    async def list_vehicles(
        self, filters: VehicleFilter, offset: int, limit: int
    ) -> list[Vehicle]:
        return await self._store.get_all(filters, offset, limit)

    async def add_vehicles(self, reg_nums: list[str]) -> int:
        """Look every number up, validate the answers, then store them in one batch.

        Nothing is stored unless every lookup succeeds and validates.
        """
        vehicles: list[VehicleCreate] = []
        for reg_num in reg_nums:
            payload = await self._info.fetch(reg_num)
            try:
                vehicles.append(VehicleCreate.model_validate(payload))
            except SchemaValidationError as exc:
                logger.warning("invalid vehicle info for %s: %s", reg_num, exc)
                raise ValidationError(f"Invalid car data for: {reg_num}") from exc

        return await self._store.add_all(vehicles)

    async def update_vehicle(self, data: VehicleUpdate) -> None:
        await self._store.update(data)

    async def delete_vehicle(self, reg_num: str) -> None:
        await self._store.delete(reg_num)
