"""Vehicle service: ingestion via the info lookup, validation, delegation."""

from __future__ import annotations

import pytest

from app.core.exceptions import ValidationError, VehicleInfoError
from app.domain.owner import Owner
from app.domain.vehicle import Vehicle
from app.schemas.vehicle import VehicleFilter, VehicleUpdate
from app.services.vehicle import VehicleService


class FakeInfoClient:
    """Answers lookups from a dict; unknown numbers raise a 404 error."""

    def __init__(self, cars: dict[str, dict]):
        self._cars = cars
        self.requested: list[str] = []

    async def fetch(self, reg_num: str) -> dict:
        self.requested.append(reg_num)
        if reg_num not in self._cars:
            raise VehicleInfoError(f"Can not find car: {reg_num}", status_code=404)
        return self._cars[reg_num]


def car(reg_num: str, **overrides) -> dict:
    payload = {
        "regNum": reg_num,
        "mark": "Lada",
        "model": "Vesta",
        "year": 2015,
        "owner": {"name": "Ivan", "surname": "Petrov", "patronymic": "Sergeevich"},
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_add_vehicles_looks_up_and_stores_in_order(store):
    info = FakeInfoClient({"A1": car("A1"), "B2": car("B2", mark="Kia", year=None)})
    service = VehicleService(store, info)

    assert await service.add_vehicles(["B2", "A1"]) == 2

    assert info.requested == ["B2", "A1"]
    vehicles = await service.list_vehicles(VehicleFilter(), 0, 10)
    assert [(v.reg_num, v.mark, v.year) for v in vehicles] == [("A1", "Lada", 2015), ("B2", "Kia", None)]


@pytest.mark.asyncio
async def test_invalid_upstream_data_stores_nothing(store, count_rows):
    info = FakeInfoClient({"A1": car("A1"), "B2": car("B2", year=1800)})
    service = VehicleService(store, info)

    with pytest.raises(ValidationError, match="B2"):
        await service.add_vehicles(["A1", "B2"])

    assert await count_rows(Vehicle) == 0


@pytest.mark.asyncio
async def test_missing_owner_surname_is_invalid(store):
    bad = car("A1", owner={"name": "Ivan"})
    service = VehicleService(store, FakeInfoClient({"A1": bad}))

    with pytest.raises(ValidationError):
        await service.add_vehicles(["A1"])


@pytest.mark.asyncio
async def test_lookup_failure_stores_nothing(store, count_rows):
    service = VehicleService(store, FakeInfoClient({"A1": car("A1")}))

    with pytest.raises(VehicleInfoError) as exc_info:
        await service.add_vehicles(["A1", "UNKNOWN"])

    assert exc_info.value.status_code == 404
    assert await count_rows(Vehicle) == 0
    assert await count_rows(Owner) == 0


@pytest.mark.asyncio
async def test_update_and_delete_delegate_to_store(store, fetch_vehicle):
    service = VehicleService(store, FakeInfoClient({"A1": car("A1")}))
    await service.add_vehicles(["A1"])

    await service.update_vehicle(VehicleUpdate(reg_num="A1", mark="Kia"))
    assert (await fetch_vehicle("A1")).mark == "Kia"

    await service.delete_vehicle("A1")
    assert await fetch_vehicle("A1") is None
