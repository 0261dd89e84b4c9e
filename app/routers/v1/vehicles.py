"""Vehicle catalog router.

Pattern:
  1. Declare a router with prefix and tags
  2. Inject the vehicle service via Depends (session factory + info client)
  3. Call service methods and wrap result in response envelope
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.exceptions import ValidationError
from app.core.pagination import PageWindow
from app.core.response import ListResponse, windowed
from app.db.base import get_session_factory
from app.repositories.store import VehicleStore
from app.schemas.vehicle import AddVehiclesRequest, VehicleFilter, VehicleOut, VehicleUpdate
from app.services.vehicle import VehicleService
from app.services.vehicle_info import VehicleInfoClient

router = APIRouter(prefix="/vehicles", tags=["Vehicles"])


# ------------------------------------------------------------------
# Dependencies
# ------------------------------------------------------------------

def get_vehicle_info_client(request: Request) -> VehicleInfoClient:
    return request.app.state.vehicle_info_client


def get_vehicle_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
    info_client: VehicleInfoClient = Depends(get_vehicle_info_client),
) -> VehicleService:
    return VehicleService(VehicleStore(session_factory), info_client)


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=ListResponse[VehicleOut])
async def list_vehicles(
    reg_num: Optional[str] = Query(default=None, description="Registration number contains"),
    mark: Optional[str] = Query(default=None, description="Mark contains"),
    model: Optional[str] = Query(default=None, description="Model contains"),
    year: Optional[int] = Query(default=None, description="Exact year"),
    name: Optional[str] = Query(default=None, description="Owner name contains"),
    surname: Optional[str] = Query(default=None, description="Owner surname contains"),
    patronymic: Optional[str] = Query(default=None, description="Owner patronymic contains"),
    window: PageWindow = Depends(),
    service: VehicleService = Depends(get_vehicle_service),
):
    """List vehicles ordered by registration number. An empty filter lists everything."""
    try:
        filters = VehicleFilter(
            reg_num=reg_num,
            mark=mark,
            model=model,
            year=year,
            name=name,
            surname=surname,
            patronymic=patronymic,
        )
    except SchemaValidationError as exc:
        raise ValidationError(f"Invalid filter: {exc.errors()[0]['msg']}") from exc

    items = await service.list_vehicles(filters, window.offset, window.limit)
    return windowed(
        [VehicleOut.model_validate(v) for v in items], window.offset, window.limit,
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_vehicles(
    body: AddVehiclesRequest,
    service: VehicleService = Depends(get_vehicle_service),
):
    """Look up the given registration numbers and add the vehicles to the catalog."""
    await service.add_vehicles(body.reg_nums)
    return Response(status_code=status.HTTP_201_CREATED)


@router.patch("", status_code=status.HTTP_204_NO_CONTENT)
async def update_vehicle(
    body: VehicleUpdate,
    service: VehicleService = Depends(get_vehicle_service),
):
    """Partially update a vehicle; only supplied fields change."""
    await service.update_vehicle(body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{reg_num}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vehicle(
    reg_num: str,
    service: VehicleService = Depends(get_vehicle_service),
):
    await service.delete_vehicle(reg_num)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
