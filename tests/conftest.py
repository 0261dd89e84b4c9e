"""Shared pytest fixtures for the catalog tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.db.base import build_engine, build_session_factory, create_tables
from app.domain.owner import Owner
from app.domain.vehicle import Vehicle
from app.repositories.store import VehicleStore
from app.schemas.vehicle import OwnerIn, VehicleCreate


@pytest.fixture()
def database_url(tmp_path) -> str:
    """Provide a file-backed SQLite database URL for one test."""

    return f"sqlite+aiosqlite:///{tmp_path / 'cars.sqlite'}"


@pytest_asyncio.fixture()
async def engine(database_url: str) -> AsyncIterator[AsyncEngine]:
    engine = build_engine(database_url)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture()
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return build_session_factory(engine)


@pytest.fixture()
def store(session_factory: async_sessionmaker[AsyncSession]) -> VehicleStore:
    return VehicleStore(session_factory)


@pytest.fixture()
def make_vehicle() -> Callable[..., VehicleCreate]:
    """Build a valid ``VehicleCreate`` with overridable fields."""

    def _make(
        reg_num: str,
        *,
        mark: str = "Lada",
        model: str = "Vesta",
        year: int | None = 2020,
        name: str = "Ivan",
        surname: str = "Petrov",
        patronymic: str | None = None,
    ) -> VehicleCreate:
        return VehicleCreate(
            reg_num=reg_num,
            mark=mark,
            model=model,
            year=year,
            owner=OwnerIn(name=name, surname=surname, patronymic=patronymic),
        )

    return _make


@pytest.fixture()
def count_rows(session_factory: async_sessionmaker[AsyncSession]) -> Callable:
    """Return an async callable counting rows of an ORM model."""

    async def _count(model: type[Owner] | type[Vehicle]) -> int:
        async with session_factory() as session:
            return (await session.execute(select(func.count()).select_from(model))).scalar_one()

    return _count


@pytest.fixture()
def fetch_vehicle(session_factory: async_sessionmaker[AsyncSession]) -> Callable:
    """Return an async callable loading one vehicle row by registration number."""

    async def _fetch(reg_num: str) -> Vehicle | None:
        async with session_factory() as session:
            return await session.get(Vehicle, reg_num)

    return _fetch
