"""Owner identity resolution: find-or-create by (name, surname, patronymic)."""

from __future__ import annotations

import pytest

from app.db.transaction import transaction
from app.domain.owner import Owner
from app.repositories.owner import OwnerRepository


@pytest.mark.asyncio
async def test_resolve_creates_then_reuses_owner(session_factory, count_rows):
    async with transaction(session_factory) as session:
        first = await OwnerRepository(session).resolve("Ivan", "Petrov", "Sergeevich")

    async with transaction(session_factory) as session:
        second = await OwnerRepository(session).resolve("Ivan", "Petrov", "Sergeevich")

    assert first == second
    assert await count_rows(Owner) == 1


@pytest.mark.asyncio
async def test_resolve_reuses_owner_created_earlier_in_same_transaction(session_factory, count_rows):
    async with transaction(session_factory) as session:
        owners = OwnerRepository(session)
        first = await owners.resolve("Anna", "Smirnova")
        second = await owners.resolve("Anna", "Smirnova")

    assert first == second
    assert await count_rows(Owner) == 1


@pytest.mark.asyncio
async def test_missing_patronymic_is_its_own_identity(session_factory, count_rows):
    async with transaction(session_factory) as session:
        owners = OwnerRepository(session)
        without = await owners.resolve("Ivan", "Petrov", None)
        with_patronymic = await owners.resolve("Ivan", "Petrov", "Ivanovich")
        again_without = await owners.resolve("Ivan", "Petrov", None)

    assert without != with_patronymic
    assert again_without == without
    assert await count_rows(Owner) == 2


@pytest.mark.asyncio
async def test_empty_patronymic_is_same_as_missing(session_factory, count_rows):
    async with transaction(session_factory) as session:
        owners = OwnerRepository(session)
        missing = await owners.resolve("Ivan", "Petrov", None)
        empty = await owners.resolve("Ivan", "Petrov", "")

    assert missing == empty
    assert await count_rows(Owner) == 1


@pytest.mark.asyncio
async def test_name_and_surname_match_exactly(session_factory):
    async with transaction(session_factory) as session:
        owners = OwnerRepository(session)
        ivan = await owners.resolve("Ivan", "Petrov")
        ivana = await owners.resolve("Ivana", "Petrov")
        lower = await owners.resolve("ivan", "Petrov")

    assert len({ivan, ivana, lower}) == 3


@pytest.mark.asyncio
async def test_find_id_returns_none_for_unknown_owner(session_factory):
    async with transaction(session_factory) as session:
        assert await OwnerRepository(session).find_id("Nobody", "Known", None) is None
