"""Unit-of-work commit/rollback behaviour."""

from __future__ import annotations

import logging

import pytest

from app.db.transaction import transaction
from app.domain.owner import Owner
from app.repositories.owner import OwnerRepository


@pytest.mark.asyncio
async def test_commits_on_success(session_factory, count_rows):
    async with transaction(session_factory) as session:
        await OwnerRepository(session).resolve("Ivan", "Petrov")

    assert await count_rows(Owner) == 1


@pytest.mark.asyncio
async def test_rolls_back_and_reraises(session_factory, count_rows):
    with pytest.raises(RuntimeError, match="boom"):
        async with transaction(session_factory) as session:
            await OwnerRepository(session).resolve("Ivan", "Petrov")
            raise RuntimeError("boom")

    assert await count_rows(Owner) == 0


class _BrokenRollbackSession:
    """Session double whose rollback fails."""

    def __init__(self):
        self.committed = False
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        self.closed = True
        return False

    async def commit(self):
        self.committed = True

    async def rollback(self):
        raise ConnectionError("connection lost")


@pytest.mark.asyncio
async def test_rollback_failure_does_not_mask_original_error(caplog):
    session = _BrokenRollbackSession()

    with caplog.at_level(logging.ERROR, logger="app.db.transaction"):
        with pytest.raises(KeyError):
            async with transaction(lambda: session):
                raise KeyError("original")

    assert session.committed is False
    assert session.closed is True
    assert "rollback failed" in caplog.text
