"""Unit-of-work helper used by every multi-statement write."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

logger = logging.getLogger(__name__)


@asynccontextmanager
async def transaction(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Yield a session whose work is committed on success and rolled back on error.

    The original exception always propagates; a failing rollback is only
    logged. Leaving the block returns the connection to the pool.
    """
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            try:
                await session.rollback()
            except Exception as rollback_exc:
                logger.error("rollback failed: %s", rollback_exc)
            raise
