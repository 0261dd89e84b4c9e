"""Owner repository — finds an owner by identity or creates one.

Find-or-create is two statements (SELECT, then INSERT) run inside the
caller's transaction. There is no uniqueness constraint on the identity
columns, so two concurrent transactions creating the same new owner can
each insert a row. Callers that need strict dedup must add a unique index.
"""

from __future__ import annotations

import logging

from sqlalchemy import select

from app.domain.owner import Owner
from app.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class OwnerRepository(BaseRepository[Owner]):
    model = Owner

    async def find_id(self, name: str, surname: str, patronymic: str | None) -> int | None:
        """Return the id of the owner with exactly this identity, if any.

        An empty patronymic is the same as a missing one and only matches
        owners stored without a patronymic.
        """
        patronymic = patronymic or None
        result = await self._session.execute(
            select(Owner.id)
            .where(Owner.name == name)
            .where(Owner.surname == surname)
            .where(Owner.patronymic.is_not_distinct_from(patronymic))
            .order_by(Owner.id)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def resolve(self, name: str, surname: str, patronymic: str | None = None) -> int:
        patronymic = patronymic or None
        owner_id = await self.find_id(name, surname, patronymic)
        if owner_id is not None:
            return owner_id

        owner = await self.create(name=name, surname=surname, patronymic=patronymic)
        logger.debug("created owner %s for %s %s", owner.id, name, surname)
        return owner.id
