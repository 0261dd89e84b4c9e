"""Builds the single bounded SELECT behind the filtered vehicle listing."""

from __future__ import annotations

from sqlalchemy import Select, select
from sqlalchemy.orm import contains_eager

from app.core.exceptions import ValidationError
from app.domain.owner import Owner
from app.domain.vehicle import Vehicle
from app.schemas.vehicle import VehicleFilter

# Filter field -> column matched as a case-sensitive substring
SUBSTRING_PREDICATES = {
    "reg_num": Vehicle.reg_num,
    "mark": Vehicle.mark,
    "model": Vehicle.model,
    "name": Owner.name,
    "surname": Owner.surname,
    "patronymic": Owner.patronymic,
}

# Filter field -> column matched exactly
EXACT_PREDICATES = {
    "year": Vehicle.year,
}


def build_search_query(filters: VehicleFilter, offset: int, limit: int) -> Select:
    """Return vehicles (owners eagerly joined) matching every set filter field.

    Unset fields add no predicate. Rows are ordered by registration number
    so that ``offset``/``limit`` windows are stable between calls.
    """
    if offset < 0:
        raise ValidationError("offset must not be negative")
    if limit < 1:
        raise ValidationError("limit must be positive")

    query = (
        select(Vehicle)
        .join(Vehicle.owner)
        .options(contains_eager(Vehicle.owner))
    )

    for field, column in SUBSTRING_PREDICATES.items():
        value = getattr(filters, field)
        if value is not None:
            query = query.where(column.contains(value, autoescape=True))

    for field, column in EXACT_PREDICATES.items():
        value = getattr(filters, field)
        if value is not None:
            query = query.where(column == value)

    return query.order_by(Vehicle.reg_num.asc()).offset(offset).limit(limit)
