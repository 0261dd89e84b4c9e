"""Standardized JSON response envelope helpers."""


from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from app.core.pagination import WindowMeta

T = TypeVar("T")


class ListResponse(BaseModel, Generic[T]):
    """Windowed list response envelope: `{ data: [...], meta: {...} }`"""

    data: list[T]
    meta: WindowMeta

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


def windowed(items: list, offset: int, limit: int) -> dict:
    """Build a windowed response dict for use with ListResponse."""
    return {
        "data": items,
        "meta": {
            "offset": offset,
            "limit": limit,
            "count": len(items),
        },
    }
