"""Pagination helpers for list endpoints."""


from fastapi import Query
from pydantic import BaseModel

from app.core.config import settings


class PageWindow:
    """FastAPI dependency for `?offset=0&limit=10`.

    The requested limit is clamped into the configured
    [min_page_limit, max_page_limit] window.
    """

    def __init__(
        self,
        offset: int = Query(default=0, ge=0, description="Rows to skip"),
        limit: int = Query(
            default=settings.default_page_limit, ge=1, description="Maximum rows to return"
        ),
    ):
        self.offset = offset
        self.limit = settings.clamp_limit(limit)


class WindowMeta(BaseModel):
    offset: int
    limit: int
    count: int

    model_config = {"populate_by_name": True}
