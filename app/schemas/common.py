"""Shared Pydantic schema base with camelCase aliases."""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator
from pydantic.alias_generators import to_camel


def blank_to_none(value: object) -> object:
    """Treat an empty or whitespace-only string the same as a missing value."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


# Optional text where "" and absent mean the same thing
OptionalText = Annotated[Optional[str], BeforeValidator(blank_to_none)]


class CamelModel(BaseModel):
    """All API schemas inherit from this to auto-generate camelCase aliases."""

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
        "from_attributes": True,
    }


class HealthResponse(BaseModel):
    """Health-check response returned by /health."""
    status: str = "ok"
    app: str
    env: str
