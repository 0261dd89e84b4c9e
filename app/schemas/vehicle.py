"""Vehicle and owner Pydantic schemas (request DTOs and response models)."""


from datetime import date
from typing import Annotated, Any

from pydantic import AfterValidator, Field, field_validator

from app.schemas.common import CamelModel, OptionalText

FIRST_CAR_YEAR = 1885


def check_year(value: int | None) -> int | None:
    """Normalise 0 to "unknown" and reject years outside 1885..this year."""
    if not value:
        return None
    current = date.today().year
    if not FIRST_CAR_YEAR <= value <= current:
        raise ValueError(f"year must be between {FIRST_CAR_YEAR} and {current}")
    return value


ModelYear = Annotated[int | None, AfterValidator(check_year)]

class OwnerIn(CamelModel):
    name: str = Field(min_length=1)
    surname: str = Field(min_length=1)
    patronymic: OptionalText = None

class OwnerOut(CamelModel):
    name: str
    surname: str
    patronymic: str | None = None

class VehicleCreate(CamelModel):
    """A fully described vehicle, as returned by the vehicle-info lookup."""

    reg_num: str = Field(min_length=1)
    mark: str = Field(min_length=1)
    model: str = Field(min_length=1)
    year: ModelYear = None
    owner: OwnerIn

class OwnerPatch(CamelModel):
    """Owner part of a partial update. ``None`` means the field was not supplied."""

    name: str | None = None
    surname: str | None = None
    patronymic: OptionalText = None

class VehicleUpdate(CamelModel):
    reg_num: str
    mark: str | None = None
    model: str | None = None
    year: ModelYear = None
    owner: OwnerPatch | None = None

    def changes(self) -> dict[str, Any]:
        """Column values to merge; empty strings and unset fields keep the stored value."""
        values: dict[str, Any] = {}
        if self.mark:
            values["mark"] = self.mark
        if self.model:
            values["model"] = self.model
        if self.year:
            values["year"] = self.year
        return values

class VehicleOut(CamelModel):
    reg_num: str
    mark: str
    model: str
    year: int | None = None
    owner: OwnerOut

class VehicleFilter(CamelModel):
    """Optional search predicates; an empty filter matches every vehicle."""

    reg_num: OptionalText = None
    mark: OptionalText = None
    model: OptionalText = None
    year: ModelYear = None
    name: OptionalText = None
    surname: OptionalText = None
    patronymic: OptionalText = None

class AddVehiclesRequest(CamelModel):
    reg_nums: list[str] = Field(min_length=1)

    @field_validator("reg_nums")
    @classmethod
    def _no_blank_numbers(cls, value: list[str]) -> list[str]:
        if any(not reg_num.strip() for reg_num in value):
            raise ValueError("registration numbers must not be blank")
        return value
