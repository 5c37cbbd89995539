"""Property listing models used by the store client and the listing wizard."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from pyplaces._constants import MIN_ADDRESS_LENGTH, MIN_AREA_SQM
from pyplaces.models._base import safe_float
from pyplaces.models.place import AddressRecord, Coordinates


class PropertyCondition(StrEnum):
    UNSPECIFIED = ""
    NEW = "new"
    RENOVATED = "renovated"
    ORIGINAL = "original"


class PropertyParams(BaseModel):
    """Listing attributes collected in the second wizard step.

    Serialized camelCase (``areaSqm``) to match the store routes.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    layout: str = ""
    """Flat layout, e.g. ``2+kk`` or ``3+1``."""

    area_sqm: float | None = None
    """Floor area in square metres."""

    balcony: bool = False
    cellar: bool = False
    garage: bool = False
    condition: PropertyCondition = PropertyCondition.UNSPECIFIED

    floor: int | None = None
    """Floor number, ``None`` when not given."""

    elevator: bool = False
    furnished: bool = False

    @field_validator("area_sqm", mode="before")
    @classmethod
    def _coerce_area(cls, value: Any) -> float | None:
        return safe_float(value)

    @field_validator("floor", mode="before")
    @classmethod
    def _coerce_floor(cls, value: Any) -> int | None:
        parsed = safe_float(value)
        return None if parsed is None else int(parsed)

    @field_validator("condition", mode="before")
    @classmethod
    def _coerce_condition(cls, value: Any) -> Any:
        return "" if value is None else value

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class SavedProperty(BaseModel):
    """A property record as listed by the store.

    The store returns flat rows (``latitude``/``longitude`` next to the
    listing attributes); they are regrouped into ``coords`` and ``params``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    address: str
    coords: Coordinates | None = None
    params: PropertyParams = Field(default_factory=PropertyParams)
    created_at: datetime | None = None
    raw: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _regroup_row(cls, values: Any) -> Any:
        if not isinstance(values, dict) or "params" in values:
            return values
        lat, lng = values.get("latitude"), values.get("longitude")
        return {
            "id": values.get("id"),
            "address": values.get("address"),
            # Zero is treated as "not set", matching how rows are written.
            "coords": {"lat": lat, "lng": lng} if lat and lng else None,
            "params": PropertyParams.model_validate(values),
            "created_at": values.get("createdAt"),
            "raw": values,
        }


class PropertyDraft:
    """Mutable listing draft filled by the address widget and the attribute form."""

    def __init__(self, params: PropertyParams | None = None) -> None:
        self.address: str = ""
        self.coords: Coordinates | None = None
        self.params = params or PropertyParams()

    def accept(self, record: AddressRecord) -> None:
        """Intake callback for the address widget."""
        self.address = record.formatted_address
        self.coords = record.coordinates

    @property
    def can_continue(self) -> bool:
        """Whether the address step may be left."""
        return len(self.address.strip()) > MIN_ADDRESS_LENGTH

    @property
    def can_submit(self) -> bool:
        return (
            self.can_continue
            and bool(self.params.layout.strip())
            and self.params.area_sqm is not None
            and self.params.area_sqm > MIN_AREA_SQM
        )
