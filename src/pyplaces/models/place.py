"""Place detail and canonical address models."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator, model_validator

from pyplaces.models._base import PlacesBaseModel, safe_float, safe_str
from pyplaces.models.query import Candidate


class Coordinates(PlacesBaseModel):
    """WGS84 point."""

    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)

    @classmethod
    def from_any(cls, value: Any) -> Coordinates | None:
        """Build coordinates from a ``{lat, lng}`` mapping, or ``None`` if unusable."""
        if not isinstance(value, dict):
            return None
        lat = safe_float(value.get("lat", value.get("latitude")))
        lng = safe_float(value.get("lng", value.get("longitude")))
        if lat is None or lng is None:
            return None
        return cls(lat=lat, lng=lng)


class AddressComponent(PlacesBaseModel):
    """One structured part of an address (street, number, city, ...)."""

    long_name: str = Field(validation_alias=AliasChoices("long_name", "longName", "longText"))
    short_name: str = Field(default="", validation_alias=AliasChoices("short_name", "shortName", "shortText"))
    types: tuple[str, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _default_short_name(cls, values: Any) -> Any:
        if isinstance(values, dict) and not values.get("short_name") and not values.get("shortName"):
            merged = dict(values)
            merged["short_name"] = values.get("long_name") or values.get("longName") or ""
            return merged
        return values


class PlaceDetail(PlacesBaseModel):
    """Full detail of a picked candidate.

    Accepts the directory's ``result`` object directly: the point is read
    from ``geometry.location`` and components from ``address_components``.

    Parameters
    ----------
    formatted_address : str
        Canonical single-line address.
    external_id : str
        Directory id of the place.
    coordinates : Coordinates or None
        Point location, when the directory returned geometry.
    components : tuple of AddressComponent or None
        Structured address parts, when returned.
    """

    formatted_address: str = Field(default="", validation_alias=AliasChoices("formatted_address", "formattedAddress"))
    external_id: str = Field(default="", validation_alias=AliasChoices("external_id", "place_id", "placeId"))
    coordinates: Coordinates | None = None
    components: tuple[AddressComponent, ...] | None = Field(
        default=None,
        validation_alias=AliasChoices("components", "address_components", "addressComponents"),
    )

    @model_validator(mode="before")
    @classmethod
    def _lift_geometry(cls, values: Any) -> Any:
        if not isinstance(values, dict) or "coordinates" in values:
            return values
        geometry = values.get("geometry")
        location = geometry.get("location") if isinstance(geometry, dict) else None
        merged = dict(values)
        merged["coordinates"] = Coordinates.from_any(location)
        return merged

    @field_validator("formatted_address", "external_id", mode="before")
    @classmethod
    def _strip_text(cls, value: Any) -> str:
        return safe_str(value) or ""


class AddressRecord(PlacesBaseModel):
    """Canonical address handed to the property store.

    Produced for every completed selection: from a resolved
    :class:`PlaceDetail`, or degraded to the candidate text alone when
    the detail lookup failed or the network is disabled.
    """

    formatted_address: str
    external_id: str | None = None
    coordinates: Coordinates | None = None
    components: tuple[AddressComponent, ...] | None = None

    @property
    def is_degraded(self) -> bool:
        """Whether the record carries no location."""
        return self.coordinates is None

    @classmethod
    def from_detail(cls, detail: PlaceDetail, *, fallback: Candidate | None = None) -> AddressRecord:
        return cls(
            formatted_address=detail.formatted_address or (fallback.description if fallback else ""),
            external_id=detail.external_id or (fallback.external_id if fallback else None),
            coordinates=detail.coordinates,
            components=detail.components,
        )

    @classmethod
    def from_text(cls, text: str) -> AddressRecord:
        return cls(formatted_address=text)
