"""Data models for place directory payloads and property listings."""

from pyplaces.models._base import PlacesBaseModel
from pyplaces.models.place import AddressComponent, AddressRecord, Coordinates, PlaceDetail
from pyplaces.models.property import (
    PropertyCondition,
    PropertyDraft,
    PropertyParams,
    SavedProperty,
)
from pyplaces.models.query import Candidate, Query
from pyplaces.models.state import NO_ACTIVE_SEQUENCE, ListSnapshot, WidgetPhase
from pyplaces.models.token import SessionToken

__all__ = [
    "AddressComponent",
    "AddressRecord",
    "Candidate",
    "Coordinates",
    "ListSnapshot",
    "NO_ACTIVE_SEQUENCE",
    "PlaceDetail",
    "PlacesBaseModel",
    "PropertyCondition",
    "PropertyDraft",
    "PropertyParams",
    "Query",
    "SavedProperty",
    "SessionToken",
    "WidgetPhase",
]
