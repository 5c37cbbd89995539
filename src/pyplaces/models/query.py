"""Suggestion query and candidate models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from pyplaces.models._base import PlacesBaseModel, utcnow


class Query(BaseModel):
    """One settled input that qualified for a suggestion lookup.

    ``sequence_number`` is strictly increasing per widget and is the only
    thing compared when deciding whether a response is stale.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    sequence_number: int = Field(ge=0)
    issued_at: datetime = Field(default_factory=utcnow)


class Candidate(PlacesBaseModel):
    """A suggestion returned by the directory for a query."""

    description: str
    external_id: str = Field(validation_alias=AliasChoices("external_id", "place_id", "placeId"))
    raw: dict[str, Any] = Field(default_factory=dict, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _stash_raw(cls, values: Any) -> Any:
        if isinstance(values, dict) and "raw" not in values:
            merged = dict(values)
            merged["raw"] = values
            return merged
        return values

    @field_validator("description", "external_id", mode="before")
    @classmethod
    def _require_text(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            raise ValueError("must be non-empty")
        return value
