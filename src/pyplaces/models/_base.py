"""Base model and coercion helpers for place directory payloads.

Directory responses are loosely typed: coordinates may arrive as numbers
or strings, optional text fields may be empty strings. Every response
model inherits from :class:`PlacesBaseModel` which is frozen, ignores
unknown keys and accepts both field names and aliases.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


def utcnow() -> datetime:
    return datetime.now(UTC)


def safe_float(value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result):
        return None
    return result


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text if text else None


class PlacesBaseModel(BaseModel):
    """Base for directory models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )
