"""Observable suggestion list state."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from pyplaces.models.query import Candidate

#: ``active_sequence`` value while no query is in flight or applied.
NO_ACTIVE_SEQUENCE = -1


class WidgetPhase(StrEnum):
    IDLE = "idle"
    DEBOUNCING = "debouncing"
    FETCHING = "fetching"
    OPEN = "open"
    RESOLVING = "resolving"


class ListSnapshot(BaseModel):
    """Immutable view of the suggestion list handed to observers."""

    model_config = ConfigDict(frozen=True)

    candidates: tuple[Candidate, ...] = ()
    is_open: bool = False
    is_loading: bool = False
    active_sequence: int = NO_ACTIVE_SEQUENCE
