"""Place directory oracle: suggestion query and detail lookup."""

from __future__ import annotations

from typing import Protocol

from pyplaces._api.autocomplete import fetch_candidates
from pyplaces._api.details import fetch_place_detail
from pyplaces._transport import Transport
from pyplaces.config import PlacesConfig
from pyplaces.models.place import PlaceDetail
from pyplaces.models.query import Candidate
from pyplaces.models.token import SessionToken


class PlaceOracle(Protocol):
    """Structural interface of the external place directory.

    Implementations raise :class:`~pyplaces.exceptions.PlacesError`
    subclasses on failure; the widget's fetcher and resolver recover
    from those.
    """

    async def suggest(self, text: str, token: SessionToken) -> list[Candidate]:
        ...

    async def details(self, external_id: str, token: SessionToken) -> PlaceDetail:
        ...


class PlacesOracle:
    """Oracle backed by the Places web service."""

    def __init__(self, config: PlacesConfig, transport: Transport) -> None:
        self._config = config
        self._transport = transport

    async def suggest(self, text: str, token: SessionToken) -> list[Candidate]:
        return await fetch_candidates(self._config, self._transport, text, token)

    async def details(self, external_id: str, token: SessionToken) -> PlaceDetail:
        return await fetch_place_detail(self._config, self._transport, external_id, token)
