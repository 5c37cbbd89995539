"""Selection resolver: turn a picked candidate into a canonical address."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable, Coroutine
from typing import Any

from pyplaces.exceptions import PlacesError
from pyplaces.models.place import AddressRecord
from pyplaces.models.query import Candidate
from pyplaces.models.token import SessionToken
from pyplaces.oracle import PlaceOracle
from pyplaces.session import SessionTokenManager

_logger = logging.getLogger(__name__)

AddressIntake = Callable[[AddressRecord], Awaitable[None] | None]


class SelectionResolver:
    """Resolve selections and end the token session.

    Every run, successful or not, ends with exactly one
    :meth:`SessionTokenManager.rotate` call. A failed detail lookup
    degrades to the candidate description without coordinates and is
    still forwarded, so the intake always receives a record.

    Parameters
    ----------
    oracle : callable
        Returns the oracle handle (constructed lazily by the owner).
    tokens : SessionTokenManager
        Token manager of the owning widget.
    clear_list : callable
        Empties and closes the suggestion list.
    on_resolved : callable, optional
        Property store intake; may be a coroutine function.
    """

    def __init__(
        self,
        *,
        oracle: Callable[[], PlaceOracle],
        tokens: SessionTokenManager,
        clear_list: Callable[[], None],
        on_resolved: AddressIntake | None = None,
    ) -> None:
        self._oracle = oracle
        self._tokens = tokens
        self._clear_list = clear_list
        self._on_resolved = on_resolved
        self._in_flight = 0

    @property
    def in_flight(self) -> int:
        return self._in_flight

    def on_select(self, candidate: Candidate) -> Coroutine[Any, Any, AddressRecord]:
        """Close the list now and return the resolution coroutine for *candidate*.

        The caller must await (or schedule) the returned coroutine.
        """
        self._clear_list()
        token = self._tokens.current()
        self._in_flight += 1
        return self._resolve_candidate(candidate, token)

    def on_text(self, text: str) -> Coroutine[Any, Any, AddressRecord]:
        """Return the resolution coroutine for raw *text* (disable-network mode)."""
        self._in_flight += 1
        return self._resolve_text(text)

    async def _resolve_candidate(self, candidate: Candidate, token: SessionToken) -> AddressRecord:
        try:
            try:
                detail = await self._oracle().details(candidate.external_id, token)
            except PlacesError as exc:
                _logger.debug("Detail lookup for %s failed, using description: %s", candidate.external_id, exc)
                record = AddressRecord(formatted_address=candidate.description, external_id=candidate.external_id)
            else:
                record = AddressRecord.from_detail(detail, fallback=candidate)
            await self._forward(record)
            return record
        finally:
            self._tokens.rotate()
            self._in_flight -= 1

    async def _resolve_text(self, text: str) -> AddressRecord:
        try:
            record = AddressRecord.from_text(text)
            await self._forward(record)
            return record
        finally:
            self._tokens.rotate()
            self._in_flight -= 1

    async def _forward(self, record: AddressRecord) -> None:
        if self._on_resolved is None:
            return
        try:
            result = self._on_resolved(record)
            if inspect.isawaitable(result):
                await result
        except Exception:
            _logger.debug("on_place_selected callback failed", exc_info=True)
