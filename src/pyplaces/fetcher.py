"""Suggestion fetcher."""

from __future__ import annotations

import logging
from collections.abc import Callable

from pyplaces.exceptions import PlacesError
from pyplaces.models.query import Candidate, Query
from pyplaces.models.token import SessionToken
from pyplaces.oracle import PlaceOracle

_logger = logging.getLogger(__name__)


class SuggestionFetcher:
    """Run suggestion queries against the oracle.

    There is no network-level cancellation: every issued query runs to
    completion and ``SuggestionListState.on_result`` decides, by sequence
    number, whether the result still matters.

    Lookup failures resolve to an empty list; they are never surfaced.
    """

    def __init__(self, oracle: Callable[[], PlaceOracle]) -> None:
        self._oracle = oracle

    async def fetch(self, query: Query, token: SessionToken) -> list[Candidate]:
        """Fetch candidates for *query* under *token*."""
        try:
            return await self._oracle().suggest(query.text, token)
        except PlacesError as exc:
            _logger.debug("Suggestion lookup seq=%d failed: %s", query.sequence_number, exc)
            return []
