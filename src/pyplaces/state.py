"""Suggestion list state.

This is the only component allowed to change what the list shows. Results
are applied in arrival order but fenced by sequence number: a result for
any query other than the most recently issued one is dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pyplaces.models.query import Candidate, Query
from pyplaces.models.state import NO_ACTIVE_SEQUENCE, ListSnapshot

_logger = logging.getLogger(__name__)


class SuggestionListState:
    """Pure state container driven by gate, fetcher and resolver events."""

    def __init__(self) -> None:
        self._candidates: tuple[Candidate, ...] = ()
        self._is_open = False
        self._is_loading = False
        self._active_sequence = NO_ACTIVE_SEQUENCE

    @property
    def candidates(self) -> tuple[Candidate, ...]:
        return self._candidates

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def active_sequence(self) -> int:
        return self._active_sequence

    def snapshot(self) -> ListSnapshot:
        return ListSnapshot(
            candidates=self._candidates,
            is_open=self._is_open,
            is_loading=self._is_loading,
            active_sequence=self._active_sequence,
        )

    def on_query_issued(self, query: Query) -> None:
        """Mark *query* as the one whose result may be shown.

        The list stays as it is (open or closed) until candidates arrive.
        """
        self._active_sequence = query.sequence_number
        self._is_loading = True

    def on_result(self, query: Query, candidates: Sequence[Candidate]) -> bool:
        """Apply *candidates* if *query* is still active.

        Returns whether the result was applied. A stale result is not an
        error and leaves the state untouched.
        """
        if query.sequence_number != self._active_sequence:
            _logger.debug(
                "Dropping stale result seq=%d (active=%d)",
                query.sequence_number,
                self._active_sequence,
            )
            return False
        self._candidates = tuple(candidates)
        self._is_open = bool(self._candidates)
        self._is_loading = False
        return True

    def on_clear(self) -> None:
        """Empty and close the list.

        Also invalidates the active sequence, so a result still in flight
        for the cleared query is fenced out like any superseded one.
        """
        self._candidates = ()
        self._is_open = False
        self._is_loading = False
        self._active_sequence = NO_ACTIVE_SEQUENCE

    def close(self) -> bool:
        """Hide the list, keeping the candidates for a later :meth:`reopen`."""
        changed = self._is_open
        self._is_open = False
        return changed

    def reopen(self) -> bool:
        """Show the kept candidates again, if there are any."""
        if self._is_open or self._is_loading or not self._candidates:
            return False
        self._is_open = True
        return True
