"""Debounced input gate.

Turns a burst of keystrokes into at most one settled input per quiet
window. The pending settle is held as an explicit ``asyncio.TimerHandle``
so it can be cancelled deterministically on reschedule and on disposal.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from collections.abc import Callable

from pyplaces._constants import DEBOUNCE_DELAY_S, MIN_QUERY_LENGTH
from pyplaces.models.query import Query

_logger = logging.getLogger(__name__)


class DebouncedInputGate:
    """Coalesce keystrokes and emit sequenced queries once input settles.

    Parameters
    ----------
    on_query : callable
        Receives each :class:`Query` issued for settled text of at least
        *min_length* characters. Sequence numbers start at 0.
    on_clear : callable
        Called when settled text is too short to query.
    on_bypass : callable, optional
        When set, receives every settled text unfiltered instead of the
        two callbacks above (disable-network mode).
    delay : float
        Quiet window in seconds.
    min_length : int
        Minimum settled text length that issues a query.
    """

    def __init__(
        self,
        *,
        on_query: Callable[[Query], None],
        on_clear: Callable[[], None],
        on_bypass: Callable[[str], None] | None = None,
        delay: float = DEBOUNCE_DELAY_S,
        min_length: int = MIN_QUERY_LENGTH,
    ) -> None:
        self._on_query = on_query
        self._on_clear = on_clear
        self._on_bypass = on_bypass
        self._delay = delay
        self._min_length = min_length
        self._sequence = itertools.count()
        self._last_sequence: int | None = None
        self._pending: asyncio.TimerHandle | None = None
        self._closed = False

    @property
    def is_pending(self) -> bool:
        """Whether a settle is scheduled."""
        return self._pending is not None

    @property
    def last_sequence(self) -> int | None:
        """Sequence number of the most recently issued query."""
        return self._last_sequence

    def on_input(self, text: str) -> None:
        """Accept a keystroke and (re)start the quiet window.

        Must be called from the event loop thread.
        """
        if self._closed:
            _logger.debug("Input ignored: gate closed")
            return
        self.cancel()
        loop = asyncio.get_running_loop()
        self._pending = loop.call_later(self._delay, self._settle, text)

    def cancel(self) -> bool:
        """Cancel the pending settle. Returns whether one was pending."""
        pending = self._pending
        self._pending = None
        if pending is None:
            return False
        pending.cancel()
        return True

    def close(self) -> None:
        """Cancel any pending settle and refuse further input."""
        self._closed = True
        self.cancel()

    def _settle(self, text: str) -> None:
        self._pending = None
        if self._closed:
            return

        if self._on_bypass is not None:
            self._on_bypass(text)
            return

        if len(text) < self._min_length:
            self._on_clear()
            return

        query = Query(text=text, sequence_number=next(self._sequence))
        self._last_sequence = query.sequence_number
        self._on_query(query)
