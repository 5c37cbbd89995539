"""Address-entry widget session."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any, TypeVar

import aiohttp

from pyplaces._transport import HttpTransport
from pyplaces.config import PlacesConfig
from pyplaces.exceptions import PlacesConfigError, PlacesError
from pyplaces.fetcher import SuggestionFetcher
from pyplaces.gate import DebouncedInputGate
from pyplaces.models.place import AddressRecord
from pyplaces.models.query import Candidate, Query
from pyplaces.models.state import ListSnapshot, WidgetPhase
from pyplaces.models.token import SessionToken
from pyplaces.oracle import PlaceOracle, PlacesOracle
from pyplaces.resolver import AddressIntake, SelectionResolver
from pyplaces.session import SessionTokenManager
from pyplaces.state import SuggestionListState

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class AddressAutocomplete:
    """One mounted address-entry widget.

    Owns every per-instance handle: the oracle (built lazily on first
    lookup), the session token, the debounce and blur timers, in-flight
    lookups and the list state. Nothing is shared between instances.

    Usage::

        async with AddressAutocomplete(config, on_place_selected=draft.accept) as widget:
            widget.on_input("Dlouhá 5")
            ...
            await widget.select(widget.snapshot.candidates[0])
    """

    def __init__(
        self,
        config: PlacesConfig,
        *,
        oracle: PlaceOracle | None = None,
        session: aiohttp.ClientSession | None = None,
        on_place_selected: AddressIntake | None = None,
        on_state_change: Callable[[ListSnapshot], None] | None = None,
        initial_text: str = "",
    ) -> None:
        if oracle is None and not config.disable_network and not config.api_key:
            raise PlacesConfigError("api_key is required unless disable_network is set or an oracle is injected")

        self._config = config
        self._oracle_handle = oracle
        self._external_session = session is not None
        self._http_session = session
        self._on_state_change = on_state_change
        self._text = initial_text
        self._closed = False
        self._tasks: set[asyncio.Task[Any]] = set()
        self._blur_timer: asyncio.TimerHandle | None = None

        self._tokens = SessionTokenManager()
        self._state = SuggestionListState()
        self._fetcher = SuggestionFetcher(self._oracle)
        self._resolver = SelectionResolver(
            oracle=self._oracle,
            tokens=self._tokens,
            clear_list=self._clear_list,
            on_resolved=on_place_selected,
        )
        self._gate = DebouncedInputGate(
            on_query=self._on_query,
            on_clear=self._clear_list,
            on_bypass=self._on_bypass if config.disable_network else None,
            delay=config.debounce_delay,
            min_length=config.min_query_length,
        )

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> AddressAutocomplete:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Dispose the widget. Safe to call more than once.

        Timers are cancelled first and unconditionally, so no settle or
        blur callback can fire against a disposed widget even if the rest
        of the teardown fails.
        """
        self._closed = True
        try:
            self._gate.close()
            self._cancel_blur()
        finally:
            tasks = list(self._tasks)
            for task in tasks:
                task.cancel()
            if tasks:
                await asyncio.gather(*tasks, return_exceptions=True)
            self._tasks.clear()
            if not self._external_session and self._http_session is not None:
                await self._http_session.close()
                self._http_session = None

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        """Current input value."""
        return self._text

    @property
    def snapshot(self) -> ListSnapshot:
        return self._state.snapshot()

    @property
    def session_token(self) -> SessionToken:
        """The live session token (issued on first access)."""
        return self._tokens.current()

    @property
    def tokens(self) -> SessionTokenManager:
        return self._tokens

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def phase(self) -> WidgetPhase:
        if self._closed:
            return WidgetPhase.IDLE
        if self._resolver.in_flight:
            return WidgetPhase.RESOLVING
        if self._gate.is_pending:
            return WidgetPhase.DEBOUNCING
        if self._state.is_loading:
            return WidgetPhase.FETCHING
        if self._state.is_open:
            return WidgetPhase.OPEN
        return WidgetPhase.IDLE

    # ------------------------------------------------------------------
    # User events
    # ------------------------------------------------------------------

    def on_input(self, text: str) -> None:
        """Keystroke: update the value and restart the quiet window."""
        if self._closed:
            return
        self._text = text
        self._cancel_blur()
        self._gate.on_input(text)

    def on_focus(self) -> None:
        """Reopen the kept suggestions when the input regains focus."""
        if self._closed:
            return
        self._cancel_blur()
        if len(self._text) >= self._config.min_query_length and self._state.reopen():
            self._notify()

    def on_blur(self) -> None:
        """Close the list shortly after focus is lost.

        The delay lets a click on a candidate land before the list goes away.
        """
        if self._closed:
            return
        self._cancel_blur()
        loop = asyncio.get_running_loop()
        self._blur_timer = loop.call_later(self._config.blur_close_delay, self._close_on_blur)

    def select(self, candidate: Candidate) -> asyncio.Task[AddressRecord]:
        """Pick *candidate*; resolution runs in the background.

        The returned task may be awaited for the resulting record.
        """
        if self._closed:
            raise PlacesError("Widget is closed")
        self._text = candidate.description
        self._cancel_blur()
        if self._config.disable_network:
            self._clear_list()
            return self._spawn(self._resolver.on_text(candidate.description))
        return self._spawn(self._resolver.on_select(candidate))

    def reset(self) -> None:
        """Drop pending input, clear the list and force a fresh session."""
        if self._closed:
            return
        self._gate.cancel()
        self._cancel_blur()
        self._text = ""
        self._clear_list()
        self._tokens.rotate()

    async def wait_idle(self) -> None:
        """Wait until no lookup or resolution task is running."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _oracle(self) -> PlaceOracle:
        if self._oracle_handle is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            transport = HttpTransport(
                self._config.base_url,
                self._http_session,
                timeout=self._config.request_timeout,
                trace=self._config.api_trace_enabled,
            )
            self._oracle_handle = PlacesOracle(self._config, transport)
        return self._oracle_handle

    def _spawn(self, coro: Coroutine[Any, Any, T]) -> asyncio.Task[T]:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _notify(self) -> None:
        if self._on_state_change is None:
            return
        try:
            self._on_state_change(self._state.snapshot())
        except Exception:
            _logger.debug("on_state_change callback failed", exc_info=True)

    def _clear_list(self) -> None:
        self._state.on_clear()
        self._notify()

    def _on_query(self, query: Query) -> None:
        token = self._tokens.current()
        self._state.on_query_issued(query)
        self._notify()
        self._spawn(self._run_fetch(query, token))

    async def _run_fetch(self, query: Query, token: SessionToken) -> None:
        candidates = await self._fetcher.fetch(query, token)
        if self._closed:
            return
        if self._state.on_result(query, candidates):
            self._notify()

    def _on_bypass(self, text: str) -> None:
        self._spawn(self._resolver.on_text(text))

    def _close_on_blur(self) -> None:
        self._blur_timer = None
        if self._state.close():
            self._notify()

    def _cancel_blur(self) -> None:
        timer = self._blur_timer
        self._blur_timer = None
        if timer is not None:
            timer.cancel()
