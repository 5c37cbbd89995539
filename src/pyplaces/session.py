"""Session token lifecycle for one widget instance."""

from __future__ import annotations

import logging

from pyplaces.models.token import SessionToken

_logger = logging.getLogger(__name__)


class SessionTokenManager:
    """Issue and rotate the token that groups queries into one billed session.

    The directory bills a run of suggestion queries plus one detail lookup
    as a single session when they share a token. Exactly one token is live
    at a time. It is created lazily on first use and replaced on every
    terminal event (a finished detail attempt or an explicit reset).

    A session the user abandons without selecting is never rotated here;
    the token simply stays live until the next terminal event.
    """

    def __init__(self) -> None:
        self._token: SessionToken | None = None
        self._rotations = 0

    def current(self) -> SessionToken:
        """Return the live token, creating one on first call."""
        if self._token is None:
            self._token = SessionToken()
            _logger.debug("Session token issued")
        return self._token

    def rotate(self) -> SessionToken:
        """Discard the live token and issue a fresh one."""
        self._token = SessionToken()
        self._rotations += 1
        _logger.debug("Session token rotated (rotation=%d)", self._rotations)
        return self._token

    @property
    def rotations(self) -> int:
        """Number of rotations since construction."""
        return self._rotations

    @property
    def has_token(self) -> bool:
        return self._token is not None
