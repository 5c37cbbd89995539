"""Custom exception hierarchy for pyplaces."""

from __future__ import annotations


class PlacesError(Exception):
    """Base exception for all pyplaces errors."""


class PlacesConfigError(PlacesError):
    """Invalid or missing configuration."""


class PlacesTransportError(PlacesError):
    """HTTP-level failure (network, timeout, non-200, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class PlacesApiError(PlacesError):
    """The place directory answered with a non-OK status or an unusable body."""

    def __init__(
        self,
        message: str,
        *,
        status: str = "",
        endpoint: str = "",
    ) -> None:
        self.status = status
        self.endpoint = endpoint
        super().__init__(message)


class PlacesRequestDeniedError(PlacesApiError):
    """Request rejected (``REQUEST_DENIED``), usually a bad or restricted API key."""


class PlacesQuotaError(PlacesApiError):
    """Quota exhausted (``OVER_QUERY_LIMIT``).

    Not retried: the widget simply shows no suggestions until the next
    settled input.
    """


class PropertyStoreError(PlacesError):
    """Property store route returned a non-2xx response."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class PropertyStoreAuthError(PropertyStoreError):
    """Property store rejected the request as unauthenticated (HTTP 401)."""
