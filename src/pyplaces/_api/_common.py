"""Shared helpers for place directory endpoint modules.

- building the parameters every directory request carries
- mapping directory status codes onto the exception hierarchy

It is internal to pyplaces and may change at any time.
"""

from __future__ import annotations

from typing import Any

from pyplaces._constants import (
    STATUS_OK,
    STATUS_OVER_QUERY_LIMIT,
    STATUS_REQUEST_DENIED,
    STATUS_ZERO_RESULTS,
)
from pyplaces.config import PlacesConfig
from pyplaces.exceptions import PlacesApiError, PlacesQuotaError, PlacesRequestDeniedError
from pyplaces.models.token import SessionToken


def build_base_params(config: PlacesConfig, token: SessionToken) -> dict[str, str]:
    """Parameters shared by suggestion and detail requests."""
    params: dict[str, str] = {
        "sessiontoken": token.id,
        "language": config.language,
    }
    if config.api_key:
        params["key"] = config.api_key
    return params


def check_status(body: dict[str, Any], *, endpoint: str, allow_zero_results: bool = False) -> bool:
    """Raise for a non-OK directory status.

    Returns ``False`` when the status is ``ZERO_RESULTS`` and
    *allow_zero_results* is set, ``True`` for ``OK``.
    """
    status = str(body.get("status") or "")
    if status == STATUS_OK:
        return True
    if status == STATUS_ZERO_RESULTS and allow_zero_results:
        return False

    message = body.get("error_message") or body.get("errorMessage") or ""
    text = f"{endpoint} failed: status={status or '<missing>'} message={message}"
    if status == STATUS_REQUEST_DENIED:
        raise PlacesRequestDeniedError(text, status=status, endpoint=endpoint)
    if status == STATUS_OVER_QUERY_LIMIT:
        raise PlacesQuotaError(text, status=status, endpoint=endpoint)
    raise PlacesApiError(text, status=status, endpoint=endpoint)
