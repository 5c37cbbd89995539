"""HTTP transport shared by the oracle and the property store clients."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pyplaces._constants import USER_AGENT
from pyplaces._redact import redact_for_log, redact_url
from pyplaces.exceptions import PlacesTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, endpoint: str, params: Mapping[str, str]) -> dict[str, Any]:
        ...

    async def request_json(
        self,
        method: str,
        endpoint: str,
        payload: Mapping[str, Any] | None = None,
    ) -> tuple[int, Any]:
        ...


class HttpTransport:
    """JSON-over-HTTP transport bound to one base URL."""

    def __init__(
        self,
        base_url: str,
        http_session: aiohttp.ClientSession,
        *,
        timeout: float = 10.0,
        headers: Mapping[str, str] | None = None,
        trace: bool = False,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._headers: dict[str, str] = {
            "accept": "application/json",
            "user-agent": USER_AGENT,
        }
        if headers:
            self._headers.update(headers)
        self._trace = trace

    def _decode(self, endpoint: str, text: str) -> Any:
        if not text.strip():
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise PlacesTransportError(
                f"Invalid JSON from {endpoint}: {text[:200]}",
                endpoint=endpoint,
            ) from exc

    async def _send(
        self,
        method: str,
        endpoint: str,
        *,
        params: Mapping[str, str] | None = None,
        payload: Mapping[str, Any] | None = None,
    ) -> tuple[int, str]:
        url = f"{self._base_url}{endpoint}"
        _logger.debug("%s %s", method, redact_url(url))
        if self._trace:
            _logger.debug("request params=%s body=%s", redact_for_log(params), redact_for_log(payload))

        try:
            async with self._http.request(
                method,
                url,
                params=params,
                json=payload,
                headers=self._headers,
                timeout=self._timeout,
            ) as resp:
                status = resp.status
                try:
                    text = await resp.text()
                except (UnicodeDecodeError, LookupError) as exc:
                    raise PlacesTransportError(
                        f"Undecodable response body from {endpoint}",
                        status_code=status,
                        endpoint=endpoint,
                    ) from exc
        except aiohttp.ClientError as exc:
            raise PlacesTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc
        except asyncio.TimeoutError as exc:
            raise PlacesTransportError(
                f"Request to {endpoint} timed out",
                endpoint=endpoint,
            ) from exc

        if self._trace:
            _logger.debug("response status=%d body=%s", status, redact_for_log(text))
        return status, text

    async def get_json(self, endpoint: str, params: Mapping[str, str]) -> dict[str, Any]:
        """GET *endpoint* and return the decoded JSON object.

        Anything but HTTP 200 with a JSON object body is a
        :class:`PlacesTransportError`.
        """
        status, text = await self._send("GET", endpoint, params=params)
        if status != 200:
            raise PlacesTransportError(
                f"HTTP {status} from {endpoint}: {text[:200]}",
                status_code=status,
                endpoint=endpoint,
            )
        body = self._decode(endpoint, text)
        if not isinstance(body, dict):
            raise PlacesTransportError(
                f"Expected a JSON object from {endpoint}",
                status_code=status,
                endpoint=endpoint,
            )
        return body

    async def request_json(
        self,
        method: str,
        endpoint: str,
        payload: Mapping[str, Any] | None = None,
    ) -> tuple[int, Any]:
        """Send *payload* and return ``(status, decoded body)`` without judging the status."""
        status, text = await self._send(method, endpoint, payload=payload)
        return status, self._decode(endpoint, text)
