"""Async client for the property store routes."""

from __future__ import annotations

from typing import Any

import aiohttp

from pyplaces._api import properties as _properties_api
from pyplaces._transport import HttpTransport
from pyplaces.config import PlacesConfig
from pyplaces.exceptions import PlacesConfigError, PlacesError
from pyplaces.models.place import Coordinates
from pyplaces.models.property import PropertyDraft, PropertyParams, SavedProperty


class PropertyStoreClient:
    """Create, list and delete property records.

    Identity is handled elsewhere: the client only forwards the opaque
    session cookie from ``config.store_cookie``.

    Usage::

        async with PropertyStoreClient(config) as store:
            await store.submit(record.formatted_address, record.coordinates, params)
            items = await store.list_properties()
    """

    def __init__(
        self,
        config: PlacesConfig,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        if not config.store_url:
            raise PlacesConfigError("store_url is required for the property store client")
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: HttpTransport | None = None

    async def __aenter__(self) -> PropertyStoreClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        headers = {"cookie": self._config.store_cookie} if self._config.store_cookie else None
        self._transport = HttpTransport(
            self._config.store_url or "",
            self._http_session,
            timeout=self._config.request_timeout,
            headers=headers,
            trace=self._config.api_trace_enabled,
        )
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    def _require_transport(self) -> HttpTransport:
        if self._transport is None:
            raise PlacesError("Client not initialized. Use 'async with PropertyStoreClient(...) as store:'")
        return self._transport

    async def submit(
        self,
        address: str,
        coordinates: Coordinates | None,
        attributes: PropertyParams,
    ) -> SavedProperty:
        """Intake contract: store one property record."""
        return await _properties_api.create_property(self._require_transport(), address, coordinates, attributes)

    async def submit_draft(self, draft: PropertyDraft) -> SavedProperty:
        """Store a completed wizard draft.

        Raises ``ValueError`` if the draft is not ready to submit.
        """
        if not draft.can_submit:
            raise ValueError("Draft is incomplete: address, layout and area are required")
        return await self.submit(draft.address, draft.coords, draft.params)

    async def list_properties(self) -> list[SavedProperty]:
        return await _properties_api.list_properties(self._require_transport())

    async def delete_property(self, property_id: str) -> None:
        await _properties_api.delete_property(self._require_transport(), property_id)

    async def health(self) -> bool:
        """Whether the store reports its database as reachable."""
        return await _properties_api.check_health(self._require_transport())
