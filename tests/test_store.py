from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from pyplaces._api import properties as properties_api
from pyplaces.config import PlacesConfig
from pyplaces.exceptions import PlacesConfigError, PlacesError, PropertyStoreAuthError, PropertyStoreError
from pyplaces.models.place import Coordinates
from pyplaces.models.property import PropertyDraft, PropertyParams
from pyplaces.store import PropertyStoreClient

_ROW = {
    "id": "prop-1",
    "address": "Dlouhá 5, Praha",
    "latitude": 50.09,
    "longitude": 14.42,
    "layout": "2+kk",
    "areaSqm": 65,
    "createdAt": "2025-11-02T10:00:00.000Z",
}


class _FakeStoreTransport:
    def __init__(self, responses: dict[tuple[str, str], tuple[int, Any]]) -> None:
        self.responses = responses
        self.calls: list[tuple[str, str, Any]] = []

    async def request_json(
        self,
        method: str,
        endpoint: str,
        payload: Mapping[str, Any] | None = None,
    ) -> tuple[int, Any]:
        self.calls.append((method, endpoint, payload))
        return self.responses[(method, endpoint)]


def test_create_payload_omits_missing_coordinates() -> None:
    payload = properties_api.build_create_payload("Dlouhá 5", None, PropertyParams(layout="1+1", area_sqm=30))

    assert "coords" not in payload
    assert payload["params"]["layout"] == "1+1"
    assert payload["params"]["areaSqm"] == 30.0


@pytest.mark.asyncio
async def test_create_property_posts_address_coords_and_params() -> None:
    transport = _FakeStoreTransport({("POST", "/api/properties"): (201, _ROW)})

    saved = await properties_api.create_property(
        transport,
        "Dlouhá 5, Praha",
        Coordinates(lat=50.09, lng=14.42),
        PropertyParams(layout="2+kk", area_sqm=65),
    )

    method, endpoint, payload = transport.calls[0]
    assert (method, endpoint) == ("POST", "/api/properties")
    assert payload["address"] == "Dlouhá 5, Praha"
    assert payload["coords"] == {"lat": 50.09, "lng": 14.42}
    assert saved.id == "prop-1"
    assert saved.coords == Coordinates(lat=50.09, lng=14.42)


@pytest.mark.asyncio
async def test_unauthorized_maps_to_auth_error() -> None:
    transport = _FakeStoreTransport({("GET", "/api/properties"): (401, {"error": "Unauthorized"})})

    with pytest.raises(PropertyStoreAuthError) as info:
        await properties_api.list_properties(transport)
    assert info.value.status_code == 401
    assert "Unauthorized" in str(info.value)


@pytest.mark.asyncio
async def test_server_error_maps_to_store_error() -> None:
    transport = _FakeStoreTransport({("DELETE", "/api/properties/prop%2F1"): (500, {"error": "db down"})})

    with pytest.raises(PropertyStoreError) as info:
        await properties_api.delete_property(transport, "prop/1")
    assert info.value.status_code == 500


@pytest.mark.asyncio
async def test_list_properties_skips_malformed_rows() -> None:
    transport = _FakeStoreTransport({("GET", "/api/properties"): (200, [_ROW, {"address": "no id"}])})

    items = await properties_api.list_properties(transport)

    assert [item.id for item in items] == ["prop-1"]


@pytest.mark.asyncio
async def test_health_reads_status_field() -> None:
    ok = _FakeStoreTransport({("GET", "/api/db-health"): (200, {"status": "ok", "result": [{"ok": 1}]})})
    down = _FakeStoreTransport({("GET", "/api/db-health"): (500, {"status": "error", "message": "x"})})

    assert await properties_api.check_health(ok) is True
    assert await properties_api.check_health(down) is False


def test_store_client_requires_url() -> None:
    with pytest.raises(PlacesConfigError):
        PropertyStoreClient(PlacesConfig())


@pytest.mark.asyncio
async def test_store_client_outside_context_raises() -> None:
    store = PropertyStoreClient(PlacesConfig(store_url="http://store.test"))

    with pytest.raises(PlacesError):
        await store.list_properties()


@pytest.mark.asyncio
async def test_submit_draft_rejects_incomplete_draft() -> None:
    store = PropertyStoreClient(PlacesConfig(store_url="http://store.test"))

    with pytest.raises(ValueError):
        await store.submit_draft(PropertyDraft())
