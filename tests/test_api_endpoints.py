from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from pyplaces._api.autocomplete import build_autocomplete_params, fetch_candidates, parse_autocomplete_response
from pyplaces._api.details import build_details_params, fetch_place_detail
from pyplaces.config import PlacesConfig
from pyplaces.exceptions import PlacesApiError, PlacesQuotaError, PlacesRequestDeniedError
from pyplaces.models.token import SessionToken
from pyplaces.oracle import PlacesOracle


class _FakeTransport:
    def __init__(self, body: dict[str, Any]) -> None:
        self.body = body
        self.calls: list[tuple[str, dict[str, str]]] = []

    async def get_json(self, endpoint: str, params: Mapping[str, str]) -> dict[str, Any]:
        self.calls.append((endpoint, dict(params)))
        return self.body


def _config() -> PlacesConfig:
    return PlacesConfig(api_key="AIza-test")


def test_autocomplete_params_carry_restrictions_and_token() -> None:
    token = SessionToken(id="tok-1")

    params = build_autocomplete_params(_config(), "Dlouhá 5", token)

    assert params == {
        "input": "Dlouhá 5",
        "sessiontoken": "tok-1",
        "key": "AIza-test",
        "language": "cs",
        "types": "address",
        "components": "country:cz|country:sk",
        "region": "cz",
    }


def test_details_params_request_address_geometry_and_components() -> None:
    params = build_details_params(_config(), "ChIJ1", SessionToken(id="tok-1"))

    assert params["place_id"] == "ChIJ1"
    assert params["sessiontoken"] == "tok-1"
    assert params["fields"] == "formatted_address,geometry,address_component,place_id"


def test_zero_results_is_empty_list() -> None:
    assert parse_autocomplete_response({"status": "ZERO_RESULTS", "predictions": []}) == []


def test_malformed_predictions_are_skipped() -> None:
    candidates = parse_autocomplete_response(
        {
            "status": "OK",
            "predictions": [
                {"description": "Dlouhá 5, Praha", "place_id": "p1"},
                {"description": "no id"},
                {"description": "Dlouhá 5, Brno", "place_id": "p2"},
            ],
        }
    )

    assert [c.external_id for c in candidates] == ["p1", "p2"]


@pytest.mark.parametrize(
    ("status", "exc_type"),
    [
        ("REQUEST_DENIED", PlacesRequestDeniedError),
        ("OVER_QUERY_LIMIT", PlacesQuotaError),
        ("INVALID_REQUEST", PlacesApiError),
        ("", PlacesApiError),
    ],
)
def test_non_ok_status_maps_to_exception(status: str, exc_type: type[PlacesApiError]) -> None:
    with pytest.raises(exc_type) as info:
        parse_autocomplete_response({"status": status, "error_message": "nope"})
    assert info.value.endpoint == "/autocomplete/json"


@pytest.mark.asyncio
async def test_fetch_candidates_uses_transport() -> None:
    transport = _FakeTransport({"status": "OK", "predictions": [{"description": "Dlouhá 5, Praha", "place_id": "p1"}]})

    candidates = await fetch_candidates(_config(), transport, "Dlouhá 5", SessionToken(id="tok-1"))

    assert [c.description for c in candidates] == ["Dlouhá 5, Praha"]
    assert transport.calls[0][0] == "/autocomplete/json"


@pytest.mark.asyncio
async def test_fetch_place_detail_parses_result() -> None:
    transport = _FakeTransport(
        {
            "status": "OK",
            "result": {
                "formatted_address": "Dlouhá 730/5, Praha 1",
                "place_id": "p1",
                "geometry": {"location": {"lat": 50.09, "lng": 14.42}},
            },
        }
    )

    detail = await fetch_place_detail(_config(), transport, "p1", SessionToken(id="tok-1"))

    assert detail.formatted_address == "Dlouhá 730/5, Praha 1"
    assert detail.coordinates is not None and detail.coordinates.lat == 50.09


@pytest.mark.asyncio
async def test_detail_zero_results_is_an_error() -> None:
    oracle = PlacesOracle(_config(), _FakeTransport({"status": "ZERO_RESULTS"}))

    with pytest.raises(PlacesApiError):
        await oracle.details("p1", SessionToken(id="tok-1"))


@pytest.mark.asyncio
async def test_detail_without_result_object_is_an_error() -> None:
    oracle = PlacesOracle(_config(), _FakeTransport({"status": "OK"}))

    with pytest.raises(PlacesApiError):
        await oracle.details("p1", SessionToken(id="tok-1"))
