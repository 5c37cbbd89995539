"""Place detail endpoint.

Endpoint:
  - /details/json
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from pyplaces._api._common import build_base_params, check_status
from pyplaces._constants import DETAIL_FIELDS, DETAILS_ENDPOINT
from pyplaces._transport import Transport
from pyplaces.config import PlacesConfig
from pyplaces.exceptions import PlacesApiError
from pyplaces.models.place import PlaceDetail
from pyplaces.models.token import SessionToken


def build_details_params(config: PlacesConfig, external_id: str, token: SessionToken) -> dict[str, str]:
    params = build_base_params(config, token)
    params["place_id"] = external_id
    params["fields"] = ",".join(DETAIL_FIELDS)
    return params


def parse_details_response(body: dict[str, Any]) -> PlaceDetail:
    check_status(body, endpoint=DETAILS_ENDPOINT)

    result = body.get("result")
    if not isinstance(result, dict):
        raise PlacesApiError(
            "Detail response has no result object",
            status=str(body.get("status") or ""),
            endpoint=DETAILS_ENDPOINT,
        )
    try:
        return PlaceDetail.model_validate(result)
    except ValidationError as exc:
        raise PlacesApiError(
            f"Unparseable place detail: {exc.error_count()} error(s)",
            status=str(body.get("status") or ""),
            endpoint=DETAILS_ENDPOINT,
        ) from exc


async def fetch_place_detail(
    config: PlacesConfig,
    transport: Transport,
    external_id: str,
    token: SessionToken,
) -> PlaceDetail:
    """Look up full detail for a picked candidate."""
    params = build_details_params(config, external_id, token)
    body = await transport.get_json(DETAILS_ENDPOINT, params)
    return parse_details_response(body)
