"""Property store routes.

Endpoints:
  - POST   /api/properties          (create)
  - GET    /api/properties          (list, newest first)
  - DELETE /api/properties/{id}     (delete)
  - GET    /api/db-health
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from pydantic import ValidationError

from pyplaces._constants import DB_HEALTH_ENDPOINT, PROPERTIES_ENDPOINT
from pyplaces._transport import Transport
from pyplaces.exceptions import PropertyStoreAuthError, PropertyStoreError
from pyplaces.models.place import Coordinates
from pyplaces.models.property import PropertyParams, SavedProperty

_logger = logging.getLogger(__name__)


def _raise_for_status(status: int, body: Any, *, endpoint: str) -> None:
    if 200 <= status < 300:
        return
    detail = body.get("error") or body.get("message") if isinstance(body, dict) else None
    message = f"{endpoint} failed: HTTP {status}" + (f" ({detail})" if detail else "")
    if status == 401:
        raise PropertyStoreAuthError(message, status_code=status)
    raise PropertyStoreError(message, status_code=status)


def build_create_payload(
    address: str,
    coordinates: Coordinates | None,
    attributes: PropertyParams,
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "address": address,
        "params": attributes.to_payload(),
    }
    if coordinates is not None:
        payload["coords"] = {"lat": coordinates.lat, "lng": coordinates.lng}
    return payload


async def create_property(
    transport: Transport,
    address: str,
    coordinates: Coordinates | None,
    attributes: PropertyParams,
) -> SavedProperty:
    payload = build_create_payload(address, coordinates, attributes)
    status, body = await transport.request_json("POST", PROPERTIES_ENDPOINT, payload)
    _raise_for_status(status, body, endpoint=PROPERTIES_ENDPOINT)
    try:
        return SavedProperty.model_validate(body)
    except ValidationError as exc:
        raise PropertyStoreError(f"Unparseable created property: {exc.error_count()} error(s)") from exc


async def list_properties(transport: Transport) -> list[SavedProperty]:
    status, body = await transport.request_json("GET", PROPERTIES_ENDPOINT)
    _raise_for_status(status, body, endpoint=PROPERTIES_ENDPOINT)
    if not isinstance(body, list):
        raise PropertyStoreError(f"{PROPERTIES_ENDPOINT} did not return a list", status_code=status)

    items: list[SavedProperty] = []
    for row in body:
        try:
            items.append(SavedProperty.model_validate(row))
        except ValidationError:
            _logger.debug("Skipping malformed property row: %r", row)
    return items


async def delete_property(transport: Transport, property_id: str) -> None:
    endpoint = f"{PROPERTIES_ENDPOINT}/{quote(property_id, safe='')}"
    status, body = await transport.request_json("DELETE", endpoint)
    _raise_for_status(status, body, endpoint=endpoint)


async def check_health(transport: Transport) -> bool:
    status, body = await transport.request_json("GET", DB_HEALTH_ENDPOINT)
    return status == 200 and isinstance(body, dict) and body.get("status") == "ok"
