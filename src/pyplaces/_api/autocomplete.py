"""Suggestion query endpoint.

Endpoint:
  - /autocomplete/json
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from pyplaces._api._common import build_base_params, check_status
from pyplaces._constants import AUTOCOMPLETE_ENDPOINT
from pyplaces._transport import Transport
from pyplaces.config import PlacesConfig
from pyplaces.exceptions import PlacesApiError
from pyplaces.models.query import Candidate
from pyplaces.models.token import SessionToken

_logger = logging.getLogger(__name__)


def build_autocomplete_params(config: PlacesConfig, text: str, token: SessionToken) -> dict[str, str]:
    params = build_base_params(config, token)
    params["input"] = text
    if config.place_types:
        params["types"] = "|".join(config.place_types)
    if config.countries:
        params["components"] = "|".join(f"country:{code}" for code in config.countries)
    if config.region:
        params["region"] = config.region
    return params


def parse_autocomplete_response(body: dict[str, Any]) -> list[Candidate]:
    """Parse predictions into candidates, keeping directory order.

    Predictions without a description or id are skipped rather than
    failing the whole list.
    """
    if not check_status(body, endpoint=AUTOCOMPLETE_ENDPOINT, allow_zero_results=True):
        return []

    predictions = body.get("predictions")
    if not isinstance(predictions, list):
        raise PlacesApiError(
            "Suggestion response has no predictions list",
            status=str(body.get("status") or ""),
            endpoint=AUTOCOMPLETE_ENDPOINT,
        )

    candidates: list[Candidate] = []
    for prediction in predictions:
        try:
            candidates.append(Candidate.model_validate(prediction))
        except ValidationError:
            _logger.debug("Skipping malformed prediction: %r", prediction)
    return candidates


async def fetch_candidates(
    config: PlacesConfig,
    transport: Transport,
    text: str,
    token: SessionToken,
) -> list[Candidate]:
    """Query the directory for suggestions matching *text*."""
    params = build_autocomplete_params(config, text, token)
    body = await transport.get_json(AUTOCOMPLETE_ENDPOINT, params)
    return parse_autocomplete_response(body)
