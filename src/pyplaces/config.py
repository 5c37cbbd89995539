"""Client configuration for pyplaces."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyplaces._constants import (
    BASE_URL,
    BLUR_CLOSE_DELAY_S,
    DEBOUNCE_DELAY_S,
    DEFAULT_COUNTRIES,
    DEFAULT_PLACE_TYPES,
    MIN_QUERY_LENGTH,
)


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_list(value: str) -> tuple[str, ...]:
    return tuple(part.strip().lower() for part in value.split(",") if part.strip())


@dataclasses.dataclass(frozen=True)
class PlacesConfig:
    """Widget and client configuration.

    Parameters
    ----------
    api_key : str or None
        Place directory API key. Required unless ``disable_network`` is
        set or an oracle is injected into the widget.
    base_url : str
        Place directory web-service root.
    countries : tuple of str
        ISO country codes suggestions are restricted to.
    place_types : tuple of str
        Place type filter sent with every suggestion query.
    language : str
        Language of descriptions and formatted addresses.
    region : str
        Region bias (ccTLD).
    debounce_delay : float
        Quiet window in seconds before a keystroke burst settles.
    min_query_length : int
        Settled text shorter than this never reaches the oracle.
    blur_close_delay : float
        Seconds between losing focus and closing the list.
    request_timeout : float
        Total timeout for one oracle or store HTTP request.
    disable_network : bool
        Bypass the oracle entirely; every settled text is forwarded as a
        bare address without coordinates.
    store_url : str or None
        Base URL of the property store routes.
    store_cookie : str or None
        Opaque session cookie forwarded to the property store.
    api_trace_enabled : bool
        Log redacted request/response bodies at DEBUG.
    """

    api_key: str | None = None
    base_url: str = BASE_URL
    countries: tuple[str, ...] = DEFAULT_COUNTRIES
    place_types: tuple[str, ...] = DEFAULT_PLACE_TYPES
    language: str = "cs"
    region: str = "cz"
    debounce_delay: float = DEBOUNCE_DELAY_S
    min_query_length: int = MIN_QUERY_LENGTH
    blur_close_delay: float = BLUR_CLOSE_DELAY_S
    request_timeout: float = 10.0
    disable_network: bool = False
    store_url: str | None = None
    store_cookie: str | None = None
    api_trace_enabled: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> PlacesConfig:
        """Create configuration from environment variables.

        Reads ``PLACES_API_KEY`` and the optional ``PLACES_*`` /
        ``PROPERTY_STORE_*`` variables. Explicit keyword arguments
        override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        PlacesConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "PLACES_API_KEY": "api_key",
            "PLACES_BASE_URL": "base_url",
            "PLACES_LANGUAGE": "language",
            "PLACES_REGION": "region",
            "PROPERTY_STORE_URL": "store_url",
            "PROPERTY_STORE_COOKIE": "store_cookie",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        countries_env = env.get("PLACES_COUNTRIES")
        if countries_env is not None and "countries" not in overrides:
            config_kwargs["countries"] = _env_list(countries_env)

        # numeric fields, handle separately
        delay_env = env.get("PLACES_DEBOUNCE_DELAY")
        if delay_env is not None and "debounce_delay" not in overrides:
            config_kwargs["debounce_delay"] = float(delay_env)

        min_len_env = env.get("PLACES_MIN_QUERY_LENGTH")
        if min_len_env is not None and "min_query_length" not in overrides:
            config_kwargs["min_query_length"] = int(min_len_env)

        timeout_env = env.get("PLACES_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = float(timeout_env)

        if "disable_network" not in overrides:
            config_kwargs["disable_network"] = _env_bool(env.get("PLACES_DISABLE_NETWORK"), False)

        if "api_trace_enabled" not in overrides:
            config_kwargs["api_trace_enabled"] = _env_bool(
                env.get("PLACES_API_TRACE_ENABLED"),
                False,
            )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
