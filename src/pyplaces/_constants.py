"""Internal constants shared across the library."""

BASE_URL = "https://maps.googleapis.com/maps/api/place"
USER_AGENT = "pyplaces/aiohttp"

AUTOCOMPLETE_ENDPOINT = "/autocomplete/json"
DETAILS_ENDPOINT = "/details/json"

#: Fields requested from the detail lookup.  Billing is per field group,
#: so only what the canonical address record needs is asked for.
DETAIL_FIELDS: tuple[str, ...] = ("formatted_address", "geometry", "address_component", "place_id")

DEFAULT_COUNTRIES: tuple[str, ...] = ("cz", "sk")
DEFAULT_PLACE_TYPES: tuple[str, ...] = ("address",)

# ------------------------------------------------------------------
# Input gate timing
# ------------------------------------------------------------------

DEBOUNCE_DELAY_S = 0.35
BLUR_CLOSE_DELAY_S = 0.15
MIN_QUERY_LENGTH = 3

# ------------------------------------------------------------------
# Oracle status codes
# ------------------------------------------------------------------

STATUS_OK = "OK"
STATUS_ZERO_RESULTS = "ZERO_RESULTS"
STATUS_REQUEST_DENIED = "REQUEST_DENIED"
STATUS_OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"

# ------------------------------------------------------------------
# Property store routes
# ------------------------------------------------------------------

PROPERTIES_ENDPOINT = "/api/properties"
DB_HEALTH_ENDPOINT = "/api/db-health"

# Minimum stripped address length accepted by the listing wizard.
MIN_ADDRESS_LENGTH = 5
MIN_AREA_SQM = 5
