"""pyplaces - Async address autocomplete session over a place directory."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyplaces")
except PackageNotFoundError:
    __version__ = "0+local"
from pyplaces.config import PlacesConfig
from pyplaces.exceptions import (
    PlacesApiError,
    PlacesConfigError,
    PlacesError,
    PlacesQuotaError,
    PlacesRequestDeniedError,
    PlacesTransportError,
    PropertyStoreAuthError,
    PropertyStoreError,
)
from pyplaces.models import (
    AddressComponent,
    AddressRecord,
    Candidate,
    Coordinates,
    ListSnapshot,
    PlaceDetail,
    PropertyCondition,
    PropertyDraft,
    PropertyParams,
    Query,
    SavedProperty,
    SessionToken,
    WidgetPhase,
)
from pyplaces.oracle import PlaceOracle, PlacesOracle
from pyplaces.store import PropertyStoreClient
from pyplaces.widget import AddressAutocomplete

__all__ = [
    "__version__",
    "AddressAutocomplete",
    "AddressComponent",
    "AddressRecord",
    "Candidate",
    "Coordinates",
    "ListSnapshot",
    "PlaceDetail",
    "PlaceOracle",
    "PlacesApiError",
    "PlacesConfig",
    "PlacesConfigError",
    "PlacesError",
    "PlacesOracle",
    "PlacesQuotaError",
    "PlacesRequestDeniedError",
    "PlacesTransportError",
    "PropertyCondition",
    "PropertyDraft",
    "PropertyParams",
    "PropertyStoreAuthError",
    "PropertyStoreClient",
    "PropertyStoreError",
    "Query",
    "SavedProperty",
    "SessionToken",
    "WidgetPhase",
]
