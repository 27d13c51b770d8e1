"""MapQuest geocoding provider.

Forward and reverse geocoding against the open or licensed MapQuest
geocoding API, returning normalized Address results.

    from mapquest_geocoder import GeocodeQuery, get_container

    geocoder = get_container().geocoder
    addresses = geocoder.geocode(GeocodeQuery("10 avenue Gambetta, Paris"))
"""

from .adapters.geocoding import MapQuestGeocoderAdapter
from .adapters.http import RequestsHttpClient
from .container import Container, get_container, reset_container
from .domain import (
    Address,
    AdminLevel,
    GeocodeQuery,
    GeocodingError,
    GeocodingErrorKind,
    GeoLocation,
    InvalidCredentialsError,
    InvalidServerResponseError,
    ResultDefaults,
    ReverseQuery,
    UnsupportedOperationError,
    ZeroResultsError,
)
from .logging_config import configure_logging

__all__ = [
    "MapQuestGeocoderAdapter",
    "RequestsHttpClient",
    "Container",
    "get_container",
    "reset_container",
    "Address",
    "AdminLevel",
    "GeocodeQuery",
    "GeoLocation",
    "ResultDefaults",
    "ReverseQuery",
    "GeocodingError",
    "GeocodingErrorKind",
    "InvalidCredentialsError",
    "InvalidServerResponseError",
    "UnsupportedOperationError",
    "ZeroResultsError",
    "configure_logging",
]
