"""Domain layer - Core models and errors.

This module contains immutable query/result models and typed errors
used throughout the geocoder.
"""

from .errors import (
    ConfigurationError,
    GeocodingError,
    GeocodingErrorKind,
    InvalidCredentialsError,
    InvalidServerResponseError,
    UnsupportedOperationError,
    ZeroResultsError,
)
from .models import (
    Address,
    AdminLevel,
    GeocodeQuery,
    GeoLocation,
    ResultDefaults,
    ReverseQuery,
)

__all__ = [
    # Models
    "GeoLocation",
    "GeocodeQuery",
    "ReverseQuery",
    "AdminLevel",
    "Address",
    "ResultDefaults",
    # Errors
    "GeocodingErrorKind",
    "GeocodingError",
    "InvalidCredentialsError",
    "UnsupportedOperationError",
    "InvalidServerResponseError",
    "ZeroResultsError",
    "ConfigurationError",
]
