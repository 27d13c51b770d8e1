"""Typed domain errors for the MapQuest geocoder.

The geocoder only ever produces the four kinds listed in
GeocodingErrorKind. Each kind has its own subclass so callers can
catch either the base class and switch on ``kind``, or a single
variant. Transport errors from the HTTP client are not wrapped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..logging_config import redact_api_key


class GeocodingErrorKind(Enum):
    """Closed set of failures a geocoding call can end with."""

    INVALID_CREDENTIALS = "invalid_credentials"
    UNSUPPORTED_OPERATION = "unsupported_operation"
    INVALID_SERVER_RESPONSE = "invalid_server_response"
    ZERO_RESULTS = "zero_results"


@dataclass
class GeocodingError(Exception):
    """Base error for geocoding calls.

    Attributes:
        message: Human-readable error description
        kind: Which of the four failure kinds this is
        url: Request URL, when the failure happened after the request
    """

    message: str
    kind: GeocodingErrorKind
    url: Optional[str] = None

    def __str__(self) -> str:
        if self.url:
            return f"{self.message} ({redact_api_key(self.url)})"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidCredentialsError(GeocodingError):
    """No API key was configured."""

    message: str = "No API Key provided."
    kind: GeocodingErrorKind = field(
        default=GeocodingErrorKind.INVALID_CREDENTIALS, init=False
    )


@dataclass
class UnsupportedOperationError(GeocodingError):
    """The query asks for something this provider cannot do."""

    message: str = (
        "The MapQuest provider does not support IP addresses, "
        "only street addresses."
    )
    kind: GeocodingErrorKind = field(
        default=GeocodingErrorKind.UNSUPPORTED_OPERATION, init=False
    )


@dataclass
class InvalidServerResponseError(GeocodingError):
    """The server answered with an empty body."""

    message: str = "Invalid server response"
    kind: GeocodingErrorKind = field(
        default=GeocodingErrorKind.INVALID_SERVER_RESPONSE, init=False
    )


@dataclass
class ZeroResultsError(GeocodingError):
    """The response held no usable location."""

    message: str = "No results found"
    kind: GeocodingErrorKind = field(
        default=GeocodingErrorKind.ZERO_RESULTS, init=False
    )


@dataclass
class ConfigurationError(Exception):
    """Invalid or missing configuration.

    Attributes:
        message: Human-readable error description
        setting_name: Name of the problematic setting
    """

    message: str
    setting_name: str = ""

    def __str__(self) -> str:
        if self.setting_name:
            return f"{self.message} ({self.setting_name})"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)
