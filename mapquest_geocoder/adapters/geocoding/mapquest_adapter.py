"""MapQuest geocoder adapter.

MapQuest offers two tiers of the same geocoding API: a licensed
(commercial) one on www.mapquestapi.com and an open one on
open.mapquestapi.com. The ``licensed`` flag picks the host.

Each call issues exactly one GET through the injected HTTP client.
Nothing is cached or retried.
"""

from __future__ import annotations

import ipaddress
import json
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional
from urllib.parse import quote_plus

from ...config import MapQuestConfig
from ...domain.errors import (
    InvalidCredentialsError,
    InvalidServerResponseError,
    UnsupportedOperationError,
    ZeroResultsError,
)
from ...domain.models import (
    Address,
    AdminLevel,
    GeocodeQuery,
    ResultDefaults,
    ReverseQuery,
)
from ...logging_config import redact_api_key
from ...ports.http import HttpClientPort

OPEN_GEOCODE_ENDPOINT_URL = (
    "https://open.mapquestapi.com/geocoding/v1/address"
    "?location=%s&outFormat=json&maxResults=%d&key=%s&thumbMaps=false"
)
OPEN_REVERSE_ENDPOINT_URL = (
    "https://open.mapquestapi.com/geocoding/v1/reverse?key=%s&lat=%s&lng=%s"
)
LICENSED_GEOCODE_ENDPOINT_URL = (
    "https://www.mapquestapi.com/geocoding/v1/address"
    "?location=%s&outFormat=json&maxResults=%d&key=%s&thumbMaps=false"
)
LICENSED_REVERSE_ENDPOINT_URL = (
    "https://www.mapquestapi.com/geocoding/v1/reverse?key=%s&lat=%s&lng=%s"
)

PROVIDER_NAME = "map_quest"

# A location with none of these is too vague to be returned
_ADDRESS_FIELDS = ("street", "postalCode", "adminArea5", "adminArea4", "adminArea3")


def _is_present(value: Any) -> bool:
    return value is not None and value != ""


def _text_or_none(value: Any) -> Optional[str]:
    return str(value) if _is_present(value) else None


def _float_or_none(value: Any) -> Optional[float]:
    return float(value) if _is_present(value) else None


def _is_ip_address(text: str) -> bool:
    # Zone IDs (fe80::1%eth0) are not accepted as IP literals
    if "%" in text:
        return False
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return True


def format_coordinate(value: float) -> str:
    """Render a coordinate in plain decimal notation without rounding.

    Uses the shortest representation that round-trips, so 37.1 stays
    ``37.1`` and 1e-05 becomes ``0.00001``.
    """
    return format(Decimal(repr(float(value))), "f")


@dataclass(frozen=True)
class MapQuestGeocoderAdapter:
    """MapQuest geocoder implementing GeocoderPort.

    Attributes:
        http_client: Transport used for the single GET per call
        api_key: MapQuest API key; calls fail while it is None
        licensed: True for the licensed endpoints, False for the open ones
        defaults: Base values merged under every result
    """

    http_client: HttpClientPort
    api_key: Optional[str]
    licensed: bool = False
    defaults: ResultDefaults = field(default_factory=ResultDefaults)

    _logger: logging.Logger = field(
        init=False,
        repr=False,
        compare=False,
        default_factory=lambda: logging.getLogger(__name__),
    )

    @classmethod
    def from_config(
        cls,
        http_client: HttpClientPort,
        config: MapQuestConfig,
        defaults: Optional[ResultDefaults] = None,
    ) -> MapQuestGeocoderAdapter:
        """Build an adapter from provider settings."""
        return cls(
            http_client=http_client,
            api_key=config.api_key,
            licensed=config.licensed,
            defaults=defaults or ResultDefaults(),
        )

    @property
    def name(self) -> str:
        return PROVIDER_NAME

    def get_name(self) -> str:
        return PROVIDER_NAME

    def build_geocode_url(self, query: GeocodeQuery) -> str:
        template = (
            LICENSED_GEOCODE_ENDPOINT_URL
            if self.licensed
            else OPEN_GEOCODE_ENDPOINT_URL
        )
        return template % (quote_plus(query.text), query.limit, self.api_key)

    def build_reverse_url(self, query: ReverseQuery) -> str:
        template = (
            LICENSED_REVERSE_ENDPOINT_URL
            if self.licensed
            else OPEN_REVERSE_ENDPOINT_URL
        )
        return template % (
            self.api_key,
            format_coordinate(query.coordinates.latitude),
            format_coordinate(query.coordinates.longitude),
        )

    def geocode(self, query: GeocodeQuery) -> tuple[Address, ...]:
        """Geocode a free-text address.

        Args:
            query: Address text and maximum number of results.

        Returns:
            Normalized addresses in the order MapQuest returned them.

        Raises:
            InvalidCredentialsError: If no API key is configured.
            UnsupportedOperationError: If the text is an IP address.
            InvalidServerResponseError: If the response body is empty.
            ZeroResultsError: If no usable location came back.
        """
        if self.api_key is None:
            raise InvalidCredentialsError()

        # This API doesn't handle IPs
        if _is_ip_address(query.text):
            raise UnsupportedOperationError()

        return self._execute_query(self.build_geocode_url(query))

    def reverse(self, query: ReverseQuery) -> tuple[Address, ...]:
        """Reverse geocode coordinates.

        Args:
            query: Coordinates to look up.

        Returns:
            Normalized addresses in the order MapQuest returned them.

        Raises:
            InvalidCredentialsError: If no API key is configured.
            InvalidServerResponseError: If the response body is empty.
            ZeroResultsError: If no usable location came back.
        """
        if self.api_key is None:
            raise InvalidCredentialsError()

        return self._execute_query(self.build_reverse_url(query))

    def _execute_query(self, url: str) -> tuple[Address, ...]:
        self._logger.debug(
            "MapQuest request",
            extra={"url": redact_api_key(url), "licensed": self.licensed},
        )

        content = self.http_client.get(url).body

        if not content:
            raise InvalidServerResponseError(url=url)

        payload = self._decode(content, url)

        results = payload.get("results")
        if not results or not isinstance(results, list):
            raise ZeroResultsError(url=url)

        first = results[0]
        locations = first.get("locations") if isinstance(first, dict) else None
        if not locations or not isinstance(locations, list):
            raise ZeroResultsError(url=url)

        addresses = []
        for index, location in enumerate(locations):
            if not isinstance(location, dict) or not any(
                _is_present(location.get(name)) for name in _ADDRESS_FIELDS
            ):
                self._logger.debug(
                    "Dropping location without address fields",
                    extra={"url": redact_api_key(url), "index": index},
                )
                continue

            addresses.append(self._to_address(location))

        if not addresses:
            raise ZeroResultsError(url=url)

        self._logger.debug(
            "MapQuest success",
            extra={"url": redact_api_key(url), "results": len(addresses)},
        )

        return tuple(addresses)

    def _decode(self, content: str, url: str) -> dict[str, Any]:
        """Decode a JSON body, treating anything but an object as empty."""
        try:
            payload = json.loads(content)
        except ValueError as e:
            self._logger.warning(
                "MapQuest returned an undecodable body",
                extra={"url": redact_api_key(url), "error": str(e)},
            )
            return {}

        if not isinstance(payload, dict):
            return {}
        return payload

    def _to_address(self, location: dict[str, Any]) -> Address:
        admin_levels = []
        if _is_present(location.get("adminArea3")):
            admin_levels.append(AdminLevel(name=str(location["adminArea3"]), level=1))
        if _is_present(location.get("adminArea4")):
            admin_levels.append(AdminLevel(name=str(location["adminArea4"]), level=2))

        lat_lng = location.get("latLng")
        if not isinstance(lat_lng, dict):
            lat_lng = {}

        # MapQuest exposes no separate ISO code, adminArea1 fills both
        country = _text_or_none(location.get("adminArea1"))

        data = self.defaults.as_mapping()
        data.update(
            {
                "latitude": _float_or_none(lat_lng.get("lat")),
                "longitude": _float_or_none(lat_lng.get("lng")),
                "streetName": _text_or_none(location.get("street")),
                "locality": _text_or_none(location.get("adminArea5")),
                "postalCode": _text_or_none(location.get("postalCode")),
                "adminLevels": admin_levels,
                "country": country,
                "countryCode": country,
            }
        )
        return Address.from_mapping(data)
