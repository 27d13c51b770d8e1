"""Immutable domain models for the MapQuest geocoder.

Queries and results are frozen dataclasses with slots. They are built
per request and never shared or mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict

DEFAULT_LIMIT = 5


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """GPS coordinates representing a geographic location."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )


@dataclass(frozen=True, slots=True)
class GeocodeQuery:
    """Forward geocoding request.

    Attributes:
        text: Free-text address to look up
        limit: Maximum number of results requested from the provider
    """

    text: str
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError(f"Limit must be at least 1, got {self.limit}")


@dataclass(frozen=True, slots=True)
class ReverseQuery:
    """Reverse geocoding request."""

    coordinates: GeoLocation

    @classmethod
    def from_coordinates(cls, latitude: float, longitude: float) -> ReverseQuery:
        return cls(GeoLocation(latitude=latitude, longitude=longitude))


@dataclass(frozen=True, slots=True)
class AdminLevel:
    """One rung of an address's administrative hierarchy.

    Attributes:
        name: Area name (e.g. a state or county)
        level: 1 for the broadest rung exposed, 2 for the next one
    """

    name: str
    level: int


@dataclass(frozen=True, slots=True)
class Address:
    """A normalized geocoding result.

    Attributes:
        latitude: Latitude as reported by the provider
        longitude: Longitude as reported by the provider
        bounds: Bounding box, only ever set through defaults
        street_number: House number, only ever set through defaults
        street_name: Street name
        locality: City or town
        postal_code: Postal code
        sub_locality: District, only ever set through defaults
        admin_levels: Administrative areas ordered by level
        country: Country name
        country_code: Country code
        timezone: Timezone, only ever set through defaults
    """

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    bounds: Optional[Mapping[str, float]] = None
    street_number: Optional[str] = None
    street_name: Optional[str] = None
    locality: Optional[str] = None
    postal_code: Optional[str] = None
    sub_locality: Optional[str] = None
    admin_levels: tuple[AdminLevel, ...] = field(default_factory=tuple)
    country: Optional[str] = None
    country_code: Optional[str] = None
    timezone: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Address:
        """Build an address from a camelCase result mapping."""
        return cls(
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
            bounds=data.get("bounds"),
            street_number=data.get("streetNumber"),
            street_name=data.get("streetName"),
            locality=data.get("locality"),
            postal_code=data.get("postalCode"),
            sub_locality=data.get("subLocality"),
            admin_levels=tuple(
                level if isinstance(level, AdminLevel) else AdminLevel(**level)
                for level in data.get("adminLevels") or ()
            ),
            country=data.get("country"),
            country_code=data.get("countryCode"),
            timezone=data.get("timezone"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase mapping of this address."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "bounds": dict(self.bounds) if self.bounds is not None else None,
            "streetNumber": self.street_number,
            "streetName": self.street_name,
            "locality": self.locality,
            "postalCode": self.postal_code,
            "subLocality": self.sub_locality,
            "adminLevels": [
                {"name": level.name, "level": level.level}
                for level in self.admin_levels
            ],
            "country": self.country,
            "countryCode": self.country_code,
            "timezone": self.timezone,
        }

    @property
    def coordinates(self) -> Optional[GeoLocation]:
        """Return the coordinates, or None if the provider omitted them."""
        if self.latitude is None or self.longitude is None:
            return None
        return GeoLocation(latitude=self.latitude, longitude=self.longitude)


class ResultDefaults(BaseModel):
    """Base values merged under every normalized result.

    Parsed fields always win over these, even when they normalize
    to None.
    """

    model_config = ConfigDict(frozen=True)

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    bounds: Optional[dict[str, float]] = None
    street_number: Optional[str] = None
    street_name: Optional[str] = None
    locality: Optional[str] = None
    postal_code: Optional[str] = None
    sub_locality: Optional[str] = None
    admin_levels: list[dict[str, Any]] = []
    country: Optional[str] = None
    country_code: Optional[str] = None
    timezone: Optional[str] = None

    def as_mapping(self) -> dict[str, Any]:
        """Return a fresh camelCase copy of the defaults."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "bounds": dict(self.bounds) if self.bounds is not None else None,
            "streetNumber": self.street_number,
            "streetName": self.street_name,
            "locality": self.locality,
            "postalCode": self.postal_code,
            "subLocality": self.sub_locality,
            "adminLevels": [dict(level) for level in self.admin_levels],
            "country": self.country,
            "countryCode": self.country_code,
            "timezone": self.timezone,
        }
