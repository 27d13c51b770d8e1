"""Geocoding port - Abstraction for address and coordinate lookups.

This protocol defines the contract for geocoding providers, allowing
the MapQuest adapter to be swapped for another provider.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import Address, GeocodeQuery, ReverseQuery


class GeocoderPort(Protocol):
    """Port for geocoding providers.

    Implementation: adapters/geocoding/mapquest_adapter.py
    """

    @property
    def name(self) -> str:
        """Stable identifier of the provider."""
        ...

    def geocode(self, query: GeocodeQuery) -> tuple[Address, ...]:
        """Geocode a free-text address.

        Args:
            query: Address text and result limit.

        Returns:
            Results in provider order, never empty.

        Raises:
            GeocodingError: If the lookup cannot produce a result.
        """
        ...

    def reverse(self, query: ReverseQuery) -> tuple[Address, ...]:
        """Reverse geocode coordinates to addresses.

        Args:
            query: Coordinates to look up.

        Returns:
            Results in provider order, never empty.

        Raises:
            GeocodingError: If the lookup cannot produce a result.
        """
        ...
