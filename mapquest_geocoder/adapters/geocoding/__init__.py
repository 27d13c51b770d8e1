"""Geocoding adapters - Implementations of GeocoderPort.

Available implementations:
- MapQuestGeocoderAdapter: MapQuest open and licensed geocoding
"""

from .mapquest_adapter import MapQuestGeocoderAdapter

__all__ = ["MapQuestGeocoderAdapter"]
