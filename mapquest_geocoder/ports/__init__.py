"""Ports layer - Abstract interfaces (Protocols) for the geocoder.

Ports define the contracts between the geocoding core and the
adapters that talk to external systems.
"""

from .geocoding import GeocoderPort
from .http import HttpClientPort, HttpResponse

__all__ = [
    "GeocoderPort",
    "HttpClientPort",
    "HttpResponse",
]
