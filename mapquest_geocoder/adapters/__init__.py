"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the geocoder to external systems:
- HTTP transport (requests)
- Geocoding services (MapQuest)
"""
