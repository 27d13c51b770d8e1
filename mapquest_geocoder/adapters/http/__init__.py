"""HTTP adapters - Implementations of HttpClientPort.

Available implementations:
- RequestsHttpClient: requests Session based client
"""

from .requests_adapter import RequestsHttpClient

__all__ = ["RequestsHttpClient"]
