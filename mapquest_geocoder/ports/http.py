"""HTTP port - Abstraction over the transport used to reach the API.

Implementation: adapters/http/requests_adapter.py
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """Status code and decoded body of an HTTP response."""

    status_code: int
    body: str


class HttpClientPort(Protocol):
    """Port for sending HTTP GET requests.

    Implementations return the response whatever its status code and
    let transport failures (DNS, refused connection, timeout) raise.
    """

    def get(self, url: str) -> HttpResponse:
        """Send a GET request.

        Args:
            url: Absolute URL to fetch.

        Returns:
            The response status code and body text.
        """
        ...
