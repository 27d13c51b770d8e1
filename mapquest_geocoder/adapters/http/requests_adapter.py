"""HTTP client adapter backed by a requests Session.

The session is created lazily and reused across calls. Status codes
are passed through untouched and requests exceptions propagate to the
caller.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Optional

import requests

from ...config import HttpConfig, get_config
from ...logging_config import redact_api_key
from ...ports.http import HttpResponse


@dataclass
class RequestsHttpClient:
    """HTTP client implementing HttpClientPort with requests.

    Attributes:
        config: Timeout and User-Agent settings
    """

    config: HttpConfig = field(default_factory=lambda: get_config().http)

    _session: Optional[requests.Session] = field(default=None, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _get_session(self) -> requests.Session:
        """Get or initialize the shared session."""
        with self._lock:
            if self._session is None:
                session = requests.Session()
                session.headers["User-Agent"] = self.config.user_agent
                self._session = session
            return self._session

    def get(self, url: str) -> HttpResponse:
        """Send a GET request and return status and body text.

        Args:
            url: Absolute URL to fetch.

        Returns:
            The response, whatever its status code.
        """
        response = self._get_session().get(url, timeout=self.config.timeout_seconds)

        self._logger.debug(
            "HTTP response received",
            extra={"url": redact_api_key(url), "status": response.status_code},
        )

        return HttpResponse(status_code=response.status_code, body=response.text)

    def close(self) -> None:
        """Close the underlying session, if one was opened."""
        with self._lock:
            if self._session is not None:
                self._session.close()
                self._session = None
