"""Wiring of configuration, HTTP client and geocoder.

The container builds the RequestsHttpClient and the MapQuest adapter
on first use and shares them afterwards. close() releases the HTTP
session; the container can be used again after it and rebuilds what
it needs.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional

from .adapters.geocoding import MapQuestGeocoderAdapter
from .adapters.http import RequestsHttpClient
from .config import AppConfig, get_config
from .domain.errors import ConfigurationError
from .ports.geocoding import GeocoderPort
from .ports.http import HttpClientPort


@dataclass
class Container:
    """Holds the shared HTTP client and geocoder for one configuration.

    Usage:
        container = Container.create_default()
        addresses = container.geocoder.geocode(GeocodeQuery("Rennes"))

        # Tests swap the transport before the geocoder is built
        container = Container(config)
        container.use_http_client(StubHttpClient(body))

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _http_client: Optional[HttpClientPort] = field(default=None, repr=False)
    _geocoder: Optional[GeocoderPort] = field(default=None, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    @property
    def http_client(self) -> HttpClientPort:
        with self._lock:
            if self._http_client is None:
                self._http_client = RequestsHttpClient(self.config.http)
            return self._http_client

    @property
    def geocoder(self) -> GeocoderPort:
        with self._lock:
            if self._geocoder is None:
                self._geocoder = MapQuestGeocoderAdapter.from_config(
                    self.http_client,
                    self.config.mapquest,
                    self.config.defaults,
                )
            return self._geocoder

    def use_http_client(self, client: HttpClientPort) -> None:
        """Replace the transport, closing the one it supersedes.

        The geocoder is rebuilt on next access so it picks up the
        new client.
        """
        with self._lock:
            self._close_http_client()
            self._http_client = client
            self._geocoder = None

    def close(self) -> None:
        """Close the HTTP client and drop the built adapters."""
        with self._lock:
            self._close_http_client()
            self._http_client = None
            self._geocoder = None

    def _close_http_client(self) -> None:
        close = getattr(self._http_client, "close", None)
        if callable(close):
            close()

    @classmethod
    def create_default(
        cls,
        config: Optional[AppConfig] = None,
        require_api_key: bool = False,
    ) -> Container:
        """Create a container for the given or environment configuration.

        Args:
            config: Optional configuration override.
            require_api_key: Fail here instead of on the first call
                when no MapQuest API key is configured.

        Raises:
            ConfigurationError: If require_api_key is set and no key
                is configured.
        """
        config = config or get_config()

        if require_api_key and config.mapquest.api_key is None:
            raise ConfigurationError(
                "MapQuest API key is not configured", setting_name="MQ_API_KEY"
            )

        return cls(config=config)


_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Return the process-wide container, creating it from the environment."""
    global _default_container
    with _container_lock:
        if _default_container is None:
            _default_container = Container.create_default()
        return _default_container


def reset_container() -> None:
    """Close the process-wide container and forget it."""
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.close()
        _default_container = None
