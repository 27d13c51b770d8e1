import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from mapquest_geocoder.config import (
    AppConfig,
    HttpConfig,
    MapQuestConfig,
    ObservabilityConfig,
    get_config,
    reset_config,
)
from mapquest_geocoder.logging_config import configure_logging, redact_api_key


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_mapquest_defaults(monkeypatch):
    monkeypatch.delenv("MQ_API_KEY", raising=False)
    monkeypatch.delenv("MQ_LICENSED", raising=False)

    config = MapQuestConfig()

    assert config.api_key is None
    assert config.licensed is False


def test_mapquest_from_environment(monkeypatch):
    monkeypatch.setenv("MQ_API_KEY", "env-key")
    monkeypatch.setenv("MQ_LICENSED", "true")

    config = get_config()

    assert config.mapquest.api_key == "env-key"
    assert config.mapquest.licensed is True


def test_http_from_environment(monkeypatch):
    monkeypatch.setenv("MQ_HTTP_TIMEOUT_SECONDS", "2.5")

    assert HttpConfig().timeout_seconds == 2.5


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_reset_config_reloads():
    first = get_config()
    reset_config()

    assert get_config() is not first


def test_app_config_aggregates_sections():
    config = AppConfig()

    assert isinstance(config.mapquest, MapQuestConfig)
    assert isinstance(config.observability, ObservabilityConfig)
    assert config.defaults.as_mapping()["adminLevels"] == []


def test_redact_api_key():
    url = "https://open.mapquestapi.com/geocoding/v1/address?location=a&key=s3cr3t&thumbMaps=false"

    assert redact_api_key(url) == (
        "https://open.mapquestapi.com/geocoding/v1/address?location=a&key=***&thumbMaps=false"
    )


def test_redact_api_key_first_parameter():
    assert redact_api_key("https://x.test/r?key=abc&lat=1") == "https://x.test/r?key=***&lat=1"


def test_configure_logging_sets_level():
    configure_logging(ObservabilityConfig(level="debug"))

    logger = logging.getLogger("mapquest_geocoder")
    assert logger.level == logging.DEBUG
    assert logger.handlers

    configure_logging(ObservabilityConfig(level="INFO"))
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
