"""Centralized configuration using Pydantic Settings.

Every setting can be overridden through environment variables:
- MQ_API_KEY=...
- MQ_LICENSED=true
- MQ_HTTP_TIMEOUT_SECONDS=5
- MQ_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.models import ResultDefaults


class MapQuestConfig(BaseSettings):
    """MapQuest provider configuration.

    Environment variables prefixed with MQ_.
    """

    model_config = SettingsConfigDict(env_prefix="MQ_")

    api_key: Optional[str] = None
    licensed: bool = False


class HttpConfig(BaseSettings):
    """HTTP transport configuration.

    Environment variables prefixed with MQ_HTTP_.
    """

    model_config = SettingsConfigDict(env_prefix="MQ_HTTP_")

    timeout_seconds: float = 10.0
    user_agent: str = "mapquest-geocoder"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with MQ_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="MQ_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.mapquest.licensed)
        print(config.http.timeout_seconds)
    """

    model_config = SettingsConfigDict(env_prefix="MQ_APP_")

    mapquest: MapQuestConfig = Field(default_factory=MapQuestConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    defaults: ResultDefaults = Field(default_factory=ResultDefaults)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
