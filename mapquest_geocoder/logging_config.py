"""Logging setup for the geocoder.

Request URLs carry the API key as a query parameter, so anything that
logs or prints a URL goes through redact_api_key() first.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .config import ObservabilityConfig

_KEY_PARAM = re.compile(r"([?&]key=)[^&]*")


def redact_api_key(url: str) -> str:
    """Replace the value of the ``key`` query parameter with ``***``."""
    return _KEY_PARAM.sub(r"\1***", url)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Configure the ``mapquest_geocoder`` logger hierarchy.

    Args:
        config: Observability settings. Loaded from the environment
            when omitted.
    """
    if config is None:
        from .config import get_config

        config = get_config().observability

    logger = logging.getLogger("mapquest_geocoder")
    logger.setLevel(config.level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.format))
        logger.addHandler(handler)
