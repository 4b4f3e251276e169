"""Logging setup for the `fallible` logger hierarchy.

The core algebra never logs. Boundary modules (interop, bridge) log captured
failures at DEBUG under `fallible.<module>`. The package installs a
NullHandler, so nothing is emitted until the application configures logging.

Example:
    >>> import logging
    >>> logging.basicConfig()
    >>> configure_logging()  # applies FALLIBLE_LOG_LEVEL
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fallible.config import get_settings

if TYPE_CHECKING:
    from fallible.config import FallibleSettings

ROOT_LOGGER = "fallible"


def configure_logging(settings: FallibleSettings | None = None) -> logging.Logger:
    """Apply the configured level to the `fallible` logger and return it."""
    settings = settings or get_settings()
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(settings.logging.level)
    return logger


def should_log_captured(logger: logging.Logger) -> bool:
    """Whether `logger` should record failures a boundary module converts to Err.

    Settings are only consulted once DEBUG is enabled for `logger`.
    """
    return logger.isEnabledFor(logging.DEBUG) and get_settings().logging.log_captured
