# SPDX-License-Identifier: MIT
"""Logging setup for command line use.

The library itself only attaches a NullHandler to the ``ordered_version``
logger; applications decide where records go.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from .config import get_settings

LOGGING_DATETIME_FORMAT_STRING = "%Y-%m-%d %H:%M:%S"
LOGGING_LOG_FORMAT_STRING = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

PACKAGE_LOGGER = "ordered_version"

# Handler installed by configure_logging(), if any.
_stream_handler: Optional[logging.Handler] = None


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Send ordered_version log records to stderr.

    Calling this again only updates the level; a single stream handler is
    attached to the package logger.

    Args:
        level: Logging level; defaults to the configured Settings.log_level

    Returns:
        The package logger
    """
    global _stream_handler

    if level is None:
        level = get_settings().log_level

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if _stream_handler is None or _stream_handler not in logger.handlers:
        _stream_handler = logging.StreamHandler()
        _stream_handler.setFormatter(
            logging.Formatter(LOGGING_LOG_FORMAT_STRING, LOGGING_DATETIME_FORMAT_STRING)
        )
        logger.addHandler(_stream_handler)

    return logger


def stream_handler() -> Optional[logging.Handler]:
    """Return the handler attached by configure_logging(), or None."""
    return _stream_handler
