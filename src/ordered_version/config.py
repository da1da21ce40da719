# SPDX-License-Identifier: MIT
"""Runtime configuration for ordered_version."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import ConfigError

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class Settings:
    """Library settings.

    Attributes:
        java_version_variable: Environment variable holding the host Java
            runtime's version string, read by JavaVersion.current()
        log_level: Level used by configure_logging() when none is given
    """

    java_version_variable: str = "JAVA_VERSION"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables.

        Raises:
            ConfigError: If ORDERED_VERSION_LOG_LEVEL is not a logging level
        """
        settings = cls()

        if variable := os.getenv("ORDERED_VERSION_JAVA_VARIABLE"):
            settings.java_version_variable = variable

        if level := os.getenv("ORDERED_VERSION_LOG_LEVEL"):
            level = level.upper()
            if level not in _LOG_LEVELS:
                raise ConfigError(
                    f"Invalid ORDERED_VERSION_LOG_LEVEL {level!r}, expected one of: {', '.join(_LOG_LEVELS)}"
                )
            settings.log_level = level

        return settings


def get_settings() -> Settings:
    """Return settings read from the current environment."""
    return Settings.from_env()
