# SPDX-License-Identifier: MIT
"""Exceptions raised by ordered_version."""

from __future__ import annotations


class VersionError(Exception):
    """Base class for all ordered_version errors."""

    pass


class InvalidVersionError(VersionError, ValueError):
    """Raised when a version string or numeric component is malformed."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version}"
        super().__init__(self.message)


class InvalidLabelError(VersionError, ValueError):
    """Raised when a pre-release or build metadata label contains '-' or '+'."""

    def __init__(self, field: str, label: str, character: str):
        self.field = field
        self.label = label
        self.message = f"Invalid special character in {field}: {character}"
        super().__init__(self.message)


class RangeBuildError(VersionError, RuntimeError):
    """Raised when a range is built without both of its bounds."""

    pass


class InvalidRangeError(VersionError, ValueError):
    """Raised when range notation does not follow the interval grammar."""

    def __init__(self, notation: str, message: str):
        self.notation = notation
        self.message = f"Invalid version range: {message}"
        super().__init__(self.message)


class ConfigError(VersionError):
    """Raised when configuration is invalid or missing."""

    pass
