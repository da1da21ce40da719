# SPDX-License-Identifier: MIT
"""Strictly ordered semantic versions and version ranges.

Versions are immutable values. Pre-release labels are ranked by category
(snapshot < alpha < beta < rc) rather than lexically, 0.x.y versions are always
unstable, and build metadata never affects equality or ordering.

Example:
    >>> from ordered_version import parse_version, parse_range
    >>>
    >>> version = parse_version("1.0-beta.2+build.9")
    >>> version.pre_release_revision
    2
    >>> version.newer_than(parse_version("1.0-alpha.7"))
    True
    >>>
    >>> parse_range("[1.0,2.0)").matches(parse_version("1.5"))
    True
"""

import logging

__version__ = "0.1.0"

from .category import PreReleaseCategory, classify_pre_release
from .errors import (
    ConfigError,
    InvalidLabelError,
    InvalidRangeError,
    InvalidVersionError,
    RangeBuildError,
    VersionError,
)
from .semver import (
    Version,
    VersionBuilder,
    parse_version,
    is_valid_version,
)
from .compare import (
    compare_versions,
    version_key,
    newest,
    oldest,
)
from .ranges import (
    VersionRange,
    VersionRangeBuilder,
    parse_range,
    version_range,
)
from .java import (
    JAVA_1_5,
    JAVA_1_6,
    JAVA_1_7,
    JAVA_1_8,
    JavaVersion,
    JavaVersionBuilder,
    parse_java_version,
)
from .config import Settings, get_settings

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Pre-release categories
    "PreReleaseCategory",
    "classify_pre_release",
    # Errors
    "VersionError",
    "InvalidVersionError",
    "InvalidLabelError",
    "RangeBuildError",
    "InvalidRangeError",
    "ConfigError",
    # Versions
    "Version",
    "VersionBuilder",
    "parse_version",
    "is_valid_version",
    # Comparison
    "compare_versions",
    "version_key",
    "newest",
    "oldest",
    # Ranges
    "VersionRange",
    "VersionRangeBuilder",
    "parse_range",
    "version_range",
    # Java versions
    "JavaVersion",
    "JavaVersionBuilder",
    "parse_java_version",
    "JAVA_1_5",
    "JAVA_1_6",
    "JAVA_1_7",
    "JAVA_1_8",
    # Configuration
    "Settings",
    "get_settings",
]
