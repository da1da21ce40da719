# SPDX-License-Identifier: MIT
"""Version comparison helpers accepting strings or Version objects.

Ordering: snapshot < alpha < beta < rc < release, with 0.x.y releases always
counted as unstable. Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, Optional, Union

from .semver import Version, parse_version

VersionLike = Union[str, Version]

_ORDER = cmp_to_key(lambda a, b: a.compare(b))


def _coerce(version: Optional[VersionLike]) -> Optional[Version]:
    if isinstance(version, str):
        return parse_version(version)
    return version


def compare_versions(version1: Optional[VersionLike], version2: Optional[VersionLike]) -> int:
    """Compare two versions.

    Args:
        version1: First version (string, Version object or None)
        version2: Second version (string, Version object or None)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Note:
        A missing version is older than any version, and two missing versions
        compare as equal.

    Examples:
        >>> compare_versions("1.0", "2.0")
        -1
        >>> compare_versions("1.0-beta", "1.0-b")
        0
        >>> compare_versions("0.1", None)
        1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    if v1 is None:
        return 0 if v2 is None else -1
    return v1.compare(v2)


def version_key(version: VersionLike) -> tuple[int, ...]:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0", "1.0-rc", "0.9", "1.0-snapshot"], key=version_key)
        ['0.9', '1.0-snapshot', '1.0-rc', '1.0']
    """
    v = parse_version(version) if isinstance(version, str) else version
    return v.sort_key()


def newest(versions: Iterable[VersionLike]) -> Optional[Version]:
    """Return the newest of ``versions``, or None if there are none."""
    parsed = [_coerce(version) for version in versions]
    return max(parsed, key=_ORDER, default=None)


def oldest(versions: Iterable[VersionLike]) -> Optional[Version]:
    """Return the oldest of ``versions``, or None if there are none."""
    parsed = [_coerce(version) for version in versions]
    return min(parsed, key=_ORDER, default=None)
