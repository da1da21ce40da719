# SPDX-License-Identifier: MIT
"""Version ranges with inclusive and exclusive bounds.

Ranges can be written in interval notation:

    [1.0,2.0)   1.0 <= v < 2.0
    (1.0,2.0]   1.0 <  v <= 2.0

The notation is whitespace-sensitive: "[1.0, 2.0)" yields an end bound of
" 2.0", which does not parse.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Optional, TypeVar, Union

from .errors import InvalidRangeError, RangeBuildError
from .semver import Version, parse_version

V = TypeVar("V", bound=Version)

_INCLUSIVE_START = "["
_EXCLUSIVE_START = "("
_INCLUSIVE_END = "]"
_EXCLUSIVE_END = ")"


@dataclass(frozen=True, slots=True)
class VersionRange(Generic[V]):
    """An interval between two versions.

    The bounds are not checked against each other. An inverted range can be
    built and matches nothing.

    Attributes:
        start_bound: Lower bound of the range
        end_bound: Upper bound of the range
        start_inclusive: Whether the lower bound itself is part of the range
        end_inclusive: Whether the upper bound itself is part of the range
    """

    start_bound: V
    end_bound: V
    start_inclusive: bool = True
    end_inclusive: bool = False

    @classmethod
    def builder(cls) -> "VersionRangeBuilder[V]":
        """Return a new builder with default bound types."""
        return VersionRangeBuilder()

    def to_builder(self) -> "VersionRangeBuilder[V]":
        """Return a builder pre-populated with this range's fields."""
        return (
            VersionRangeBuilder()
            .start_bound(self.start_bound)
            .start_inclusive(self.start_inclusive)
            .end_bound(self.end_bound)
            .end_inclusive(self.end_inclusive)
        )

    def with_start_bound(self, value: V) -> "VersionRange[V]":
        return self.to_builder().start_bound(value).build()

    def with_end_bound(self, value: V) -> "VersionRange[V]":
        return self.to_builder().end_bound(value).build()

    def with_start_inclusive(self, value: bool) -> "VersionRange[V]":
        return self.to_builder().start_inclusive(value).build()

    def with_end_inclusive(self, value: bool) -> "VersionRange[V]":
        return self.to_builder().end_inclusive(value).build()

    def matches(self, version: Optional[V]) -> bool:
        """Check whether ``version`` lies within this range.

        Exclusive bounds are checked first, so a range whose bounds are equal
        matches nothing unless both sides are inclusive.

        Args:
            version: Version to test, or None

        Returns:
            True if the version is inside the range, False otherwise
        """
        if version is None:
            return False
        if not self.start_inclusive and self.start_bound == version:
            return False
        if not self.end_inclusive and self.end_bound == version:
            return False
        return not self.start_bound.newer_than(version) and not self.end_bound.older_than(version)

    def matching(self, versions: Iterable[V]) -> set[V]:
        """Return the subset of ``versions`` inside this range."""
        return {version for version in versions if self.matches(version)}

    def __contains__(self, version: object) -> bool:
        return isinstance(version, Version) and self.matches(version)  # type: ignore[arg-type]

    def __str__(self) -> str:
        start = _INCLUSIVE_START if self.start_inclusive else _EXCLUSIVE_START
        end = _INCLUSIVE_END if self.end_inclusive else _EXCLUSIVE_END
        return f"{start}{self.start_bound},{self.end_bound}{end}"


class VersionRangeBuilder(Generic[V]):
    """Mutable scratch space for assembling a VersionRange.

    ``build()`` resets the builder whether or not it succeeds. Builders are not
    safe to share between threads.
    """

    def __init__(self) -> None:
        self._start_bound: Optional[V] = None
        self._end_bound: Optional[V] = None
        self._start_inclusive = True
        self._end_inclusive = False

    def start_bound(self, value: Optional[V]) -> "VersionRangeBuilder[V]":
        self._start_bound = value
        return self

    def end_bound(self, value: Optional[V]) -> "VersionRangeBuilder[V]":
        self._end_bound = value
        return self

    def start_inclusive(self, value: bool) -> "VersionRangeBuilder[V]":
        self._start_inclusive = value
        return self

    def end_inclusive(self, value: bool) -> "VersionRangeBuilder[V]":
        self._end_inclusive = value
        return self

    def reset(self) -> "VersionRangeBuilder[V]":
        """Clear both bounds and restore the default bound types."""
        self._start_bound = None
        self._end_bound = None
        self._start_inclusive = True
        self._end_inclusive = False
        return self

    def build(self) -> VersionRange[V]:
        """Create the range and reset the builder.

        Raises:
            RangeBuildError: If either bound has not been set
        """
        try:
            if self._start_bound is None:
                raise RangeBuildError("Missing starting bound")
            if self._end_bound is None:
                raise RangeBuildError("Missing ending bound")
            return VersionRange(
                start_bound=self._start_bound,
                end_bound=self._end_bound,
                start_inclusive=self._start_inclusive,
                end_inclusive=self._end_inclusive,
            )
        finally:
            self.reset()


def parse_range(
    notation: str,
    parser: Callable[[str], V] = parse_version,  # type: ignore[assignment]
) -> VersionRange[V]:
    """Parse interval notation into a VersionRange.

    Args:
        notation: Range such as "[1.0,2.0)" or "(1.0-alpha,1.0]"
        parser: Function turning each bound into a version

    Returns:
        The parsed range

    Raises:
        InvalidRangeError: If ``notation`` is not a string, or the separator
            or a bracket is missing
        InvalidVersionError: If a bound is not a valid version

    Examples:
        >>> r = parse_range("[0.0,1.0)")
        >>> r.start_inclusive, r.end_inclusive
        (True, False)
    """
    if not isinstance(notation, str):
        raise InvalidRangeError(
            str(notation), f"Range must be a string, got {type(notation).__name__}"
        )

    start, separator, end = notation.partition(",")
    if not separator:
        raise InvalidRangeError(notation, "Missing separator")

    if start.startswith(_INCLUSIVE_START):
        start_inclusive = True
    elif start.startswith(_EXCLUSIVE_START):
        start_inclusive = False
    else:
        raise InvalidRangeError(notation, "Missing starting bound type")

    if end.endswith(_INCLUSIVE_END):
        end_inclusive = True
    elif end.endswith(_EXCLUSIVE_END):
        end_inclusive = False
    else:
        raise InvalidRangeError(notation, "Missing ending bound type")

    return (
        VersionRangeBuilder()
        .start_bound(parser(start[1:]))
        .start_inclusive(start_inclusive)
        .end_bound(parser(end[:-1]))
        .end_inclusive(end_inclusive)
        .build()
    )


def version_range(start: Union[str, V], end: Union[str, V]) -> VersionRange:
    """Create a range including ``start`` and excluding ``end``.

    Strings are parsed with parse_version.
    """
    start_bound = parse_version(start) if isinstance(start, str) else start
    end_bound = parse_version(end) if isinstance(end, str) else end
    return VersionRangeBuilder().start_bound(start_bound).end_bound(end_bound).build()
