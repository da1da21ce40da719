# SPDX-License-Identifier: MIT
"""Version values and the version string parser.

Accepted format:
    MAJOR[.MINOR[.PATCH]][-PRERELEASE][+METADATA]

The pre-release and metadata segments may appear in either order, so both
"1.0-alpha+meta" and "1.0+meta-alpha" parse to the same value. Missing MINOR and
PATCH default to 0, and numeric segments after PATCH are ignored.

Stability is derived: a version is stable only when it has no pre-release label
and its major component is greater than zero. Every 0.x.y version is unstable.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

from .category import PreReleaseCategory, classify_pre_release
from .errors import InvalidLabelError, InvalidVersionError, VersionError

logger = logging.getLogger(__name__)

# A numeric component is a run of ASCII digits, nothing else (no sign, no
# whitespace, no underscores).
DIGITS_PATTERN = re.compile(r"[0-9]+")

# Sentinel rank used in hashes and sort keys when a version has no category.
_NO_CATEGORY = -1

V = TypeVar("V", bound="Version")


def _clamp(value: int) -> int:
    return max(-1, min(1, value))


def _check_component(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidVersionError(str(value), f"{name} must be a non-negative integer, got {value!r}")


def _check_label(field: str, label: Optional[str]) -> None:
    if label is None:
        return
    if "-" in label:
        raise InvalidLabelError(field, label, "-")
    if "+" in label:
        raise InvalidLabelError(field, label, "+")


def _parse_segment(segment: str, version: str) -> int:
    if not DIGITS_PATTERN.fullmatch(segment):
        raise InvalidVersionError(version, f"Invalid numeric segment {segment!r} in version: {version}")
    return int(segment)


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """An immutable semantic version.

    Build metadata is informational only: it is rendered by ``str()`` but never
    takes part in equality, hashing or ordering.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        pre_release: Optional pre-release label (e.g., "alpha", "beta.2", "rc.1")
        build_metadata: Optional build metadata (e.g., "build.123")
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    pre_release: Optional[str] = None
    build_metadata: Optional[str] = None

    def __post_init__(self) -> None:
        _check_component("major", self.major)
        _check_component("minor", self.minor)
        _check_component("patch", self.patch)
        _check_label("pre-release", self.pre_release)
        _check_label("build metadata", self.build_metadata)

    # -- construction -------------------------------------------------------

    @classmethod
    def builder(cls) -> "VersionBuilder":
        """Return a new, empty builder for this version type."""
        return VersionBuilder()

    @classmethod
    def parse(cls: type[V], text: str) -> V:
        """Parse ``text`` into a version of this type.

        Raises:
            InvalidVersionError: If a numeric segment is malformed
            InvalidLabelError: If a label contains a stray '-' or '+'
        """
        return cls.builder().parse(text).build()

    def to_builder(self) -> "VersionBuilder":
        """Return a builder pre-populated with this version's fields."""
        return (
            self.builder()
            .major(self.major)
            .minor(self.minor)
            .patch(self.patch)
            .pre_release(self.pre_release)
            .build_metadata(self.build_metadata)
        )

    def with_major(self: V, value: int) -> V:
        """Return a copy of this version with a different major component."""
        return self.to_builder().major(value).build()

    def with_minor(self: V, value: int) -> V:
        """Return a copy of this version with a different minor component."""
        return self.to_builder().minor(value).build()

    def with_patch(self: V, value: int) -> V:
        """Return a copy of this version with a different patch component."""
        return self.to_builder().patch(value).build()

    def with_pre_release(self: V, value: Optional[str]) -> V:
        """Return a copy of this version with a different pre-release label."""
        return self.to_builder().pre_release(value).build()

    def with_build_metadata(self: V, value: Optional[str]) -> V:
        """Return a copy of this version with different build metadata."""
        return self.to_builder().build_metadata(value).build()

    # -- derived properties -------------------------------------------------

    @property
    def pre_release_category(self) -> Optional[PreReleaseCategory]:
        """Return the category of the pre-release label, or None without one."""
        return classify_pre_release(self.pre_release)

    @property
    def pre_release_revision(self) -> int:
        """Return the number following the first '.' of the pre-release label.

        Returns 0 when there is no label, no '.', or the remainder is not a
        plain non-negative integer ("alpha.1.2" has revision 0).
        """
        if self.pre_release is None:
            return 0
        _, separator, revision = self.pre_release.partition(".")
        if not separator or not DIGITS_PATTERN.fullmatch(revision):
            return 0
        return int(revision)

    @property
    def is_stable(self) -> bool:
        """Return True if this version has no pre-release label and major > 0."""
        return self.pre_release is None and self.major > 0

    @property
    def is_unstable(self) -> bool:
        """Return True if this version is not stable."""
        return not self.is_stable

    @property
    def base_version(self) -> str:
        """Return the MAJOR.MINOR.PATCH part of the version."""
        return f"{self.major}.{self.minor}.{self.patch}"

    # -- comparison ---------------------------------------------------------

    def _base_equals(self, other: "Version") -> bool:
        if other is self:
            return True
        if (self.major, self.minor, self.patch) != (other.major, other.minor, other.patch):
            return False
        if self.is_unstable != other.is_unstable:
            return False

        mine = self.pre_release_category
        theirs = other.pre_release_category
        if mine is None or theirs is None:
            return mine is theirs
        if mine is not theirs:
            return False
        # Revisions of unrecognised labels carry no meaning.
        if mine is PreReleaseCategory.UNKNOWN:
            return True
        return self.pre_release_revision == other.pre_release_revision

    def compare(self, other: Optional["Version"]) -> int:
        """Compare this version with ``other``.

        Precedence, first decisive step wins:

        1. Any version is newer than None.
        2. Equal versions compare as 0.
        3. Major, minor and patch, numerically.
        4. An unstable version is older than a stable one.
        5. Between two unstable versions, one without a pre-release label
           (a plain 0.x.y) is newer than one with a label; otherwise the
           categories are compared (UNKNOWN < SNAPSHOT < ALPHA < BETA <
           RELEASE_CANDIDATE), then the pre-release revisions.

        Args:
            other: Version to compare against, or None

        Returns:
            -1 if this version is older, 0 if equal, 1 if newer

        Examples:
            >>> Version.parse("1.0-alpha.1").compare(Version.parse("1.0-alpha.2"))
            -1
            >>> Version.parse("1.0").compare(None)
            1
        """
        if other is None:
            return 1
        if self._base_equals(other):
            return 0

        for mine, theirs in (
            (self.major, other.major),
            (self.minor, other.minor),
            (self.patch, other.patch),
        ):
            if mine != theirs:
                return 1 if mine > theirs else -1

        if self.is_stable and other.is_unstable:
            return 1
        if self.is_unstable and other.is_stable:
            return -1

        mine_category = self.pre_release_category
        their_category = other.pre_release_category
        if mine_category is None and their_category is not None:
            return 1
        if mine_category is not None and their_category is None:
            return -1
        if mine_category is None or their_category is None:
            return 0

        if mine_category is not their_category:
            return 1 if mine_category > their_category else -1

        return _clamp(self.pre_release_revision - other.pre_release_revision)

    def newer_than(self, other: Optional["Version"]) -> bool:
        """Return True if this version is strictly newer than ``other``."""
        return self.compare(other) == 1

    def older_than(self, other: Optional["Version"]) -> bool:
        """Return True if this version is strictly older than ``other``."""
        return self.compare(other) == -1

    def sort_key(self) -> tuple[int, ...]:
        """Return a tuple that orders versions the same way ``compare`` does."""
        if self.is_stable:
            return (self.major, self.minor, self.patch, 1, 0, 0)

        category = self.pre_release_category
        if category is None:
            return (self.major, self.minor, self.patch, 0, len(PreReleaseCategory), 0)
        if category is PreReleaseCategory.UNKNOWN:
            return (self.major, self.minor, self.patch, 0, category.rank, 0)
        return (self.major, self.minor, self.patch, 0, category.rank, self.pre_release_revision)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._base_equals(other)

    def __hash__(self) -> int:
        category = self.pre_release_category
        if category is None:
            rank, revision = _NO_CATEGORY, 0
        elif category is PreReleaseCategory.UNKNOWN:
            rank, revision = category.rank, 0
        else:
            rank, revision = category.rank, self.pre_release_revision
        return hash((self.major, self.minor, self.patch, rank, revision))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    # -- callbacks ----------------------------------------------------------

    def if_equal(self: V, other: Optional["Version"], callback: Callable[[V], Any]) -> V:
        """Invoke ``callback`` with this version if it equals ``other``."""
        if other is not None and self == other:
            callback(self)
        return self

    def if_newer_than(self: V, other: Optional["Version"], callback: Callable[[V], Any]) -> V:
        """Invoke ``callback`` with this version if it is newer than ``other``."""
        if self.newer_than(other):
            callback(self)
        return self

    def if_older_than(self: V, other: Optional["Version"], callback: Callable[[V], Any]) -> V:
        """Invoke ``callback`` with this version if it is older than ``other``."""
        if self.older_than(other):
            callback(self)
        return self

    def if_stable(self: V, callback: Callable[[V], Any]) -> V:
        """Invoke ``callback`` with this version if it is stable."""
        if self.is_stable:
            callback(self)
        return self

    def if_unstable(self: V, callback: Callable[[V], Any]) -> V:
        """Invoke ``callback`` with this version if it is unstable."""
        if self.is_unstable:
            callback(self)
        return self

    def __str__(self) -> str:
        """Return the canonical form: MAJOR.MINOR[.PATCH][-PRE][+META].

        The patch component is only rendered when it is non-zero.
        """
        version = f"{self.major}.{self.minor}"
        if self.patch > 0:
            version += f".{self.patch}"
        if self.pre_release is not None:
            version += f"-{self.pre_release}"
        if self.build_metadata is not None:
            version += f"+{self.build_metadata}"
        return version


class VersionBuilder:
    """Mutable scratch space for assembling a Version.

    Setters return the builder so calls can be chained. ``build()`` resets the
    builder, so one instance can be reused sequentially. Builders are not safe
    to share between threads.

    Example:
        >>> Version.builder().major(1).minor(4).pre_release("rc.2").build()
        Version(major=1, minor=4, patch=0, pre_release='rc.2', build_metadata=None)
    """

    def __init__(self) -> None:
        self._major = 0
        self._minor = 0
        self._patch = 0
        self._pre_release: Optional[str] = None
        self._build_metadata: Optional[str] = None
        self._pre_release_category: Optional[PreReleaseCategory] = None
        self.reset()

    @property
    def pre_release_category(self) -> Optional[PreReleaseCategory]:
        """Return the category of the currently set pre-release label."""
        return self._pre_release_category

    def major(self, value: int) -> "VersionBuilder":
        self._major = value
        return self

    def minor(self, value: int) -> "VersionBuilder":
        self._minor = value
        return self

    def patch(self, value: int) -> "VersionBuilder":
        self._patch = value
        return self

    def pre_release(self, value: Optional[str]) -> "VersionBuilder":
        """Set the pre-release label and recompute its category.

        Raises:
            InvalidLabelError: If the label contains '-' or '+'
        """
        _check_label("pre-release", value)
        self._pre_release = value
        self._pre_release_category = classify_pre_release(value)
        return self

    def build_metadata(self, value: Optional[str]) -> "VersionBuilder":
        """Set the build metadata label.

        Raises:
            InvalidLabelError: If the label contains '-' or '+'
        """
        _check_label("build metadata", value)
        self._build_metadata = value
        return self

    def reset(self) -> "VersionBuilder":
        """Restore all fields to their defaults."""
        self._major = 0
        self._minor = 0
        self._patch = 0
        self._pre_release = None
        self._build_metadata = None
        self._pre_release_category = None
        return self

    def parse(self, text: str) -> "VersionBuilder":
        """Populate this builder from a version string.

        The builder is reset when parsing fails, so no partially parsed
        fields are left behind.

        Args:
            text: Version string, MAJOR[.MINOR[.PATCH]][-PRE][+META]

        Returns:
            This builder

        Raises:
            InvalidVersionError: If ``text`` is not a string or a numeric
                segment is not a non-negative integer
            InvalidLabelError: If a label contains a stray '-' or '+'
        """
        if not isinstance(text, str):
            raise InvalidVersionError(
                str(text), f"Version must be a string, got {type(text).__name__}"
            )

        try:
            self._parse(text)
        except VersionError:
            self.reset()
            raise
        return self

    def _parse(self, text: str) -> None:
        pre_index = text.find("-")
        meta_index = text.find("+")

        pre_release = text[pre_index + 1 :] if pre_index != -1 else None
        metadata = text[meta_index + 1 :] if meta_index != -1 else None

        # When both markers are present, the earlier segment ends at the later marker.
        if pre_release is not None and meta_index > pre_index:
            pre_release = pre_release[: pre_release.index("+")]
        elif metadata is not None and pre_index > meta_index:
            metadata = metadata[: metadata.index("-")]

        self.pre_release(pre_release)
        self.build_metadata(metadata)

        markers = [index for index in (pre_index, meta_index) if index != -1]
        remainder = text[: min(markers, default=len(text))]

        for setter in (self.major, self.minor, self.patch):
            if not remainder:
                break
            segment, _, remainder = remainder.partition(".")
            setter(_parse_segment(segment, text))

        if remainder:
            logger.debug("Ignoring trailing segments %r of version %r", remainder, text)

    def _create(self) -> Version:
        return Version(
            major=self._major,
            minor=self._minor,
            patch=self._patch,
            pre_release=self._pre_release,
            build_metadata=self._build_metadata,
        )

    def build(self) -> Version:
        """Create the Version and reset the builder.

        The builder is reset even when construction fails.

        Raises:
            InvalidVersionError: If a numeric component is negative or not an int
        """
        try:
            return self._create()
        finally:
            self.reset()


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: A string of the form MAJOR[.MINOR[.PATCH]][-PRE][+META]

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If a numeric segment is malformed
        InvalidLabelError: If a label contains a stray '-' or '+'

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, pre_release=None, build_metadata=None)

        >>> parse_version("1.0+build.7-beta.2")
        Version(major=1, minor=0, patch=0, pre_release='beta.2', build_metadata='build.7')
    """
    return Version.parse(version_string)


def is_valid_version(version_string: Any) -> bool:
    """Check if a string parses as a version.

    Examples:
        >>> is_valid_version("1.0-alpha")
        True
        >>> is_valid_version("1.x")
        False
    """
    if not isinstance(version_string, str):
        return False
    try:
        parse_version(version_string)
    except (InvalidVersionError, InvalidLabelError):
        return False
    return True
