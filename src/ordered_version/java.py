# SPDX-License-Identifier: MIT
"""Java runtime versions.

Java version strings carry an update number after an underscore, e.g.
"1.8.0_45" or "1.7.0_80-ea". The update number only breaks ties between
versions that are otherwise equal.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Callable, Optional, cast

from .config import Settings, get_settings
from .errors import ConfigError, InvalidLabelError, InvalidVersionError
from .semver import DIGITS_PATTERN, Version, VersionBuilder

logger = logging.getLogger(__name__)

# Marks the update number in Java version strings, so labels may not contain it.
UPDATE_MARKER = "_"


def _check_java_label(field: str, label: Optional[str]) -> None:
    if label is not None and UPDATE_MARKER in label:
        raise InvalidLabelError(field, label, UPDATE_MARKER)


@dataclass(frozen=True, slots=True, eq=False)
class JavaVersion(Version):
    """A Version with a trailing update number.

    Attributes:
        update_number: Update release, rendered as "_N" when non-zero
    """

    update_number: int = 0

    def __post_init__(self) -> None:
        Version.__post_init__(self)
        _check_java_label("pre-release", self.pre_release)
        _check_java_label("build metadata", self.build_metadata)
        if isinstance(self.update_number, bool) or not isinstance(self.update_number, int) or self.update_number < 0:
            raise InvalidVersionError(
                str(self.update_number),
                f"update_number must be a non-negative integer, got {self.update_number!r}",
            )

    @classmethod
    def builder(cls) -> "JavaVersionBuilder":
        return JavaVersionBuilder()

    @classmethod
    def current(cls, source: Optional[Callable[[], str]] = None) -> "JavaVersion":
        """Parse the version of the host Java runtime.

        Args:
            source: Callable returning the runtime's version string. Defaults
                to reading the environment variable named by
                Settings.java_version_variable.

        Raises:
            ConfigError: If no source is given and the variable is unset
        """
        if source is None:
            return cls.parse(environment_java_version())
        return cls.parse(source())

    def to_builder(self) -> "JavaVersionBuilder":
        builder = cast(JavaVersionBuilder, Version.to_builder(self))
        return builder.update_number(self.update_number)

    def with_update_number(self, value: int) -> "JavaVersion":
        """Return a copy of this version with a different update number."""
        return self.to_builder().update_number(value).build()

    def compare(self, other: Optional[Version]) -> int:
        """Compare like Version, then by update number against another JavaVersion."""
        result = Version.compare(self, other)
        if result != 0 or not isinstance(other, JavaVersion):
            return result
        return max(-1, min(1, self.update_number - other.update_number))

    def sort_key(self) -> tuple[int, ...]:
        return Version.sort_key(self) + (self.update_number,)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        if isinstance(other, JavaVersion) and self.update_number != other.update_number:
            return False
        return self._base_equals(other)

    # Equal to plain Versions regardless of update number, so hash like one.
    __hash__ = Version.__hash__

    def __str__(self) -> str:
        version = Version.__str__(self)
        if self.update_number != 0:
            version += f"_{self.update_number}"
        return version


class JavaVersionBuilder(VersionBuilder):
    """Builder for JavaVersion that understands the "_N" update suffix."""

    def __init__(self) -> None:
        self._update_number = 0
        super().__init__()

    def update_number(self, value: int) -> "JavaVersionBuilder":
        self._update_number = value
        return self

    def pre_release(self, value: Optional[str]) -> "JavaVersionBuilder":
        """Set the pre-release label.

        Raises:
            InvalidLabelError: If the label contains '-', '+' or '_'
        """
        _check_java_label("pre-release", value)
        super().pre_release(value)
        return self

    def build_metadata(self, value: Optional[str]) -> "JavaVersionBuilder":
        _check_java_label("build metadata", value)
        super().build_metadata(value)
        return self

    def reset(self) -> "JavaVersionBuilder":
        super().reset()
        self._update_number = 0
        return self

    def parse(self, text: str) -> "JavaVersionBuilder":
        """Populate this builder from a Java version string.

        The "_N" suffix is cut out before the remaining string is parsed as a
        plain version. A malformed update number directly after the numeric
        segments is treated as 0. Labels may not contain an underscore, so
        "1.8.0-ea_b12" is rejected rather than losing part of its label.

        Raises:
            InvalidVersionError: If a numeric segment is malformed
            InvalidLabelError: If a label contains '-', '+' or '_'
        """
        if isinstance(text, str):
            update_index = text.find(UPDATE_MARKER)
            if update_index != -1:
                markers = [
                    index
                    for index in (text.find("-", update_index), text.find("+", update_index))
                    if index != -1
                ]
                end_index = min(markers, default=len(text))
                update = text[update_index + 1 : end_index]
                head = text[:update_index]
                # A non-numeric suffix after a label marker stays in the label,
                # where the label check rejects it.
                if DIGITS_PATTERN.fullmatch(update):
                    self.update_number(int(update))
                    text = head + text[end_index:]
                elif "-" not in head and "+" not in head:
                    logger.debug("Ignoring malformed update number %r in %r", update, text)
                    self.update_number(0)
                    text = head + text[end_index:]

        super().parse(text)
        return self

    def _create(self) -> JavaVersion:
        return JavaVersion(
            major=self._major,
            minor=self._minor,
            patch=self._patch,
            pre_release=self._pre_release,
            build_metadata=self._build_metadata,
            update_number=self._update_number,
        )

    def build(self) -> JavaVersion:
        return cast(JavaVersion, super().build())


def parse_java_version(version_string: str) -> JavaVersion:
    """Parse a Java version string such as "1.8.0_45".

    Examples:
        >>> str(parse_java_version("1.8.0_45"))
        '1.8_45'
    """
    return JavaVersion.parse(version_string)


def environment_java_version(settings: Optional[Settings] = None) -> str:
    """Read the host Java version string from the environment.

    Raises:
        ConfigError: If the configured variable is not set
    """
    settings = settings or get_settings()
    value = os.getenv(settings.java_version_variable)
    if not value:
        raise ConfigError(
            f"Java version unavailable: environment variable {settings.java_version_variable} is not set"
        )
    return value


JAVA_1_5 = JavaVersion(1, 5, 0)
JAVA_1_6 = JavaVersion(1, 6, 0)
JAVA_1_7 = JavaVersion(1, 7, 0)
JAVA_1_8 = JavaVersion(1, 8, 0)
