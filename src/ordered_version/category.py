# SPDX-License-Identifier: MIT
"""Pre-release categories and their aliases.

A pre-release label is free text, so its leading token is mapped onto a fixed
precedence ladder instead of being compared lexically:

    UNKNOWN < SNAPSHOT < ALPHA < BETA < RELEASE_CANDIDATE

Aliases are case-sensitive. When two categories claim the same alias the one
declared first keeps it.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class PreReleaseCategory(Enum):
    """Coarse precedence bucket for a pre-release label."""

    UNKNOWN = ()
    SNAPSHOT = ("snapshot",)
    ALPHA = ("a", "alpha")
    BETA = ("b", "beta")
    RELEASE_CANDIDATE = ("rc",)

    @property
    def aliases(self) -> tuple[str, ...]:
        """Return the aliases registered for this category."""
        return self.value

    @property
    def rank(self) -> int:
        """Return the position of this category in the precedence ladder."""
        return _RANKS[self]

    @classmethod
    def from_alias(cls, alias: Optional[str]) -> "PreReleaseCategory":
        """Look up the category registered for ``alias``.

        Examples:
            >>> PreReleaseCategory.from_alias("b")
            <PreReleaseCategory.BETA: ('b', 'beta')>
            >>> PreReleaseCategory.from_alias("Alpha")
            <PreReleaseCategory.UNKNOWN: ()>
        """
        if alias is None:
            return cls.UNKNOWN
        return _ALIASES.get(alias, cls.UNKNOWN)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PreReleaseCategory):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PreReleaseCategory):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PreReleaseCategory):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PreReleaseCategory):
            return NotImplemented
        return self.rank >= other.rank


def _build_alias_table() -> dict[str, PreReleaseCategory]:
    table: dict[str, PreReleaseCategory] = {}
    for category in PreReleaseCategory:
        for alias in category.aliases:
            table.setdefault(alias, category)
    return table


_RANKS = {category: index for index, category in enumerate(PreReleaseCategory)}
_ALIASES = _build_alias_table()


def classify_pre_release(label: Optional[str]) -> Optional[PreReleaseCategory]:
    """Classify a pre-release label by the token before its first '.'.

    Args:
        label: Pre-release label such as "alpha.2", or None

    Returns:
        The matching category, UNKNOWN for unregistered tokens, or None when
        there is no label at all

    Examples:
        >>> classify_pre_release("rc.1")
        <PreReleaseCategory.RELEASE_CANDIDATE: ('rc',)>
        >>> classify_pre_release(None) is None
        True
    """
    if label is None:
        return None
    return PreReleaseCategory.from_alias(label.split(".", 1)[0])
