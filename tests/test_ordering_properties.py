# SPDX-License-Identifier: MIT
"""Property-based tests for version ordering.

These tests verify that:
- compare is a total order: reflexive, antisymmetric and transitive
- equality and hashing agree, and ignore build metadata
- compare agrees with sort_key and with the rich comparison operators
- canonical rendering parses back to an equal version
- copy-on-write methods never modify the original
- range membership agrees with the bound comparisons
"""

from __future__ import annotations

from hypothesis import assume, given, strategies as st

from ordered_version import Version, VersionRange, parse_version


# =============================================================================
# Strategies for generating test data
# =============================================================================

components = st.integers(min_value=0, max_value=4)

labels = st.sampled_from(
    [
        None,
        "snapshot",
        "a",
        "alpha",
        "alpha.1",
        "a.2",
        "b",
        "beta.3",
        "rc",
        "rc.1",
        "rc.12",
        "preview",
        "dev.4",
        "alpha.x",
    ]
)

metadata = st.one_of(st.none(), st.from_regex(r"[a-z0-9]{1,6}(\.[a-z0-9]{1,4})?", fullmatch=True))


@st.composite
def versions(draw) -> Version:
    """Generate a Version, biased towards small numbers so collisions happen."""
    return Version(
        major=draw(components),
        minor=draw(components),
        patch=draw(components),
        pre_release=draw(labels),
        build_metadata=draw(metadata),
    )


# =============================================================================
# Ordering laws
# =============================================================================


@given(versions())
def test_reflexive(a: Version) -> None:
    assert a.compare(a) == 0
    assert a == a


@given(versions(), versions())
def test_exactly_one_relation(a: Version, b: Version) -> None:
    relations = [a.older_than(b), a.compare(b) == 0, a.newer_than(b)]
    assert relations.count(True) == 1


@given(versions(), versions())
def test_antisymmetric(a: Version, b: Version) -> None:
    assert a.compare(b) == -b.compare(a)


@given(versions(), versions(), versions())
def test_transitive(a: Version, b: Version, c: Version) -> None:
    assume(a.compare(b) <= 0 and b.compare(c) <= 0)
    assert a.compare(c) <= 0


@given(versions(), versions())
def test_equality_matches_compare(a: Version, b: Version) -> None:
    assert (a == b) == (a.compare(b) == 0)


@given(versions(), versions())
def test_equal_versions_hash_equally(a: Version, b: Version) -> None:
    if a == b:
        assert hash(a) == hash(b)


@given(versions())
def test_newer_than_none(a: Version) -> None:
    assert a.compare(None) == 1
    assert a.newer_than(None)


@given(versions(), versions())
def test_sort_key_agrees_with_compare(a: Version, b: Version) -> None:
    key_a, key_b = a.sort_key(), b.sort_key()
    expected = (key_a > key_b) - (key_a < key_b)
    assert a.compare(b) == expected


@given(versions(), versions())
def test_operators_agree_with_compare(a: Version, b: Version) -> None:
    result = a.compare(b)
    assert (a < b) == (result < 0)
    assert (a <= b) == (result <= 0)
    assert (a > b) == (result > 0)
    assert (a >= b) == (result >= 0)


# =============================================================================
# Metadata, rendering and copies
# =============================================================================


@given(versions(), metadata)
def test_metadata_never_matters(a: Version, other_metadata) -> None:
    b = a.with_build_metadata(other_metadata)
    assert a == b
    assert hash(a) == hash(b)
    assert a.compare(b) == 0


@given(versions())
def test_canonical_round_trip(a: Version) -> None:
    parsed = parse_version(str(a))
    assert parsed == a
    assert parsed.build_metadata == a.build_metadata
    assert parsed.pre_release == a.pre_release


@given(versions(), components, labels)
def test_copies_leave_original_unchanged(a: Version, value: int, label) -> None:
    snapshot = (a.major, a.minor, a.patch, a.pre_release, a.build_metadata)
    a.with_major(value)
    a.with_minor(value)
    a.with_patch(value)
    a.with_pre_release(label)
    a.with_build_metadata(None)
    assert (a.major, a.minor, a.patch, a.pre_release, a.build_metadata) == snapshot


@given(versions())
def test_stability_rule(a: Version) -> None:
    assert a.is_stable == (a.pre_release is None and a.major > 0)


# =============================================================================
# Ranges
# =============================================================================


@given(versions(), versions(), st.booleans(), st.booleans(), versions())
def test_range_membership(start, end, start_inclusive, end_inclusive, candidate) -> None:
    r = VersionRange(start, end, start_inclusive, end_inclusive)
    lower = start.compare(candidate)
    upper = end.compare(candidate)
    expected = (lower < 0 or (lower == 0 and start_inclusive)) and (
        upper > 0 or (upper == 0 and end_inclusive)
    )
    assert r.matches(candidate) == expected


@given(st.lists(versions(), max_size=12), versions(), versions())
def test_matching_is_filter(items, start, end) -> None:
    r = VersionRange(start, end)
    assert r.matching(items) == {v for v in items if r.matches(v)}
