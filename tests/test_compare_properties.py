# SPDX-License-Identifier: MIT
"""Property-based tests for version comparison.

These tests verify that:
- compare_versions is reflexive, antisymmetric and transitive
- Build metadata never affects comparison
- Rendering a parsed version and parsing it again gives an equal version
- Relational operators agree with compare_versions
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from semantic_compare import Version, compare_versions, parse_version, satisfies


# =============================================================================
# Strategies for generating test data
# =============================================================================

numbers = st.lists(st.integers(min_value=0, max_value=20), min_size=1, max_size=4)

# Numeric identifiers and purely alphabetic ones; alphabetic identifiers
# always render above digits, which keeps mixed-kind ordering transitive
identifiers = st.one_of(
    st.integers(min_value=0, max_value=30).map(str),
    st.from_regex(r"[a-zA-Z][a-zA-Z-]{0,5}", fullmatch=True),
)

prereleases = st.lists(identifiers, min_size=0, max_size=3)

# No hyphens: the first hyphen always starts the pre-release
builds = st.from_regex(r"[0-9a-zA-Z]+(\.[0-9a-zA-Z]+){0,2}", fullmatch=True)


@st.composite
def version_strings(draw, with_build: bool = True) -> str:
    """Generate a well-formed version string."""
    version = ".".join(str(n) for n in draw(numbers))
    pre = draw(prereleases)
    if pre:
        version += "-" + ".".join(pre)
    # Build metadata is only recognized after a pre-release
    if pre and with_build and draw(st.booleans()):
        version += "+" + draw(builds)
    return version


# =============================================================================
# Properties
# =============================================================================


class TestComparatorLaws:
    """The comparator defines a total order (modulo build metadata)."""

    @given(version_strings())
    @settings(max_examples=100)
    def test_reflexive(self, version: str) -> None:
        assert compare_versions(version, version) == 0

    @given(version_strings(), version_strings())
    @settings(max_examples=200)
    def test_antisymmetric(self, a: str, b: str) -> None:
        assert compare_versions(a, b) == -compare_versions(b, a)

    @given(version_strings(), version_strings(), version_strings())
    @settings(max_examples=200)
    def test_transitive(self, a: str, b: str, c: str) -> None:
        if compare_versions(a, b) <= 0 and compare_versions(b, c) <= 0:
            assert compare_versions(a, c) <= 0
        if compare_versions(a, b) == 0 and compare_versions(b, c) == 0:
            assert compare_versions(a, c) == 0

    @given(version_strings(), version_strings())
    @settings(max_examples=100)
    def test_result_range(self, a: str, b: str) -> None:
        assert compare_versions(a, b) in (-1, 0, 1)


class TestBuildMetadata:
    """Build metadata never participates in ordering."""

    @given(version_strings(with_build=False), builds, builds)
    @settings(max_examples=100)
    def test_build_ignored(self, version: str, build1: str, build2: str) -> None:
        assert compare_versions(f"{version}-rc+{build1}", f"{version}-rc+{build2}") == 0
        assert compare_versions(f"{version}-rc+{build1}", f"{version}-rc") == 0

    @given(version_strings(with_build=False), builds)
    @settings(max_examples=100)
    def test_hash_ignores_build(self, version: str, build: str) -> None:
        assert hash(parse_version(f"{version}-rc")) == hash(parse_version(f"{version}-rc+{build}"))


class TestRoundTrip:
    """Parsing is idempotent for well-formed versions."""

    @given(version_strings())
    @settings(max_examples=100)
    def test_render_and_reparse(self, version: str) -> None:
        parsed = parse_version(version)
        reparsed = parse_version(str(parsed))
        assert compare_versions(parsed, reparsed) == 0
        assert str(reparsed) == str(parsed)

    @given(version_strings())
    @settings(max_examples=100)
    def test_well_formed_string_preserved(self, version: str) -> None:
        assert str(parse_version(version)) == version

    @given(st.text(max_size=30))
    @settings(max_examples=200)
    def test_parse_never_fails(self, text: str) -> None:
        assert isinstance(parse_version(text), Version)


class TestOperatorsAgree:
    """Relational operators and named assertions follow compare_versions."""

    @given(version_strings(), version_strings())
    @settings(max_examples=100)
    def test_relational_operators(self, a: str, b: str) -> None:
        v1, v2 = parse_version(a), parse_version(b)
        result = compare_versions(v1, v2)
        assert (v1 == v2) == (result == 0)
        assert (v1 < v2) == (result == -1)
        assert (v1 <= v2) == (result in (-1, 0))
        assert (v1 > v2) == (result == 1)
        assert (v1 >= v2) == (result in (0, 1))

    @given(version_strings(), version_strings(), version_strings())
    @settings(max_examples=100)
    def test_within_matches_single_operators(self, v: str, lo: str, hi: str) -> None:
        expected = satisfies(v, gte=lo) and satisfies(v, lte=hi)
        assert satisfies(v, within=[lo, hi]) == expected
