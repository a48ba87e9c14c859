# SPDX-License-Identifier: MIT
"""Three-way version comparison.

Ordering rules:
- Missing number components count as 0 (1.0 == 1.0.0)
- A release ranks above any pre-release (1.0.0-rc < 1.0.0)
- Pre-release identifiers compare left to right; a longer list wins on a
  shared prefix, identifiers of the same kind compare natively and mixed
  kinds compare by their string form
- Build metadata is ignored
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Iterable, Optional

from .semver import PrereleaseIdentifier, Version, parse_version


def _sign(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _compare_numbers(numbers1: tuple[int, ...], numbers2: tuple[int, ...]) -> int:
    for i in range(max(len(numbers1), len(numbers2))):
        a: Optional[int] = numbers1[i] if i < len(numbers1) else None
        b: Optional[int] = numbers2[i] if i < len(numbers2) else None

        if b is None:
            result = 0 if a == 0 else 1
        elif a is None:
            result = 0 if b == 0 else -1
        else:
            result = _sign(a, b)

        if result != 0:
            return result
    return 0


def _compare_identifiers(p1: PrereleaseIdentifier, p2: PrereleaseIdentifier) -> int:
    """Compare two pre-release identifiers.

    Identifiers of the same kind compare by value. A numeric identifier and a
    textual one compare by their string renderings, so "beta" > 1 and
    "1a" > 10.
    """
    if type(p1) is type(p2):
        return _sign(p1.value, p2.value)
    return _sign(str(p1), str(p2))


def _compare_prerelease(
    pre1: tuple[PrereleaseIdentifier, ...], pre2: tuple[PrereleaseIdentifier, ...]
) -> int:
    # No pre-release > any pre-release
    if not pre1 and pre2:
        return 1
    if pre1 and not pre2:
        return -1

    for i in range(max(len(pre1), len(pre2))):
        if i >= len(pre2):
            return 1
        if i >= len(pre1):
            return -1
        result = _compare_identifiers(pre1[i], pre2[i])
        if result != 0:
            return result
    return 0


def compare_versions(version1: Any, version2: Any) -> int:
    """Compare two versions.

    Args:
        version1: First version (Version object or anything parse_version accepts)
        version2: Second version (Version object or anything parse_version accepts)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.2.0", "1.2")
        0
        >>> compare_versions("1.0.0-alpha", "1.0.0")
        -1
        >>> compare_versions("1.0.0-alpha.beta", "1.0.0-alpha.1")
        1
        >>> compare_versions("1.0.0+build1", "1.0.0+build2")
        0
    """
    v1 = parse_version(version1)
    v2 = parse_version(version2)

    result = _compare_numbers(v1.number_components, v2.number_components)
    if result != 0:
        return result
    return _compare_prerelease(v1.prerelease_components, v2.prerelease_components)


_VersionKey = cmp_to_key(compare_versions)


def version_key(version: Any) -> Any:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _VersionKey(parse_version(version))


def sort_versions(versions: Iterable[Any], reverse: bool = False) -> list[Version]:
    """Parse and sort versions in ascending order (descending if reverse)."""
    return sorted((parse_version(v) for v in versions), key=version_key, reverse=reverse)
