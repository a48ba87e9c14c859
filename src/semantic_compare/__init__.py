# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison and assertions.

Versions are parsed permissively (parsing never fails) and compared with a
single three-way comparator that every operator and relational method is
built on.

Example:
    >>> from semantic_compare import Version, compare_versions, satisfies
    >>>
    >>> version = Version.parse("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>>
    >>> compare_versions("1.0.0", "1")
    0
    >>> version.satisfies(between=["1.2.2", "1.2.3"])
    True
    >>> version < "1.2.3"
    True
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    NumericIdentifier,
    TextualIdentifier,
    PrereleaseIdentifier,
    parse_version,
)
from .compare import (
    compare_versions,
    version_key,
    sort_versions,
)
from .operators import (
    Operator,
    ACCEPTED_RESULTS,
    OPERATOR_NAMES,
    satisfies,
    VersionAssertionError,
    InvalidOperatorError,
    InvalidOperandError,
)

__all__ = [
    # Version parsing
    "Version",
    "NumericIdentifier",
    "TextualIdentifier",
    "PrereleaseIdentifier",
    "parse_version",
    # Version comparison
    "compare_versions",
    "version_key",
    "sort_versions",
    # Assertions
    "Operator",
    "ACCEPTED_RESULTS",
    "OPERATOR_NAMES",
    "satisfies",
    "VersionAssertionError",
    "InvalidOperatorError",
    "InvalidOperandError",
]
