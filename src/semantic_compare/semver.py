# SPDX-License-Identifier: MIT
"""Semantic version parsing.

Parses MAJOR.MINOR.PATCH[-prerelease][+build] strings permissively: any input
produces a Version, malformed numeric text simply degrades to 0.

- Number components: 1.2.3, 1.2, 1, 1.2.3.4
- Pre-release: -alpha, -alpha.1, -0.3.7, -rc.01
- Build metadata, after a pre-release: -rc.1+build, -alpha+20240101
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Union

if TYPE_CHECKING:
    from collections.abc import Mapping

# Leading integer prefix: optional "+" sign, underscores allowed between digits
_INTEGER_PREFIX = re.compile(r"\s*\+?([0-9]+(?:_[0-9]+)*)")


@dataclass(frozen=True, slots=True)
class NumericIdentifier:
    """A pre-release identifier made only of digits, without leading zeros."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class TextualIdentifier:
    """Any other pre-release identifier (e.g. "alpha", "rc1", "01")."""

    value: str

    def __str__(self) -> str:
        return self.value


PrereleaseIdentifier = Union[NumericIdentifier, TextualIdentifier]


def _to_int(text: str) -> int:
    """Convert the leading integer prefix of text, or 0 if there is none."""
    match = _INTEGER_PREFIX.match(text)
    if not match:
        return 0
    return int(match.group(1).replace("_", ""))


def _split_dotted(text: str) -> list[str]:
    """Split on dots, dropping trailing empty parts ("1.2." -> ["1", "2"])."""
    parts = text.split(".")
    while parts and not parts[-1]:
        parts.pop()
    return parts


def _parse_identifier(text: str) -> PrereleaseIdentifier:
    number = _to_int(text)
    if str(number) == text:
        return NumericIdentifier(number)
    return TextualIdentifier(text)


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a parsed semantic version.

    Instances are immutable. Equality, ordering and hashing ignore build
    metadata and treat missing number components as 0, so
    ``Version.parse("1.0-rc") == Version.parse("1.0.0-rc+build.5")``.

    Attributes:
        number_components: Dot-separated numbers (e.g. (1, 2, 3))
        prerelease_components: Pre-release identifiers (e.g. alpha, 1)
        build_metadata: Optional build metadata (e.g. "build.123"), or None
    """

    number_components: tuple[int, ...] = ()
    prerelease_components: tuple[PrereleaseIdentifier, ...] = ()
    build_metadata: Optional[str] = None

    @classmethod
    def parse(cls, version: Any) -> Version:
        """Parse a version-like value. See :func:`parse_version`."""
        return parse_version(version)

    @property
    def major(self) -> Optional[int]:
        """Major version number, or None if absent."""
        return self._number_at(0)

    @property
    def minor(self) -> Optional[int]:
        """Minor version number, or None if absent."""
        return self._number_at(1)

    @property
    def patch(self) -> Optional[int]:
        """Patch version number, or None if absent."""
        return self._number_at(2)

    def _number_at(self, index: int) -> Optional[int]:
        if index < len(self.number_components):
            return self.number_components[index]
        return None

    @property
    def number(self) -> str:
        """Return the "MAJOR.MINOR.PATCH" part as a string."""
        return ".".join(str(n) for n in self.number_components)

    @property
    def prerelease(self) -> str:
        """Return the pre-release part as a string ("" when there is none)."""
        return ".".join(str(p) for p in self.prerelease_components)

    @property
    def build(self) -> Optional[str]:
        """Return the build metadata, or None if absent."""
        return self.build_metadata

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease_components)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.number
        if self.prerelease_components:
            version += f"-{self.prerelease}"
        if self.build_metadata is not None:
            version += f"+{self.build_metadata}"
        return version

    def __repr__(self) -> str:
        return f"Version({str(self)!r})"

    def compare(self, other: Any) -> int:
        """Three-way compare with another version-like value (-1, 0 or 1)."""
        from .compare import compare_versions

        return compare_versions(self, other)

    def satisfies(self, assertions: Optional[Mapping[Any, Any]] = None, **kwargs: Any) -> bool:
        """Return True if every operator assertion holds for this version.

        Examples:
            >>> Version.parse("1.5.0").satisfies(within=["1.0.0", "2.0.0"])
            True
            >>> Version.parse("1.5.0").satisfies({"gte": "1.0", "lt": "1.5"})
            False
        """
        from .operators import satisfies

        return satisfies(self, assertions, **kwargs)

    def _holds(self, operator: str, other: Any) -> Any:
        if not isinstance(other, (Version, str)):
            return NotImplemented
        return self.satisfies({operator: other})

    def __eq__(self, other: Any) -> Any:
        # Strings are not coerced here, so equal objects always hash equally
        if not isinstance(other, Version):
            return NotImplemented
        return self._holds("eq", other)

    def __lt__(self, other: Any) -> Any:
        return self._holds("lt", other)

    def __le__(self, other: Any) -> Any:
        return self._holds("lte", other)

    def __gt__(self, other: Any) -> Any:
        return self._holds("gt", other)

    def __ge__(self, other: Any) -> Any:
        return self._holds("gte", other)

    def __hash__(self) -> int:
        numbers = list(self.number_components)
        while numbers and numbers[-1] == 0:
            numbers.pop()
        return hash((tuple(numbers), tuple(str(p) for p in self.prerelease_components)))


def parse_version(version: Any) -> Version:
    """Parse a version-like value into a Version object.

    Parsing never fails. A Version is returned unchanged, None is treated as
    an empty string and any other object is converted with str(). Number
    components without a leading integer become 0.

    The pre-release starts at the first "-" and build metadata at the first
    "+" after it. A "+" before any "-" is part of the number text, so
    "1.0.0+build" has no build metadata.

    Args:
        version: A version string (MAJOR.MINOR.PATCH[-prerelease][+build])
            or an existing Version

    Returns:
        A Version object with parsed components

    Examples:
        >>> parse_version("1.2.3").number_components
        (1, 2, 3)

        >>> parse_version("1.0.0-alpha.1").prerelease_components
        (TextualIdentifier(value='alpha'), NumericIdentifier(value=1))

        >>> parse_version("2.0.0-rc.1+build.456").build_metadata
        'build.456'

        >>> parse_version("x.2").number_components
        (0, 2)

        >>> parse_version("1.0.0+build-5").prerelease
        '5'
    """
    if isinstance(version, Version):
        return version

    text = "" if version is None else str(version)

    number, _, rest = text.partition("-")
    prerelease, plus, build = rest.partition("+")

    return Version(
        number_components=tuple(_to_int(part) for part in _split_dotted(number)),
        prerelease_components=tuple(_parse_identifier(part) for part in _split_dotted(prerelease)),
        build_metadata=build if plus else None,
    )
