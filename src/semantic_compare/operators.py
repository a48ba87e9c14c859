# SPDX-License-Identifier: MIT
"""Named comparison operators and version assertions.

Single operators accept the comparator results listed in ``ACCEPTED_RESULTS``.
Range operators are built from them:

- between: gt lo and lt hi (open interval)
- within: gte lo and lte hi (closed interval)
- any_of: eq any of the operands
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Optional, Union

from .compare import compare_versions
from .semver import Version, parse_version


class VersionAssertionError(ValueError):
    """Base class for errors raised while evaluating version assertions."""


class InvalidOperatorError(VersionAssertionError):
    """Raised when an assertion uses an unrecognized operator."""

    def __init__(self, operator: Any, message: str = ""):
        self.operator = operator
        self.message = message or f"Unrecognized operator '{operator}'"
        super().__init__(self.message)


class InvalidOperandError(VersionAssertionError):
    """Raised when a range operator is not given a sequence of two or more versions."""

    def __init__(self, operator: Any, operand: Any, message: str = ""):
        self.operator = operator
        self.operand = operand
        self.message = message or (
            f"Range operand for '{operator}' must be a list containing at least two elements, "
            f"got {operand!r}"
        )
        super().__init__(self.message)


class Operator(Enum):
    """Closed set of assertion operators."""

    EQUAL_TO = "equal_to"
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUAL_TO = "less_than_or_equal_to"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUAL_TO = "greater_than_or_equal_to"
    BETWEEN = "between"
    WITHIN = "within"
    ANY_OF = "any_of"

    @property
    def is_range(self) -> bool:
        return self in (Operator.BETWEEN, Operator.WITHIN, Operator.ANY_OF)

    @classmethod
    def from_name(cls, name: Union[str, Operator]) -> Operator:
        """Look up an operator by member, long name or short alias.

        Raises:
            InvalidOperatorError: If the name is not a known operator
        """
        if isinstance(name, Operator):
            return name
        if isinstance(name, str):
            if name in _ALIASES:
                return _ALIASES[name]
            try:
                return cls(name)
            except ValueError:
                pass
        raise InvalidOperatorError(name)


_ALIASES = {
    "eq": Operator.EQUAL_TO,
    "lt": Operator.LESS_THAN,
    "lte": Operator.LESS_THAN_OR_EQUAL_TO,
    "gt": Operator.GREATER_THAN,
    "gte": Operator.GREATER_THAN_OR_EQUAL_TO,
}

# Comparator results accepted by each single operator
ACCEPTED_RESULTS: dict[Operator, frozenset[int]] = {
    Operator.EQUAL_TO: frozenset({0}),
    Operator.LESS_THAN: frozenset({-1}),
    Operator.LESS_THAN_OR_EQUAL_TO: frozenset({-1, 0}),
    Operator.GREATER_THAN: frozenset({1}),
    Operator.GREATER_THAN_OR_EQUAL_TO: frozenset({1, 0}),
}

OPERATOR_NAMES = tuple(_ALIASES) + tuple(op.value for op in Operator)


def _range_operands(operator: Operator, operand: Any) -> Sequence[Any]:
    if (
        not isinstance(operand, Sequence)
        or isinstance(operand, (str, bytes))
        or len(operand) < 2
    ):
        raise InvalidOperandError(operator.value, operand)
    return operand


def _check(version: Version, operator: Operator, operand: Any) -> bool:
    if operator is Operator.BETWEEN:
        lo, hi = _range_operands(operator, operand)[:2]
        return _check(version, Operator.GREATER_THAN, lo) and _check(
            version, Operator.LESS_THAN, hi
        )
    if operator is Operator.WITHIN:
        lo, hi = _range_operands(operator, operand)[:2]
        return _check(version, Operator.GREATER_THAN_OR_EQUAL_TO, lo) and _check(
            version, Operator.LESS_THAN_OR_EQUAL_TO, hi
        )
    if operator is Operator.ANY_OF:
        return any(
            _check(version, Operator.EQUAL_TO, v) for v in _range_operands(operator, operand)
        )
    return compare_versions(version, operand) in ACCEPTED_RESULTS[operator]


def satisfies(
    version: Any, assertions: Optional[Mapping[Any, Any]] = None, **kwargs: Any
) -> bool:
    """Check a version against one or more operator assertions.

    Assertions are evaluated in order (mapping first, then keyword arguments)
    and must all hold. Evaluation stops at the first one that does not.

    Args:
        version: The version to check (Version object or version string)
        assertions: Mapping of operator name to operand. Range operators
            (between, within, any_of) take a list of at least two versions.
        **kwargs: Further assertions given as keyword arguments

    Returns:
        True if all assertions hold, False otherwise

    Raises:
        InvalidOperatorError: If an operator name is not recognized
        InvalidOperandError: If a range operand is not a list of two or more versions

    Examples:
        >>> satisfies("1.5.0", within=["1.0.0", "2.0.0"])
        True
        >>> satisfies("2.0.1", {"within": ["1.0.0", "2.0.0"]})
        False
        >>> satisfies("1.0.0", any_of=["1.0.0", "2.0.0"])
        True
    """
    v = parse_version(version)

    pairs = list((assertions or {}).items()) + list(kwargs.items())
    for name, operand in pairs:
        if not _check(v, Operator.from_name(name), operand):
            return False
    return True
