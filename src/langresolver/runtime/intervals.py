"""Interval specs guarding plural branches.

An interval spec is the bracket/brace prefix of a branch, in the notation
popularised by Symfony's translation component:

    {0,3,5}     discrete set
    [1,5]       lower <= n <= upper
    ]1,5[       lower <  n <  upper   (also written (1,5))
    [1,5[       lower <= n <  upper   (also written [1,5))
    ]1,5]       lower <  n <= upper   (also written (1,5])

Bounds may be '*', 'Inf', '+Inf' or '-Inf' for the infinities.

Python 3.13+. Zero external dependencies.
"""

import math
import re
from dataclasses import dataclass
from decimal import Decimal

from langresolver.constants import (
    EXCLUSIVE_CLOSE,
    EXCLUSIVE_OPEN,
    INCLUSIVE_CLOSE,
    INCLUSIVE_OPEN,
    SET_CLOSE,
    SET_OPEN,
)
from langresolver.diagnostics import ErrorTemplate, InvalidIntervalError
from langresolver.enums import IntervalKind

__all__ = [
    "Interval",
    "classify_interval",
    "parse_bound",
    "parse_interval",
    "test_interval",
]

# Characters removed before splitting a spec into bounds.
_DELIMITERS_PATTERN = re.compile(r"[\[\]{}()]")
_BOUND_SEPARATOR_PATTERN = re.compile(r",\s?")
_INFINITY_PATTERN = re.compile(r"(?P<sign>[+-]?)(?:\*|inf(?:inity)?)", re.IGNORECASE)
_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


@dataclass(frozen=True, slots=True)
class Interval:
    """Parsed interval spec.

    Attributes:
        kind: Which of the five shapes the spec has
        values: Set members for IntervalKind.SET, else (lower, upper)
    """

    kind: IntervalKind
    values: tuple[float, ...]

    @property
    def lower(self) -> float:
        """Lower bound of a range (first member for a set)."""
        return self.values[0]

    @property
    def upper(self) -> float:
        """Upper bound of a range (last member for a set)."""
        return self.values[-1]

    def contains(self, count: int | float | Decimal) -> bool:
        """Check whether count lies in the interval.

        Sets use exact numeric membership, never range comparison.
        NaN is in no interval.
        """
        if isinstance(count, Decimal) and count.is_nan():
            return False
        match self.kind:
            case IntervalKind.SET:
                return any(count == value for value in self.values)
            case IntervalKind.BOTH_INCLUSIVE:
                return self.lower <= count <= self.upper
            case IntervalKind.BOTH_EXCLUSIVE:
                return self.lower < count < self.upper
            case IntervalKind.RIGHT_INCLUSIVE:
                return self.lower < count <= self.upper
            case IntervalKind.LEFT_INCLUSIVE:
                return self.lower <= count < self.upper


def classify_interval(spec: str) -> IntervalKind | None:
    """Classify a spec by its outer delimiters.

    Shapes are tested in a fixed order (set, both inclusive, both exclusive,
    right inclusive, left inclusive); the first that fits wins.

    Returns:
        The interval kind, or None if the delimiters form no known shape
    """
    text = spec.strip()
    if len(text) < 2:
        return None

    first, last = text[0], text[-1]
    if first == SET_OPEN and last == SET_CLOSE:
        return IntervalKind.SET
    if first == INCLUSIVE_OPEN and last == INCLUSIVE_CLOSE:
        return IntervalKind.BOTH_INCLUSIVE
    if first in EXCLUSIVE_OPEN and last in EXCLUSIVE_CLOSE:
        return IntervalKind.BOTH_EXCLUSIVE
    if first in EXCLUSIVE_OPEN and last == INCLUSIVE_CLOSE:
        return IntervalKind.RIGHT_INCLUSIVE
    if first == INCLUSIVE_OPEN and last in EXCLUSIVE_CLOSE:
        return IntervalKind.LEFT_INCLUSIVE
    return None


def parse_bound(bound: str, spec: str = "") -> float:
    """Parse one interval bound.

    Args:
        bound: Bound text, e.g. "3", "-2.5", "*", "+Inf"
        spec: Enclosing spec, used for error reporting

    Returns:
        The bound as a float; '*' and 'Inf' map to math.inf

    Raises:
        InvalidIntervalError: If the bound is not a number

    Examples:
        >>> parse_bound("4")
        4.0
        >>> parse_bound("-Inf")
        -inf
        >>> parse_bound("*")
        inf
    """
    text = bound.strip()
    if (match := _INFINITY_PATTERN.fullmatch(text)) is not None:
        return -math.inf if match["sign"] == "-" else math.inf

    if _NUMBER_PATTERN.fullmatch(text) is None:
        context = spec or bound
        raise InvalidIntervalError(
            ErrorTemplate.interval_bound_invalid(context, bound), spec=context
        )
    return float(text)


def parse_interval(spec: str) -> Interval | None:
    """Parse an interval spec.

    Args:
        spec: Spec text such as "[1,5]" or "{0,3,5}"

    Returns:
        Parsed Interval, or None if the delimiters form no known shape

    Raises:
        InvalidIntervalError: If a bound is not a number, or a range does
            not have exactly two bounds
    """
    text = spec.strip()
    kind = classify_interval(text)
    if kind is None:
        return None

    content = _DELIMITERS_PATTERN.sub("", text)
    values = tuple(parse_bound(bound, text) for bound in _BOUND_SEPARATOR_PATTERN.split(content))

    if kind is not IntervalKind.SET and len(values) != 2:
        raise InvalidIntervalError(
            ErrorTemplate.interval_arity_mismatch(text, len(values)), spec=text
        )
    return Interval(kind=kind, values=values)


def test_interval(count: int | float | Decimal, spec: str) -> bool | None:
    """Check whether count belongs to the interval described by spec.

    Args:
        count: Number to test
        spec: Interval spec

    Returns:
        True or False, or None when the spec matches none of the five
        shapes (callers treat None as "no explicit rule applies")

    Raises:
        InvalidIntervalError: If the spec has a recognized shape but its
            bounds are not numbers

    Examples:
        >>> test_interval(2, "[1,5]")
        True
        >>> test_interval(5, "(1,5)")
        False
        >>> test_interval(0, "{0,3,5}")
        True
        >>> test_interval(6, "[6,*]")
        True
    """
    interval = parse_interval(spec)
    if interval is None:
        return None
    return interval.contains(count)


# Keep pytest from collecting test_interval when it is imported into test modules.
test_interval.__test__ = False  # type: ignore[attr-defined]
