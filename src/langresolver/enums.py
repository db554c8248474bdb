"""Enumerations for langresolver type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class IntervalKind(StrEnum):
    """Shape of a parsed interval spec.

    StrEnum provides automatic string conversion: str(IntervalKind.SET) == "set"
    """

    SET = "set"
    """Discrete set of numbers: {0,3,5}"""

    BOTH_INCLUSIVE = "both_inclusive"
    """Closed range: [1,5]"""

    BOTH_EXCLUSIVE = "both_exclusive"
    """Open range: (1,5) or ]1,5["""

    LEFT_INCLUSIVE = "left_inclusive"
    """Half-open range, lower bound included: [1,5) or [1,5["""

    RIGHT_INCLUSIVE = "right_inclusive"
    """Half-open range, upper bound included: (1,5] or ]1,5]"""


__all__ = [
    "IntervalKind",
]
