"""Plural branch tokenization and selection.

A pluralizable template is a '|'-separated list of branches. Each branch may
start with an interval spec (see intervals.py) that guards it:

    {0}No apples|{1}One apple|[2,*]:count apples

Templates without any spec use ordinary two-way pluralization:

    apple|apples

Selection:
    1. Explicit rules are tested in declaration order; the first match wins.
    2. Otherwise, count > 1 picks the second branch (or the first when there
       is only one), anything else picks the first.

Malformed templates are never fatal: the raw template is returned and a
warning Diagnostic describes the problem.

Python 3.13+. Zero external dependencies.
"""

import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal

from langresolver.diagnostics import Diagnostic, ErrorTemplate, InvalidIntervalError
from langresolver.runtime.intervals import Interval, parse_interval
from langresolver.types import NumericCount

__all__ = [
    "Branch",
    "find_invalid_rules",
    "is_number",
    "normalize_count",
    "resolve_branch",
    "select_branch",
    "tokenize",
]

logger = logging.getLogger(__name__)

# One branch: optional leading whitespace, optional interval spec, then text
# up to the next '|'. The interval alphabet covers digits, signs, '*', 'Inf'.
_BRANCH_PATTERN = re.compile(
    r"\s?"
    r"(?P<spec>[{\[\]][0-9,\s*\-+Inf.]+[}\[\]])?"
    r"(?P<text>[^|]+)"
)


@dataclass(frozen=True, slots=True)
class Branch:
    """One alternative of a pluralizable template.

    Attributes:
        text: Branch text, trimmed
        spec: Interval spec guarding the branch, trimmed (None if implicit)
    """

    text: str
    spec: str | None = None

    @property
    def is_explicit(self) -> bool:
        """True if the branch carries an interval spec."""
        return self.spec is not None


def tokenize(template: str) -> tuple[Branch, ...]:
    """Split a template into branches.

    Empty segments between pipes are skipped, so "a||b" has two branches.

    Examples:
        >>> tokenize("{0}none|[1,*] some")
        (Branch(text='none', spec='{0}'), Branch(text='some', spec='[1,*]'))
        >>> tokenize("apple|apples")
        (Branch(text='apple', spec=None), Branch(text='apples', spec=None))
    """
    branches: list[Branch] = []
    for match in _BRANCH_PATTERN.finditer(template):
        spec = match.group("spec")
        branches.append(
            Branch(
                text=match.group("text").strip(),
                spec=spec.strip() if spec is not None else None,
            )
        )
    return tuple(branches)


def find_invalid_rules(branches: tuple[Branch, ...]) -> tuple[str, ...]:
    """Collect the fragments of every explicit rule that cannot be applied.

    Only templates with at least one spec are checked. A rule is invalid when:
    - its bounds are not numbers, or a range lacks exactly two bounds;
    - an implicit branch precedes an explicit one.

    Bracketed text after the last explicit branch ("[NEW] :count items")
    is ordinary branch text.

    Returns:
        Offending spec or branch text, in declaration order (empty if valid)
    """
    explicit = [index for index, branch in enumerate(branches) if branch.is_explicit]
    if not explicit:
        return ()

    last_explicit = explicit[-1]
    invalid: list[str] = []
    for index, branch in enumerate(branches):
        if branch.spec is None:
            if index < last_explicit:
                invalid.append(branch.text)
            continue
        try:
            parse_interval(branch.spec)
        except InvalidIntervalError:
            invalid.append(branch.spec)
    return tuple(invalid)


def is_number(value: object) -> bool:
    """True for int, float and Decimal, but not bool."""
    return isinstance(value, int | float | Decimal) and not isinstance(value, bool)


def _is_nan(value: object) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, float) and math.isnan(value)


def normalize_count(count: object) -> NumericCount:
    """Reduce any accepted count to a plain number.

    Older call sites pass a mapping whose first value is the count (e.g.
    {"apples": 3}); that value is used when it is a number. Anything that is
    not a number after this step counts as 0, and so does NaN, which orders
    against nothing.

    Examples:
        >>> normalize_count(3)
        3
        >>> normalize_count({"apples": 3})
        3
        >>> normalize_count({"apples": "three"})
        0
        >>> normalize_count(Decimal("NaN"))
        0
    """
    if isinstance(count, Mapping):
        count = next(iter(count.values()), 0)
    if is_number(count) and not _is_nan(count):
        return count  # type: ignore[return-value]
    return 0


def _matching_branch(
    branches: tuple[Branch, ...], count: NumericCount
) -> Branch | None:
    """Return the first explicit branch whose interval contains count."""
    for branch in branches:
        if branch.spec is None:
            continue
        interval: Interval | None = parse_interval(branch.spec)
        if interval is not None and interval.contains(count):
            return branch
    return None


def resolve_branch(
    key: str, template: str, count: object
) -> tuple[str, tuple[Diagnostic, ...]]:
    """Select the branch of template that applies to count.

    Pure: diagnostics are returned, not logged.

    Args:
        key: Lookup key, for diagnostics only
        template: Raw template
        count: Count as accepted at the API boundary (normalized here)

    Returns:
        Tuple of (selected text, diagnostics). On a malformed template the
        text is the unmodified template and diagnostics holds one warning.
    """
    if not template:
        return template, ()

    branches = tokenize(template)
    if not branches:
        return template, (ErrorTemplate.no_branches(key, template),)

    invalid = find_invalid_rules(branches)
    if invalid:
        return template, (ErrorTemplate.invalid_explicit_rule(key, template, invalid[0]),)

    number = normalize_count(count)
    matched = _matching_branch(branches, number)
    if matched is not None:
        return matched.text, ()

    if number > 1 and len(branches) > 1:
        return branches[1].text, ()
    return branches[0].text, ()


def select_branch(key: str, template: str, count: object) -> str:
    """Select the branch of template that applies to count, logging problems.

    Examples:
        >>> select_branch("apples", "{0}No apple|{1}one apple|[2,*]apples", 0)
        'No apple'
        >>> select_branch("apples", "apple|apples", 2)
        'apples'
    """
    text, diagnostics = resolve_branch(key, template, count)
    for diagnostic in diagnostics:
        logger.warning("%s", diagnostic)
    return text
