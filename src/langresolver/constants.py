"""Shared constants for langresolver.

Centralized configuration constants used across the runtime, validation and
loading packages. Placing constants here avoids circular imports and provides
a single source of truth.

Constants are grouped by domain:
- Catalog layout: default group and key separator
- Template grammar: placeholder prefix, interval delimiters
- Logging limits: truncation of template text in log records

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Catalog layout
    "DEFAULT_GROUP",
    "KEY_SEPARATOR",
    # Template grammar
    "PLACEHOLDER_PREFIX",
    "COUNT_REPLACEMENT",
    "SET_OPEN",
    "SET_CLOSE",
    "INCLUSIVE_OPEN",
    "INCLUSIVE_CLOSE",
    "EXCLUSIVE_OPEN",
    "EXCLUSIVE_CLOSE",
    # Logging limits
    "LOG_TRUNCATE_WARNING",
]

# ============================================================================
# CATALOG LAYOUT
# ============================================================================

# Group used when a lookup key carries no explicit, known group prefix.
DEFAULT_GROUP: str = "messages"

# Separates the group name from the entry name in a lookup key.
KEY_SEPARATOR: str = "."

# ============================================================================
# TEMPLATE GRAMMAR
# ============================================================================

# Placeholders are written as ":name" inside templates.
PLACEHOLDER_PREFIX: str = ":"

# Reserved replacement name that choice() fills with the count.
COUNT_REPLACEMENT: str = "count"

# Interval delimiters. ISO 31-11 reversed brackets (]1,5[) are exclusive,
# as are parentheses.
SET_OPEN: str = "{"
SET_CLOSE: str = "}"
INCLUSIVE_OPEN: str = "["
INCLUSIVE_CLOSE: str = "]"
EXCLUSIVE_OPEN: frozenset[str] = frozenset({"(", "]", ")"})
EXCLUSIVE_CLOSE: frozenset[str] = frozenset({")", "[", "("})

# ============================================================================
# LOGGING LIMITS
# ============================================================================

# Template text quoted in warnings is cut to this many characters.
LOG_TRUNCATE_WARNING: int = 100
