"""Type aliases for the catalog and resolution domain.

Provides semantic type aliases used throughout the package and by user code
when annotating Lang call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from decimal import Decimal
from typing import Protocol, TypeAlias

__all__ = [
    "CatalogProvider",
    "Count",
    "EntryKey",
    "GroupName",
    "MessageKey",
    "Messages",
    "MessagesGroup",
    "NumericCount",
    "ReplacementValue",
    "Replacements",
    "Template",
]

GroupName: TypeAlias = str
"""Name of a message group (e.g., 'messages', 'errors')."""

EntryKey: TypeAlias = str
"""Entry name inside a group (e.g., 'missing', 'nav.home')."""

MessageKey: TypeAlias = str
"""Lookup key, optionally group-prefixed (e.g., 'errors.missing', 'hi')."""

Template: TypeAlias = str
"""Raw template text, possibly with plural branches and :placeholders."""

Messages: TypeAlias = Mapping[EntryKey, Template]
"""Entries of one group."""

MessagesGroup: TypeAlias = Mapping[GroupName, Messages]
"""A full catalog: group name to its entries."""

ReplacementValue: TypeAlias = str | int | float | Decimal
"""Scalar substituted for a :placeholder."""

Replacements: TypeAlias = Mapping[str, ReplacementValue]
"""Placeholder name (without the leading colon) to its value."""

NumericCount: TypeAlias = int | float | Decimal
"""Plain number driving plural branch selection."""

Count: TypeAlias = NumericCount | Mapping[str, object]
"""Any count accepted at the API boundary.

Older call sites pass a mapping whose first value is the count.
"""


class CatalogProvider(Protocol):
    """Zero-argument source of a fallback catalog.

    Consulted by Lang only when no catalog argument is given. Returning None
    means the provider has nothing to offer.

    Example:
        >>> def from_settings() -> MessagesGroup | None:
        ...     return settings.MESSAGES
        >>> lang = Lang(provider=from_settings)
    """

    def __call__(self) -> MessagesGroup | None:
        """Return the catalog, or None when unavailable."""
