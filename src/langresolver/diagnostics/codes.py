"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (catalog missing or unusable)
        2000-2999: Template errors (pluralization rules)
        3000-3999: Interval errors (bound parsing, unrecognized shapes)
        4000-4999: Catalog validation warnings
    """

    # Configuration errors (1000-1999)
    CATALOG_MISSING = 1001
    CATALOG_INVALID = 1002
    CATALOG_LOAD_FAILED = 1003

    # Template errors (2000-2999)
    NO_BRANCHES = 2001
    INVALID_EXPLICIT_RULE = 2002

    # Interval errors (3000-3999)
    INTERVAL_BOUND_INVALID = 3001
    INTERVAL_ARITY_MISMATCH = 3002
    INTERVAL_UNRECOGNIZED = 3003

    # Validation warnings (4000-4999)
    VALIDATION_GROUP_NAME_DOTTED = 4001
    VALIDATION_GROUP_NOT_MAPPING = 4002
    VALIDATION_ENTRY_NOT_STRING = 4003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context to find the
    offending catalog entry without re-running resolution.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        message_key: Lookup key of the entry involved (None for catalog-level errors)
        fragment: Offending piece of template text (spec or branch)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    message_key: str | None = None
    fragment: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            warning[INVALID_EXPLICIT_RULE]: Message 'apples' may contain an invalid ...
              --> apples
              = fragment: '[1,In]'
              = help: Every branch before the last ruled branch needs a rule, ...

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
