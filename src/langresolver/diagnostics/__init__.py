"""Diagnostic system for langresolver errors.

Provides structured error diagnostics with codes, hints, and the offending
template fragment. Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CatalogLoadError,
    InvalidIntervalError,
    LangConfigurationError,
    LangError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationError, ValidationResult, ValidationWarning

__all__ = [
    "CatalogLoadError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidIntervalError",
    "LangConfigurationError",
    "LangError",
    "OutputFormat",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]
