"""Validation result types for catalog validation.

Consolidates feedback from template checks (errors that change resolution
output) and structural checks (warnings about entries that can never
resolve).

Python 3.13+.
"""

from dataclasses import dataclass

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]


# Maximum content length before truncation when sanitizing
_SANITIZE_MAX_CONTENT_LENGTH: int = 100


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Template that resolution would return unmodified.

    Attributes:
        code: Error code (e.g., "invalid-explicit-rule", "no-branches")
        message: Human-readable error message
        message_key: Fully qualified key of the entry ("group.entry")
        content: The offending template

    Security Note:
        The `content` field holds catalog text that may not be fit for end
        users. Use format(sanitize=True) to truncate or redact it.
    """

    code: str
    message: str
    message_key: str
    content: str

    def format(
        self,
        *,
        sanitize: bool = False,
        redact_content: bool = False,
    ) -> str:
        """Format error as human-readable string.

        Args:
            sanitize: If True, truncate content to prevent information leakage.
            redact_content: If True (and sanitize=True), completely redact
                           content instead of truncating.

        Returns:
            Formatted error string with optional content sanitization.
        """
        if sanitize:
            if redact_content:
                content_display = "[content redacted]"
            elif len(self.content) > _SANITIZE_MAX_CONTENT_LENGTH:
                content_display = self.content[:_SANITIZE_MAX_CONTENT_LENGTH] + "..."
            else:
                content_display = self.content
        else:
            content_display = self.content

        return f"[{self.code}] {self.message_key}: {self.message} (content: {content_display!r})"


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """Structural warning from catalog validation.

    Attributes:
        code: Warning code (e.g., "entry-not-string", "group-name-dotted")
        message: Human-readable warning message
        context: Additional context (e.g., the group or key involved)
    """

    code: str
    message: str
    context: str | None = None


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of validating a whole catalog.

    Immutable result object for thread-safe validation feedback.

    Attributes:
        errors: Templates with invalid pluralization rules
        warnings: Structural warnings

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    errors: tuple[ValidationError, ...]
    warnings: tuple[ValidationWarning, ...]

    @property
    def is_valid(self) -> bool:
        """True if no errors were found. Warnings do not affect validity."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Number of errors."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Number of warnings."""
        return len(self.warnings)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a valid result with no errors or warnings."""
        return ValidationResult(errors=(), warnings=())

    @staticmethod
    def invalid(
        errors: tuple[ValidationError, ...] = (),
        warnings: tuple[ValidationWarning, ...] = (),
    ) -> "ValidationResult":
        """Create a result with errors and/or warnings.

        Args:
            errors: Tuple of validation errors (default: empty)
            warnings: Tuple of validation warnings (default: empty)

        Returns:
            ValidationResult with provided errors/warnings
        """
        return ValidationResult(errors=errors, warnings=warnings)

    def format(
        self,
        *,
        sanitize: bool = False,
        redact_content: bool = False,
        include_warnings: bool = True,
    ) -> str:
        """Format validation result as human-readable string.

        Args:
            sanitize: If True, truncate error content.
            redact_content: If True (and sanitize=True), completely redact
                           error content instead of truncating.
            include_warnings: If True (default), include warnings in output.

        Returns:
            Formatted string with errors and optionally warnings.
        """
        lines: list[str] = []

        if self.errors:
            lines.append(f"Errors ({len(self.errors)}):")
            for error in self.errors:
                lines.append(f"  {error.format(sanitize=sanitize, redact_content=redact_content)}")

        if include_warnings and self.warnings:
            lines.append(f"Warnings ({len(self.warnings)}):")
            for warning in self.warnings:
                context = f" ({warning.context})" if warning.context else ""
                lines.append(f"  [{warning.code}]: {warning.message}{context}")

        if not lines:
            return "Validation passed: no errors or warnings"

        return "\n".join(lines)
