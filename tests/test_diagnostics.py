"""Tests for the diagnostics package.

Coverage:
    - DiagnosticCode ranges and uniqueness
    - ErrorTemplate factories
    - DiagnosticFormatter output styles
    - Exception hierarchy and attached diagnostics
    - ValidationResult helpers
"""

from __future__ import annotations

import json

import pytest

from langresolver.diagnostics import (
    CatalogLoadError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    InvalidIntervalError,
    LangConfigurationError,
    LangError,
    OutputFormat,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)

# ============================================================================
# CODES
# ============================================================================


class TestDiagnosticCode:
    """Code numbering."""

    def test_values_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low", "high"),
        [
            (DiagnosticCode.CATALOG_MISSING, 1000, 1999),
            (DiagnosticCode.NO_BRANCHES, 2000, 2999),
            (DiagnosticCode.INTERVAL_BOUND_INVALID, 3000, 3999),
            (DiagnosticCode.VALIDATION_ENTRY_NOT_STRING, 4000, 4999),
        ],
    )
    def test_ranges(self, code: DiagnosticCode, low: int, high: int) -> None:
        assert low <= code.value <= high


# ============================================================================
# TEMPLATES
# ============================================================================


class TestErrorTemplate:
    """Diagnostic factories."""

    def test_catalog_missing(self) -> None:
        diagnostic = ErrorTemplate.catalog_missing()
        assert diagnostic.code is DiagnosticCode.CATALOG_MISSING
        assert diagnostic.severity == "error"
        assert diagnostic.hint is not None

    def test_catalog_invalid(self) -> None:
        diagnostic = ErrorTemplate.catalog_invalid("list")
        assert "got list" in diagnostic.message

    def test_invalid_explicit_rule(self) -> None:
        diagnostic = ErrorTemplate.invalid_explicit_rule("apples", "{0}a|[1,x]b", "[1,x]b")
        assert diagnostic.message == (
            "Message 'apples' may contain an invalid explicit rule "
            "within this message: '{0}a|[1,x]b'"
        )
        assert diagnostic.message_key == "apples"
        assert diagnostic.fragment == "[1,x]b"
        assert diagnostic.severity == "warning"
        assert str(diagnostic) == diagnostic.message

    def test_long_template_truncated(self) -> None:
        template = "x|" * 200
        diagnostic = ErrorTemplate.no_branches("k", template)
        assert "..." in diagnostic.message
        assert len(diagnostic.message) < len(template)

    def test_control_characters_escaped(self) -> None:
        diagnostic = ErrorTemplate.no_branches("k", "\x1b[31m|")
        assert "\x1b" not in diagnostic.message
        assert "\\x1b" in diagnostic.message

    def test_interval_bound_invalid(self) -> None:
        diagnostic = ErrorTemplate.interval_bound_invalid("[1,x]", "x")
        assert diagnostic.code is DiagnosticCode.INTERVAL_BOUND_INVALID
        assert diagnostic.fragment == "[1,x]"

    def test_interval_arity_mismatch(self) -> None:
        diagnostic = ErrorTemplate.interval_arity_mismatch("[1,2,3]", 3)
        assert "found 3" in diagnostic.message


# ============================================================================
# FORMATTER
# ============================================================================


class TestDiagnosticFormatter:
    """Output styles."""

    @pytest.fixture
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.invalid_explicit_rule("apples", "one|{2}two", "one")

    def test_rust(self, diagnostic: Diagnostic) -> None:
        lines = DiagnosticFormatter().format(diagnostic).splitlines()
        assert lines[0].startswith("warning[INVALID_EXPLICIT_RULE]: Message 'apples'")
        assert lines[1] == "  --> apples"
        assert lines[2] == "  = fragment: 'one'"
        assert lines[3].startswith("  = help: ")

    def test_rust_without_key(self) -> None:
        text = DiagnosticFormatter().format(ErrorTemplate.catalog_missing())
        assert text.startswith("error[CATALOG_MISSING]: No message catalog available")
        assert "-->" not in text

    def test_format_error_uses_rust_style(self, diagnostic: Diagnostic) -> None:
        assert diagnostic.format_error() == DiagnosticFormatter().format(diagnostic)

    def test_color(self, diagnostic: Diagnostic) -> None:
        text = DiagnosticFormatter(color=True).format(diagnostic)
        assert text.startswith("\033[1;33mwarning\033[0m[")

    def test_simple(self, diagnostic: Diagnostic) -> None:
        text = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic)
        assert text == f"INVALID_EXPLICIT_RULE: {diagnostic.message}"

    def test_json(self, diagnostic: Diagnostic) -> None:
        text = DiagnosticFormatter(output_format=OutputFormat.JSON).format(diagnostic)
        data = json.loads(text)
        assert data["code"] == "INVALID_EXPLICIT_RULE"
        assert data["code_value"] == 2002
        assert data["severity"] == "warning"
        assert data["message_key"] == "apples"
        assert data["fragment"] == "one"
        assert "hint" in data

    def test_json_omits_absent_fields(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.CATALOG_MISSING, message="m")
        data = json.loads(DiagnosticFormatter(output_format=OutputFormat.JSON).format(diagnostic))
        assert set(data) == {"code", "code_value", "message", "severity"}

    def test_sanitize(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.NO_BRANCHES, message="m" * 50)
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        assert formatter.format(diagnostic) == "NO_BRANCHES: mmmmmmmmmm..."

    def test_format_all(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        text = formatter.format_all(
            [ErrorTemplate.catalog_missing(), ErrorTemplate.catalog_invalid("int")]
        )
        assert text.count("\n\n") == 1


# ============================================================================
# ERRORS
# ============================================================================


class TestErrors:
    """Exception hierarchy."""

    def test_string_message(self) -> None:
        error = LangError("plain")
        assert str(error) == "plain"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        diagnostic = ErrorTemplate.catalog_missing()
        error = LangConfigurationError(diagnostic)
        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()

    @pytest.mark.parametrize(
        "error_type", [LangConfigurationError, InvalidIntervalError, CatalogLoadError]
    )
    def test_hierarchy(self, error_type: type[LangError]) -> None:
        assert issubclass(error_type, LangError)
        assert issubclass(error_type, Exception)

    def test_invalid_interval_spec(self) -> None:
        error = InvalidIntervalError("bad", spec="[1,x]")
        assert error.spec == "[1,x]"

    def test_catalog_load_path(self) -> None:
        error = CatalogLoadError("bad", path="lang/en.json")
        assert error.path == "lang/en.json"


# ============================================================================
# VALIDATION RESULT
# ============================================================================


class TestValidationResult:
    """Result helpers."""

    def test_valid(self) -> None:
        result = ValidationResult.valid()
        assert result.is_valid
        assert result.error_count == 0
        assert result.warning_count == 0

    def test_warnings_do_not_invalidate(self) -> None:
        result = ValidationResult.invalid(warnings=(ValidationWarning("w", "msg"),))
        assert result.is_valid
        assert result.format() == "Warnings (1):\n  [w]: msg"

    def test_error_format_redacted(self) -> None:
        error = ValidationError(
            code="no-branches", message="m", message_key="messages.k", content="secret"
        )
        assert error.format(sanitize=True, redact_content=True) == (
            "[no-branches] messages.k: m (content: '[content redacted]')"
        )

    def test_error_format_truncated(self) -> None:
        error = ValidationError(code="c", message="m", message_key="k", content="x" * 150)
        assert error.format(sanitize=True).endswith("...')")
        assert len(error.format(sanitize=True)) < len(error.format())

    def test_format_without_warnings(self) -> None:
        result = ValidationResult.invalid(
            errors=(ValidationError(code="c", message="m", message_key="k", content="t"),),
            warnings=(ValidationWarning("w", "msg", context="ctx"),),
        )
        text = result.format(include_warnings=False)
        assert "Warnings" not in text
        assert not result.is_valid
