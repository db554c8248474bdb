"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from langresolver.constants import LOG_TRUNCATE_WARNING

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


def _excerpt(text: str) -> str:
    """Truncate and repr() template text for display.

    repr() escapes control characters (prevents ANSI/log injection) while
    keeping Unicode letters readable.
    """
    if len(text) > LOG_TRUNCATE_WARNING:
        return repr(text[:LOG_TRUNCATE_WARNING] + "...")
    return repr(text)


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @staticmethod
    def catalog_missing() -> Diagnostic:
        """No catalog passed and no provider supplied one.

        Returns:
            Diagnostic for CATALOG_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.CATALOG_MISSING,
            message="No message catalog available",
            hint="Pass a catalog to Lang()/init() or inject a provider that returns one",
        )

    @staticmethod
    def catalog_invalid(received_type: str) -> Diagnostic:
        """Catalog is not a mapping of groups.

        Args:
            received_type: Type name of the rejected value

        Returns:
            Diagnostic for CATALOG_INVALID
        """
        msg = f"Message catalog must be a mapping of groups, got {received_type}"
        return Diagnostic(
            code=DiagnosticCode.CATALOG_INVALID,
            message=msg,
            hint="Use a dict such as {'messages': {'hi': 'Hello!'}}",
        )

    @staticmethod
    def catalog_load_failed(path: str, reason: str) -> Diagnostic:
        """Catalog file could not be loaded.

        Args:
            path: File or directory that failed
            reason: Short description of the failure

        Returns:
            Diagnostic for CATALOG_LOAD_FAILED
        """
        msg = f"Failed to load catalog from '{path}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.CATALOG_LOAD_FAILED,
            message=msg,
            hint="Catalog files are JSON objects of group -> {entry: template}",
        )

    # ------------------------------------------------------------------
    # Templates
    # ------------------------------------------------------------------

    @staticmethod
    def no_branches(message_key: str, template: str) -> Diagnostic:
        """Template yielded no branches at all (e.g. only pipes).

        Args:
            message_key: Lookup key of the entry
            template: The raw template

        Returns:
            Diagnostic for NO_BRANCHES
        """
        msg = f"Message '{message_key}' has no pluralization branches: {_excerpt(template)}"
        return Diagnostic(
            code=DiagnosticCode.NO_BRANCHES,
            message=msg,
            hint="Separate non-empty branches with '|'",
            message_key=message_key,
            severity="warning",
        )

    @staticmethod
    def invalid_explicit_rule(message_key: str, template: str, fragment: str) -> Diagnostic:
        """Template has an explicit rule that cannot be applied.

        Args:
            message_key: Lookup key of the entry
            template: The raw template
            fragment: The offending spec or branch

        Returns:
            Diagnostic for INVALID_EXPLICIT_RULE
        """
        msg = (
            f"Message '{message_key}' may contain an invalid explicit rule "
            f"within this message: {_excerpt(template)}"
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_EXPLICIT_RULE,
            message=msg,
            hint=(
                "Every branch before the last ruled branch needs a rule, and rules "
                "may only hold numbers, '*' or 'Inf'"
            ),
            message_key=message_key,
            fragment=fragment,
            severity="warning",
        )

    # ------------------------------------------------------------------
    # Intervals
    # ------------------------------------------------------------------

    @staticmethod
    def interval_bound_invalid(spec: str, bound: str) -> Diagnostic:
        """Interval bound is not a number.

        Args:
            spec: Full interval spec
            bound: The bound that failed to parse

        Returns:
            Diagnostic for INTERVAL_BOUND_INVALID
        """
        msg = f"Interval {spec!r} has a bound that is not a number: {bound!r}"
        return Diagnostic(
            code=DiagnosticCode.INTERVAL_BOUND_INVALID,
            message=msg,
            hint="Use digits, '*', 'Inf', '+Inf' or '-Inf'",
            fragment=spec,
        )

    @staticmethod
    def interval_arity_mismatch(spec: str, found: int) -> Diagnostic:
        """Range interval without exactly two bounds.

        Args:
            spec: Full interval spec
            found: Number of bounds present

        Returns:
            Diagnostic for INTERVAL_ARITY_MISMATCH
        """
        msg = f"Range interval {spec!r} needs exactly 2 bounds, found {found}"
        return Diagnostic(
            code=DiagnosticCode.INTERVAL_ARITY_MISMATCH,
            message=msg,
            hint="Write ranges as [lower,upper]; use {n} for a single number",
            fragment=spec,
        )

    @staticmethod
    def interval_unrecognized(message_key: str, spec: str) -> Diagnostic:
        """Interval spec delimiters form none of the known shapes.

        Args:
            message_key: Lookup key of the entry
            spec: The interval spec

        Returns:
            Diagnostic for INTERVAL_UNRECOGNIZED
        """
        msg = f"Message '{message_key}' has an interval that never matches: {spec!r}"
        return Diagnostic(
            code=DiagnosticCode.INTERVAL_UNRECOGNIZED,
            message=msg,
            hint="Use {a,b}, [a,b], ]a,b[, [a,b[ or ]a,b]",
            message_key=message_key,
            fragment=spec,
            severity="warning",
        )

    # ------------------------------------------------------------------
    # Catalog validation
    # ------------------------------------------------------------------

    @staticmethod
    def group_name_dotted(group: str) -> Diagnostic:
        """Group name containing the key separator.

        Args:
            group: The group name

        Returns:
            Diagnostic for VALIDATION_GROUP_NAME_DOTTED
        """
        msg = f"Group '{group}' contains '.' and cannot be addressed by an explicit key"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_GROUP_NAME_DOTTED,
            message=msg,
            hint="Rename the group without dots",
            fragment=group,
            severity="warning",
        )

    @staticmethod
    def group_not_mapping(group: str, received_type: str) -> Diagnostic:
        """Group whose value is not a mapping of entries.

        Args:
            group: The group name
            received_type: Type name of the group value

        Returns:
            Diagnostic for VALIDATION_GROUP_NOT_MAPPING
        """
        msg = f"Group '{group}' is not a mapping of entries (got {received_type})"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_GROUP_NOT_MAPPING,
            message=msg,
            hint="Lookups in this group always miss",
            fragment=group,
            severity="warning",
        )

    @staticmethod
    def entry_not_string(message_key: str, received_type: str) -> Diagnostic:
        """Entry whose value is not a template string.

        Args:
            message_key: Lookup key of the entry
            received_type: Type name of the entry value

        Returns:
            Diagnostic for VALIDATION_ENTRY_NOT_STRING
        """
        msg = f"Entry '{message_key}' is not a string (got {received_type})"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_ENTRY_NOT_STRING,
            message=msg,
            hint="Lookups of this key always miss and return the key itself",
            message_key=message_key,
            severity="warning",
        )
