"""Catalog validation.

Checks every template of a catalog without resolving anything. Use it in CI
or when loading catalogs from an untrusted source, before handing them to
Lang.

Errors mark templates that resolution would return unmodified (the plural
rules cannot be applied). Warnings mark entries that can never resolve, or
interval specs that never match.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Mapping

from langresolver.constants import KEY_SEPARATOR
from langresolver.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)
from langresolver.runtime.intervals import classify_interval
from langresolver.runtime.plurals import find_invalid_rules, tokenize

__all__ = ["validate_catalog"]

logger = logging.getLogger(__name__)


def _code(diagnostic: Diagnostic) -> str:
    """Kebab-case code string for a diagnostic (INVALID_EXPLICIT_RULE -> invalid-explicit-rule)."""
    return diagnostic.code.name.lower().replace("_", "-")


def _to_warning(diagnostic: Diagnostic, context: str) -> ValidationWarning:
    return ValidationWarning(code=_code(diagnostic), message=diagnostic.message, context=context)


def _validate_template(
    key: str, template: str
) -> tuple[list[ValidationError], list[ValidationWarning]]:
    """Validate one template.

    Args:
        key: Fully qualified key ("group.entry")
        template: Template text

    Returns:
        Tuple of (errors, warnings)
    """
    errors: list[ValidationError] = []
    warnings: list[ValidationWarning] = []

    if not template:
        return errors, warnings

    branches = tokenize(template)
    if not branches:
        diagnostic = ErrorTemplate.no_branches(key, template)
        errors.append(
            ValidationError(
                code=_code(diagnostic),
                message=diagnostic.message,
                message_key=key,
                content=template,
            )
        )
        return errors, warnings

    for fragment in find_invalid_rules(branches):
        diagnostic = ErrorTemplate.invalid_explicit_rule(key, template, fragment)
        errors.append(
            ValidationError(
                code=_code(diagnostic),
                message=diagnostic.message,
                message_key=key,
                content=template,
            )
        )

    for branch in branches:
        if branch.spec is not None and classify_interval(branch.spec) is None:
            diagnostic = ErrorTemplate.interval_unrecognized(key, branch.spec)
            warnings.append(_to_warning(diagnostic, key))

    return errors, warnings


def validate_catalog(catalog: Mapping[str, object]) -> ValidationResult:
    """Validate every template of a catalog.

    Args:
        catalog: Group name -> (entry key -> template)

    Returns:
        ValidationResult with template errors and structural warnings

    Example:
        >>> result = validate_catalog({"messages": {"bad": "{0}none|[1,In]some"}})
        >>> result.is_valid
        False
        >>> result.errors[0].message_key
        'messages.bad'
    """
    errors: list[ValidationError] = []
    warnings: list[ValidationWarning] = []

    for group, entries in catalog.items():
        if KEY_SEPARATOR in group:
            warnings.append(_to_warning(ErrorTemplate.group_name_dotted(group), group))

        if not isinstance(entries, Mapping):
            diagnostic = ErrorTemplate.group_not_mapping(group, type(entries).__name__)
            warnings.append(_to_warning(diagnostic, group))
            continue

        for entry, template in entries.items():
            key = f"{group}{KEY_SEPARATOR}{entry}"
            if not isinstance(template, str):
                diagnostic = ErrorTemplate.entry_not_string(key, type(template).__name__)
                warnings.append(_to_warning(diagnostic, key))
                continue
            template_errors, template_warnings = _validate_template(key, template)
            errors.extend(template_errors)
            warnings.extend(template_warnings)

    logger.debug(
        "Catalog validated: %d errors, %d warnings", len(errors), len(warnings)
    )
    if not errors and not warnings:
        return ValidationResult.valid()
    return ValidationResult.invalid(errors=tuple(errors), warnings=tuple(warnings))
