"""Placeholder substitution.

Placeholders are written ":name". Every replacement key is applied to the
whole text in mapping order, one key at a time. A value containing another
placeholder token may therefore be substituted again by a later key;
ordering is observable.

Python 3.13+. Zero external dependencies.
"""

from langresolver.constants import PLACEHOLDER_PREFIX
from langresolver.types import ReplacementValue, Replacements, Template

__all__ = [
    "apply_replacements",
    "format_value",
]


def format_value(value: ReplacementValue) -> str:
    """Render a replacement value as text.

    Booleans render as "true"/"false" and integral floats drop the trailing
    ".0" so that counts read naturally ("2 apples", not "2.0 apples").

    Examples:
        >>> format_value(2.0)
        '2'
        >>> format_value(2.5)
        '2.5'
        >>> format_value(Decimal("1.50"))
        '1.50'
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def apply_replacements(text: Template, replacements: Replacements) -> str:
    """Replace every ":name" in text with the matching replacement value.

    Args:
        text: Text containing placeholders
        replacements: Placeholder name (no leading colon) to value

    Returns:
        Text with every occurrence of every placeholder replaced

    Examples:
        >>> apply_replacements("Hi :name, bye :name", {"name": "Ann"})
        'Hi Ann, bye Ann'
        >>> apply_replacements(":a", {"a": ":b", "b": "x"})
        'x'
    """
    for name, value in replacements.items():
        text = text.replace(f"{PLACEHOLDER_PREFIX}{name}", format_value(value))
    return text
