"""Resolution runtime package.

Provides the catalog snapshot, interval matching, plural branch selection,
placeholder substitution, and the Lang API.

Python 3.13+.
"""

from .catalog import Catalog, ParsedKey
from .intervals import Interval, parse_interval, test_interval
from .lang import Lang, init
from .plurals import Branch, normalize_count, resolve_branch, select_branch, tokenize
from .replacements import apply_replacements, format_value

__all__ = [
    "Branch",
    "Catalog",
    "Interval",
    "Lang",
    "ParsedKey",
    "apply_replacements",
    "format_value",
    "init",
    "normalize_count",
    "parse_interval",
    "resolve_branch",
    "select_branch",
    "test_interval",
    "tokenize",
]
