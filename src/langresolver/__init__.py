"""langresolver - grouped message catalogs with interval pluralization.

Resolves dotted keys against a catalog of grouped templates, selects plural
branches with interval rules ({0}, [2,4], [5,*]) or plain singular/plural
pairs, and substitutes :placeholders.

Public API:
    Lang - Message resolver over one catalog
    init - Construct a Lang
    validate_catalog - Check every template of a catalog
    JsonCatalogLoader - Load catalogs from JSON files
    test_interval / parse_interval - Interval spec matching
    select_branch - Plural branch selection
    apply_replacements - Placeholder substitution

Exceptions:
    LangError - Base exception class
    LangConfigurationError - No catalog available at construction
    InvalidIntervalError - Interval bounds are not numbers
    CatalogLoadError - Catalog file missing or malformed

Submodules:
    langresolver.runtime - Catalog, intervals, plurals, replacements, Lang
    langresolver.diagnostics - Diagnostic codes, error types, formatting
    langresolver.validation - Catalog validation
    langresolver.loading - JSON catalog loader
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    CatalogLoadError,
    InvalidIntervalError,
    LangConfigurationError,
    LangError,
)
from .loading import JsonCatalogLoader
from .runtime import (
    Lang,
    apply_replacements,
    init,
    parse_interval,
    select_branch,
    test_interval,
)
from .validation import validate_catalog

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("langresolver")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CatalogLoadError",
    "InvalidIntervalError",
    "JsonCatalogLoader",
    "Lang",
    "LangConfigurationError",
    "LangError",
    "__version__",
    "apply_replacements",
    "init",
    "parse_interval",
    "select_branch",
    "test_interval",
    "validate_catalog",
]
