"""Exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class LangError(Exception):
    """Base exception for all langresolver errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LangError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class LangConfigurationError(LangError):
    """No usable catalog at construction time.

    Raised by Lang() and init() when neither the catalog argument nor the
    injected provider yields a catalog, or when the catalog is not a mapping.
    This is the only failure Lang raises; resolution itself never does.
    """


class InvalidIntervalError(LangError):
    """Interval spec whose bounds cannot be read as numbers.

    Raised by parse_interval() and test_interval(). The plural selector
    catches it and reports the template as malformed instead.

    Attributes:
        spec: The offending interval spec text
    """

    def __init__(self, message: str | Diagnostic, *, spec: str = "") -> None:
        """Initialize InvalidIntervalError.

        Args:
            message: Error message string OR Diagnostic object
            spec: The interval spec that failed to parse
        """
        super().__init__(message)
        self.spec = spec


class CatalogLoadError(LangError):
    """Catalog file missing, unreadable, or not shaped like a catalog.

    Attributes:
        path: Path that failed to load
    """

    def __init__(self, message: str | Diagnostic, *, path: str = "") -> None:
        """Initialize CatalogLoadError.

        Args:
            message: Error message string OR Diagnostic object
            path: File or directory that failed to load
        """
        super().__init__(message)
        self.path = path
