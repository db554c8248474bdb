"""Lang - Main API for message resolution.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Mapping

from langresolver.constants import COUNT_REPLACEMENT, DEFAULT_GROUP
from langresolver.diagnostics import Diagnostic, ErrorTemplate, LangConfigurationError
from langresolver.runtime.catalog import Catalog
from langresolver.runtime.plurals import is_number, normalize_count, resolve_branch
from langresolver.runtime.replacements import apply_replacements
from langresolver.types import CatalogProvider, Count, MessagesGroup, NumericCount, Replacements

__all__ = ["Lang", "init"]

logger = logging.getLogger(__name__)


class Lang:
    """Message resolver over one catalog.

    Resolves dotted keys to templates, picks the plural branch for a count,
    and substitutes :placeholders.

    Thread Safety:
        Resolution is pure over an immutable Catalog snapshot. set_messages()
        builds a new snapshot and publishes it with a single attribute
        assignment; every call reads that attribute once. Concurrent readers
        therefore see the old catalog or the new one, never a mix, and no
        lock is needed.

    Errors:
        Construction raises LangConfigurationError when no catalog is
        available. Nothing else raises: unknown keys resolve to the key
        itself, malformed plural templates resolve to the raw template and
        log a warning.

    Examples:
        >>> lang = Lang({"messages": {
        ...     "hi": "Hello :name!",
        ...     "apples": "{0}No apple|{1}one apple|[2,*]:count apples",
        ... }})
        >>> lang.get("hi", {"name": "Ann"})
        'Hello Ann!'
        >>> lang.choice("apples", 3)
        '3 apples'
        >>> lang.get("missing.key")
        'missing.key'
    """

    __slots__ = ("_catalog", "_default_group")

    def __init__(
        self,
        catalog: MessagesGroup | None = None,
        /,
        *,
        provider: CatalogProvider | None = None,
        default_group: str = DEFAULT_GROUP,
    ) -> None:
        """Initialize the resolver.

        Args:
            catalog: Group name -> (entry key -> template) [positional-only]
            provider: Fallback catalog source, consulted only when catalog
                      is None (e.g. a JsonCatalogLoader)
            default_group: Group used for keys without a known prefix

        Raises:
            LangConfigurationError: If neither catalog nor provider yields a
                                    catalog, or the catalog is not a mapping
        """
        source: object = catalog
        if source is None and provider is not None:
            source = provider()
        if source is None:
            raise LangConfigurationError(ErrorTemplate.catalog_missing())

        self._default_group = default_group
        self._catalog = self._snapshot(source)

        logger.info(
            "Lang initialized: %d groups, %d entries (default group: %s)",
            len(self._catalog.groups),
            len(self._catalog),
            default_group,
        )

    def _snapshot(self, source: object) -> Catalog:
        """Build an immutable Catalog from a caller-supplied mapping."""
        if not isinstance(source, Mapping):
            raise LangConfigurationError(ErrorTemplate.catalog_invalid(type(source).__name__))
        return Catalog(source, default_group=self._default_group)

    @property
    def catalog(self) -> Catalog:
        """Current catalog snapshot (read-only)."""
        return self._catalog

    @property
    def default_group(self) -> str:
        """Group used for keys without a known prefix (read-only)."""
        return self._default_group

    @property
    def groups(self) -> frozenset[str]:
        """Group names of the current catalog."""
        return self._catalog.groups

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> repr(Lang({"messages": {"hi": "Hello!"}}))
            "Lang(default_group='messages', groups=1, entries=1)"
        """
        catalog = self._catalog
        return (
            f"Lang(default_group={self._default_group!r}, "
            f"groups={len(catalog.groups)}, "
            f"entries={len(catalog)})"
        )

    def set_messages(self, catalog: MessagesGroup, /) -> None:
        """Replace the whole catalog.

        The new snapshot is fully built before it is published, so a
        concurrent get() sees either the previous catalog or this one.

        Raises:
            LangConfigurationError: If catalog is not a mapping
        """
        snapshot = self._snapshot(catalog)
        self._catalog = snapshot
        logger.info(
            "Messages replaced: %d groups, %d entries",
            len(snapshot.groups),
            len(snapshot),
        )

    def has(self, key: str, /) -> bool:
        """True if key resolves to a template string."""
        return self._catalog.get_template(key) is not None

    def resolve(
        self,
        key: str,
        /,
        replacements: Replacements | None = None,
        count: Count | None = None,
    ) -> tuple[str, tuple[Diagnostic, ...]]:
        """Resolve key and report problems instead of logging them.

        Same pipeline as get(); callers that surface diagnostics themselves
        (CI checks, admin tooling) use this form.

        Returns:
            Tuple of (text, diagnostics)

        Example:
            >>> text, diagnostics = lang.resolve("apples", count=2)
            >>> if diagnostics:
            ...     for diagnostic in diagnostics:
            ...         print(diagnostic.format_error())
        """
        template = self._catalog.get_template(key)
        if template is None:
            logger.debug("Message not found: %r", key)
            return key, ()

        text, diagnostics = resolve_branch(key, template, _effective_count(replacements, count))
        if replacements is not None:
            text = apply_replacements(text, replacements)
        return text, diagnostics

    def get(
        self,
        key: str,
        /,
        replacements: Replacements | None = None,
        count: Count | None = None,
    ) -> str:
        """Return the resolved message, or key itself if it is unknown.

        Args:
            key: Lookup key, optionally prefixed with a group ("errors.missing")
            replacements: Placeholder values; "count" doubles as the count
                          when no explicit count is given
            count: Number selecting the plural branch

        Returns:
            Resolved text
        """
        text, diagnostics = self.resolve(key, replacements, count)
        for diagnostic in diagnostics:
            logger.warning("%s", diagnostic)
        return text

    def choice(
        self,
        key: str,
        count: Count,
        /,
        replacements: Replacements | None = None,
    ) -> str:
        """Return the plural form of key for count.

        count is also exposed as the :count placeholder, overriding any
        "count" in replacements. The caller's mapping is not modified.
        """
        merged = dict(replacements) if replacements is not None else {}
        merged[COUNT_REPLACEMENT] = count  # type: ignore[assignment]
        return self.get(key, merged, count)


def _effective_count(replacements: Replacements | None, count: Count | None) -> NumericCount:
    """Explicit count wins, then a numeric replacements["count"], then 0."""
    if count is not None:
        return normalize_count(count)
    if replacements is not None:
        candidate = replacements.get(COUNT_REPLACEMENT)
        if is_number(candidate):
            return normalize_count(candidate)
    return 0


def init(
    catalog: MessagesGroup | None = None,
    /,
    *,
    provider: CatalogProvider | None = None,
    default_group: str = DEFAULT_GROUP,
) -> Lang:
    """Construct a Lang.

    Consumers keep the returned handle and pass it along; there is no
    process-wide instance.

    Raises:
        LangConfigurationError: If no catalog is available
    """
    return Lang(catalog, provider=provider, default_group=default_group)
