"""Immutable catalog snapshot with key parsing and template lookup.

A Catalog is built once from a caller's mapping and never changes. Replacing
the messages of a Lang means building a new Catalog and swapping the
reference, so readers see either the old snapshot or the new one.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from langresolver.constants import DEFAULT_GROUP, KEY_SEPARATOR
from langresolver.types import EntryKey, GroupName, MessageKey, Template

__all__ = [
    "Catalog",
    "ParsedKey",
]


@dataclass(frozen=True, slots=True)
class ParsedKey:
    """Lookup key split into group and entry.

    Attributes:
        group: Group name (the default group when the key had no known prefix)
        entry: Entry name inside the group
    """

    group: GroupName
    entry: EntryKey


class Catalog:
    """Read-only snapshot of grouped message templates.

    The caller's mappings are copied on construction, so later mutation of
    the source dict does not leak into resolution. Group values that are not
    mappings are kept as group names for key parsing but never resolve.

    Examples:
        >>> catalog = Catalog({"messages": {"hi": "Hello!"}, "errors": {"missing": "Not found"}})
        >>> catalog.parse_key("errors.missing")
        ParsedKey(group='errors', entry='missing')
        >>> catalog.parse_key("unknown.hi")
        ParsedKey(group='messages', entry='unknown.hi')
        >>> catalog.get_template("hi")
        'Hello!'
    """

    __slots__ = ("_default_group", "_group_names", "_groups")

    def __init__(
        self,
        groups: Mapping[str, object],
        /,
        *,
        default_group: str = DEFAULT_GROUP,
    ) -> None:
        """Snapshot groups.

        Args:
            groups: Group name to entry mapping [positional-only]
            default_group: Group used for keys without a known prefix
        """
        frozen: dict[str, Mapping[str, object]] = {}
        for name, entries in groups.items():
            if isinstance(entries, Mapping):
                frozen[name] = MappingProxyType(dict(entries))
        self._groups: Mapping[str, Mapping[str, object]] = MappingProxyType(frozen)
        self._group_names: frozenset[str] = frozenset(groups)
        self._default_group = default_group

    @property
    def default_group(self) -> str:
        """Group used for keys without a known prefix (read-only)."""
        return self._default_group

    @property
    def groups(self) -> frozenset[str]:
        """All group names, including ones whose value is not a mapping."""
        return self._group_names

    @property
    def messages(self) -> Mapping[str, Mapping[str, object]]:
        """Read-only view of the resolvable groups."""
        return self._groups

    def __len__(self) -> int:
        """Total number of entries across all resolvable groups."""
        return sum(len(entries) for entries in self._groups.values())

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"Catalog(groups={len(self._group_names)}, entries={len(self)})"

    def parse_key(self, key: MessageKey) -> ParsedKey:
        """Split a lookup key into group and entry.

        The first dot-segment is a group only when it exactly names a group
        of this catalog. Otherwise the whole, unsplit key is the entry name in
        the default group, so entry names may contain dots.
        """
        group, separator, entry = key.partition(KEY_SEPARATOR)
        if separator and group in self._group_names:
            return ParsedKey(group=group, entry=entry)
        return ParsedKey(group=self._default_group, entry=key)

    def lookup(self, group: GroupName, entry: EntryKey) -> Template | None:
        """Return the template stored under group/entry, or None.

        None covers an absent group, a group that is not a mapping, an absent
        entry, and an entry whose value is not a string.
        """
        entries = self._groups.get(group)
        if entries is None:
            return None
        template = entries.get(entry)
        if not isinstance(template, str):
            return None
        return template

    def get_template(self, key: MessageKey) -> Template | None:
        """Parse key and look up its template."""
        parsed = self.parse_key(key)
        return self.lookup(parsed.group, parsed.entry)
