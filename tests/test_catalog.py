"""Tests for runtime/catalog.py - key parsing and template lookup.

Coverage:
    - Explicit vs implicit groups, dots inside entry names
    - Lookup misses (absent group, absent entry, non-string value)
    - Snapshot isolation from the caller's dict
"""

from __future__ import annotations

import typing

import pytest
from hypothesis import given
from hypothesis import strategies as st

from langresolver import types
from langresolver.runtime.catalog import Catalog, ParsedKey


@pytest.fixture
def groups() -> dict[str, dict[str, object]]:
    return {
        "messages": {"hi": "Hello!", "nav.home": "Home", "count": 3},
        "errors": {"missing": "Not found", "deep.nested": "Deep"},
        "broken": "not a mapping",  # type: ignore[dict-item]
    }


class TestParseKey:
    """Classification of the first key segment."""

    def test_explicit_group(self, groups: dict[str, dict[str, object]]) -> None:
        catalog = Catalog(groups)
        assert catalog.parse_key("errors.missing") == ParsedKey("errors", "missing")

    def test_explicit_group_keeps_remaining_dots(
        self, groups: dict[str, dict[str, object]]
    ) -> None:
        catalog = Catalog(groups)
        assert catalog.parse_key("errors.deep.nested") == ParsedKey("errors", "deep.nested")

    def test_implicit_group(self, groups: dict[str, dict[str, object]]) -> None:
        assert Catalog(groups).parse_key("hi") == ParsedKey("messages", "hi")

    def test_unknown_prefix_keeps_whole_key(self, groups: dict[str, dict[str, object]]) -> None:
        assert Catalog(groups).parse_key("unknown.hi") == ParsedKey("messages", "unknown.hi")

    def test_group_name_alone_is_an_entry(self, groups: dict[str, dict[str, object]]) -> None:
        assert Catalog(groups).parse_key("errors") == ParsedKey("messages", "errors")

    def test_empty_key(self, groups: dict[str, dict[str, object]]) -> None:
        assert Catalog(groups).parse_key("") == ParsedKey("messages", "")

    def test_trailing_dot(self, groups: dict[str, dict[str, object]]) -> None:
        assert Catalog(groups).parse_key("errors.") == ParsedKey("errors", "")

    def test_non_mapping_group_still_counts_as_group(
        self, groups: dict[str, dict[str, object]]
    ) -> None:
        assert Catalog(groups).parse_key("broken.x") == ParsedKey("broken", "x")

    def test_custom_default_group(self) -> None:
        catalog = Catalog({"app": {"hi": "Hey"}}, default_group="app")
        assert catalog.parse_key("hi") == ParsedKey("app", "hi")
        assert catalog.default_group == "app"

    @given(key=st.text(alphabet="abc.", max_size=12))
    def test_never_raises_and_round_trips(self, key: str) -> None:
        catalog = Catalog({"a": {}, "b": {}})
        parsed = catalog.parse_key(key)
        if parsed.group == "messages":
            assert parsed.entry == key
        else:
            assert f"{parsed.group}.{parsed.entry}" == key


class TestLookup:
    """Template lookup."""

    def test_hit(self, groups: dict[str, dict[str, object]]) -> None:
        catalog = Catalog(groups)
        assert catalog.lookup("errors", "missing") == "Not found"
        assert catalog.get_template("errors.missing") == "Not found"

    def test_dotted_entry_in_default_group(self, groups: dict[str, dict[str, object]]) -> None:
        assert Catalog(groups).get_template("nav.home") == "Home"

    def test_absent_group(self, groups: dict[str, dict[str, object]]) -> None:
        assert Catalog(groups).lookup("nope", "hi") is None

    def test_absent_entry(self, groups: dict[str, dict[str, object]]) -> None:
        assert Catalog(groups).lookup("messages", "nope") is None

    def test_non_string_value(self, groups: dict[str, dict[str, object]]) -> None:
        assert Catalog(groups).lookup("messages", "count") is None

    def test_non_mapping_group(self, groups: dict[str, dict[str, object]]) -> None:
        assert Catalog(groups).get_template("broken.x") is None

    def test_missing_default_group(self) -> None:
        assert Catalog({"errors": {"x": "y"}}).get_template("x") is None


class TestSnapshot:
    """Catalog isolation and introspection."""

    def test_source_mutation_not_visible(self, groups: dict[str, dict[str, object]]) -> None:
        catalog = Catalog(groups)
        groups["messages"]["hi"] = "Changed"
        groups["extra"] = {"x": "y"}
        assert catalog.get_template("hi") == "Hello!"
        assert "extra" not in catalog.groups

    def test_messages_view_is_read_only(self, groups: dict[str, dict[str, object]]) -> None:
        catalog = Catalog(groups)
        with pytest.raises(TypeError):
            catalog.messages["messages"]["hi"] = "x"  # type: ignore[index]

    def test_len_and_repr(self, groups: dict[str, dict[str, object]]) -> None:
        catalog = Catalog(groups)
        assert len(catalog) == 5
        assert repr(catalog) == "Catalog(groups=3, entries=5)"

    def test_groups_include_non_mapping(self, groups: dict[str, dict[str, object]]) -> None:
        assert Catalog(groups).groups == frozenset({"messages", "errors", "broken"})


class TestAnnotations:
    """Catalog signatures use the domain type aliases."""

    def test_lookup_signature(self) -> None:
        hints = typing.get_type_hints(Catalog.lookup)
        assert hints["group"] is types.GroupName
        assert hints["entry"] is types.EntryKey

    def test_parse_key_signature(self) -> None:
        assert typing.get_type_hints(Catalog.parse_key)["key"] is types.MessageKey

    def test_public_aliases_are_used(self) -> None:
        assert "LegacyCount" not in types.__all__
        assert typing.get_type_hints(ParsedKey)["group"] is types.GroupName
