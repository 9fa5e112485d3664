"""Tests for LocaleTextTable and LocaleTableRegistry.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from keytextengine.constants import DEFAULT_LOCALE_TAG
from keytextengine.diagnostics import DiagnosticCode, KeyTextConfigurationError
from keytextengine.tables import LocaleTableRegistry, LocaleTextTable


class TestLocaleTextTable:
    """Slot access on a single table."""

    def test_slot_present(self) -> None:
        table = LocaleTextTable.from_sequence("xx", ["a", None, "c"])

        assert table.slot(0) == "a"
        assert table.slot(2) == "c"

    def test_none_slot_is_absent(self) -> None:
        table = LocaleTextTable.from_sequence("xx", ["a", None])

        assert table.slot(1) is None

    def test_past_end_is_absent(self) -> None:
        """Short tables leave trailing slots absent."""
        table = LocaleTextTable.from_sequence("xx", ["a"])

        assert table.slot(1) is None
        assert table.slot(500) is None

    def test_negative_id_is_absent(self) -> None:
        """Negative ids never index from the end."""
        table = LocaleTextTable.from_sequence("xx", ["a", "b"])

        assert table.slot(-1) is None

    def test_empty_string_is_present(self) -> None:
        """An empty string is a value, not an absent slot."""
        table = LocaleTextTable.from_sequence("xx", [""])

        assert table.slot(0) == ""

    def test_from_sequence_copies(self) -> None:
        """Later changes to the source list do not leak in."""
        source = ["a"]
        table = LocaleTextTable.from_sequence("xx", source)
        source[0] = "changed"

        assert table.slot(0) == "a"
        assert len(table) == 1


class TestRegistryConstruction:
    """Validation when indexing tables."""

    def test_default_required(self) -> None:
        """A registry without a default table is rejected."""
        with pytest.raises(KeyTextConfigurationError) as exc_info:
            LocaleTableRegistry({"en": ("a",)})

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.DEFAULT_TABLE_MISSING

    def test_custom_default_tag(self) -> None:
        """The default tag is configurable."""
        registry = LocaleTableRegistry({"base": ("a",)}, default_tag="base")

        assert registry.default_tag == "base"
        assert registry.table_for("fr").locale_tag == "base"

    def test_table_longer_than_size_rejected(self) -> None:
        """Tables cannot have more slots than names."""
        with pytest.raises(KeyTextConfigurationError) as exc_info:
            LocaleTableRegistry({DEFAULT_LOCALE_TAG: ("a", "b"), "en": ("a", "b", "c")}, size=2)

        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.TABLE_TOO_LONG
        assert diagnostic.locale_tag == "en"

    def test_table_equal_to_size_accepted(self) -> None:
        registry = LocaleTableRegistry({DEFAULT_LOCALE_TAG: ("a", "b")}, size=2)

        assert len(registry.default_table) == 2

    def test_prebuilt_tables_kept(self) -> None:
        """LocaleTextTable values are used as given."""
        table = LocaleTextTable("en", ("E",))
        registry = LocaleTableRegistry({DEFAULT_LOCALE_TAG: ("D",), "en": table})

        assert registry.table_for("en") is table


class TestRegistryLookup:
    """table_for() and the read-only views."""

    @pytest.fixture
    def registry(self) -> LocaleTableRegistry:
        return LocaleTableRegistry({DEFAULT_LOCALE_TAG: ("D",), "en": ("E",), "hi": (None,)})

    def test_exact_match(self, registry: LocaleTableRegistry) -> None:
        assert registry.table_for("en").slot(0) == "E"

    def test_unknown_tag_gets_default(self, registry: LocaleTableRegistry) -> None:
        """Unknown tags map to the DEFAULT table."""
        assert registry.table_for("fr") is registry.default_table

    def test_no_partial_matching(self, registry: LocaleTableRegistry) -> None:
        """Region subtags are not stripped inside the registry."""
        assert registry.table_for("en_US") is registry.default_table

    def test_tag_matching_is_case_sensitive(self, registry: LocaleTableRegistry) -> None:
        assert registry.table_for("EN") is registry.default_table

    def test_views(self, registry: LocaleTableRegistry) -> None:
        """tags(), len, in and iteration cover every table."""
        assert registry.tags() == (DEFAULT_LOCALE_TAG, "en", "hi")
        assert len(registry) == 3
        assert "hi" in registry
        assert "fr" not in registry
        assert list(registry) == [DEFAULT_LOCALE_TAG, "en", "hi"]

    def test_repr(self, registry: LocaleTableRegistry) -> None:
        assert repr(registry) == (
            "LocaleTableRegistry(tags=['DEFAULT', 'en', 'hi'], default='DEFAULT')"
        )
