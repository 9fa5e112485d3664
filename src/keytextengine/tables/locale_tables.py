"""Locale text tables and the registry that selects one per locale tag.

A LocaleTextTable is a read-only sequence of optional template strings
indexed by NameId. ``None`` marks an absent slot; callers fall back to the
DEFAULT table for it. Tables may be shorter than the name list: every slot
past the end is absent.

LocaleTableRegistry maps exact locale tags to tables. Unknown tags get the
DEFAULT table outright. Broader matching (dropping region or script
subtags) is the caller's policy; see locale_utils.select_table_tag().

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from keytextengine.constants import DEFAULT_LOCALE_TAG
from keytextengine.diagnostics import ErrorTemplate, KeyTextConfigurationError

__all__ = ["LocaleTableRegistry", "LocaleTextTable"]


@dataclass(frozen=True, slots=True)
class LocaleTextTable:
    """Immutable per-locale text slots.

    Attributes:
        locale_tag: Tag this table is registered under
        texts: Slot values in NameId order (None = absent)
    """

    locale_tag: str
    texts: tuple[str | None, ...]

    @classmethod
    def from_sequence(
        cls, locale_tag: str, texts: Sequence[str | None]
    ) -> LocaleTextTable:
        """Build a table from any sequence of optional strings."""
        return cls(locale_tag, tuple(texts))

    def slot(self, name_id: int) -> str | None:
        """Return the slot for ``name_id``, or None if absent or past the end."""
        if 0 <= name_id < len(self.texts):
            return self.texts[name_id]
        return None

    def __len__(self) -> int:
        return len(self.texts)


class LocaleTableRegistry:
    """Immutable locale tag to LocaleTextTable mapping with DEFAULT fallback.

    Example:
        >>> registry = LocaleTableRegistry({"DEFAULT": ("a", "b"), "en": (None, "B")})
        >>> registry.table_for("en").slot(1)
        'B'
        >>> registry.table_for("fr").locale_tag
        'DEFAULT'
    """

    __slots__ = ("_default", "_default_tag", "_tables")

    def __init__(
        self,
        tables: Mapping[str, LocaleTextTable | Sequence[str | None]],
        *,
        default_tag: str = DEFAULT_LOCALE_TAG,
        size: int | None = None,
    ) -> None:
        """Index the given tables.

        Args:
            tables: Tag to table (or plain slot sequence, wrapped on the fly)
            default_tag: Tag of the table used for unknown tags and absent slots
            size: Number of registered names; tables longer than this are rejected

        Raises:
            KeyTextConfigurationError: If the default table is missing or a
                table is longer than ``size``
        """
        indexed: dict[str, LocaleTextTable] = {}
        for tag, table in tables.items():
            if not isinstance(table, LocaleTextTable):
                table = LocaleTextTable.from_sequence(tag, table)
            if size is not None and len(table) > size:
                raise KeyTextConfigurationError(
                    ErrorTemplate.table_too_long(tag, len(table), size)
                )
            indexed[tag] = table

        if default_tag not in indexed:
            raise KeyTextConfigurationError(ErrorTemplate.default_table_missing(default_tag))

        self._tables: MappingProxyType[str, LocaleTextTable] = MappingProxyType(indexed)
        self._default_tag = default_tag
        self._default = indexed[default_tag]

    @property
    def default_tag(self) -> str:
        """Tag of the fallback table."""
        return self._default_tag

    @property
    def default_table(self) -> LocaleTextTable:
        """The fallback table."""
        return self._default

    def table_for(self, locale_tag: str) -> LocaleTextTable:
        """Return the table for an exact tag, or the DEFAULT table."""
        return self._tables.get(locale_tag, self._default)

    def tags(self) -> tuple[str, ...]:
        """Return every registered tag, default included."""
        return tuple(self._tables)

    def __contains__(self, locale_tag: object) -> bool:
        return locale_tag in self._tables

    def __iter__(self) -> Iterator[str]:
        return iter(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self) -> str:
        return f"LocaleTableRegistry(tags={list(self._tables)!r}, default={self._default_tag!r})"
