"""Name registry: text name to dense NameId mapping.

Built once from a fixed ordered list. A name's position in the list is its
NameId; every LocaleTextTable is indexed by it. The registry is immutable
after construction, so it can be shared between threads without locking.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from keytextengine.core.name_validation import is_valid_name
from keytextengine.diagnostics import (
    DuplicateNameError,
    ErrorTemplate,
    InvalidNameError,
    UnknownNameError,
)

__all__ = ["NameRegistry"]


class NameRegistry:
    """Immutable ordered mapping from text name to NameId.

    Example:
        >>> registry = NameRegistry(["single_quotes", "double_quotes"])
        >>> registry.id_of("double_quotes")
        1
        >>> registry.all_names()
        ('single_quotes', 'double_quotes')

    Raises on construction:
        DuplicateNameError: If a name appears twice
        InvalidNameError: If a name does not match [a-z_0-9]+
    """

    __slots__ = ("_ids", "_names")

    def __init__(self, names: Iterable[str]) -> None:
        """Build the registry from an ordered name list.

        Args:
            names: Names in NameId order
        """
        ordered = tuple(names)
        ids: dict[str, int] = {}
        for name_id, name in enumerate(ordered):
            if not is_valid_name(name):
                raise InvalidNameError(ErrorTemplate.invalid_name(name), name=name)
            first_id = ids.setdefault(name, name_id)
            if first_id != name_id:
                raise DuplicateNameError(
                    ErrorTemplate.duplicate_name(name, first_id, name_id), name=name
                )
        self._names: tuple[str, ...] = ordered
        self._ids: MappingProxyType[str, int] = MappingProxyType(ids)

    def id_of(self, name: str) -> int:
        """Return the NameId of a registered name.

        Raises:
            UnknownNameError: If the name is not registered
        """
        name_id = self._ids.get(name)
        if name_id is None:
            raise UnknownNameError(ErrorTemplate.unknown_name(name), name=name)
        return name_id

    def find_id(self, name: str) -> int | None:
        """Return the NameId of a name, or None if it is not registered."""
        return self._ids.get(name)

    def name_of(self, name_id: int) -> str:
        """Return the name registered under ``name_id``.

        Raises:
            IndexError: If name_id is outside [0, len(self))
        """
        if name_id < 0:
            msg = f"NameId must be non-negative, got {name_id}"
            raise IndexError(msg)
        return self._names[name_id]

    def all_names(self) -> tuple[str, ...]:
        """Return every registered name in NameId order."""
        return self._names

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __repr__(self) -> str:
        return f"NameRegistry(size={len(self._names)})"
