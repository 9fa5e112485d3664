"""Static text tables: name registry, locale tables and built-in data.

Submodules:
    names          - NameRegistry (name to NameId)
    locale_tables  - LocaleTextTable, LocaleTableRegistry
    builtin_names  - Compiled-in NAMES and OVERRIDE_NAMES
    builtin_texts  - Compiled-in LOCALE_TEXTS

The built-in registries are created once, on first use, and shared: they are
immutable.

Python 3.13+. Zero external dependencies.
"""

import functools

from keytextengine.tables.builtin_names import NAMES, OVERRIDE_NAMES
from keytextengine.tables.builtin_texts import LOCALE_TEXTS
from keytextengine.tables.locale_tables import LocaleTableRegistry, LocaleTextTable
from keytextengine.tables.names import NameRegistry

__all__ = [
    "NAMES",
    "OVERRIDE_NAMES",
    "LocaleTableRegistry",
    "LocaleTextTable",
    "NameRegistry",
    "default_name_registry",
    "default_table_registry",
]


@functools.cache
def default_name_registry() -> NameRegistry:
    """Return the shared registry of the compiled-in name list."""
    return NameRegistry(NAMES)


@functools.cache
def default_table_registry() -> LocaleTableRegistry:
    """Return the shared registry of the compiled-in locale tables."""
    return LocaleTableRegistry(LOCALE_TEXTS, size=len(NAMES))
