"""KeyTextEngine - locale-layered keyboard text tables with !text/ references.

Resolves label and hint strings for a virtual keyboard. Strings live in a
name-indexed table layered per locale (DEFAULT underneath every locale) and
may reference each other with ``!text/<name>`` markers, which are expanded
by a bounded, escape-aware substitution loop.

Public API:
    TextsSet - Holder of the current locale binding for a keyboard context
    TextsBinding - Immutable (locale table, override map) pair
    TextsConfig - Pass bound and override-eligible names
    resolve_text_reference - Expand !text/ references with any lookup callable
    NameRegistry - Text name to NameId mapping
    LocaleTableRegistry - Locale tag to table mapping with DEFAULT fallback

Exceptions:
    KeyTextError - Base exception class
    KeyTextConfigurationError - Static data defects
    UnknownNameError - Lookup of an unregistered name
    IndirectionDepthError - Reference expansion did not settle
    TextsNotBoundError - Lookup before bind()

Submodules:
    keytextengine.tables - Name registry, locale tables, built-in data
    keytextengine.localization - Override providers and load tracking
    keytextengine.diagnostics - Error types, codes and formatting
    keytextengine.locale_utils - Locale normalization and table-tag matching
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    DuplicateNameError,
    IndirectionDepthError,
    InvalidNameError,
    KeyTextConfigurationError,
    KeyTextError,
    TextsNotBoundError,
    UnknownNameError,
)
from .localization import MappingOverrideProvider, PathOverrideProvider
from .runtime import TextsBinding, TextsConfig, TextsSet, resolve_text_reference
from .tables import LocaleTableRegistry, LocaleTextTable, NameRegistry

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("keytextengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DuplicateNameError",
    "IndirectionDepthError",
    "InvalidNameError",
    "KeyTextConfigurationError",
    "KeyTextError",
    "LocaleTableRegistry",
    "LocaleTextTable",
    "MappingOverrideProvider",
    "NameRegistry",
    "PathOverrideProvider",
    "TextsBinding",
    "TextsConfig",
    "TextsNotBoundError",
    "TextsSet",
    "UnknownNameError",
    "__version__",
    "resolve_text_reference",
]
