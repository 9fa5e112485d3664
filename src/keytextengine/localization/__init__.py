"""Localization package: override providers and bind-time load tracking.

Submodules:
    types      - PEP 695 type aliases (TextName, LocaleTag, TemplateText)
    providers  - OverrideProvider protocol, MappingOverrideProvider,
                 PathOverrideProvider
    loading    - OverrideLoadResult, OverrideLoadSummary, FallbackInfo

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from keytextengine.enums import LoadStatus
from keytextengine.localization.loading import (
    FallbackInfo,
    OverrideLoadResult,
    OverrideLoadSummary,
)
from keytextengine.localization.providers import (
    MappingOverrideProvider,
    OverrideProvider,
    PathOverrideProvider,
)
from keytextengine.localization.types import LocaleTag, TemplateText, TextName

__all__ = [
    # Provider protocol and implementations
    "OverrideProvider",
    "MappingOverrideProvider",
    "PathOverrideProvider",
    # Load tracking
    "LoadStatus",
    "OverrideLoadResult",
    "OverrideLoadSummary",
    # Fallback observability
    "FallbackInfo",
    # Type aliases for user code type annotations
    "LocaleTag",
    "TemplateText",
    "TextName",
]
