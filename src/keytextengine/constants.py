"""Shared constants for KeyTextEngine.

This module provides centralized configuration constants used across the
tables, runtime and localization packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Reference syntax: Marker and escape characters consumed from templates
- Indirection limits: Bound on reference expansion passes
- Locale tags: Designated table tags with special meaning
- Name limits: Constraints on text names

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Reference syntax
    "PREFIX_TEXT",
    "BACKSLASH",
    # Indirection limits
    "MAX_STRING_REFERENCE_INDIRECTION",
    # Locale tags
    "DEFAULT_LOCALE_TAG",
    "NO_LANGUAGE",
    # Name limits
    "MAX_NAME_LENGTH",
    # Override resources
    "DEFAULT_OVERRIDE_RESOURCE",
]

# ============================================================================
# REFERENCE SYNTAX
# ============================================================================

# Marker introducing a text reference: "!text/<name>".
# The name that follows is the greedy run of [a-z_0-9].
PREFIX_TEXT: str = "!text/"

# Escape marker. The character after a backslash is never scanned for a marker.
BACKSLASH: str = "\\"

# ============================================================================
# INDIRECTION LIMITS
# ============================================================================

# Maximum number of scan passes for one resolve_text_reference() call.
# Every pass that substitutes at least one reference forces another pass,
# so a chain of N nested references needs N + 1 passes. Exceeding the
# bound is a data defect (runaway or cyclic references), never a user error.
MAX_STRING_REFERENCE_INDIRECTION: int = 10

# ============================================================================
# LOCALE TAGS
# ============================================================================

# Tag of the table every other table falls back to.
DEFAULT_LOCALE_TAG: str = "DEFAULT"

# "No language" subtype tag. Has its own table, but override strings for it
# come from the system locale.
NO_LANGUAGE: str = "zz"

# ============================================================================
# NAME LIMITS
# ============================================================================

# Names are short snake_case identifiers; anything longer is a data error.
MAX_NAME_LENGTH: int = 128

# ============================================================================
# OVERRIDE RESOURCES
# ============================================================================

# File read by PathOverrideProvider inside each locale directory.
DEFAULT_OVERRIDE_RESOURCE: str = "strings-action-keys.json"
