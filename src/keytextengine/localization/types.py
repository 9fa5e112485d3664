"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the package and by user code
when annotating provider implementations.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "LocaleTag",
    "TemplateText",
    "TextName",
]

TextName: TypeAlias = str
"""Identifier of a localizable text (e.g., 'more_keys_for_a', 'label_go_key')."""

LocaleTag: TypeAlias = str
"""Table or provider locale tag (e.g., 'en', 'hi', 'zz', 'DEFAULT', 'pt_BR')."""

TemplateText: TypeAlias = str
"""Raw text that may contain !text/<name> references and backslash escapes."""
