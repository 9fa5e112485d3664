"""Runtime package: locale binding and reference resolution.

Provides TextsSet, its immutable TextsBinding, and the !text/ reference
resolver. Depends on the tables package for static data.

Python 3.13+.
"""

from .resolver import TextGetter, resolve_text_reference
from .texts_config import TextsConfig
from .texts_set import TextLookup, TextsBinding, TextsSet

__all__ = [
    "TextGetter",
    "TextLookup",
    "TextsBinding",
    "TextsConfig",
    "TextsSet",
    "resolve_text_reference",
]
