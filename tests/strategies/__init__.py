"""Hypothesis strategies for KeyTextEngine property-based testing.

Usage:
    from tests.strategies import text_names, templates
    from tests.strategies.texts import reference_chains
"""

from .texts import (
    LITERAL_CHARS,
    NAME_CHARS,
    escaped_chars,
    join_template,
    literal_texts,
    reference_chains,
    template_parts,
    templates,
    text_names,
)

__all__ = [
    "LITERAL_CHARS",
    "NAME_CHARS",
    "escaped_chars",
    "join_template",
    "literal_texts",
    "reference_chains",
    "template_parts",
    "templates",
    "text_names",
]
