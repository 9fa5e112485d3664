"""Text reference resolver - expands !text/<name> references.

Scans template text for ``!text/<name>`` markers and replaces each with the
text looked up for ``<name>``. Inserted text may contain further references,
so scanning repeats until a pass makes no substitution. Passes are counted
by IndirectionGuard; text that does not settle within the bound is a data
defect and raises IndirectionDepthError.

Escapes:
    A backslash hides the next character from the scanner, so ``\\!text/a``
    is not a reference. Escapes are kept: a pass that substitutes nothing
    returns its input untouched, and a pass that does substitute copies both
    the backslash and the escaped character. Unescaping is the job of the
    key-spec parser that consumes the resolved text.

Missing texts:
    A name with no text (lookup returns None) contributes nothing. A name
    the registry does not know is logged and also contributes nothing, so a
    malformed layout string never takes the keyboard down.

Python 3.13+. Zero external dependencies.

Thread Safety:
    Pure function over its arguments. The lookup callable is only read.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeAlias

from keytextengine.constants import BACKSLASH, MAX_STRING_REFERENCE_INDIRECTION, PREFIX_TEXT
from keytextengine.core.indirection_guard import IndirectionGuard
from keytextengine.core.name_validation import search_name_end
from keytextengine.diagnostics import UnknownNameError

__all__ = ["TextGetter", "resolve_text_reference"]

logger = logging.getLogger(__name__)

TextGetter: TypeAlias = Callable[[str], str | None]
"""Name to text lookup used during expansion (e.g., TextsBinding.get_text)."""

_PREFIX_LEN = len(PREFIX_TEXT)


def _lookup(get_text: TextGetter, name: str) -> str:
    """Look up ``name``, degrading unknown names and missing texts to ""."""
    try:
        text = get_text(name)
    except UnknownNameError:
        logger.warning("Unknown text name %r referenced as %s%s", name, PREFIX_TEXT, name)
        return ""
    return text if text is not None else ""


def _expand_once(text: str, get_text: TextGetter) -> str | None:
    """Run one left-to-right pass over ``text``.

    Returns:
        The rewritten text, or None if the pass found no reference (the
        caller then keeps ``text`` as is)
    """
    size = len(text)
    if size < _PREFIX_LEN:
        return None

    parts: list[str] | None = None
    pos = 0
    while pos < size:
        if text.startswith(PREFIX_TEXT, pos):
            if parts is None:
                parts = [text[:pos]]
            end = search_name_end(text, pos + _PREFIX_LEN)
            parts.append(_lookup(get_text, text[pos + _PREFIX_LEN : end]))
            pos = end
        elif text[pos] == BACKSLASH:
            if parts is not None:
                # Keep the escape and the escaped character.
                parts.append(text[pos : pos + 2])
            pos += 2
        else:
            if parts is not None:
                parts.append(text[pos])
            pos += 1

    return "".join(parts) if parts is not None else None


def resolve_text_reference(
    raw_text: str | None,
    get_text: TextGetter,
    *,
    max_indirection: int = MAX_STRING_REFERENCE_INDIRECTION,
) -> str | None:
    """Expand every ``!text/<name>`` reference in ``raw_text``.

    Args:
        raw_text: Template text (None and "" are accepted)
        get_text: Name to text lookup; may raise UnknownNameError
        max_indirection: Maximum number of scan passes (keyword-only)

    Returns:
        Fully expanded text, or None if the input or the result is empty

    Raises:
        IndirectionDepthError: If references are still being substituted
            after max_indirection passes

    Example:
        >>> texts = {"a": "X!text/b", "b": "Y"}
        >>> resolve_text_reference("!text/a", texts.get)
        'XY'
        >>> resolve_text_reference("plain", texts.get)
        'plain'
        >>> resolve_text_reference("", texts.get) is None
        True
    """
    if not raw_text:
        return None

    guard = IndirectionGuard(max_passes=max_indirection)
    text = raw_text
    while True:
        guard.enter_pass(text)
        expanded = _expand_once(text, get_text)
        if expanded is None:
            break
        text = expanded

    return text or None
