"""Unified text-name validation.

This module provides the single source of truth for text-name grammar rules,
ensuring the registry (complete-string validation) and the reference scanner
(character-by-character scanning) agree on what a name is.

Text Name Grammar:
    [a-z_0-9]+

    - Characters: lowercase ASCII letter, ASCII digit, or underscore
    - Length: Maximum MAX_NAME_LENGTH characters

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.

Python 3.13+.
"""

from __future__ import annotations

import re

from keytextengine.constants import MAX_NAME_LENGTH

__all__ = [
    "is_name_char",
    "is_valid_name",
    "search_name_end",
]

# Compiled regex for complete name validation.
_NAME_PATTERN: re.Pattern[str] = re.compile(r"[a-z_0-9]+")


def is_name_char(ch: str) -> bool:
    """Check if character can appear in a text name.

    Uppercase letters and non-ASCII characters are deliberately excluded:
    a reference like ``!text/foo,Bar`` ends at the comma, and one like
    ``!text/fooX`` ends before the ``X``.

    Args:
        ch: Single character to check

    Returns:
        True if character is in [a-z_0-9], False otherwise

    Example:
        >>> is_name_char('a')
        True
        >>> is_name_char('_')
        True
        >>> is_name_char('A')
        False
        >>> is_name_char('é')
        False
    """
    return ("a" <= ch <= "z") or ("0" <= ch <= "9") or ch == "_"


def is_valid_name(name: str) -> bool:
    """Validate complete text name.

    Args:
        name: Name string to validate

    Returns:
        True if the name is non-empty, within MAX_NAME_LENGTH and matches
        [a-z_0-9]+, False otherwise

    Example:
        >>> is_valid_name("more_keys_for_a")
        True
        >>> is_valid_name("label-go-key")
        False
        >>> is_valid_name("")
        False
    """
    if not name or len(name) > MAX_NAME_LENGTH:
        return False
    return _NAME_PATTERN.fullmatch(name) is not None


def search_name_end(text: str, start: int) -> int:
    """Find the end of the name run starting at ``start``.

    Scans greedily while characters satisfy is_name_char(). Scanning stops at
    the first other character or at the end of the text, so a reference at
    the very end of a string is valid.

    Args:
        text: Text being scanned
        start: Index of the first character after the reference marker

    Returns:
        Index one past the last name character (``start`` if there is none)

    Example:
        >>> search_name_end("!text/abc,d", 6)
        9
        >>> search_name_end("!text/abc", 6)
        9
        >>> search_name_end("!text/,", 6)
        6
    """
    size = len(text)
    for pos in range(start, size):
        if not is_name_char(text[pos]):
            return pos
    return size
