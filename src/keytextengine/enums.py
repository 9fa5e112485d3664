"""Enumerations for KeyTextEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class TextSource(StrEnum):
    """Where a looked-up text came from.

    StrEnum provides automatic string conversion: str(TextSource.DEFAULT) == "default"
    """

    OVERRIDE = "override"
    """Override map populated from the override provider at bind time."""

    LOCALE = "locale"
    """Slot of the bound locale's table."""

    DEFAULT = "default"
    """Slot of the DEFAULT table (locale slot absent)."""

    MISSING = "missing"
    """No override, no locale slot, no DEFAULT slot."""


class LoadStatus(StrEnum):
    """Outcome of one override provider query.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Provider returned a string."""

    NOT_FOUND = "not_found"
    """Provider has no string for the name."""

    ERROR = "error"
    """Provider failed while reading its source."""


__all__ = [
    "LoadStatus",
    "TextSource",
]
