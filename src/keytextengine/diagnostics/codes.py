"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Name registry errors (static name list defects)
        2000-2999: Table errors (locale table data defects)
        3000-3999: Resolution errors (reference expansion failures)
        4000-4999: Binding errors (locale binding lifecycle)
    """

    # Name registry errors (1000-1999)
    DUPLICATE_NAME = 1001
    INVALID_NAME = 1002
    UNKNOWN_NAME = 1003

    # Table errors (2000-2999)
    DEFAULT_TABLE_MISSING = 2001
    TABLE_TOO_LONG = 2002

    # Resolution errors (3000-3999)
    INDIRECTION_DEPTH_EXCEEDED = 3001

    # Binding errors (4000-4999)
    NOT_BOUND = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        name: Text name involved in the error (if any)
        text: Template text being resolved when the error occurred (if any)
        locale_tag: Locale tag involved in the error (if any)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    name: str | None = None
    text: str | None = None
    locale_tag: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[UNKNOWN_NAME]: Text name 'more_keys_for_q' is not registered
              = name: more_keys_for_q
              = help: Add the name to the name list or fix the reference

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
