"""Diagnostic system for KeyTextEngine errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DuplicateNameError,
    IndirectionDepthError,
    InvalidNameError,
    KeyTextConfigurationError,
    KeyTextError,
    TextsNotBoundError,
    UnknownNameError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DuplicateNameError",
    "ErrorTemplate",
    "IndirectionDepthError",
    "InvalidNameError",
    "KeyTextConfigurationError",
    "KeyTextError",
    "OutputFormat",
    "TextsNotBoundError",
    "UnknownNameError",
]
