"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Template texts are keyboard data and may hold control characters or
    very long more-keys lists; ``sanitize`` truncates them for log output.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to prevent log flooding
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.unknown_name("foo")))
        UNKNOWN_NAME: Text name 'foo' is not registered
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[INDIRECTION_DEPTH_EXCEEDED]: Too many !text/ name indirection: ...
              = text: '!text/a'
              = help: Look for a reference cycle in the locale table
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"
        parts = [f"{severity}[{diagnostic.code.name}]: {diagnostic.message}"]

        if diagnostic.locale_tag:
            parts.append(f"  = locale: {diagnostic.locale_tag}")

        if diagnostic.name is not None:
            parts.append(f"  = name: {diagnostic.name!r}")

        if diagnostic.text is not None:
            parts.append(f"  = text: {self._maybe_sanitize(diagnostic.text)!r}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format."""
        message = self._maybe_sanitize(diagnostic.message)
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON."""
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.locale_tag:
            data["locale_tag"] = diagnostic.locale_tag

        if diagnostic.name is not None:
            data["name"] = diagnostic.name

        if diagnostic.text is not None:
            data["text"] = self._maybe_sanitize(diagnostic.text)

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
