"""Tests for the diagnostic system: codes, templates, formatter and errors.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest

from keytextengine.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    DuplicateNameError,
    ErrorTemplate,
    IndirectionDepthError,
    InvalidNameError,
    KeyTextConfigurationError,
    KeyTextError,
    OutputFormat,
    TextsNotBoundError,
    UnknownNameError,
)


class TestDiagnosticCodes:
    """Code numbering by category."""

    def test_codes_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]

        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low", "high"),
        [
            (DiagnosticCode.DUPLICATE_NAME, 1000, 1999),
            (DiagnosticCode.TABLE_TOO_LONG, 2000, 2999),
            (DiagnosticCode.INDIRECTION_DEPTH_EXCEEDED, 3000, 3999),
            (DiagnosticCode.NOT_BOUND, 4000, 4999),
        ],
    )
    def test_code_ranges(self, code: DiagnosticCode, low: int, high: int) -> None:
        assert low <= code.value <= high


class TestErrorTemplate:
    """Template messages and context fields."""

    def test_unknown_name(self) -> None:
        diagnostic = ErrorTemplate.unknown_name("more_keys_for_q")

        assert diagnostic.code == DiagnosticCode.UNKNOWN_NAME
        assert diagnostic.message == "Text name 'more_keys_for_q' is not registered"
        assert diagnostic.name == "more_keys_for_q"
        assert diagnostic.hint

    def test_indirection_depth_exceeded(self) -> None:
        diagnostic = ErrorTemplate.indirection_depth_exceeded("!text/a", 10)

        assert diagnostic.message == "Too many !text/name indirection: !text/a"
        assert diagnostic.text == "!text/a"
        assert "10 passes" in (diagnostic.hint or "")

    def test_table_too_long(self) -> None:
        diagnostic = ErrorTemplate.table_too_long("hi", 151, 150)

        assert diagnostic.locale_tag == "hi"
        assert "151 slots" in diagnostic.message
        assert "150 names" in diagnostic.message

    def test_default_table_missing(self) -> None:
        diagnostic = ErrorTemplate.default_table_missing("DEFAULT")

        assert diagnostic.code == DiagnosticCode.DEFAULT_TABLE_MISSING
        assert diagnostic.locale_tag == "DEFAULT"

    def test_not_bound(self) -> None:
        diagnostic = ErrorTemplate.not_bound()

        assert diagnostic.code == DiagnosticCode.NOT_BOUND
        assert str(diagnostic) == diagnostic.message


class TestDiagnosticFormatter:
    """Output formats."""

    @pytest.fixture
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.unknown_name("foo")

    def test_rust_format(self, diagnostic: Diagnostic) -> None:
        output = DiagnosticFormatter().format(diagnostic)

        assert output.splitlines() == [
            "error[UNKNOWN_NAME]: Text name 'foo' is not registered",
            "  = name: 'foo'",
            "  = help: Add the name to the name list or fix the reference",
        ]

    def test_rust_format_locale_and_text(self) -> None:
        diagnostic = Diagnostic(
            code=DiagnosticCode.INDIRECTION_DEPTH_EXCEEDED,
            message="m",
            text="!text/a",
            locale_tag="hi",
            severity="warning",
        )
        output = DiagnosticFormatter().format(diagnostic)

        assert output.splitlines() == [
            "warning[INDIRECTION_DEPTH_EXCEEDED]: m",
            "  = locale: hi",
            "  = text: '!text/a'",
        ]

    def test_simple_format(self, diagnostic: Diagnostic) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(diagnostic) == "UNKNOWN_NAME: Text name 'foo' is not registered"

    def test_json_format(self, diagnostic: Diagnostic) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(diagnostic))

        assert data["code"] == "UNKNOWN_NAME"
        assert data["code_value"] == 1003
        assert data["name"] == "foo"
        assert data["severity"] == "error"
        assert "text" not in data

    def test_sanitize_truncates(self) -> None:
        diagnostic = ErrorTemplate.indirection_depth_exceeded("x" * 300, 10)
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=20
        )

        output = formatter.format(diagnostic)

        assert output.endswith("...")
        assert len(output) < 60

    def test_format_all(self, diagnostic: Diagnostic) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format_all([diagnostic, diagnostic]).count("\n\n") == 1


class TestErrors:
    """Exception hierarchy."""

    def test_plain_message(self) -> None:
        error = KeyTextError("plain")

        assert str(error) == "plain"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        diagnostic = ErrorTemplate.not_bound()
        error = TextsNotBoundError(diagnostic)

        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()

    @pytest.mark.parametrize(
        "error",
        [
            DuplicateNameError("m", name="a"),
            InvalidNameError("m", name="A"),
            UnknownNameError("m", name="a"),
            IndirectionDepthError("m", text="t", max_indirection=10),
        ],
    )
    def test_configuration_errors(self, error: KeyTextError) -> None:
        assert isinstance(error, KeyTextConfigurationError)

    def test_not_bound_is_not_configuration_error(self) -> None:
        assert not isinstance(TextsNotBoundError("m"), KeyTextConfigurationError)

    def test_unknown_name_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            raise UnknownNameError(ErrorTemplate.unknown_name("x"), name="x")
