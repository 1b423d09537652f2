"""Tests for the diagnostics package: codes, spans, templates, errors, formatting."""

from __future__ import annotations

import json

import pytest

from fixeddecoder import FixedDecoder
from fixeddecoder.diagnostics import (
    DecodeError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorCategory,
    ErrorTemplate,
    FixedParseError,
    FixedPatternError,
    FixedValueError,
    FrozenErrorContext,
    OutputFormat,
    SourceSpan,
)

# ============================================================================
# CODES
# ============================================================================


class TestDiagnosticCode:
    """Test code numbering."""

    def test_codes_are_unique(self) -> None:
        """Every code has its own value."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low", "high"),
        [
            (DiagnosticCode.AMBIGUOUS_OR_MISSING_NUMERIC_PATTERN, 1000, 1999),
            (DiagnosticCode.INVALID_PATTERN_CHAR, 1000, 1999),
            (DiagnosticCode.UNEXPECTED_CHARACTER, 2000, 2999),
            (DiagnosticCode.NON_DIGIT_WHERE_DIGIT_EXPECTED, 2000, 2999),
            (DiagnosticCode.TRAILING_INPUT, 2000, 2999),
            (DiagnosticCode.VALUE_TOO_LONG, 2000, 2999),
            (DiagnosticCode.LOCALE_UNKNOWN, 3000, 3999),
        ],
    )
    def test_code_ranges(self, code: DiagnosticCode, low: int, high: int) -> None:
        """Codes sit in their category's range."""
        assert low <= code.value <= high

    def test_error_category_is_str(self) -> None:
        """ErrorCategory compares equal to plain strings."""
        assert ErrorCategory.PATTERN == "pattern"
        assert str(ErrorCategory.VALUE) == "value"


# ============================================================================
# SOURCE SPAN
# ============================================================================


class TestSourceSpan:
    """Test SourceSpan validation and construction."""

    def test_at_single_line(self) -> None:
        """at() computes 1-indexed line and column."""
        assert SourceSpan.at("1 234,5", 5) == SourceSpan(start=5, end=6, line=1, column=6)

    def test_at_multi_line(self) -> None:
        """Columns restart after a newline."""
        span = SourceSpan.at("12\n3x", 4)

        assert span.line == 2
        assert span.column == 2

    def test_at_end_of_input_is_empty(self) -> None:
        """Positions past the end clamp to an empty span."""
        span = SourceSpan.at("12", 7)

        assert span.start == span.end == 2

    def test_at_length(self) -> None:
        """length widens the span but never past the end."""
        assert SourceSpan.at("12.50", 2, 10).end == 5

    @pytest.mark.parametrize(
        ("start", "end", "line", "column"),
        [(-1, 0, 1, 1), (3, 2, 1, 1), (0, 0, 0, 1), (0, 0, 1, 0)],
    )
    def test_invalid_spans(self, start: int, end: int, line: int, column: int) -> None:
        """Negative offsets, reversed ranges and 0-based line/column are rejected."""
        with pytest.raises(ValueError, match="SourceSpan"):
            SourceSpan(start=start, end=end, line=line, column=column)


# ============================================================================
# TEMPLATES
# ============================================================================


class TestErrorTemplate:
    """Test message templates."""

    def test_numeric_pattern_missing(self) -> None:
        """Missing group message names the pattern."""
        diagnostic = ErrorTemplate.numeric_pattern_missing("abc")

        assert diagnostic.code is DiagnosticCode.AMBIGUOUS_OR_MISSING_NUMERIC_PATTERN
        assert diagnostic.message == (
            "The pattern 'abc' did not contain a valid pattern such as '0.00'"
        )
        assert diagnostic.span is None

    def test_numeric_pattern_ambiguous(self) -> None:
        """Ambiguous group message gives the count."""
        diagnostic = ErrorTemplate.numeric_pattern_ambiguous("#.#.#", 2)

        assert "2 numeric patterns" in diagnostic.message

    def test_non_digit_end_of_input(self) -> None:
        """An empty 'found' reads as end of input."""
        diagnostic = ErrorTemplate.non_digit("-", "", 1, SourceSpan.at("-", 1))

        assert diagnostic.message.startswith("Reached end of '-' at pos 1")

    def test_unexpected_character_hint_names_separator(self) -> None:
        """The hint names the decimal separator in effect."""
        diagnostic = ErrorTemplate.unexpected_character(
            "12;5", ";", 2, ",", ".", 1, SourceSpan.at("12;5", 2)
        )

        assert diagnostic.hint == "Use ',' as the decimal separator"

    def test_value_too_long(self) -> None:
        """Length and limit appear in the message."""
        diagnostic = ErrorTemplate.value_too_long(5000, 4000)

        assert "5000" in diagnostic.message
        assert "4000" in diagnostic.message


# ============================================================================
# ERRORS
# ============================================================================


class TestErrors:
    """Test the exception hierarchy."""

    def test_hierarchy(self) -> None:
        """Pattern and value errors are decode errors."""
        assert issubclass(FixedPatternError, FixedParseError)
        assert issubclass(FixedValueError, FixedParseError)
        assert issubclass(FixedParseError, DecodeError)

    def test_categories(self) -> None:
        """Each subclass carries its category."""
        assert FixedPatternError.category is ErrorCategory.PATTERN
        assert FixedValueError.category is ErrorCategory.VALUE

    def test_plain_message(self) -> None:
        """DecodeError accepts a plain string without a diagnostic."""
        error = DecodeError("boom")

        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_default_context(self) -> None:
        """A missing context defaults to an empty one."""
        error = FixedValueError(ErrorTemplate.value_too_long(5, 4))

        assert error.context == FrozenErrorContext()
        assert error.input_value == ""
        assert error.code is DiagnosticCode.VALUE_TOO_LONG

    def test_context_is_frozen(self) -> None:
        """Error context cannot be modified."""
        context = FrozenErrorContext(found=",")

        with pytest.raises(AttributeError):
            context.found = "."  # type: ignore[misc]


# ============================================================================
# FORMATTER
# ============================================================================


def _value_error_diagnostic() -> Diagnostic:
    _, errors = FixedDecoder("#.00").decode("x1")
    diagnostic = errors[0].diagnostic
    assert diagnostic is not None
    return diagnostic


class TestDiagnosticFormatter:
    """Test rust, simple and json output."""

    def test_rust_format(self) -> None:
        """Rust style has header, location and help lines."""
        output = DiagnosticFormatter().format(_value_error_diagnostic())
        lines = output.split("\n")

        assert lines[0].startswith("error[NON_DIGIT_WHERE_DIGIT_EXPECTED]: Character 'x'")
        assert lines[1] == "  --> line 1, column 1"
        assert lines[2].startswith("  = help: ")

    def test_rust_format_without_span(self) -> None:
        """Pattern diagnostics have no location line."""
        output = DiagnosticFormatter().format(ErrorTemplate.numeric_pattern_missing("abc"))

        assert "-->" not in output

    def test_rust_color(self) -> None:
        """Colour wraps the severity in ANSI codes."""
        output = DiagnosticFormatter(color=True).format(_value_error_diagnostic())

        assert output.startswith("\033[1;31merror\033[0m[")

    def test_warning_severity(self) -> None:
        """Warnings keep their severity label."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.TRAILING_INPUT, message="m", severity="warning"
        )

        assert DiagnosticFormatter().format(diagnostic).startswith("warning[TRAILING_INPUT]")

    def test_simple_format(self) -> None:
        """Simple style is one line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(ErrorTemplate.locale_unknown("xx_XX")) == (
            "LOCALE_UNKNOWN: Unknown locale 'xx_XX'"
        )

    def test_json_format(self) -> None:
        """JSON style carries code, span and hint."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(_value_error_diagnostic()))

        assert data["code"] == "NON_DIGIT_WHERE_DIGIT_EXPECTED"
        assert data["code_value"] == 2002
        assert data["severity"] == "error"
        assert data["start"] == 0
        assert data["end"] == 1
        assert "hint" in data

    def test_sanitize_truncates(self) -> None:
        """Long messages are truncated when sanitizing."""
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        output = formatter.format(ErrorTemplate.numeric_pattern_missing("x" * 50))

        assert output == "AMBIGUOUS_OR_MISSING_NUMERIC_PATTERN: The patter..."

    def test_format_all(self) -> None:
        """Diagnostics are separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostics = [
            ErrorTemplate.locale_unknown("a"),
            ErrorTemplate.locale_unknown("b"),
        ]

        assert formatter.format_all(diagnostics) == (
            "LOCALE_UNKNOWN: Unknown locale 'a'\n\nLOCALE_UNKNOWN: Unknown locale 'b'"
        )

    def test_format_error_uses_rust_style(self) -> None:
        """Diagnostic.format_error() is the default formatter's output."""
        diagnostic = _value_error_diagnostic()

        assert diagnostic.format_error() == DiagnosticFormatter().format(diagnostic)
