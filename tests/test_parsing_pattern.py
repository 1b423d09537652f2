"""Tests for parsing.pattern: whitespace and numeric-group compression."""

from __future__ import annotations

import pytest

from fixeddecoder.diagnostics import DiagnosticCode, ErrorCategory, FixedPatternError
from fixeddecoder.parsing.pattern import (
    CompressedPattern,
    compress_digits,
    compress_pattern,
    compress_whitespace,
)

# ============================================================================
# WHITESPACE
# ============================================================================


class TestCompressWhitespace:
    """Test compress_whitespace()."""

    def test_removes_spaces_everywhere(self) -> None:
        """Leading, inner and trailing spaces are removed."""
        assert compress_whitespace(" # . 00 ") == "#.00"

    def test_removes_tabs_and_newlines(self) -> None:
        """All whitespace kinds are removed."""
        assert compress_whitespace("1\t234\n.5\r") == "1234.5"

    def test_removes_non_breaking_spaces(self) -> None:
        """Locale group separators such as NBSP and NNBSP are whitespace."""
        assert compress_whitespace("1\u00a0234\u202f567,89") == "1234567,89"

    def test_empty_string(self) -> None:
        """Empty input stays empty."""
        assert compress_whitespace("") == ""


# ============================================================================
# NUMERIC GROUP COMPRESSION
# ============================================================================


class TestCompressDigits:
    """Test compress_digits() canonical tokens."""

    @pytest.mark.parametrize(
        ("pattern", "expected"),
        [
            ("#,##0.00", "#.#"),
            ("0.00", "#.#"),
            ("#.#", "#.#"),
            ("##0.###", "#.#"),
            ("#", "#"),
            ("0", "#"),
            ("#,###", "#"),
            (".00", ".#"),
            (".#", ".#"),
        ],
    )
    def test_canonical_token(self, pattern: str, expected: str) -> None:
        """Each numeric group shape compresses to its canonical token."""
        assert compress_digits(pattern, ",", ".").text == expected

    def test_swapped_separators(self) -> None:
        """European separators compress to the same canonical '.' token."""
        assert compress_digits("#.##0,00", ".", ",").text == "#.#"

    def test_literal_text_is_preserved(self) -> None:
        """Characters around the numeric group are kept in place."""
        assert compress_digits("$#,##0.00USD", ",", ".").text == "$#.#USD"

    def test_decimal_without_minor_digits_stays_literal(self) -> None:
        """A decimal separator not followed by placeholders is not part of the group."""
        assert compress_digits("#.", ",", ".").text == "#."

    def test_grouped_flag_set_when_group_separator_used(self) -> None:
        """Patterns that group major digits are marked as grouped."""
        assert compress_digits("#,##0.00", ",", ".").grouped

    def test_grouped_flag_clear_without_group_separator(self) -> None:
        """Patterns without grouping accept no grouping in values."""
        assert not compress_digits("#0.00", ",", ".").grouped

    def test_returns_compressed_pattern(self) -> None:
        """Result is a CompressedPattern whose str() is the text."""
        result = compress_digits("#,##0.00", ",", ".")
        assert isinstance(result, CompressedPattern)
        assert str(result) == "#.#"


class TestCompressDigitsErrors:
    """Test compress_digits() rejection of ambiguous or missing groups."""

    def test_no_numeric_group(self) -> None:
        """A pattern without placeholders is rejected."""
        with pytest.raises(FixedPatternError) as exc_info:
            compress_digits("abc", ",", ".")

        error = exc_info.value
        assert error.code is DiagnosticCode.AMBIGUOUS_OR_MISSING_NUMERIC_PATTERN
        assert error.category is ErrorCategory.PATTERN
        assert error.pattern == "abc"

    def test_empty_pattern(self) -> None:
        """An empty pattern has no numeric group."""
        with pytest.raises(FixedPatternError) as exc_info:
            compress_digits("", ",", ".")
        assert exc_info.value.code is DiagnosticCode.AMBIGUOUS_OR_MISSING_NUMERIC_PATTERN

    def test_bare_group_separators_are_not_a_group(self) -> None:
        """A run of group separators alone does not count as a numeric group."""
        with pytest.raises(FixedPatternError):
            compress_digits(",,", ",", ".")

    def test_two_numeric_groups(self) -> None:
        """'#.#.#' holds a group plus a minor-only group."""
        with pytest.raises(FixedPatternError) as exc_info:
            compress_digits("#.#.#", ",", ".")

        error = exc_info.value
        assert error.code is DiagnosticCode.AMBIGUOUS_OR_MISSING_NUMERIC_PATTERN
        assert "2 numeric patterns" in str(error)

    def test_groups_split_by_literal(self) -> None:
        """Groups separated by literal text are ambiguous."""
        with pytest.raises(FixedPatternError):
            compress_digits("#x#", ",", ".")

    def test_spaces_inside_group_without_whitespace_compression(self) -> None:
        """compress_digits() alone treats spaces as literal text."""
        with pytest.raises(FixedPatternError):
            compress_digits("# . 00", ",", ".")


class TestCompressPattern:
    """Test compress_pattern() (whitespace first, then digits)."""

    def test_spaces_do_not_split_groups(self) -> None:
        """Whitespace is removed before the numeric group is located."""
        assert compress_pattern(" # . 00 ", ",", ".") == compress_pattern("#.00", ",", ".")

    def test_result_is_cached(self) -> None:
        """Repeated compression returns the cached instance."""
        first = compress_pattern("#,##0.00", ",", ".")
        second = compress_pattern("#,##0.00", ",", ".")
        assert first is second

    def test_space_group_separator(self) -> None:
        """A space group separator disappears with the whitespace."""
        result = compress_pattern("# ##0,00", " ", ",")
        assert result.text == "#.#"
        assert not result.grouped
