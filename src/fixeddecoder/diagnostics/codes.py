"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "FrozenErrorContext",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization for FixedParseError.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        PATTERN: The display pattern (or locale used to derive it) is unusable
        VALUE: The monetary value does not match the pattern
    """

    PATTERN = "pattern"
    VALUE = "value"


@dataclass(frozen=True, slots=True)
class FrozenErrorContext:
    """Immutable context for decode errors.

    Attributes:
        input_value: Monetary value as passed by the caller
        pattern: Display pattern as passed by the caller
        compressed_value: Whitespace-compressed monetary value
        compressed_pattern: Canonical compressed pattern
        found: Offending character ("" at end of input)
        expected: Character the pattern required at that point
        input_position: Offset of ``found`` in the compressed value
        pattern_position: Offset of the pattern character being matched
    """

    input_value: str = ""
    pattern: str = ""
    compressed_value: str = ""
    compressed_pattern: str = ""
    found: str = ""
    expected: str = ""
    input_position: int | None = None
    pattern_position: int | None = None


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Pattern errors (display pattern unusable)
        2000-2999: Value errors (input does not match the pattern)
        3000-3999: Locale errors (CLDR-derived configuration)
    """

    # Pattern errors (1000-1999)
    AMBIGUOUS_OR_MISSING_NUMERIC_PATTERN = 1001
    INVALID_PATTERN_CHAR = 1002

    # Value errors (2000-2999)
    UNEXPECTED_CHARACTER = 2001
    NON_DIGIT_WHERE_DIGIT_EXPECTED = 2002
    TRAILING_INPUT = 2003
    VALUE_TOO_LONG = 2004

    # Locale errors (3000-3999)
    LOCALE_UNKNOWN = 3001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of an error in the caller's original (uncompressed) input.

    Monetary values are single-line, but multi-line input is still located
    correctly.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)

    @classmethod
    def at(cls, source: str, pos: int, length: int = 1) -> "SourceSpan":
        """Build a span of ``length`` characters starting at ``pos`` in ``source``.

        Positions past the end are clamped to ``len(source)`` and produce an
        empty span (used for "end of input" errors).

        Example:
            >>> SourceSpan.at("1 234,5", 5)
            SourceSpan(start=5, end=6, line=1, column=6)
        """
        pos = max(0, min(pos, len(source)))
        end = min(pos + length, len(source))
        line = source.count("\n", 0, pos) + 1
        last_newline = source.rfind("\n", 0, pos)
        column = pos - last_newline if last_newline >= 0 else pos + 1
        return cls(start=pos, end=end, line=line, column=column)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location in the original input (None for pattern errors)
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[UNEXPECTED_CHARACTER]: '12,5' contained an unexpected ...
              --> line 1, column 3
              = help: Use the decimal separator configured for this pattern

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
