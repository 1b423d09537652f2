"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


def _describe(char: str) -> str:
    """Quote a character for a message, naming end of input explicitly."""
    return f"'{char}'" if char else "end of input"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    # =========================================================================
    # PATTERN ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def numeric_pattern_missing(pattern: str) -> Diagnostic:
        """Pattern has no numeric group.

        Args:
            pattern: The display pattern as supplied

        Returns:
            Diagnostic for AMBIGUOUS_OR_MISSING_NUMERIC_PATTERN
        """
        msg = f"The pattern '{pattern}' did not contain a valid pattern such as '0.00'"
        return Diagnostic(
            code=DiagnosticCode.AMBIGUOUS_OR_MISSING_NUMERIC_PATTERN,
            message=msg,
            span=None,
            hint="Use '#' or '0' placeholders, e.g. '#,##0.00'",
        )

    @staticmethod
    def numeric_pattern_ambiguous(pattern: str, group_count: int) -> Diagnostic:
        """Pattern has more than one numeric group.

        Args:
            pattern: The display pattern as supplied
            group_count: Number of numeric groups found

        Returns:
            Diagnostic for AMBIGUOUS_OR_MISSING_NUMERIC_PATTERN
        """
        msg = (
            f"The pattern '{pattern}' contained {group_count} numeric patterns; "
            "exactly one is allowed"
        )
        return Diagnostic(
            code=DiagnosticCode.AMBIGUOUS_OR_MISSING_NUMERIC_PATTERN,
            message=msg,
            span=None,
            hint="Check that the group and decimal separators match the pattern",
        )

    @staticmethod
    def invalid_pattern_char(char: str, position: int, compressed_pattern: str) -> Diagnostic:
        """Compressed pattern holds a character the decoder cannot match.

        Args:
            char: The offending pattern character
            position: Its offset in the compressed pattern
            compressed_pattern: The compressed pattern

        Returns:
            Diagnostic for INVALID_PATTERN_CHAR
        """
        msg = (
            f"Invalid character '{char}' found in pattern '{compressed_pattern}' "
            f"at pos {position}"
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_PATTERN_CHAR,
            message=msg,
            span=None,
            hint="Patterns may only hold digit placeholders and separators",
        )

    # =========================================================================
    # VALUE ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def unexpected_character(
        value: str,
        found: str,
        input_position: int,
        expected: str,
        pattern_char: str,
        pattern_position: int,
        span: SourceSpan,
    ) -> Diagnostic:
        """Input character does not match the pattern's decimal separator.

        Args:
            value: The monetary value as supplied
            found: The character found in the input
            input_position: Offset of ``found`` in the compressed value
            expected: The configured decimal separator
            pattern_char: The pattern character being matched
            pattern_position: Offset of ``pattern_char`` in the compressed pattern
            span: Location of ``found`` in the original value

        Returns:
            Diagnostic for UNEXPECTED_CHARACTER
        """
        msg = (
            f"'{value}' contained an unexpected character {_describe(found)} "
            f"at pos {input_position} when a match for pattern character "
            f"'{pattern_char}' at pos {pattern_position} was expected"
        )
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            message=msg,
            span=span,
            hint=f"Use '{expected}' as the decimal separator",
        )

    @staticmethod
    def non_digit(value: str, found: str, input_position: int, span: SourceSpan) -> Diagnostic:
        """A digit run was required but none was found.

        Args:
            value: The monetary value as supplied
            found: The character at the cursor ("" at end of input)
            input_position: Offset of the cursor in the compressed value
            span: Location of the cursor in the original value

        Returns:
            Diagnostic for NON_DIGIT_WHERE_DIGIT_EXPECTED
        """
        if found:
            msg = (
                f"Character '{found}' at pos {input_position} of '{value}' "
                "is not a digit when a digit was expected"
            )
        else:
            msg = (
                f"Reached end of '{value}' at pos {input_position} "
                "when a digit was expected"
            )
        return Diagnostic(
            code=DiagnosticCode.NON_DIGIT_WHERE_DIGIT_EXPECTED,
            message=msg,
            span=span,
            hint="Amounts must contain at least one digit on each side of the decimal separator",
        )

    @staticmethod
    def trailing_input(
        value: str, remainder: str, input_position: int, span: SourceSpan
    ) -> Diagnostic:
        """Input continues after the whole pattern was matched.

        Args:
            value: The monetary value as supplied
            remainder: The unconsumed tail of the compressed value
            input_position: Offset of the tail in the compressed value
            span: Location of the tail in the original value

        Returns:
            Diagnostic for TRAILING_INPUT
        """
        msg = (
            f"'{value}' contained unexpected trailing characters '{remainder}' "
            f"at pos {input_position} after the pattern was fully matched"
        )
        return Diagnostic(
            code=DiagnosticCode.TRAILING_INPUT,
            message=msg,
            span=span,
            hint="Check the decimal separator and remove any text after the amount",
        )

    @staticmethod
    def value_too_long(length: int, max_length: int) -> Diagnostic:
        """Compressed input exceeds the maximum accepted length.

        Args:
            length: Length of the compressed value
            max_length: Configured maximum

        Returns:
            Diagnostic for VALUE_TOO_LONG
        """
        msg = f"Monetary value of {length} characters exceeds the limit of {max_length}"
        return Diagnostic(
            code=DiagnosticCode.VALUE_TOO_LONG,
            message=msg,
            span=None,
            hint="Split or truncate the input before decoding",
        )

    # =========================================================================
    # LOCALE ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def locale_unknown(locale_code: str) -> Diagnostic:
        """Unknown locale for deriving separators.

        Args:
            locale_code: The unknown locale code

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            span=None,
            hint="Use BCP 47 locale codes (e.g., 'en_US', 'de_DE', 'lv_LV')",
        )
