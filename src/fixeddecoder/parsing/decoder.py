"""Decode monetary strings into exact minor units.

API: FixedDecoder.decode() returns tuple[DecodedAmount | None, tuple[FixedParseError, ...]].
decode() NEVER raises for a bad pattern or a bad value - errors are returned
in the tuple.

The decoder walks the compressed pattern one character at a time and pulls
matching input from a ValueQueue. It is a two-state machine (before and
after the decimal separator) with no backtracking:

    pattern "#,##0.00" --compress--> "#.#"
    value   "-1,234.5"
        '#'  -> optional '-', major digits 1234
        '.'  -> decimal separator
        '#'  -> minor digits 5, scale 1
    result  DecodedAmount(value=-12345, scale=1)

Thread-safe. FixedDecoder is immutable and every decode() works on its own queue.

Python 3.13+.
"""

import logging
from dataclasses import dataclass

from fixeddecoder.constants import (
    DECIMAL_TOKEN,
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_GROUP_SEPARATOR,
    MAJOR_TOKEN,
    MAX_VALUE_LENGTH,
    NEGATIVE_SIGN,
    RESERVED_SEPARATOR_CHARS,
    SPACE_TOKEN,
)
from fixeddecoder.diagnostics import (
    ErrorTemplate,
    FixedParseError,
    FixedPatternError,
    FixedValueError,
    FrozenErrorContext,
    SourceSpan,
)

from .amount import DecodedAmount
from .pattern import CompressedPattern, compress_pattern, compress_whitespace
from .queue import ValueQueue

__all__ = ["FixedDecoder", "decode_amount"]

logger = logging.getLogger(__name__)


def _original_position(original: str, compressed_pos: int) -> int:
    """Map an offset in the whitespace-compressed value back to the original."""
    seen = 0
    for pos, char in enumerate(original):
        if char.isspace():
            continue
        if seen == compressed_pos:
            return pos
        seen += 1
    return len(original)


@dataclass(frozen=True, slots=True)
class _DecodeInput:
    """One decode call's view of the pattern and value."""

    monetary_value: str
    pattern: str
    compressed_value: str
    compressed_pattern: CompressedPattern

    def context(
        self,
        *,
        found: str = "",
        expected: str = "",
        input_position: int | None = None,
        pattern_position: int | None = None,
    ) -> FrozenErrorContext:
        return FrozenErrorContext(
            input_value=self.monetary_value,
            pattern=self.pattern,
            compressed_value=self.compressed_value,
            compressed_pattern=self.compressed_pattern.text,
            found=found,
            expected=expected,
            input_position=input_position,
            pattern_position=pattern_position,
        )

    def span(self, compressed_pos: int, length: int = 1) -> SourceSpan:
        start = _original_position(self.monetary_value, compressed_pos)
        return SourceSpan.at(self.monetary_value, start, length)


@dataclass(frozen=True, slots=True)
class FixedDecoder:
    """Decodes monetary amounts based on a display pattern.

    Attributes:
        pattern: Display pattern such as ``"#,##0.00"``
        group_separator: Character grouping major digits
        decimal_separator: Character separating major and minor digits

    Example:
        >>> decoder = FixedDecoder("#,##0.00")
        >>> decoder.decode("1,234.56")
        (DecodedAmount(value=123456, scale=2), ())

        >>> german = FixedDecoder("#.##0,00", group_separator=".", decimal_separator=",")
        >>> amount, errors = german.decode("-1.234,5")
        >>> amount
        DecodedAmount(value=-12345, scale=1)

        >>> amount, errors = decoder.decode("12;50")
        >>> amount is None, errors[0].code.name
        (True, 'UNEXPECTED_CHARACTER')
    """

    pattern: str
    group_separator: str = DEFAULT_GROUP_SEPARATOR
    decimal_separator: str = DEFAULT_DECIMAL_SEPARATOR

    def __post_init__(self) -> None:
        """Validate the separators.

        Raises:
            ValueError: If a separator is not exactly one character, is a digit,
                a digit placeholder or the minus sign, if both separators are
                the same, or if the decimal separator is whitespace.
        """
        for name, separator in (
            ("group_separator", self.group_separator),
            ("decimal_separator", self.decimal_separator),
        ):
            if len(separator) != 1:
                msg = f"{name} must be a single character, got {separator!r}"
                raise ValueError(msg)
            if separator in RESERVED_SEPARATOR_CHARS:
                msg = f"{name} {separator!r} is reserved for digits and signs"
                raise ValueError(msg)
        if self.group_separator == self.decimal_separator:
            msg = f"group_separator and decimal_separator must differ, both are {self.group_separator!r}"
            raise ValueError(msg)
        if self.decimal_separator.isspace():
            msg = "decimal_separator cannot be whitespace; whitespace is ignored when decoding"
            raise ValueError(msg)

    @classmethod
    def for_locale(cls, locale_code: str, pattern: str | None = None) -> "FixedDecoder":
        """Create a decoder using a locale's CLDR separators.

        Args:
            locale_code: BCP 47 or POSIX locale identifier (e.g. "de-DE", "de_DE")
            pattern: Display pattern written with the locale's own separators.
                Defaults to the locale's standard decimal pattern.

        Returns:
            FixedDecoder

        Raises:
            FixedPatternError: If the locale is unknown (LOCALE_UNKNOWN)
            BabelImportError: If Babel is not installed

        Example:
            >>> FixedDecoder.for_locale("de_DE").decode("1.234,56")
            (DecodedAmount(value=123456, scale=2), ())
        """
        from .locale import get_locale_format  # noqa: PLC0415 - Babel loaded lazily

        locale_format = get_locale_format(locale_code)
        return cls(
            pattern=pattern if pattern is not None else locale_format.pattern,
            group_separator=locale_format.group_separator,
            decimal_separator=locale_format.decimal_separator,
        )

    def compress_pattern(self) -> CompressedPattern:
        """Compressed form of this decoder's pattern.

        Raises:
            FixedPatternError: If the pattern holds zero or several numeric groups
        """
        return compress_pattern(self.pattern, self.group_separator, self.decimal_separator)

    def decode(
        self,
        monetary_value: str,
        scale: int | None = None,
    ) -> tuple[DecodedAmount | None, tuple[FixedParseError, ...]]:
        """Parse ``monetary_value`` into minor units and the scale found.

        Args:
            monetary_value: Display string such as "1,234.56"
            scale: Scale the caller expects. Accepted for API compatibility
                and NOT enforced: the returned scale is always the number of
                minor digits present in ``monetary_value``.

        Returns:
            Tuple of (result, errors):
            - result: DecodedAmount, or None if decoding failed
            - errors: Tuple holding the single FixedParseError (empty on success)
        """
        try:
            amount = self._decode(monetary_value)
        except FixedParseError as error:
            logger.debug(
                "Failed to decode %r with pattern %r: %s", monetary_value, self.pattern, error
            )
            return (None, (error,))

        if scale is not None and scale != amount.scale:
            logger.debug(
                "Decoded %r with scale %d; requested scale %d is not enforced",
                monetary_value,
                amount.scale,
                scale,
            )
        return (amount, ())

    def _decode(self, monetary_value: str) -> DecodedAmount:
        compressed_pattern = self.compress_pattern()
        compressed_value = compress_whitespace(monetary_value)
        state = _DecodeInput(monetary_value, self.pattern, compressed_value, compressed_pattern)

        if len(compressed_value) > MAX_VALUE_LENGTH:
            diagnostic = ErrorTemplate.value_too_long(len(compressed_value), MAX_VALUE_LENGTH)
            raise FixedValueError(diagnostic, context=state.context())

        major_units = 0
        minor_units = 0
        # the no. of decimals actually found in the minor units
        actual_scale = 0
        is_negative = False
        seen_major = False

        group_separator = self.group_separator if compressed_pattern.grouped else None
        queue = ValueQueue(compressed_value, group_separator)

        for pattern_pos, char in enumerate(compressed_pattern.text):
            if char == MAJOR_TOKEN:
                if not seen_major:
                    if queue.peek() == NEGATIVE_SIGN:
                        queue = queue.take_one().queue
                        is_negative = True
                    major = queue.take_major_digits()
                    if major is None:
                        raise self._non_digit(state, queue)
                    major_units, queue = major.value, major.queue
                elif queue.is_not_empty:
                    minor = queue.take_minor_digits()
                    if minor is None:
                        raise self._non_digit(state, queue)
                    minor_units, actual_scale = minor.value.value, minor.value.scale
                    queue = minor.queue
            elif char == DECIMAL_TOKEN:
                if queue.is_not_empty:
                    taken = queue.take_one()
                    if taken.value != self.decimal_separator:
                        diagnostic = ErrorTemplate.unexpected_character(
                            monetary_value,
                            taken.value,
                            queue.index,
                            self.decimal_separator,
                            char,
                            pattern_pos,
                            state.span(queue.index),
                        )
                        context = state.context(
                            found=taken.value,
                            expected=self.decimal_separator,
                            input_position=queue.index,
                            pattern_position=pattern_pos,
                        )
                        raise FixedValueError(diagnostic, context=context)
                    queue = taken.queue
                seen_major = True
            elif char == SPACE_TOKEN:
                continue
            else:
                diagnostic = ErrorTemplate.invalid_pattern_char(
                    char, pattern_pos, compressed_pattern.text
                )
                raise FixedPatternError(
                    diagnostic, context=state.context(found=char, pattern_position=pattern_pos)
                )

        if queue.is_not_empty:
            remainder = queue.remainder
            start = _original_position(monetary_value, queue.index)
            length = len(monetary_value.rstrip()) - start
            diagnostic = ErrorTemplate.trailing_input(
                monetary_value,
                remainder,
                queue.index,
                SourceSpan.at(monetary_value, start, length),
            )
            raise FixedValueError(
                diagnostic,
                context=state.context(found=remainder, input_position=queue.index),
            )

        value = major_units * 10**actual_scale + minor_units
        amount = DecodedAmount(-value if is_negative else value, actual_scale)
        logger.debug("Decoded %r with pattern %r: %s", monetary_value, self.pattern, amount)
        return amount

    @staticmethod
    def _non_digit(state: _DecodeInput, queue: ValueQueue) -> FixedValueError:
        found = queue.peek() or ""
        diagnostic = ErrorTemplate.non_digit(
            state.monetary_value, found, queue.index, state.span(queue.index)
        )
        return FixedValueError(
            diagnostic,
            context=state.context(found=found, input_position=queue.index),
        )


def decode_amount(
    value: str,
    pattern: str,
    *,
    group_separator: str = DEFAULT_GROUP_SEPARATOR,
    decimal_separator: str = DEFAULT_DECIMAL_SEPARATOR,
    scale: int | None = None,
) -> tuple[DecodedAmount | None, tuple[FixedParseError, ...]]:
    """Decode ``value`` against ``pattern`` in one call.

    Args:
        value: Display string such as "1,234.56"
        pattern: Display pattern such as "#,##0.00"
        group_separator: Character grouping major digits
        decimal_separator: Character separating major and minor digits
        scale: Expected scale (not enforced, see FixedDecoder.decode())

    Returns:
        Tuple of (result, errors), see FixedDecoder.decode()

    Raises:
        ValueError: If the separators are invalid

    Examples:
        >>> decode_amount("-12.5", "#.00")
        (DecodedAmount(value=-125, scale=1), ())
        >>> decode_amount("42", "#.00")
        (DecodedAmount(value=42, scale=0), ())
    """
    decoder = FixedDecoder(pattern, group_separator, decimal_separator)
    return decoder.decode(value, scale)
