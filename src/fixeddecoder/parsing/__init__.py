"""Decode display-formatted monetary strings into exact fixed-point amounts.

- Decode functions NEVER raise for a bad pattern or value - errors are returned in tuple
- The returned scale is the number of minor digits actually present

Public API:
    Decoding:
        FixedDecoder - Pattern + separators; decode() returns
            tuple[DecodedAmount | None, tuple[FixedParseError, ...]]
        decode_amount - One-shot decode against a pattern
        parse_amount - One-shot decode using a locale's CLDR separators (needs Babel)

    Building blocks:
        compress_pattern, compress_digits, compress_whitespace - Pattern compression
        ValueQueue - Immutable cursor over a compressed value

    Type Guards:
        is_valid_amount - TypeIs guard for DecodedAmount (not None)

Example:
    >>> from fixeddecoder.parsing import FixedDecoder, is_valid_amount
    >>> result, errors = FixedDecoder("#,##0.00").decode("1,234.56")
    >>> if is_valid_amount(result):
    ...     total = result.to_decimal()

Python 3.13+.
"""

from .amount import DecodedAmount
from .decoder import FixedDecoder, decode_amount
from .guards import is_valid_amount
from .locale import parse_amount
from .pattern import CompressedPattern, compress_digits, compress_pattern, compress_whitespace
from .queue import MinorDigits, TakeResult, ValueQueue

__all__ = [
    # Results
    "CompressedPattern",
    "DecodedAmount",
    "MinorDigits",
    "TakeResult",
    # Decoding
    "FixedDecoder",
    "ValueQueue",
    "decode_amount",
    "parse_amount",
    # Pattern compression
    "compress_digits",
    "compress_pattern",
    "compress_whitespace",
    # Type guards
    "is_valid_amount",
]
