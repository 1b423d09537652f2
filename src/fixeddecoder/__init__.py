"""fixeddecoder - Decode display-formatted money into exact minor units.

Parses strings such as "1,234.56" against a display pattern such as
"#,##0.00" into an arbitrary-precision integer amount in minor units and
the number of decimal places actually present.

Public API:
    FixedDecoder - Pattern + separators, decode() returns (result, errors)
    DecodedAmount - Result: value in minor units and scale
    decode_amount - One-shot decode against a pattern
    parse_amount - One-shot decode using CLDR locale data (requires Babel)
    is_valid_amount - Type guard for decode results

Exceptions:
    DecodeError - Base exception class
    FixedParseError - Decode failure carrying a Diagnostic and context
    FixedPatternError - The pattern (or locale) cannot drive a decode
    FixedValueError - The value does not match the pattern

Submodules:
    fixeddecoder.parsing - Decoder, pattern compression, value queue
    fixeddecoder.diagnostics - Diagnostic codes, templates and formatting
    fixeddecoder.core - Optional Babel integration
"""

from .diagnostics import DecodeError, FixedParseError, FixedPatternError, FixedValueError
from .parsing import DecodedAmount, FixedDecoder, decode_amount, is_valid_amount, parse_amount

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("fixeddecoder")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DecodeError",
    "DecodedAmount",
    "FixedDecoder",
    "FixedParseError",
    "FixedPatternError",
    "FixedValueError",
    "__version__",
    "decode_amount",
    "is_valid_amount",
    "parse_amount",
]
