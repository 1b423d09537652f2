"""Shared constants for fixeddecoder.

Centralizes the token characters of display patterns, default separators
and input limits used across the parsing and diagnostics packages.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Pattern tokens
    "PATTERN_DIGIT_CHARS",
    "MAJOR_TOKEN",
    "DECIMAL_TOKEN",
    "SPACE_TOKEN",
    # Input characters
    "ASCII_DIGITS",
    "NEGATIVE_SIGN",
    # Separators
    "DEFAULT_GROUP_SEPARATOR",
    "DEFAULT_DECIMAL_SEPARATOR",
    "RESERVED_SEPARATOR_CHARS",
    # Input limits
    "MAX_VALUE_LENGTH",
    "MAX_PATTERN_CACHE_SIZE",
]

# ============================================================================
# PATTERN TOKENS
# ============================================================================

# Placeholder characters accepted inside a numeric group of a display pattern.
# "#" is an optional digit, "0" a mandatory one; for decoding both mean "digit".
PATTERN_DIGIT_CHARS: str = "#0"

# Canonical token a numeric run is compressed to.
MAJOR_TOKEN: str = "#"

# Canonical decimal point of a compressed pattern. The configured decimal
# separator is always rewritten to this character by compression.
DECIMAL_TOKEN: str = "."

# Only reachable when a pattern was not whitespace-compressed.
SPACE_TOKEN: str = " "

# ============================================================================
# INPUT CHARACTERS
# ============================================================================

# ASCII digits only. str.isdigit() accepts characters such as "²" which
# int() rejects.
ASCII_DIGITS: str = "0123456789"

NEGATIVE_SIGN: str = "-"

# ============================================================================
# SEPARATORS
# ============================================================================

DEFAULT_GROUP_SEPARATOR: str = ","
DEFAULT_DECIMAL_SEPARATOR: str = "."

# Characters that can never be configured as a separator: they would be
# indistinguishable from digit placeholders, digits or the sign.
RESERVED_SEPARATOR_CHARS: frozenset[str] = frozenset(
    PATTERN_DIGIT_CHARS + ASCII_DIGITS + NEGATIVE_SIGN
)

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum length of a whitespace-compressed monetary value.
# CPython refuses int() conversion of strings above 4300 digits by default
# (sys.int_info.default_max_str_digits); stay safely below it.
MAX_VALUE_LENGTH: int = 4000

# Distinct (pattern, group, decimal) triples kept by the compression cache.
MAX_PATTERN_CACHE_SIZE: int = 256
