"""Display pattern compression.

Reduces a display pattern such as ``"#,##0.00"`` to a canonical template
holding exactly one numeric token:

- ``#.#`` - major digits, decimal separator, minor digits
- ``#``   - major digits only
- ``.#``  - decimal separator and minor digits only

Characters around the numeric group are preserved. The decimal separator of
the compressed group is always written as ``.`` regardless of the configured
separator.

Thread-safe. Compression is a pure function and is memoised.

Python 3.13+. Zero external dependencies.
"""

import functools
from dataclasses import dataclass

from fixeddecoder.constants import (
    DECIMAL_TOKEN,
    MAJOR_TOKEN,
    MAX_PATTERN_CACHE_SIZE,
    PATTERN_DIGIT_CHARS,
)
from fixeddecoder.diagnostics import ErrorTemplate, FixedPatternError, FrozenErrorContext

__all__ = [
    "CompressedPattern",
    "compress_digits",
    "compress_pattern",
    "compress_whitespace",
]


@dataclass(frozen=True, slots=True)
class CompressedPattern:
    """Canonical form of a display pattern.

    Attributes:
        text: Pattern with its numeric group replaced by ``#``, ``#.#`` or ``.#``
        grouped: True if the major digits of the group used the group separator
    """

    text: str
    grouped: bool = False

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class _NumericGroup:
    """Span of one numeric group in a pattern (end exclusive)."""

    start: int
    end: int
    has_major: bool
    has_minor: bool
    grouped: bool

    @property
    def token(self) -> str:
        if self.has_major and self.has_minor:
            return MAJOR_TOKEN + DECIMAL_TOKEN + MAJOR_TOKEN
        if self.has_major:
            return MAJOR_TOKEN
        return DECIMAL_TOKEN + MAJOR_TOKEN


def compress_whitespace(text: str) -> str:
    """Remove all whitespace from a pattern or a value.

    Whitespace carries no meaning when decoding, including non-breaking
    spaces that some locales use as group separators.

    Example:
        >>> compress_whitespace(" 1 234,56\\u00a0")
        '1234,56'
    """
    return "".join(char for char in text if not char.isspace())


def _find_numeric_groups(
    pattern: str, group_separator: str, decimal_separator: str
) -> list[_NumericGroup]:
    """Locate every numeric group in a single left-to-right pass."""
    groups: list[_NumericGroup] = []
    length = len(pattern)
    pos = 0

    while pos < length:
        start = pos
        has_major = False
        grouped = False

        # Major run: digit placeholders and group separators
        while pos < length and (
            pattern[pos] in PATTERN_DIGIT_CHARS or pattern[pos] == group_separator
        ):
            if pattern[pos] == group_separator:
                grouped = True
            else:
                has_major = True
            pos += 1

        # A run of bare group separators is literal text
        if not has_major:
            pos = start
            grouped = False

        # Optional decimal separator followed by a minor run
        has_minor = False
        if pos < length and pattern[pos] == decimal_separator:
            minor_end = pos + 1
            while minor_end < length and pattern[minor_end] in PATTERN_DIGIT_CHARS:
                minor_end += 1
            if minor_end > pos + 1:
                has_minor = True
                pos = minor_end

        if has_major or has_minor:
            groups.append(_NumericGroup(start, pos, has_major, has_minor, grouped))
        else:
            pos = start + 1

    return groups


def compress_digits(
    pattern: str, group_separator: str, decimal_separator: str
) -> CompressedPattern:
    """Compress the single numeric group of ``pattern`` to its canonical token.

    Args:
        pattern: Display pattern (normally already whitespace-compressed)
        group_separator: Character grouping major digits (e.g. ``,``)
        decimal_separator: Character separating major and minor digits

    Returns:
        CompressedPattern

    Raises:
        FixedPatternError: If the pattern holds no numeric group or more
            than one (AMBIGUOUS_OR_MISSING_NUMERIC_PATTERN)

    Examples:
        >>> compress_digits("#,##0.00", ",", ".").text
        '#.#'
        >>> compress_digits("#.##0,00", ".", ",").text
        '#.#'
        >>> compress_digits("0", ",", ".").text
        '#'
        >>> compress_digits(".00", ",", ".").text
        '.#'
    """
    groups = _find_numeric_groups(pattern, group_separator, decimal_separator)

    if not groups:
        diagnostic = ErrorTemplate.numeric_pattern_missing(pattern)
        raise FixedPatternError(diagnostic, context=FrozenErrorContext(pattern=pattern))

    if len(groups) != 1:
        diagnostic = ErrorTemplate.numeric_pattern_ambiguous(pattern, len(groups))
        raise FixedPatternError(diagnostic, context=FrozenErrorContext(pattern=pattern))

    group = groups[0]
    text = pattern[: group.start] + group.token + pattern[group.end :]
    return CompressedPattern(text=text, grouped=group.grouped)


@functools.lru_cache(maxsize=MAX_PATTERN_CACHE_SIZE)
def compress_pattern(
    pattern: str, group_separator: str, decimal_separator: str
) -> CompressedPattern:
    """Whitespace-compress then digit-compress ``pattern``.

    Whitespace goes first so that ``" # . 00 "`` and ``"#.00"`` compress to
    the same template.

    Raises:
        FixedPatternError: See compress_digits()
    """
    return compress_digits(compress_whitespace(pattern), group_separator, decimal_separator)
