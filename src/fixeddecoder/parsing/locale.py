"""Locale-derived decoder configuration.

API: parse_amount() returns tuple[DecodedAmount | None, tuple[FixedParseError, ...]].
Functions NEVER raise for bad input - errors returned in tuple.

Group and decimal symbols and the default display pattern are sourced from
Unicode CLDR via Babel. CLDR patterns always use ``,`` and ``.`` as pattern
symbols; they are translated to the locale's actual symbols here so the
result can drive a FixedDecoder directly.

Raises BabelImportError if Babel is not installed.

Thread-safe. Locale lookups are cached with lru_cache.

Python 3.13+.
"""

import functools
import logging
from dataclasses import dataclass

from fixeddecoder.core.babel_compat import (
    get_babel_numbers,
    get_locale_class,
    get_unknown_locale_error,
    require_babel,
)
from fixeddecoder.diagnostics import (
    ErrorTemplate,
    FixedParseError,
    FixedPatternError,
    FrozenErrorContext,
)

from .amount import DecodedAmount
from .decoder import FixedDecoder

__all__ = ["LocaleFormat", "get_locale_format", "normalize_locale", "parse_amount"]

logger = logging.getLogger(__name__)

# Distinct locales kept by the CLDR lookup cache.
MAX_LOCALE_CACHE_SIZE: int = 128

# Separator between positive and negative subpatterns in CLDR number patterns.
_SUBPATTERN_SEPARATOR: str = ";"


@dataclass(frozen=True, slots=True)
class LocaleFormat:
    """Decoder configuration derived from a locale.

    Attributes:
        locale_code: Normalized (POSIX) locale code
        pattern: Standard decimal pattern written with the locale's separators
        group_separator: CLDR group symbol (latn numbering system)
        decimal_separator: CLDR decimal symbol (latn numbering system)
    """

    locale_code: str
    pattern: str
    group_separator: str
    decimal_separator: str


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_locale_format(locale_code: str) -> LocaleFormat:
    """Resolve separators and the standard decimal pattern for a locale.

    Args:
        locale_code: BCP 47 or POSIX locale identifier

    Returns:
        LocaleFormat

    Raises:
        FixedPatternError: If Babel does not know the locale (LOCALE_UNKNOWN)
        BabelImportError: If Babel is not installed

    Example:
        >>> get_locale_format("de_DE")
        LocaleFormat(locale_code='de_DE', pattern='#.##0,###', group_separator='.', decimal_separator=',')
    """
    require_babel("get_locale_format")
    locale_class = get_locale_class()
    unknown_locale_error_class = get_unknown_locale_error()
    numbers = get_babel_numbers()

    normalized = normalize_locale(locale_code)
    try:
        locale = locale_class.parse(normalized)
    except (unknown_locale_error_class, ValueError) as e:
        diagnostic = ErrorTemplate.locale_unknown(locale_code)
        raise FixedPatternError(diagnostic, context=FrozenErrorContext()) from e

    group_separator = numbers.get_group_symbol(locale)
    decimal_separator = numbers.get_decimal_symbol(locale)

    cldr_pattern = locale.decimal_formats[None].pattern
    positive = cldr_pattern.split(_SUBPATTERN_SEPARATOR, 1)[0]
    pattern = positive.translate(str.maketrans({",": group_separator, ".": decimal_separator}))

    logger.debug(
        "Locale %s: pattern=%r group=%r decimal=%r",
        normalized,
        pattern,
        group_separator,
        decimal_separator,
    )
    return LocaleFormat(
        locale_code=normalized,
        pattern=pattern,
        group_separator=group_separator,
        decimal_separator=decimal_separator,
    )


def parse_amount(
    value: str,
    locale_code: str,
    *,
    pattern: str | None = None,
    scale: int | None = None,
) -> tuple[DecodedAmount | None, tuple[FixedParseError, ...]]:
    """Decode a locale-formatted monetary string into minor units.

    Args:
        value: Display string (e.g., "1 234,56" for lv_LV)
        locale_code: BCP 47 locale identifier
        pattern: Display pattern in the locale's separators; defaults to the
            locale's standard decimal pattern
        scale: Expected scale (not enforced, see FixedDecoder.decode())

    Returns:
        Tuple of (result, errors):
        - result: DecodedAmount, or None if decoding failed
        - errors: Tuple of FixedParseError (empty tuple on success)

    Raises:
        BabelImportError: If Babel is not installed

    Examples:
        >>> parse_amount("1,234.56", "en_US")
        (DecodedAmount(value=123456, scale=2), ())
        >>> parse_amount("1.234,5", "de_DE")
        (DecodedAmount(value=12345, scale=1), ())
        >>> result, errors = parse_amount("1,00", "xx_XX")
        >>> errors[0].code.name
        'LOCALE_UNKNOWN'
    """
    try:
        decoder = FixedDecoder.for_locale(locale_code, pattern)
    except FixedPatternError as error:
        logger.debug("Cannot decode %r for locale %r: %s", value, locale_code, error)
        return (None, (error,))
    return decoder.decode(value, scale)
