"""Type guard for decode result type narrowing.

decode() returns tuple[DecodedAmount | None, tuple[FixedParseError, ...]].
The guard checks the result component to narrow its type for mypy.

Example:
    >>> result, errors = decoder.decode("1,234.56")
    >>> if is_valid_amount(result):
    ...     # mypy knows result is DecodedAmount
    ...     cents = result.value
"""

from typing import TypeIs

from .amount import DecodedAmount

__all__ = ["is_valid_amount"]


def is_valid_amount(value: DecodedAmount | None) -> TypeIs[DecodedAmount]:
    """Type guard: Check if a decode result holds an amount (not None).

    Safe to call directly on the decode() result without checking errors first.

    Args:
        value: DecodedAmount from the decode() result tuple (None on error)

    Returns:
        True if value is a DecodedAmount, False otherwise
    """
    return value is not None
