"""Decoded fixed-point amount."""

from dataclasses import dataclass
from decimal import Decimal

__all__ = ["DecodedAmount"]


@dataclass(frozen=True, slots=True)
class DecodedAmount:
    """An exact amount in minor units together with its scale.

    ``DecodedAmount(123456, 2)`` is 1234.56. The scale is the number of minor
    digits present in the decoded input, not the number a display pattern
    asks for: ``"12.5"`` decodes to ``DecodedAmount(125, 1)``.

    Attributes:
        value: Signed amount in minor units (arbitrary precision)
        scale: Number of minor digits (>= 0)
    """

    value: int
    scale: int

    def __post_init__(self) -> None:
        if self.scale < 0:
            msg = f"DecodedAmount.scale must be >= 0, got {self.scale}"
            raise ValueError(msg)

    def to_decimal(self) -> Decimal:
        """Return the exact Decimal value, keeping the scale as its exponent.

        Example:
            >>> DecodedAmount(123456, 2).to_decimal()
            Decimal('1234.56')
            >>> DecodedAmount(-125, 1).to_decimal()
            Decimal('-12.5')
        """
        return Decimal(self.value).scaleb(-self.scale)
