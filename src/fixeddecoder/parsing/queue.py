"""Immutable character queue over a monetary value.

Implements the immutable cursor pattern for the decoder.
Python 3.13+. Zero external dependencies.

Design:
    - ValueQueue is a frozen dataclass; every take returns a NEW queue
    - End of input is a state (is_empty); peek() returns None there
    - Digit runs are returned as Python ints (arbitrary precision)
"""

from dataclasses import dataclass, replace

from fixeddecoder.constants import ASCII_DIGITS

__all__ = ["MinorDigits", "TakeResult", "ValueQueue"]


@dataclass(frozen=True, slots=True)
class MinorDigits:
    """Digits to the right of the decimal separator.

    Attributes:
        value: The digits read as an integer ("05" -> 5)
        scale: Number of digit characters consumed ("05" -> 2)
    """

    value: int
    scale: int


@dataclass(frozen=True, slots=True)
class ValueQueue:
    """Cursor over a whitespace-compressed monetary value.

    Example:
        >>> queue = ValueQueue("-1,234.5", group_separator=",")
        >>> queue.peek()
        '-'
        >>> sign = queue.take_one()
        >>> major = sign.queue.take_major_digits()
        >>> major.value
        1234
        >>> major.queue.peek()
        '.'
        >>> queue.index  # Original unchanged
        0

    Attributes:
        source: The compressed monetary value
        group_separator: Separator skipped inside digit runs, None to accept
            no grouping at all
        index: Current offset into source
        last_take: Text returned by the take that produced this queue
    """

    source: str
    group_separator: str | None = None
    index: int = 0
    last_take: str | None = None

    @property
    def is_empty(self) -> bool:
        """True once every character has been taken."""
        return self.index >= len(self.source)

    @property
    def is_not_empty(self) -> bool:
        return not self.is_empty

    @property
    def remainder(self) -> str:
        """Characters not yet taken."""
        return self.source[self.index :]

    def peek(self) -> str | None:
        """Current character without advancing, or None at end of input."""
        if self.is_empty:
            return None
        return self.source[self.index]

    def take_one(self) -> "TakeResult[str]":
        """Take the current character.

        Raises:
            EOFError: If the queue is empty. Check is_not_empty first.
        """
        if self.is_empty:
            msg = f"Unexpected end of input at position {self.index}"
            raise EOFError(msg)
        char = self.source[self.index]
        return TakeResult(char, replace(self, index=self.index + 1, last_take=char))

    def take_n(self, n: int) -> "TakeResult[str]":
        """Take up to ``n`` characters, clipped at end of input.

        The queue advances by the number of characters actually taken.

        Example:
            >>> ValueQueue("12", index=1).take_n(5).value
            '2'
        """
        if n < 0:
            msg = f"take_n() count must be >= 0, got {n}"
            raise ValueError(msg)
        end = min(self.index + n, len(self.source))
        taken = self.source[self.index : end]
        return TakeResult(taken, replace(self, index=end, last_take=taken))

    @staticmethod
    def is_digit(char: str) -> bool:
        """True if ``char`` is one of the ASCII digits 0-9."""
        return len(char) == 1 and char in ASCII_DIGITS

    def take_major_digits(self) -> "TakeResult[int] | None":
        """Take the run of digits and group separators at the cursor.

        Returns:
            The digits as an int, or None (queue unchanged) if the run
            holds no digit.
        """
        run = self._take_digits()
        if run is None:
            return None
        return TakeResult(int(run.value), run.queue)

    def take_minor_digits(self) -> "TakeResult[MinorDigits] | None":
        """Take the remaining digits as minor units.

        Same consumption rule as take_major_digits(); the scale is the
        number of digits taken, group separators excluded.
        """
        run = self._take_digits()
        if run is None:
            return None
        return TakeResult(MinorDigits(int(run.value), len(run.value)), run.queue)

    def _take_digits(self) -> "TakeResult[str] | None":
        pos = self.index
        digits: list[str] = []
        while pos < len(self.source):
            char = self.source[pos]
            if self.is_digit(char):
                digits.append(char)
            elif char != self.group_separator:
                break
            pos += 1

        if not digits:
            return None

        taken = self.source[self.index : pos]
        return TakeResult("".join(digits), replace(self, index=pos, last_take=taken))


@dataclass(frozen=True, slots=True)
class TakeResult[T]:
    """Value taken from a queue together with the advanced queue.

    Type Parameters:
        T: The type of the taken value
    """

    value: T
    queue: ValueQueue
