"""Decode exception hierarchy with structured diagnostics.

Errors are exceptions so callers may raise them, but the decoder returns
them in its result tuple instead of raising.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, FrozenErrorContext

__all__ = [
    "DecodeError",
    "FixedParseError",
    "FixedPatternError",
    "FixedValueError",
]


class DecodeError(Exception):
    """Base exception for all fixeddecoder errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DecodeError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class FixedParseError(DecodeError):
    """Failure to decode a monetary value against a display pattern.

    Attributes:
        category: Whether the pattern or the value was at fault
        context: Immutable input/pattern/position details

    Example:
        >>> result, errors = decoder.decode("12,5")
        >>> if errors:
        ...     err = errors[0]
        ...     print(err.code.name, err.context.found, err.context.input_position)
        UNEXPECTED_CHARACTER , 2
    """

    category: ErrorCategory = ErrorCategory.VALUE

    def __init__(
        self,
        diagnostic: Diagnostic,
        *,
        context: FrozenErrorContext | None = None,
    ) -> None:
        """Initialize FixedParseError.

        Args:
            diagnostic: Diagnostic produced by ErrorTemplate
            context: Input, pattern and position details
        """
        super().__init__(diagnostic)
        self.context = context if context is not None else FrozenErrorContext()

    @property
    def code(self) -> DiagnosticCode:
        """Diagnostic code identifying the error kind."""
        assert self.diagnostic is not None  # noqa: S101 - always set by __init__
        return self.diagnostic.code

    @property
    def input_value(self) -> str:
        """The monetary value that failed to decode."""
        return self.context.input_value

    @property
    def pattern(self) -> str:
        """The display pattern in effect."""
        return self.context.pattern


class FixedPatternError(FixedParseError):
    """The display pattern cannot drive a decode.

    Covers a missing or repeated numeric group, characters the decoder does
    not understand, and locales Babel cannot resolve.
    """

    category = ErrorCategory.PATTERN


class FixedValueError(FixedParseError):
    """The monetary value does not match a valid pattern."""

    category = ErrorCategory.VALUE
