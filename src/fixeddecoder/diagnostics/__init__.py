"""Diagnostic system for decode errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, FrozenErrorContext, SourceSpan
from .errors import DecodeError, FixedParseError, FixedPatternError, FixedValueError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DecodeError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FixedParseError",
    "FixedPatternError",
    "FixedValueError",
    "FrozenErrorContext",
    "OutputFormat",
    "SourceSpan",
]
