"""Diagnostic system for interval errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    IntervalArithmeticError,
    IntervalDivisionError,
    IntervalError,
    IntervalFieldError,
    IntervalParseError,
    IntervalRangeError,
    PatternSyntaxError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "IntervalArithmeticError",
    "IntervalDivisionError",
    "IntervalError",
    "IntervalFieldError",
    "IntervalParseError",
    "IntervalRangeError",
    "OutputFormat",
    "PatternSyntaxError",
    "SourceSpan",
]
