"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Range errors (value outside a duration's bounds)
        2000-2999: Field errors (individual field outside its sub-range)
        3000-3999: Arithmetic errors (scaling by a float)
        4000-4999: Pattern errors (pattern string does not compile)
        5000-5999: Parse errors (input does not match a compiled pattern)
    """

    # Range errors (1000-1999)
    INTERVAL_OUT_OF_RANGE = 1001

    # Field errors (2000-2999)
    INVALID_MONTH = 2001
    TIME_OUT_OF_RANGE = 2002
    INVALID_MINUTE = 2003
    INVALID_SECOND = 2004
    INVALID_FRACTION = 2005

    # Arithmetic errors (3000-3999)
    NUMERIC_OVERFLOW = 3001
    INVALID_NUMBER = 3002
    DIVIDE_BY_ZERO = 3003

    # Pattern errors (4000-4999)
    PATTERN_UNKNOWN_TOKEN = 4001
    PATTERN_DUPLICATE_FIELD = 4002
    PATTERN_NO_FIELDS = 4003
    PATTERN_UNTERMINATED_QUOTE = 4004
    PATTERN_TOO_LONG = 4005

    # Parse errors (5000-5999)
    PARSE_UNEXPECTED_END = 5001
    PARSE_LITERAL_MISMATCH = 5002
    PARSE_DIGITS_EXPECTED = 5003
    PARSE_TRAILING_INPUT = 5004
    PARSE_INPUT_TOO_LONG = 5005
    FIELD_INCOMPATIBLE = 5006


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location inside a pattern or input string for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int = 1
    column: int = 1

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location in the pattern or input (None for value errors)
        hint: Suggestion for fixing the error
        field: Name of the offending field (field and incompatibility errors)
        source: Pattern or input text the span points into
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    field: str | None = None
    source: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[PARSE_DIGITS_EXPECTED]: The interval is invalid: expected digits for month ...
              --> column 6
              = source: 0000-xx
              = field: month
              = help: Each numeric field needs at least one digit

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
