"""Interval exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = [
    "IntervalArithmeticError",
    "IntervalDivisionError",
    "IntervalError",
    "IntervalFieldError",
    "IntervalParseError",
    "IntervalRangeError",
    "PatternSyntaxError",
]


class IntervalError(Exception):
    """Base exception for all interval errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize IntervalError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def code(self) -> DiagnosticCode | None:
        """Diagnostic code, or None for plain-message errors."""
        return self.diagnostic.code if self.diagnostic is not None else None


class IntervalRangeError(IntervalError):
    """Value exceeds the symmetric bound of its duration type.

    Raised by construction, addition, subtraction and scaling alike.
    """


class IntervalFieldError(IntervalError):
    """A single field lies outside its legal sub-range.

    Examples:
    - month >= 12
    - hour >= 24
    - microsecond > 999999

    Attributes:
        field: Name of the offending field
    """

    def __init__(self, message: str | Diagnostic, *, field: str = "") -> None:
        super().__init__(message)
        self.field = field


class IntervalArithmeticError(IntervalError):
    """Scaling produced a non-finite intermediate value.

    The code distinguishes NUMERIC_OVERFLOW (infinite) from
    INVALID_NUMBER (not a number).
    """


class IntervalDivisionError(IntervalArithmeticError, ZeroDivisionError):
    """Division by exactly zero, detected before dividing."""


class IntervalParseError(IntervalError):
    """Input string does not match a compiled pattern.

    Also raised when the pattern uses a field the target duration type
    cannot represent.

    Attributes:
        input_value: The string that failed to parse
        pattern: The pattern the input was matched against
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        pattern: str = "",
    ) -> None:
        """Initialize IntervalParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            pattern: The pattern source
        """
        super().__init__(message)
        self.input_value = input_value
        self.pattern = pattern


class PatternSyntaxError(IntervalParseError):
    """The pattern string itself cannot be compiled.

    Unknown tokens, repeated fields, unterminated quotes.
    """
