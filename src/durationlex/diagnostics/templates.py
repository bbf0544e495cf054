"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from ..syntax.cursor import Cursor
from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


def _span(source: str, start: int, end: int | None = None) -> SourceSpan:
    """Build a span for [start, end) in source with 1-indexed line/column."""
    end = start if end is None else end
    line, column = Cursor(source, start).compute_line_col()
    return SourceSpan(start=start, end=end, line=line, column=column)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # ------------------------------------------------------------------
    # Range errors
    # ------------------------------------------------------------------

    @staticmethod
    def interval_out_of_range(kind: str, value: object) -> Diagnostic:
        """Value outside the symmetric bound of a duration type.

        Args:
            kind: Duration kind ("year-month" or "day-time")
            value: Offending value, as computed

        Returns:
            Diagnostic for INTERVAL_OUT_OF_RANGE
        """
        msg = f"The {kind} interval is out of range: {value}"
        return Diagnostic(
            code=DiagnosticCode.INTERVAL_OUT_OF_RANGE,
            message=msg,
            hint="Year-month intervals are bounded by 178000000 years, "
            "day-time intervals by 100000000 days",
        )

    # ------------------------------------------------------------------
    # Field errors
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_month(month: int) -> Diagnostic:
        """Month field outside 0..11."""
        msg = f"Month must be between 0 and 11, got {month}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_MONTH,
            message=msg,
            hint="Carry twelve months into the year field",
            field="month",
        )

    @staticmethod
    def time_out_of_range(hour: int) -> Diagnostic:
        """Hour field outside 0..23."""
        msg = f"Hour must be between 0 and 23, got {hour}"
        return Diagnostic(
            code=DiagnosticCode.TIME_OUT_OF_RANGE,
            message=msg,
            hint="Carry 24 hours into the day field",
            field="hour",
        )

    @staticmethod
    def invalid_minute(minute: int) -> Diagnostic:
        """Minute field outside 0..59."""
        msg = f"Minute must be between 0 and 59, got {minute}"
        return Diagnostic(code=DiagnosticCode.INVALID_MINUTE, message=msg, field="minute")

    @staticmethod
    def invalid_second(second: int) -> Diagnostic:
        """Second field outside 0..59."""
        msg = f"Second must be between 0 and 59, got {second}"
        return Diagnostic(code=DiagnosticCode.INVALID_SECOND, message=msg, field="second")

    @staticmethod
    def invalid_fraction(microsecond: int) -> Diagnostic:
        """Microsecond field outside 0..999999."""
        msg = f"Fractional second must be between 0 and 999999 microseconds, got {microsecond}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_FRACTION,
            message=msg,
            field="fraction",
        )

    # ------------------------------------------------------------------
    # Arithmetic errors
    # ------------------------------------------------------------------

    @staticmethod
    def numeric_overflow(operation: str, factor: float) -> Diagnostic:
        """Scaling produced an infinite intermediate result.

        Args:
            operation: "multiply" or "divide"
            factor: The scaling factor

        Returns:
            Diagnostic for NUMERIC_OVERFLOW
        """
        msg = f"Numeric overflow: cannot {operation} interval by {factor!r}"
        return Diagnostic(code=DiagnosticCode.NUMERIC_OVERFLOW, message=msg)

    @staticmethod
    def invalid_number(operation: str, factor: float) -> Diagnostic:
        """Scaling produced NaN."""
        msg = f"Invalid number: cannot {operation} interval by {factor!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_NUMBER,
            message=msg,
            hint="The scaling factor or its product is not a number",
        )

    @staticmethod
    def divide_by_zero() -> Diagnostic:
        """Division by exactly zero."""
        return Diagnostic(code=DiagnosticCode.DIVIDE_BY_ZERO, message="Division by zero")

    # ------------------------------------------------------------------
    # Pattern errors
    # ------------------------------------------------------------------

    @staticmethod
    def pattern_unknown_token(pattern: str, token: str, position: int) -> Diagnostic:
        """Pattern contains a token outside the vocabulary.

        Args:
            pattern: Pattern source
            token: The unrecognized text
            position: Offset of the token in the pattern

        Returns:
            Diagnostic for PATTERN_UNKNOWN_TOKEN
        """
        msg = f"Unknown format token '{token}' at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UNKNOWN_TOKEN,
            message=msg,
            span=_span(pattern, position, position + len(token)),
            hint='Use YYYY, MM, DD, HH24, MI, SS, FF[1-9], or quote literal text with "..."',
            source=pattern,
        )

    @staticmethod
    def pattern_duplicate_field(pattern: str, field: str, position: int) -> Diagnostic:
        """Same field appears twice in a pattern."""
        msg = f"Format field '{field}' appears twice (second occurrence at position {position})"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_DUPLICATE_FIELD,
            message=msg,
            span=_span(pattern, position),
            field=field,
            source=pattern,
        )

    @staticmethod
    def pattern_no_fields(pattern: str) -> Diagnostic:
        """Pattern has only literal text."""
        msg = f"Format pattern '{pattern}' contains no field"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_NO_FIELDS,
            message=msg,
            hint="A pattern needs at least one of YYYY, MM, DD, HH24, MI, SS, FF",
            source=pattern,
        )

    @staticmethod
    def pattern_unterminated_quote(pattern: str, position: int) -> Diagnostic:
        """Quoted literal has no closing quote."""
        msg = f"Unterminated quoted literal starting at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UNTERMINATED_QUOTE,
            message=msg,
            span=_span(pattern, position, len(pattern)),
            source=pattern,
        )

    @staticmethod
    def pattern_too_long(length: int, limit: int) -> Diagnostic:
        """Pattern exceeds MAX_PATTERN_LENGTH."""
        msg = f"Format pattern length {length} exceeds maximum of {limit} characters"
        return Diagnostic(code=DiagnosticCode.PATTERN_TOO_LONG, message=msg)

    # ------------------------------------------------------------------
    # Parse errors
    # ------------------------------------------------------------------

    @staticmethod
    def parse_unexpected_end(input_value: str, expected: str) -> Diagnostic:
        """Input ended before the pattern did.

        Args:
            input_value: The input being parsed
            expected: Description of what the pattern still requires

        Returns:
            Diagnostic for PARSE_UNEXPECTED_END
        """
        msg = f"The interval is invalid: input ended, expected {expected}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_UNEXPECTED_END,
            message=msg,
            span=_span(input_value, len(input_value)),
            source=input_value,
        )

    @staticmethod
    def parse_literal_mismatch(input_value: str, literal: str, position: int) -> Diagnostic:
        """Separator text did not match."""
        msg = f"The interval is invalid: expected '{literal}' at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_LITERAL_MISMATCH,
            message=msg,
            span=_span(input_value, position),
            source=input_value,
        )

    @staticmethod
    def parse_digits_expected(input_value: str, field: str, position: int) -> Diagnostic:
        """Numeric token found no digits."""
        msg = f"The interval is invalid: expected digits for {field} at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_DIGITS_EXPECTED,
            message=msg,
            span=_span(input_value, position),
            hint="Each numeric field needs at least one digit",
            field=field,
            source=input_value,
        )

    @staticmethod
    def parse_trailing_input(input_value: str, position: int) -> Diagnostic:
        """Input continues after the pattern is exhausted."""
        trailing = input_value[position:]
        msg = f"The interval is invalid: unexpected trailing input '{trailing}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_TRAILING_INPUT,
            message=msg,
            span=_span(input_value, position, len(input_value)),
            source=input_value,
        )

    @staticmethod
    def parse_input_too_long(length: int, limit: int) -> Diagnostic:
        """Input exceeds MAX_INPUT_LENGTH."""
        msg = f"Input length {length} exceeds maximum of {limit} characters"
        return Diagnostic(code=DiagnosticCode.PARSE_INPUT_TOO_LONG, message=msg)

    @staticmethod
    def field_incompatible(field: str, kind: str) -> Diagnostic:
        """Pattern or record uses a field the duration type does not have.

        Args:
            field: Field name (e.g. "day")
            kind: Duration kind ("year-month" or "day-time")

        Returns:
            Diagnostic for FIELD_INCOMPATIBLE
        """
        msg = f"Field '{field}' is not valid for a {kind} interval"
        return Diagnostic(
            code=DiagnosticCode.FIELD_INCOMPATIBLE,
            message=msg,
            hint="Year-month intervals accept YYYY and MM; "
            "day-time intervals accept DD, HH24, MI, SS and FF",
            field=field,
        )
