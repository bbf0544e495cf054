"""Pattern-driven text codec: format and parse bridge records.

- render() turns a BridgeRecord into text following a TokenProgram
- scan() matches text against a TokenProgram and returns a BridgeRecord
- DurationFormat wraps a compiled program for repeated use with duration types

Rendering always emits an explicit sign ("+" or "-") before the first field.
Scanning accepts an optional sign in the same place, ignores whitespace around
the input and around every literal separator, and leaves fields the pattern
does not mention at zero.

Thread-safe. Every function here is pure; programs and records are immutable.

Python 3.13+.
"""

from __future__ import annotations

import logging

from durationlex.constants import (
    DEFAULT_FRACTION_PRECISION,
    MAX_FRACTION_DIGITS,
    MAX_INPUT_LENGTH,
)
from durationlex.diagnostics import Diagnostic, ErrorTemplate, IntervalParseError
from durationlex.enums import FieldKind
from durationlex.syntax.cursor import Cursor, ParseResult

from .bridge import BridgeRecord, RecordConvertible
from .tokens import FieldToken, LiteralToken, TokenProgram, compile_pattern

__all__ = [
    "DurationFormat",
    "check_fields",
    "render",
    "scan",
]

logger = logging.getLogger(__name__)

# Digits kept in the microsecond field.
_MICRO_DIGITS = 6


def _parse_error(
    diagnostic: Diagnostic, input_value: str, program: TokenProgram
) -> IntervalParseError:
    logger.debug("Failed to parse %r with pattern %r: %s", input_value, program.source, diagnostic)
    return IntervalParseError(diagnostic, input_value=input_value, pattern=program.source)


def check_fields(
    program: TokenProgram,
    allowed: frozenset[FieldKind],
    kind: str,
    *,
    input_value: str = "",
) -> None:
    """Reject programs referencing fields outside allowed.

    Runs before any scanning or rendering, so a year-month pattern never
    touches a day-time value and vice versa. input_value is attached to the
    error when the check guards a parse.

    Raises:
        IntervalParseError: FIELD_INCOMPATIBLE for the first offending token
    """
    for token in program.field_tokens():
        if token.field not in allowed:
            diagnostic = ErrorTemplate.field_incompatible(token.field, kind)
            logger.debug("Pattern %r rejected for %s: %s", program.source, kind, diagnostic)
            raise IntervalParseError(diagnostic, input_value=input_value, pattern=program.source)


# ==============================================================================
# RENDERING
# ==============================================================================


def _render_fraction(token: FieldToken, microsecond: int) -> str:
    precision = token.precision or DEFAULT_FRACTION_PRECISION
    if precision <= _MICRO_DIGITS:
        digits = microsecond // 10 ** (_MICRO_DIGITS - precision)
    else:
        digits = microsecond * 10 ** (precision - _MICRO_DIGITS)
    return str(digits).zfill(precision)


def render(program: TokenProgram, record: BridgeRecord) -> str:
    """Render record following program.

    Args:
        program: Compiled pattern
        record: Field magnitudes and sign

    Returns:
        Formatted text with an explicit sign before the first field

    Example:
        >>> render(compile_pattern("yy-mm"), BridgeRecord(year=123, month=2))
        '+123-02'
        >>> render(compile_pattern("yy-mm"), BridgeRecord(year=1, negative=True))
        '-01-00'
    """
    parts: list[str] = []
    sign_pending = True
    for token in program.tokens:
        match token:
            case LiteralToken(text=text):
                parts.append(text)
            case FieldToken(field=FieldKind.FRACTION):
                if sign_pending:
                    parts.append("-" if record.negative else "+")
                    sign_pending = False
                parts.append(_render_fraction(token, record.microsecond))
            case FieldToken(field=field, width=width):
                if sign_pending:
                    parts.append("-" if record.negative else "+")
                    sign_pending = False
                parts.append(str(record.get(field)).zfill(width))
    return "".join(parts)


# ==============================================================================
# SCANNING
# ==============================================================================


def _fraction_to_micros(digits: str) -> int:
    """Convert left-aligned fraction digits to microseconds, rounding half-up.

    Example:
        >>> _fraction_to_micros("5")
        500000
        >>> _fraction_to_micros("000011567")
        12
    """
    if len(digits) <= _MICRO_DIGITS:
        return int(digits.ljust(_MICRO_DIGITS, "0"))
    scale = 10 ** (len(digits) - _MICRO_DIGITS)
    whole, remainder = divmod(int(digits), scale)
    return whole + (1 if remainder * 2 >= scale else 0)


def _scan_sign(cursor: Cursor) -> ParseResult[bool]:
    """Consume an optional leading sign; value is True for '-'."""
    if cursor.is_eof:
        return ParseResult(False, cursor)
    if cursor.current == "-":
        return ParseResult(True, cursor.advance())
    if cursor.current == "+":
        return ParseResult(False, cursor.advance())
    return ParseResult(False, cursor)


def _scan_field(token: FieldToken, cursor: Cursor, program: TokenProgram) -> ParseResult[int]:
    if cursor.is_eof:
        diagnostic = ErrorTemplate.parse_unexpected_end(cursor.source, str(token.field))
        raise _parse_error(diagnostic, cursor.source, program)

    if token.field is FieldKind.FRACTION:
        limit = token.precision or MAX_FRACTION_DIGITS
    else:
        limit = token.max_digits
    digits = cursor.take_digits(limit)
    if not digits.value:
        diagnostic = ErrorTemplate.parse_digits_expected(cursor.source, token.field, cursor.pos)
        raise _parse_error(diagnostic, cursor.source, program)

    if token.field is FieldKind.FRACTION:
        return ParseResult(_fraction_to_micros(digits.value), digits.cursor)
    return ParseResult(int(digits.value), digits.cursor)


def _scan_literal(token: LiteralToken, cursor: Cursor, program: TokenProgram) -> Cursor:
    cursor = cursor.skip_whitespace()
    expected = token.stripped
    if not expected:
        return cursor
    if cursor.is_eof:
        diagnostic = ErrorTemplate.parse_unexpected_end(cursor.source, f"'{expected}'")
        raise _parse_error(diagnostic, cursor.source, program)
    if not cursor.startswith(expected):
        diagnostic = ErrorTemplate.parse_literal_mismatch(cursor.source, expected, cursor.pos)
        raise _parse_error(diagnostic, cursor.source, program)
    return cursor.advance(len(expected)).skip_whitespace()


def scan(
    program: TokenProgram,
    input_value: str,
    *,
    allowed: frozenset[FieldKind] | None = None,
    kind: str = "",
) -> BridgeRecord:
    """Match input_value against program.

    Args:
        program: Compiled pattern
        input_value: Text to parse
        allowed: Fields the requesting duration type can represent; checked
            before scanning begins (None skips the check)
        kind: Duration kind name used in incompatibility diagnostics

    Returns:
        Record with scanned fields set and every other field zero

    Raises:
        IntervalParseError: Input exhausted early, separator mismatch,
            missing digits, trailing input, oversized input, or a field
            outside allowed

    Example:
        >>> record = scan(compile_pattern("yyyy - mm"), "  -0000 - 11  ")
        >>> record.year, record.month, record.negative
        (0, 11, True)
    """
    if allowed is not None:
        check_fields(program, allowed, kind, input_value=input_value[:MAX_INPUT_LENGTH])

    if len(input_value) > MAX_INPUT_LENGTH:
        diagnostic = ErrorTemplate.parse_input_too_long(len(input_value), MAX_INPUT_LENGTH)
        raise _parse_error(diagnostic, input_value[:MAX_INPUT_LENGTH], program)

    record = BridgeRecord()
    cursor = Cursor(input_value, 0).skip_whitespace()
    sign_pending = True

    for token in program.tokens:
        match token:
            case LiteralToken():
                cursor = _scan_literal(token, cursor, program)
            case FieldToken():
                if sign_pending:
                    sign = _scan_sign(cursor)
                    record = record.with_sign(negative=sign.value)
                    cursor = sign.cursor
                    sign_pending = False
                result = _scan_field(token, cursor, program)
                record = record.with_field(token.field, result.value)
                cursor = result.cursor

    cursor = cursor.skip_whitespace()
    if not cursor.is_eof:
        diagnostic = ErrorTemplate.parse_trailing_input(input_value, cursor.pos)
        raise _parse_error(diagnostic, input_value, program)

    return record


# ==============================================================================
# PUBLIC HANDLE
# ==============================================================================


class DurationFormat:
    """Reusable compiled pattern for formatting and parsing durations.

    Compile once, then format or parse many values. Instances are immutable
    and safe to share between threads.

    Example:
        >>> from durationlex import YearMonthDuration
        >>> fmt = DurationFormat("yyyy-mm")
        >>> fmt.format(YearMonthDuration.from_year_month(1, 2))
        '+0001-02'
        >>> fmt.parse("-0001-02", YearMonthDuration)
        YearMonthDuration(months=-14)
    """

    __slots__ = ("_program",)

    def __init__(self, pattern: str | TokenProgram) -> None:
        """Compile pattern (or adopt an already compiled program).

        Raises:
            PatternSyntaxError: If the pattern does not compile
        """
        self._program = pattern if isinstance(pattern, TokenProgram) else compile_pattern(pattern)

    @property
    def pattern(self) -> str:
        """Original pattern string."""
        return self._program.source

    @property
    def program(self) -> TokenProgram:
        """Compiled token program."""
        return self._program

    def __repr__(self) -> str:
        return f"DurationFormat({self.pattern!r})"

    def format(self, value: RecordConvertible) -> str:
        """Format a duration.

        Raises:
            IntervalParseError: FIELD_INCOMPATIBLE if the pattern uses a field
                the duration type does not have
        """
        check_fields(self._program, type(value).available_fields(), type(value).KIND)
        return render(self._program, value.to_record())

    def parse[T: RecordConvertible](self, input_value: str, duration_type: type[T]) -> T:
        """Parse input_value into a duration of duration_type.

        Raises:
            IntervalParseError: Input does not match, or field incompatible
            IntervalRangeError: Parsed value outside the type's bounds
            IntervalFieldError: Parsed field outside its sub-range
        """
        record = scan(
            self._program,
            input_value,
            allowed=duration_type.available_fields(),
            kind=duration_type.KIND,
        )
        return duration_type.from_record(record)
