"""DayTimeDuration: a signed count of microseconds.

Bounded symmetrically by MAX_USECONDS (100,000,000 days). Every instance
satisfies |usecs| <= MAX_USECONDS; arithmetic re-checks the bound.

A datetime.time converts to the duration since midnight, and a duration
compares directly against a time of day:

    >>> from datetime import time
    >>> DayTimeDuration.from_parts(0, 1, 2, 3, 4) == time(1, 2, 3, 4)
    True
    >>> DayTimeDuration.from_parts(1, 0, 0, 0) > time(23, 59)
    True

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time, timedelta
from typing import ClassVar

from durationlex.constants import (
    DEFAULT_DAY_TIME_PATTERN,
    HOURS_PER_DAY,
    MAX_DAY,
    MAX_USECONDS,
    MINUTES_PER_HOUR,
    SECONDS_PER_MINUTE,
    USECONDS_MAX,
    USECONDS_PER_DAY,
    USECONDS_PER_HOUR,
    USECONDS_PER_MINUTE,
    USECONDS_PER_SECOND,
)
from durationlex.diagnostics import ErrorTemplate, IntervalFieldError, IntervalRangeError
from durationlex.enums import FieldKind, IntervalKind, Sign
from durationlex.format import BridgeRecord, DurationFormat, require_fields

from . import fields
from ._arith import scale, trunc_div, trunc_rem

__all__ = ["DayTimeDuration", "time_to_usecs"]


def time_to_usecs(value: time) -> int:
    """Microseconds since midnight of a time of day (tzinfo is ignored).

    Example:
        >>> time_to_usecs(time(1, 2, 3, 4))
        3723000004
    """
    seconds = (value.hour * MINUTES_PER_HOUR + value.minute) * SECONDS_PER_MINUTE + value.second
    return seconds * USECONDS_PER_SECOND + value.microsecond


def _comparable_usecs(other: object) -> int | None:
    match other:
        case DayTimeDuration(usecs=usecs):
            return usecs
        case time():
            return time_to_usecs(other)
        case _:
            return None


def _check_parts(day: int, hour: int, minute: int, second: int, microsecond: int) -> None:
    """Validate day-time fields in order: range, hour, minute, second, fraction."""
    below_max = day < MAX_DAY or (
        day == MAX_DAY and hour == 0 and minute == 0 and second == 0 and microsecond == 0
    )
    if day < 0 or not below_max:
        value = f"{day} days {hour:02d}:{minute:02d}:{second:02d}.{microsecond:06d}"
        raise IntervalRangeError(ErrorTemplate.interval_out_of_range(IntervalKind.DAY_TIME, value))
    if not 0 <= hour < HOURS_PER_DAY:
        raise IntervalFieldError(ErrorTemplate.time_out_of_range(hour), field=FieldKind.HOUR)
    if not 0 <= minute < MINUTES_PER_HOUR:
        raise IntervalFieldError(ErrorTemplate.invalid_minute(minute), field=FieldKind.MINUTE)
    if not 0 <= second < SECONDS_PER_MINUTE:
        raise IntervalFieldError(ErrorTemplate.invalid_second(second), field=FieldKind.SECOND)
    if not 0 <= microsecond <= USECONDS_MAX:
        raise IntervalFieldError(
            ErrorTemplate.invalid_fraction(microsecond), field=FieldKind.FRACTION
        )


@dataclass(frozen=True, slots=True, eq=False)
class DayTimeDuration:
    """Duration measured in days, hours, minutes, seconds and microseconds.

    Equality, hashing and ordering follow usecs. Equality and ordering also
    accept a datetime.time, compared by microseconds since midnight; the
    hash of a duration is not the hash of an equal time.

    Attributes:
        usecs: Signed microsecond count, |usecs| <= MAX_USECONDS

    Example:
        >>> interval = DayTimeDuration.from_parts(1, 2, 3, 4, 5)
        >>> interval.usecs
        93784000005
        >>> str(-interval)
        '-01 02:03:04.000005'
    """

    usecs: int

    KIND: ClassVar[IntervalKind] = IntervalKind.DAY_TIME
    ZERO: ClassVar[DayTimeDuration]
    MIN: ClassVar[DayTimeDuration]
    MAX: ClassVar[DayTimeDuration]

    def __post_init__(self) -> None:
        """Check the bound.

        Raises:
            TypeError: If usecs is not an int
            IntervalRangeError: If |usecs| > MAX_USECONDS
        """
        if not isinstance(self.usecs, int) or isinstance(self.usecs, bool):
            msg = f"usecs must be int, not {type(self.usecs).__name__}"
            raise TypeError(msg)
        if not -MAX_USECONDS <= self.usecs <= MAX_USECONDS:
            raise IntervalRangeError(ErrorTemplate.interval_out_of_range(self.KIND, self.usecs))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_parts(
        cls,
        day: int,
        hour: int,
        minute: int,
        second: int,
        microsecond: int = 0,
    ) -> DayTimeDuration:
        """Build a non-negative duration from its fields.

        Checks run in order, and the first failure is raised.

        Args:
            day: Days, 0..MAX_DAY (smaller fields must be 0 at MAX_DAY)
            hour: 0..23
            minute: 0..59
            second: 0..59
            microsecond: 0..999999

        Raises:
            IntervalRangeError: Beyond MAX_DAY days, or day negative
            IntervalFieldError: TIME_OUT_OF_RANGE, INVALID_MINUTE,
                INVALID_SECOND or INVALID_FRACTION

        Example:
            >>> DayTimeDuration.from_parts(100000000, 0, 0, 0) == DayTimeDuration.MAX
            True
        """
        _check_parts(day, hour, minute, second, microsecond)
        clock = hour * USECONDS_PER_HOUR + minute * USECONDS_PER_MINUTE
        clock += second * USECONDS_PER_SECOND + microsecond
        return cls(day * USECONDS_PER_DAY + clock)

    @staticmethod
    def is_valid_parts(
        day: int, hour: int, minute: int, second: int, microsecond: int = 0
    ) -> bool:
        """Check whether from_parts() would succeed with these fields."""
        try:
            _check_parts(day, hour, minute, second, microsecond)
        except (IntervalRangeError, IntervalFieldError):
            return False
        return True

    @classmethod
    def from_micros(cls, usecs: int) -> DayTimeDuration:
        """Build a duration from a signed microsecond count.

        Raises:
            IntervalRangeError: If |usecs| > MAX_USECONDS
        """
        return cls(usecs)

    @classmethod
    def from_time(cls, value: time) -> DayTimeDuration:
        """Duration from midnight to a time of day. Never fails."""
        return cls(time_to_usecs(value))

    @classmethod
    def from_timedelta(cls, value: timedelta) -> DayTimeDuration:
        """Exact conversion from datetime.timedelta.

        Raises:
            IntervalRangeError: If value exceeds 100,000,000 days either way
        """
        seconds = value.days * HOURS_PER_DAY * MINUTES_PER_HOUR * SECONDS_PER_MINUTE
        seconds += value.seconds
        return cls(seconds * USECONDS_PER_SECOND + value.microseconds)

    def to_timedelta(self) -> timedelta:
        """Exact conversion to datetime.timedelta (always representable)."""
        return timedelta(microseconds=self.usecs)

    def extract(self) -> tuple[Sign, int, int, int, int, int]:
        """Split into (sign, day, hour, minute, second, microsecond).

        Fields are magnitudes; the sign is factored out once. Zero reports
        Sign.POSITIVE.

        Example:
            >>> DayTimeDuration.from_micros(-11).extract()
            (<Sign.NEGATIVE: -1>, 0, 0, 0, 0, 11)
        """
        sign = Sign.NEGATIVE if self.usecs < 0 else Sign.POSITIVE
        day, rest = divmod(abs(self.usecs), USECONDS_PER_DAY)
        hour, rest = divmod(rest, USECONDS_PER_HOUR)
        minute, rest = divmod(rest, USECONDS_PER_MINUTE)
        second, microsecond = divmod(rest, USECONDS_PER_SECOND)
        return sign, day, hour, minute, second, microsecond

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def negate(self) -> DayTimeDuration:
        """Return the duration with opposite sign (never fails)."""
        return DayTimeDuration(-self.usecs)

    def add(self, other: DayTimeDuration) -> DayTimeDuration:
        """Sum of two durations.

        Raises:
            IntervalRangeError: If the sum leaves the bound
        """
        return DayTimeDuration(self.usecs + other.usecs)

    def sub(self, other: DayTimeDuration) -> DayTimeDuration:
        """Difference of two durations.

        Raises:
            IntervalRangeError: If the difference leaves the bound
        """
        return self.add(other.negate())

    def sub_time(self, value: time) -> DayTimeDuration:
        """Subtract a time of day, taken as the duration since midnight.

        Example:
            >>> DayTimeDuration.ZERO.sub_time(time(1, 2, 3, 4)).extract()
            (<Sign.NEGATIVE: -1>, 0, 1, 2, 3, 4)

        Raises:
            IntervalRangeError: If the result leaves the bound
        """
        return DayTimeDuration(self.usecs - time_to_usecs(value))

    def mul(self, factor: float) -> DayTimeDuration:
        """Scale by factor, truncating toward zero.

        Raises:
            IntervalArithmeticError: Product infinite or NaN
            IntervalRangeError: Product outside the bound
        """
        return DayTimeDuration(scale(self.usecs, factor, "multiply"))

    def div(self, factor: float) -> DayTimeDuration:
        """Divide by factor, truncating toward zero.

        Raises:
            IntervalDivisionError: factor == 0.0
            IntervalArithmeticError: Quotient infinite or NaN
            IntervalRangeError: Quotient outside the bound
        """
        return DayTimeDuration(scale(self.usecs, factor, "divide"))

    def __neg__(self) -> DayTimeDuration:
        return self.negate()

    def __add__(self, other: object) -> DayTimeDuration:
        if not isinstance(other, DayTimeDuration):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> DayTimeDuration:
        match other:
            case DayTimeDuration():
                return self.sub(other)
            case time():
                return self.sub_time(other)
            case _:
                return NotImplemented

    def __mul__(self, factor: object) -> DayTimeDuration:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return self.mul(factor)

    __rmul__ = __mul__

    def __truediv__(self, factor: object) -> DayTimeDuration:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return self.div(factor)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        usecs = _comparable_usecs(other)
        if usecs is None:
            return NotImplemented
        return self.usecs == usecs

    def __hash__(self) -> int:
        return hash(self.usecs)

    def __lt__(self, other: object) -> bool:
        usecs = _comparable_usecs(other)
        if usecs is None:
            return NotImplemented
        return self.usecs < usecs

    def __le__(self, other: object) -> bool:
        usecs = _comparable_usecs(other)
        if usecs is None:
            return NotImplemented
        return self.usecs <= usecs

    def __gt__(self, other: object) -> bool:
        usecs = _comparable_usecs(other)
        if usecs is None:
            return NotImplemented
        return self.usecs > usecs

    def __ge__(self, other: object) -> bool:
        usecs = _comparable_usecs(other)
        if usecs is None:
            return NotImplemented
        return self.usecs >= usecs

    # ------------------------------------------------------------------
    # Capability accessors
    # ------------------------------------------------------------------

    def year(self) -> int | None:
        return None

    def month(self) -> int | None:
        return None

    def day(self) -> int | None:
        """Signed whole days (truncated toward zero)."""
        return trunc_div(self.usecs, USECONDS_PER_DAY)

    def hour(self) -> int | None:
        """Signed whole hours within the day."""
        return trunc_div(trunc_rem(self.usecs, USECONDS_PER_DAY), USECONDS_PER_HOUR)

    def minute(self) -> int | None:
        """Signed whole minutes within the hour."""
        return trunc_div(trunc_rem(self.usecs, USECONDS_PER_HOUR), USECONDS_PER_MINUTE)

    def second(self) -> float | None:
        """Signed seconds within the minute, including the fraction."""
        return trunc_rem(self.usecs, USECONDS_PER_MINUTE) / USECONDS_PER_SECOND

    @classmethod
    def available_fields(cls) -> frozenset[FieldKind]:
        """Fields a day-time duration can represent."""
        return fields.available_fields(cls.ZERO)

    # ------------------------------------------------------------------
    # Text conversion
    # ------------------------------------------------------------------

    def to_record(self) -> BridgeRecord:
        """Convert to a bridge record for the codec."""
        sign, day, hour, minute, second, microsecond = self.extract()
        return BridgeRecord(
            day=day,
            hour=hour,
            minute=minute,
            second=second,
            microsecond=microsecond,
            negative=sign is Sign.NEGATIVE,
        )

    @classmethod
    def from_record(cls, record: BridgeRecord) -> DayTimeDuration:
        """Validate a bridge record and build a duration from it.

        Raises:
            IntervalParseError: Record sets a year-month field
            IntervalRangeError: Fields beyond the bound
            IntervalFieldError: A field outside its sub-range
        """
        require_fields(record, cls.available_fields(), cls.KIND)
        value = cls.from_parts(
            record.day, record.hour, record.minute, record.second, record.microsecond
        )
        return value.negate() if record.negative else value

    def format(self, pattern: str = DEFAULT_DAY_TIME_PATTERN) -> str:
        """Render with pattern.

        Example:
            >>> DayTimeDuration.ZERO.format("DD HH24:MI:SS")
            '+00 00:00:00'

        Raises:
            PatternSyntaxError: If the pattern does not compile
            IntervalParseError: If the pattern uses a year-month field
        """
        return DurationFormat(pattern).format(self)

    @classmethod
    def parse(cls, input_value: str, pattern: str = DEFAULT_DAY_TIME_PATTERN) -> DayTimeDuration:
        """Parse input_value with pattern.

        Example:
            >>> DayTimeDuration.parse("-0 00:00:00.000011567", "DD HH24:MI:SS.FF")
            DayTimeDuration(usecs=-12)

        Raises:
            PatternSyntaxError: If the pattern does not compile
            IntervalParseError: Input does not match or pattern uses a year-month field
            IntervalRangeError: Parsed value outside the bound
            IntervalFieldError: A parsed field outside its sub-range
        """
        return DurationFormat(pattern).parse(input_value, cls)

    def __str__(self) -> str:
        return self.format(DEFAULT_DAY_TIME_PATTERN)


DayTimeDuration.ZERO = DayTimeDuration(0)
DayTimeDuration.MIN = DayTimeDuration(-MAX_USECONDS)
DayTimeDuration.MAX = DayTimeDuration(MAX_USECONDS)
