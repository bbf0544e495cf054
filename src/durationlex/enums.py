"""Enumerations for durationlex type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion where the value
is a name, and IntEnum where the value is arithmetic.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class Sign(IntEnum):
    """Sign of a duration.

    There is no zero variant: a zero duration reports POSITIVE because the
    sign follows whether the stored count is strictly negative.
    IntEnum values double as multipliers: ``int(Sign.NEGATIVE) == -1``.
    """

    POSITIVE = 1
    NEGATIVE = -1


class IntervalKind(StrEnum):
    """The closed set of duration variants.

    StrEnum provides automatic string conversion: str(IntervalKind.DAY_TIME) == "day-time"
    """

    YEAR_MONTH = "year-month"
    """Signed count of months: YearMonthDuration"""

    DAY_TIME = "day-time"
    """Signed count of microseconds: DayTimeDuration"""


class FieldKind(StrEnum):
    """Field vocabulary shared by pattern tokens, bridge records and accessors.

    StrEnum provides automatic string conversion: str(FieldKind.MINUTE) == "minute"
    """

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    FRACTION = "fraction"
    """Sub-second part, stored as microseconds"""


__all__ = [
    "FieldKind",
    "IntervalKind",
    "Sign",
]
