"""Generic field access over both duration types.

Each duration exposes year() .. second() accessors; a field the type does
not have returns None. The accessors decompose the SIGNED stored count with
truncating division and remainder, so every non-zero field of a negative
duration is itself negative. This is a different operation from extract(),
which factors the sign out once and returns unsigned magnitudes.

    >>> from durationlex import DayTimeDuration
    >>> value = -DayTimeDuration.from_parts(1, 2, 3, 4, 500000)
    >>> value.hour(), value.second()
    (-2, -4.5)
    >>> value.extract()
    (<Sign.NEGATIVE: -1>, 1, 2, 3, 4, 500000)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import Protocol

from durationlex.constants import USECONDS_PER_SECOND
from durationlex.enums import FieldKind

__all__ = ["FieldAccessors", "available_fields", "field_value", "field_values"]


class FieldAccessors(Protocol):
    """Capability accessors implemented by both duration types."""

    def year(self) -> int | None: ...

    def month(self) -> int | None: ...

    def day(self) -> int | None: ...

    def hour(self) -> int | None: ...

    def minute(self) -> int | None: ...

    def second(self) -> float | None: ...


def field_value(value: FieldAccessors, field: FieldKind) -> int | None:
    """Return the signed value of one field, or None if value lacks it.

    SECOND is the whole-second part of second() truncated toward zero;
    FRACTION is the remaining sub-second part in microseconds, carrying the
    same sign.

    Args:
        value: A YearMonthDuration or DayTimeDuration
        field: Field to read

    Example:
        >>> from durationlex import YearMonthDuration
        >>> field_value(YearMonthDuration.from_months(-14), FieldKind.MONTH)
        -2
        >>> field_value(YearMonthDuration.from_months(-14), FieldKind.DAY) is None
        True
    """
    match field:
        case FieldKind.YEAR:
            return value.year()
        case FieldKind.MONTH:
            return value.month()
        case FieldKind.DAY:
            return value.day()
        case FieldKind.HOUR:
            return value.hour()
        case FieldKind.MINUTE:
            return value.minute()
        case FieldKind.SECOND:
            second = value.second()
            return None if second is None else int(second)
        case FieldKind.FRACTION:
            second = value.second()
            if second is None:
                return None
            return round((second - int(second)) * USECONDS_PER_SECOND)


def available_fields(value: FieldAccessors) -> frozenset[FieldKind]:
    """Fields for which value's accessors return a number."""
    return frozenset(field for field in FieldKind if field_value(value, field) is not None)


def field_values(value: FieldAccessors) -> dict[FieldKind, int]:
    """All available fields of value, in FieldKind order."""
    result: dict[FieldKind, int] = {}
    for field in FieldKind:
        number = field_value(value, field)
        if number is not None:
            result[field] = number
    return result
