"""Bounded, signed duration values.

- YearMonthDuration: months, up to 178,000,000 years either way
- DayTimeDuration: microseconds, up to 100,000,000 days either way

Both are immutable and hashable. Every operation that can leave the bound
raises instead of wrapping or clamping.

Python 3.13+.
"""

from .day_time import DayTimeDuration, time_to_usecs
from .fields import FieldAccessors, available_fields, field_value, field_values
from .year_month import YearMonthDuration

__all__ = [
    "DayTimeDuration",
    "FieldAccessors",
    "YearMonthDuration",
    "available_fields",
    "field_value",
    "field_values",
    "time_to_usecs",
]
