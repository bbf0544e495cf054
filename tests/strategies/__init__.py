"""Hypothesis strategies for durationlex property-based testing.

Strategies are organized by domain:

- intervals: duration values, field tuples, bridge records, scaling factors
  and patterns

Usage:
    from tests.strategies import year_month_durations, day_time_durations
    from tests.strategies.intervals import scale_factors
"""

from .intervals import (
    bridge_records,
    day_time_durations,
    day_time_fields,
    day_time_patterns,
    month_counts,
    scale_factors,
    subset_patterns,
    times_of_day,
    usecond_counts,
    whitespace,
    year_month_durations,
    year_month_fields,
    year_month_patterns,
)

__all__ = [
    "bridge_records",
    "day_time_durations",
    "day_time_fields",
    "day_time_patterns",
    "month_counts",
    "scale_factors",
    "subset_patterns",
    "times_of_day",
    "usecond_counts",
    "whitespace",
    "year_month_durations",
    "year_month_fields",
    "year_month_patterns",
]
