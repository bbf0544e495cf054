"""Shared constants for durationlex.

This module provides centralized numeric bounds and configuration constants
used across the interval and format packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Calendar units: Fixed unit ratios (no calendrical meaning)
- Interval bounds: Symmetric magnitude limits of both duration types
- Input limits: DoS prevention via size constraints
- Codec defaults: Precision and default patterns

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Calendar units
    "MONTHS_PER_YEAR",
    "HOURS_PER_DAY",
    "MINUTES_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "USECONDS_PER_SECOND",
    "USECONDS_PER_MINUTE",
    "USECONDS_PER_HOUR",
    "USECONDS_PER_DAY",
    "USECONDS_MAX",
    # Interval bounds
    "MAX_YEAR",
    "MAX_DAY",
    "MAX_MONTHS",
    "MAX_USECONDS",
    # Input limits
    "MAX_PATTERN_LENGTH",
    "MAX_INPUT_LENGTH",
    "PATTERN_CACHE_SIZE",
    # Codec defaults
    "DEFAULT_FRACTION_PRECISION",
    "MAX_FRACTION_DIGITS",
    "DEFAULT_YEAR_MONTH_PATTERN",
    "DEFAULT_DAY_TIME_PATTERN",
]

# ============================================================================
# CALENDAR UNITS
# ============================================================================

MONTHS_PER_YEAR: int = 12
HOURS_PER_DAY: int = 24
MINUTES_PER_HOUR: int = 60
SECONDS_PER_MINUTE: int = 60

USECONDS_PER_SECOND: int = 1_000_000
USECONDS_PER_MINUTE: int = USECONDS_PER_SECOND * SECONDS_PER_MINUTE
USECONDS_PER_HOUR: int = USECONDS_PER_MINUTE * MINUTES_PER_HOUR
USECONDS_PER_DAY: int = USECONDS_PER_HOUR * HOURS_PER_DAY

# Largest value of the microsecond field.
USECONDS_MAX: int = USECONDS_PER_SECOND - 1

# ============================================================================
# INTERVAL BOUNDS
# ============================================================================
#
# Both duration types are bounded symmetrically: +MAX and -MAX are both
# representable, so negation never leaves the domain.
#
# YearMonthDuration stores months in a signed 32-bit range:
#   MAX_MONTHS = 2_136_000_000 < 2**31 - 1
#
# DayTimeDuration stores microseconds in a signed 64-bit range:
#   MAX_USECONDS = 8_640_000_000_000_000_000 < 2**63 - 1
#
# Because both bounds sit strictly inside the storage range, a bounds check
# after an exact integer operation also covers storage overflow.
#
# ============================================================================

MAX_YEAR: int = 178_000_000
MAX_DAY: int = 100_000_000

MAX_MONTHS: int = MAX_YEAR * MONTHS_PER_YEAR
MAX_USECONDS: int = MAX_DAY * USECONDS_PER_DAY

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Longest accepted pattern string. Real patterns are a few dozen characters.
MAX_PATTERN_LENGTH: int = 256

# Longest accepted input string for parsing.
MAX_INPUT_LENGTH: int = 1024

# Maximum compiled patterns kept in the LRU cache.
PATTERN_CACHE_SIZE: int = 128

# ============================================================================
# CODEC DEFAULTS
# ============================================================================

# Precision of FF (no digit) when formatting: microseconds.
DEFAULT_FRACTION_PRECISION: int = 6

# Digits FF (no digit) accepts when parsing; digits past the sixth are
# rounded half-up into the microsecond field.
MAX_FRACTION_DIGITS: int = 9

# Patterns used by str() of the duration types.
DEFAULT_YEAR_MONTH_PATTERN: str = "YYYY-MM"
DEFAULT_DAY_TIME_PATTERN: str = "DD HH24:MI:SS.FF6"
