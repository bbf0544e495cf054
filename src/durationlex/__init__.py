"""durationlex - bounded year-month and day-time durations with pattern text I/O.

Two immutable duration types with symmetric bounds, checked arithmetic and a
small case-insensitive pattern language for formatting and parsing.

Public API:
    YearMonthDuration - Signed count of months (up to 178,000,000 years)
    DayTimeDuration - Signed count of microseconds (up to 100,000,000 days)
    DurationFormat - Reusable compiled pattern (YYYY, MM, DD, HH24, MI, SS, FF)
    describe - Locale-aware spelled-out rendering via Babel
    Sign - Sign reported by extract()

Exceptions:
    IntervalError - Base exception class
    IntervalRangeError - Value outside the bound of its type
    IntervalFieldError - Field outside its sub-range (month, hour, ...)
    IntervalArithmeticError - Scaling produced infinity or NaN
    IntervalDivisionError - Division by zero
    IntervalParseError - Input does not match a pattern
    PatternSyntaxError - Pattern does not compile

Submodules:
    durationlex.interval - Duration types and generic field access
    durationlex.format - Pattern compiler, bridge record and codec
    durationlex.diagnostics - Error codes, templates and formatter
    durationlex.constants - Bounds and limits
"""

from .diagnostics import (
    IntervalArithmeticError,
    IntervalDivisionError,
    IntervalError,
    IntervalFieldError,
    IntervalParseError,
    IntervalRangeError,
    PatternSyntaxError,
)
from .enums import FieldKind, IntervalKind, Sign
from .format import DurationFormat
from .interval import DayTimeDuration, YearMonthDuration
from .localization import describe

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("durationlex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DayTimeDuration",
    "DurationFormat",
    "FieldKind",
    "IntervalArithmeticError",
    "IntervalDivisionError",
    "IntervalError",
    "IntervalFieldError",
    "IntervalKind",
    "IntervalParseError",
    "IntervalRangeError",
    "PatternSyntaxError",
    "Sign",
    "YearMonthDuration",
    "__version__",
    "describe",
]
