"""Quickstart example for durationlex.

This example demonstrates the two duration types, checked arithmetic,
pattern-based formatting and parsing, and localized descriptions.

Note: Each example catches only the errors it demonstrates. In production,
catch IntervalError (the common base) where input comes from users.
"""

from datetime import time, timedelta

from durationlex import (
    DayTimeDuration,
    DurationFormat,
    IntervalArithmeticError,
    IntervalError,
    IntervalParseError,
    IntervalRangeError,
    YearMonthDuration,
    describe,
)

# Example 1: Building durations
print("=" * 50)
print("Example 1: Building Durations")
print("=" * 50)

tenure = YearMonthDuration.from_year_month(3, 7)
print(tenure)
# Output: +0003-07

shift = DayTimeDuration.from_parts(0, 8, 30, 0)
print(shift)
# Output: +00 08:30:00.000000

print(tenure.extract())
# Output: (<Sign.POSITIVE: 1>, 3, 7)

# Example 2: Checked arithmetic
print("\n" + "=" * 50)
print("Example 2: Checked Arithmetic")
print("=" * 50)

print(-shift + DayTimeDuration.from_parts(1, 0, 0, 0))
# Output: +00 15:30:00.000000

print(shift * 2.5)
# Output: +00 21:15:00.000000

try:
    YearMonthDuration.MAX + YearMonthDuration.from_months(1)
except IntervalRangeError as e:
    print(f"Range error: {e}")

try:
    shift / 0.0
except IntervalArithmeticError as e:
    print(f"Arithmetic error [{e.code.name if e.code else '-'}]: {e}")

# Example 3: Time of day and timedelta
print("\n" + "=" * 50)
print("Example 3: Time of Day and timedelta")
print("=" * 50)

print(DayTimeDuration.from_time(time(9, 15)) > time(9, 0))
# Output: True

print(DayTimeDuration.from_timedelta(timedelta(days=2, minutes=5)))
# Output: +02 00:05:00.000000

# Example 4: Patterns
print("\n" + "=" * 50)
print("Example 4: Format and Parse")
print("=" * 50)

print(shift.format("HH24:MI"))
# Output: +08:30

fmt = DurationFormat('DD "days" HH24:MI:SS.FF3')
print(fmt.format(DayTimeDuration.from_parts(2, 3, 4, 5, 678900)))
# Output: +02 days 03:04:05.678

parsed = fmt.parse("  -2 days 3:04:05.5 ", DayTimeDuration)
print(repr(parsed))
# Output: DayTimeDuration(usecs=-183845500000)

for text, pattern in [("1-13", "YYYY-MM"), ("5", "DD")]:
    try:
        YearMonthDuration.parse(text, pattern)
    except IntervalError as e:
        if e.diagnostic is not None:
            print(e.diagnostic.format_error())

try:
    YearMonthDuration.parse("2024", "YYYY-MM")
except IntervalParseError as e:
    print(f"Parse error for {e.input_value!r}: {e}")

# Example 5: Localized descriptions
print("\n" + "=" * 50)
print("Example 5: Localized Descriptions")
print("=" * 50)

print(describe(tenure))
# Output: 3 years, 7 months

print(describe(-shift, "de_DE"))
print(describe(shift, "lv_LV", length="short"))

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
