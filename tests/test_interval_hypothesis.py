"""Hypothesis property-based tests for both duration types.

Covers the construct/extract round trip, negation, bound edges, the
format/parse round trip, whitespace flexibility and the error kinds of
float scaling. Complements the example-based per-type test modules.
"""

from __future__ import annotations

import math
from datetime import time, timedelta

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from durationlex import (
    DayTimeDuration,
    FieldKind,
    IntervalArithmeticError,
    IntervalDivisionError,
    IntervalError,
    IntervalParseError,
    IntervalRangeError,
    Sign,
    YearMonthDuration,
)
from durationlex.constants import (
    MAX_MONTHS,
    MAX_USECONDS,
    USECONDS_PER_DAY,
    USECONDS_PER_HOUR,
    USECONDS_PER_MINUTE,
    USECONDS_PER_SECOND,
)
from durationlex.interval import field_value
from tests.strategies import (
    day_time_durations,
    day_time_fields,
    day_time_patterns,
    month_counts,
    scale_factors,
    times_of_day,
    usecond_counts,
    whitespace,
    year_month_durations,
    year_month_fields,
    year_month_patterns,
)

# ============================================================================
# CONSTRUCTION ROUND TRIPS
# ============================================================================


class TestConstructionProperties:
    """Field constructors and extract() are inverse."""

    @given(fields=year_month_fields, negative=st.booleans())
    def test_year_month_extract_round_trip(
        self, fields: tuple[int, int], negative: bool
    ) -> None:
        """PROPERTY: extract(from_year_month(y, m)) recovers y and m."""
        value = YearMonthDuration.from_year_month(*fields)
        if negative:
            value = -value

        sign, year, month = value.extract()
        assert (year, month) == fields
        expected_sign = Sign.NEGATIVE if negative and value.months else Sign.POSITIVE
        assert sign is expected_sign

    @given(fields=day_time_fields, negative=st.booleans())
    def test_day_time_extract_round_trip(
        self, fields: tuple[int, int, int, int, int], negative: bool
    ) -> None:
        """PROPERTY: extract(from_parts(...)) recovers every field."""
        value = DayTimeDuration.from_parts(*fields)
        if negative:
            value = -value

        assert value.extract()[1:] == fields

    @given(months=month_counts)
    def test_year_month_accessors_recompose(self, months: int) -> None:
        """PROPERTY: year() * 12 + month() == months."""
        value = YearMonthDuration.from_months(months)
        year = value.year()
        month = value.month()
        assert year is not None
        assert month is not None
        assert year * 12 + month == months

    @given(usecs=usecond_counts)
    def test_day_time_accessors_recompose(self, usecs: int) -> None:
        """PROPERTY: signed fields sum back to the stored count."""
        value = DayTimeDuration.from_micros(usecs)
        total = (
            (field_value(value, FieldKind.DAY) or 0) * USECONDS_PER_DAY
            + (field_value(value, FieldKind.HOUR) or 0) * USECONDS_PER_HOUR
            + (field_value(value, FieldKind.MINUTE) or 0) * USECONDS_PER_MINUTE
            + (field_value(value, FieldKind.SECOND) or 0) * USECONDS_PER_SECOND
            + (field_value(value, FieldKind.FRACTION) or 0)
        )
        assert total == usecs

    @given(months=st.integers())
    def test_year_month_bound(self, months: int) -> None:
        """PROPERTY: from_months accepts exactly |months| <= MAX_MONTHS."""
        if abs(months) <= MAX_MONTHS:
            assert YearMonthDuration.from_months(months).months == months
        else:
            with pytest.raises(IntervalRangeError):
                YearMonthDuration.from_months(months)

    @given(usecs=st.integers())
    def test_day_time_bound(self, usecs: int) -> None:
        """PROPERTY: from_micros accepts exactly |usecs| <= MAX_USECONDS."""
        if abs(usecs) <= MAX_USECONDS:
            assert DayTimeDuration.from_micros(usecs).usecs == usecs
        else:
            with pytest.raises(IntervalRangeError):
                DayTimeDuration.from_micros(usecs)


# ============================================================================
# NEGATION, ADDITION AND ORDER
# ============================================================================


class TestArithmeticProperties:
    """Negation, addition and ordering follow the stored count."""

    @given(value=year_month_durations())
    def test_year_month_double_negation(self, value: YearMonthDuration) -> None:
        """INVARIANT: -(-x) == x, and negation never fails."""
        assert -(-value) == value

    @given(value=day_time_durations())
    def test_day_time_double_negation(self, value: DayTimeDuration) -> None:
        """INVARIANT: -(-x) == x, and negation never fails."""
        assert -(-value) == value

    @given(a=year_month_durations(), b=year_month_durations())
    def test_year_month_add_checked(self, a: YearMonthDuration, b: YearMonthDuration) -> None:
        """PROPERTY: a + b succeeds iff the exact sum is in range."""
        exact = a.months + b.months
        if abs(exact) <= MAX_MONTHS:
            event("outcome=in_range")
            assert (a + b).months == exact
            assert (a + b) - b == a
        else:
            event("outcome=out_of_range")
            with pytest.raises(IntervalRangeError):
                a.add(b)

    @given(a=day_time_durations(), b=day_time_durations())
    def test_day_time_sub_checked(self, a: DayTimeDuration, b: DayTimeDuration) -> None:
        """PROPERTY: a - b succeeds iff the exact difference is in range."""
        exact = a.usecs - b.usecs
        if abs(exact) <= MAX_USECONDS:
            event("outcome=in_range")
            assert (a - b).usecs == exact
        else:
            event("outcome=out_of_range")
            with pytest.raises(IntervalRangeError):
                a.sub(b)

    @given(a=day_time_durations(), b=day_time_durations())
    def test_day_time_order(self, a: DayTimeDuration, b: DayTimeDuration) -> None:
        """PROPERTY: ordering follows usecs."""
        assert (a < b) == (a.usecs < b.usecs)
        assert (a == b) == (a.usecs == b.usecs)

    @given(clock=times_of_day)
    def test_sub_time_is_negated_from_time(self, clock: time) -> None:
        """PROPERTY: ZERO - t == -(from_time(t))."""
        assert DayTimeDuration.ZERO.sub_time(clock) == -DayTimeDuration.from_time(clock)
        assert DayTimeDuration.from_time(clock) == clock

    @given(usecs=usecond_counts)
    def test_timedelta_round_trip(self, usecs: int) -> None:
        """PROPERTY: timedelta conversion is exact."""
        value = DayTimeDuration.from_micros(usecs)
        delta = value.to_timedelta()
        assert delta == timedelta(microseconds=usecs)
        assert DayTimeDuration.from_timedelta(delta) == value


# ============================================================================
# SCALING
# ============================================================================


class TestScalingProperties:
    """Every scaling either succeeds with the truncated result or raises a known error."""

    @given(value=day_time_durations(), factor=scale_factors())
    def test_day_time_mul_outcomes(self, value: DayTimeDuration, factor: float) -> None:
        """PROPERTY: mul matches truncated double-precision multiplication."""
        product = float(value.usecs) * factor
        if math.isnan(product):
            with pytest.raises(IntervalArithmeticError):
                value.mul(factor)
        elif math.isinf(product):
            with pytest.raises(IntervalArithmeticError):
                value.mul(factor)
        elif abs(int(product)) > MAX_USECONDS:
            with pytest.raises(IntervalRangeError):
                value.mul(factor)
        else:
            assert value.mul(factor).usecs == int(product)

    @given(value=year_month_durations(), factor=scale_factors())
    def test_year_month_div_outcomes(self, value: YearMonthDuration, factor: float) -> None:
        """PROPERTY: div rejects zero first, then follows truncated division."""
        if factor == 0.0:
            with pytest.raises(IntervalDivisionError):
                value.div(factor)
            return
        quotient = float(value.months) / factor
        if math.isnan(quotient) or math.isinf(quotient):
            with pytest.raises(IntervalArithmeticError):
                value.div(factor)
        elif abs(int(quotient)) > MAX_MONTHS:
            with pytest.raises(IntervalRangeError):
                value.div(factor)
        else:
            assert value.div(factor).months == int(quotient)

    @given(value=year_month_durations())
    def test_mul_by_one_is_identity(self, value: YearMonthDuration) -> None:
        """PROPERTY: months fit a double exactly, so x * 1.0 == x."""
        assert value * 1.0 == value


# ============================================================================
# TEXT ROUND TRIPS
# ============================================================================


class TestTextProperties:
    """format() and parse() are inverse for every supported pattern."""

    @given(value=year_month_durations(), pattern=year_month_patterns)
    def test_year_month_round_trip(self, value: YearMonthDuration, pattern: str) -> None:
        """PROPERTY: parse(format(x, p), p) == x."""
        assert YearMonthDuration.parse(value.format(pattern), pattern) == value

    @given(value=day_time_durations(), pattern=day_time_patterns)
    def test_day_time_round_trip(self, value: DayTimeDuration, pattern: str) -> None:
        """PROPERTY: parse(format(x, p), p) == x at microsecond precision."""
        assert DayTimeDuration.parse(value.format(pattern), pattern) == value

    @given(value=day_time_durations(), before=whitespace, after=whitespace)
    def test_surrounding_whitespace_ignored(
        self, value: DayTimeDuration, before: str, after: str
    ) -> None:
        """PROPERTY: leading and trailing whitespace never changes the result."""
        text = before + str(value) + after
        assert DayTimeDuration.parse(text) == value

    @given(value=year_month_durations(), gap=whitespace)
    def test_whitespace_around_separator(self, value: YearMonthDuration, gap: str) -> None:
        """PROPERTY: whitespace around a literal separator is ignored."""
        head, _, tail = str(value).rpartition("-")
        text = head + gap + "-" + gap + tail
        assert YearMonthDuration.parse(text) == value

    @given(value=year_month_durations(), pattern=day_time_patterns)
    def test_incompatible_patterns_rejected(self, value: YearMonthDuration, pattern: str) -> None:
        """PROPERTY: a day-time pattern never formats a year-month value."""
        with pytest.raises(IntervalParseError):
            value.format(pattern)

    @pytest.mark.fuzz
    @given(text=st.text(max_size=40), pattern=day_time_patterns)
    @settings(max_examples=2000)
    def test_parse_never_crashes(self, text: str, pattern: str) -> None:
        """INVARIANT: arbitrary input parses or raises an interval error."""
        try:
            DayTimeDuration.parse(text, pattern)
        except IntervalError as e:
            event(f"outcome={type(e).__name__}")
        else:
            event("outcome=parsed")
