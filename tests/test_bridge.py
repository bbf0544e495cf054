"""Tests for BridgeRecord and the record conversions of both duration types."""

from __future__ import annotations

import pytest

from durationlex import (
    DayTimeDuration,
    FieldKind,
    IntervalFieldError,
    IntervalParseError,
    IntervalRangeError,
    YearMonthDuration,
)
from durationlex.diagnostics import DiagnosticCode
from durationlex.format import BridgeRecord, require_fields


class TestBridgeRecord:
    """Test the record container itself."""

    def test_defaults_are_zero(self) -> None:
        """A fresh record is zero and positive."""
        record = BridgeRecord()

        assert all(record.get(field) == 0 for field in FieldKind)
        assert record.negative is False
        assert record.nonzero_fields() == frozenset()

    def test_fraction_maps_to_microsecond(self) -> None:
        """FRACTION reads and writes the microsecond attribute."""
        record = BridgeRecord().with_field(FieldKind.FRACTION, 250_000)

        assert record.microsecond == 250_000
        assert record.get(FieldKind.FRACTION) == 250_000

    def test_with_field_returns_copy(self) -> None:
        """Records are immutable; with_field builds a new one."""
        original = BridgeRecord(year=1)
        updated = original.with_field(FieldKind.MONTH, 5)

        assert original.month == 0
        assert (updated.year, updated.month) == (1, 5)

    def test_with_sign(self) -> None:
        """with_sign only touches the sign."""
        record = BridgeRecord(day=2).with_sign(negative=True)
        assert record == BridgeRecord(day=2, negative=True)

    def test_nonzero_fields(self) -> None:
        """Only fields holding a value are reported."""
        record = BridgeRecord(hour=3, microsecond=1)
        assert record.nonzero_fields() == frozenset({FieldKind.HOUR, FieldKind.FRACTION})


class TestRequireFields:
    """Test require_fields()."""

    def test_allowed_record_passes(self) -> None:
        """Records inside the allowed set pass silently."""
        require_fields(BridgeRecord(year=1), YearMonthDuration.available_fields(), "year-month")

    def test_first_foreign_field_in_vocabulary_order(self) -> None:
        """DAY is reported before SECOND regardless of set order."""
        record = BridgeRecord(second=1, day=1)
        with pytest.raises(IntervalParseError) as exc_info:
            require_fields(record, YearMonthDuration.available_fields(), "year-month")

        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.FIELD_INCOMPATIBLE
        assert diagnostic.field == "day"


class TestYearMonthRecord:
    """Test YearMonthDuration.to_record / from_record."""

    def test_to_record_factors_sign(self) -> None:
        """Magnitudes plus one sign flag."""
        record = YearMonthDuration.from_months(-14).to_record()
        assert record == BridgeRecord(year=1, month=2, negative=True)

    def test_from_record(self) -> None:
        """A record rebuilds the duration."""
        record = BridgeRecord(year=1, month=2, negative=True)
        assert YearMonthDuration.from_record(record) == YearMonthDuration.from_months(-14)

    def test_from_record_negative_zero(self) -> None:
        """A negative zero record is zero."""
        record = BridgeRecord(negative=True)
        assert YearMonthDuration.from_record(record) == YearMonthDuration.ZERO

    def test_from_record_foreign_field(self) -> None:
        """Day-time fields are rejected."""
        with pytest.raises(IntervalParseError):
            YearMonthDuration.from_record(BridgeRecord(year=1, hour=1))

    def test_from_record_validates(self) -> None:
        """Field checks apply to records too."""
        with pytest.raises(IntervalFieldError):
            YearMonthDuration.from_record(BridgeRecord(month=12))
        with pytest.raises(IntervalRangeError):
            YearMonthDuration.from_record(BridgeRecord(year=178_000_001, negative=True))


class TestDayTimeRecord:
    """Test DayTimeDuration.to_record / from_record."""

    def test_to_record_factors_sign(self) -> None:
        """Magnitudes plus one sign flag."""
        record = (-DayTimeDuration.from_parts(1, 2, 3, 4, 5)).to_record()
        assert record == BridgeRecord(
            day=1, hour=2, minute=3, second=4, microsecond=5, negative=True
        )

    def test_from_record(self) -> None:
        """A record rebuilds the duration."""
        record = BridgeRecord(day=1, hour=2, minute=3, second=4, microsecond=5)
        assert DayTimeDuration.from_record(record) == DayTimeDuration.from_parts(1, 2, 3, 4, 5)

    def test_from_record_foreign_field(self) -> None:
        """Year-month fields are rejected."""
        with pytest.raises(IntervalParseError):
            DayTimeDuration.from_record(BridgeRecord(month=1))

    def test_bounds_round_trip(self) -> None:
        """MIN and MAX survive the record conversion."""
        for value in (DayTimeDuration.MIN, DayTimeDuration.MAX):
            assert DayTimeDuration.from_record(value.to_record()) == value
