"""Neutral field record exchanged between duration types and the text codec.

The codec reads and writes BridgeRecord only; it never imports a duration
type. Each duration type converts itself to a record (sign factored out once,
magnitudes in every field) and validates a record on the way back.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, ClassVar, Protocol, Self

from durationlex.diagnostics import ErrorTemplate, IntervalParseError
from durationlex.enums import FieldKind

if TYPE_CHECKING:
    from durationlex.enums import IntervalKind

__all__ = ["BridgeRecord", "RecordConvertible", "require_fields"]

# Record attribute holding each field's value.
_ATTRIBUTES: dict[FieldKind, str] = {
    FieldKind.YEAR: "year",
    FieldKind.MONTH: "month",
    FieldKind.DAY: "day",
    FieldKind.HOUR: "hour",
    FieldKind.MINUTE: "minute",
    FieldKind.SECOND: "second",
    FieldKind.FRACTION: "microsecond",
}


@dataclass(frozen=True, slots=True)
class BridgeRecord:
    """Unsigned field magnitudes plus a single sign flag.

    Carries no bounds of its own: validation happens when a duration type
    is built from the record.

    Attributes:
        year: Years (year-month durations)
        month: Months within the year
        day: Days (day-time durations)
        hour: Hours within the day
        minute: Minutes within the hour
        second: Whole seconds within the minute
        microsecond: Sub-second part in microseconds
        negative: True when the duration is negative

    Example:
        >>> record = BridgeRecord(year=1, month=2)
        >>> record.get(FieldKind.MONTH)
        2
        >>> record.with_field(FieldKind.DAY, 3).day
        3
    """

    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    microsecond: int = 0
    negative: bool = False

    def get(self, field: FieldKind) -> int:
        """Return the magnitude stored for field."""
        value: int = getattr(self, _ATTRIBUTES[field])
        return value

    def with_field(self, field: FieldKind, value: int) -> BridgeRecord:
        """Return a copy with field set to value."""
        return replace(self, **{_ATTRIBUTES[field]: value})

    def with_sign(self, *, negative: bool) -> BridgeRecord:
        """Return a copy with the sign flag set."""
        return replace(self, negative=negative)

    def nonzero_fields(self) -> frozenset[FieldKind]:
        """Fields holding a non-default value."""
        return frozenset(field for field in FieldKind if self.get(field) != 0)


class RecordConvertible(Protocol):
    """What the codec needs from a duration type.

    Implemented by YearMonthDuration and DayTimeDuration.
    """

    KIND: ClassVar[IntervalKind]

    @classmethod
    def available_fields(cls) -> frozenset[FieldKind]: ...

    @classmethod
    def from_record(cls, record: BridgeRecord) -> Self: ...

    def to_record(self) -> BridgeRecord: ...


def require_fields(record: BridgeRecord, allowed: frozenset[FieldKind], kind: str) -> None:
    """Reject a record holding a value in a field outside allowed.

    Raises:
        IntervalParseError: FIELD_INCOMPATIBLE for the first such field,
            in FieldKind order
    """
    foreign = record.nonzero_fields() - allowed
    for field in FieldKind:
        if field in foreign:
            raise IntervalParseError(ErrorTemplate.field_incompatible(field, kind))
