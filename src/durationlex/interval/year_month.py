"""YearMonthDuration: a signed count of months.

Bounded symmetrically by MAX_MONTHS (178,000,000 years), so negation is
always total. Addition, subtraction and scaling re-check the bound and raise
IntervalRangeError when it is exceeded. There is no unchecked constructor:
every instance satisfies |months| <= MAX_MONTHS.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from durationlex.constants import DEFAULT_YEAR_MONTH_PATTERN, MAX_MONTHS, MAX_YEAR, MONTHS_PER_YEAR
from durationlex.diagnostics import (
    ErrorTemplate,
    IntervalFieldError,
    IntervalRangeError,
)
from durationlex.enums import FieldKind, IntervalKind, Sign
from durationlex.format import BridgeRecord, DurationFormat, require_fields

from . import fields
from ._arith import scale, trunc_div, trunc_rem

__all__ = ["YearMonthDuration"]


@dataclass(frozen=True, slots=True, order=True)
class YearMonthDuration:
    """Duration measured in years and months.

    Attributes:
        months: Signed month count, |months| <= MAX_MONTHS

    Example:
        >>> interval = YearMonthDuration.from_year_month(1, 2)
        >>> interval.months
        14
        >>> str(-interval)
        '-0001-02'
        >>> interval * 5.0
        YearMonthDuration(months=70)
    """

    months: int

    KIND: ClassVar[IntervalKind] = IntervalKind.YEAR_MONTH
    ZERO: ClassVar[YearMonthDuration]
    MIN: ClassVar[YearMonthDuration]
    MAX: ClassVar[YearMonthDuration]

    def __post_init__(self) -> None:
        """Check the bound.

        Raises:
            TypeError: If months is not an int
            IntervalRangeError: If |months| > MAX_MONTHS
        """
        if not isinstance(self.months, int) or isinstance(self.months, bool):
            msg = f"months must be int, not {type(self.months).__name__}"
            raise TypeError(msg)
        if not -MAX_MONTHS <= self.months <= MAX_MONTHS:
            raise IntervalRangeError(ErrorTemplate.interval_out_of_range(self.KIND, self.months))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_year_month(cls, year: int, month: int) -> YearMonthDuration:
        """Build a non-negative duration from year and month fields.

        Args:
            year: Years, 0..MAX_YEAR
            month: Months within the year, 0..11 (must be 0 when year == MAX_YEAR)

        Raises:
            IntervalRangeError: Beyond MAX_YEAR years, or year negative
            IntervalFieldError: month outside 0..11

        Example:
            >>> YearMonthDuration.from_year_month(178000000, 0) == YearMonthDuration.MAX
            True
        """
        if year < 0 or year > MAX_YEAR or (year == MAX_YEAR and month != 0):
            raise IntervalRangeError(
                ErrorTemplate.interval_out_of_range(cls.KIND, f"{year} years {month} months")
            )
        if not 0 <= month < MONTHS_PER_YEAR:
            raise IntervalFieldError(ErrorTemplate.invalid_month(month), field=FieldKind.MONTH)
        return cls(year * MONTHS_PER_YEAR + month)

    @staticmethod
    def is_valid_year_month(year: int, month: int) -> bool:
        """Check whether from_year_month(year, month) would succeed."""
        if year < 0 or year > MAX_YEAR or (year == MAX_YEAR and month != 0):
            return False
        return 0 <= month < MONTHS_PER_YEAR

    @classmethod
    def from_months(cls, months: int) -> YearMonthDuration:
        """Build a duration from a signed month count.

        Raises:
            IntervalRangeError: If |months| > MAX_MONTHS
        """
        return cls(months)

    def extract(self) -> tuple[Sign, int, int]:
        """Split into (sign, year, month) over the unsigned magnitude.

        Zero reports Sign.POSITIVE.

        Example:
            >>> YearMonthDuration.from_months(-11).extract()
            (<Sign.NEGATIVE: -1>, 0, 11)
        """
        sign = Sign.NEGATIVE if self.months < 0 else Sign.POSITIVE
        year, month = divmod(abs(self.months), MONTHS_PER_YEAR)
        return sign, year, month

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def negate(self) -> YearMonthDuration:
        """Return the duration with opposite sign (never fails)."""
        return YearMonthDuration(-self.months)

    def add(self, other: YearMonthDuration) -> YearMonthDuration:
        """Sum of two durations.

        Raises:
            IntervalRangeError: If the sum leaves the bound
        """
        return YearMonthDuration(self.months + other.months)

    def sub(self, other: YearMonthDuration) -> YearMonthDuration:
        """Difference of two durations.

        Raises:
            IntervalRangeError: If the difference leaves the bound
        """
        return self.add(other.negate())

    def mul(self, factor: float) -> YearMonthDuration:
        """Scale by factor, truncating toward zero.

        Example:
            >>> YearMonthDuration.from_year_month(1, 2).mul(-5.3).extract()
            (<Sign.NEGATIVE: -1>, 6, 2)

        Raises:
            IntervalArithmeticError: Product infinite or NaN
            IntervalRangeError: Product outside the bound
        """
        return YearMonthDuration(scale(self.months, factor, "multiply"))

    def div(self, factor: float) -> YearMonthDuration:
        """Divide by factor, truncating toward zero.

        Raises:
            IntervalDivisionError: factor == 0.0
            IntervalArithmeticError: Quotient infinite or NaN
            IntervalRangeError: Quotient outside the bound
        """
        return YearMonthDuration(scale(self.months, factor, "divide"))

    def __neg__(self) -> YearMonthDuration:
        return self.negate()

    def __add__(self, other: object) -> YearMonthDuration:
        if not isinstance(other, YearMonthDuration):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> YearMonthDuration:
        if not isinstance(other, YearMonthDuration):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, factor: object) -> YearMonthDuration:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return self.mul(factor)

    __rmul__ = __mul__

    def __truediv__(self, factor: object) -> YearMonthDuration:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return self.div(factor)

    # ------------------------------------------------------------------
    # Capability accessors
    # ------------------------------------------------------------------

    def year(self) -> int | None:
        """Signed whole years (truncated toward zero)."""
        return trunc_div(self.months, MONTHS_PER_YEAR)

    def month(self) -> int | None:
        """Signed months left after whole years."""
        return trunc_rem(self.months, MONTHS_PER_YEAR)

    def day(self) -> int | None:
        return None

    def hour(self) -> int | None:
        return None

    def minute(self) -> int | None:
        return None

    def second(self) -> float | None:
        return None

    @classmethod
    def available_fields(cls) -> frozenset[FieldKind]:
        """Fields a year-month duration can represent."""
        return fields.available_fields(cls.ZERO)

    # ------------------------------------------------------------------
    # Text conversion
    # ------------------------------------------------------------------

    def to_record(self) -> BridgeRecord:
        """Convert to a bridge record for the codec."""
        sign, year, month = self.extract()
        return BridgeRecord(year=year, month=month, negative=sign is Sign.NEGATIVE)

    @classmethod
    def from_record(cls, record: BridgeRecord) -> YearMonthDuration:
        """Validate a bridge record and build a duration from it.

        Raises:
            IntervalParseError: Record sets a day-time field
            IntervalRangeError: Fields beyond the bound
            IntervalFieldError: Month outside 0..11
        """
        require_fields(record, cls.available_fields(), cls.KIND)
        value = cls.from_year_month(record.year, record.month)
        return value.negate() if record.negative else value

    def format(self, pattern: str = DEFAULT_YEAR_MONTH_PATTERN) -> str:
        """Render with pattern.

        Example:
            >>> YearMonthDuration.from_year_month(123, 2).format("yy-mm")
            '+123-02'

        Raises:
            PatternSyntaxError: If the pattern does not compile
            IntervalParseError: If the pattern uses a day-time field
        """
        return DurationFormat(pattern).format(self)

    @classmethod
    def parse(
        cls, input_value: str, pattern: str = DEFAULT_YEAR_MONTH_PATTERN
    ) -> YearMonthDuration:
        """Parse input_value with pattern.

        Example:
            >>> YearMonthDuration.parse("  -0000 - 11 ", "yyyy - mm")
            YearMonthDuration(months=-11)

        Raises:
            PatternSyntaxError: If the pattern does not compile
            IntervalParseError: Input does not match or pattern uses a day-time field
            IntervalRangeError: Parsed value outside the bound
            IntervalFieldError: Parsed month outside 0..11
        """
        return DurationFormat(pattern).parse(input_value, cls)

    def __str__(self) -> str:
        return self.format(DEFAULT_YEAR_MONTH_PATTERN)


YearMonthDuration.ZERO = YearMonthDuration(0)
YearMonthDuration.MIN = YearMonthDuration(-MAX_MONTHS)
YearMonthDuration.MAX = YearMonthDuration(MAX_MONTHS)
