"""Integer helpers shared by both duration types.

Python floor division rounds toward negative infinity; duration fields
truncate toward zero, so the accessors go through trunc_div / trunc_rem.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import math

from durationlex.diagnostics import (
    ErrorTemplate,
    IntervalArithmeticError,
    IntervalDivisionError,
)

__all__ = ["scale", "trunc_div", "trunc_rem"]

logger = logging.getLogger(__name__)


def trunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero.

    Example:
        >>> trunc_div(-14, 12)
        -1
        >>> -14 // 12
        -2
    """
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def trunc_rem(a: int, b: int) -> int:
    """Remainder matching trunc_div; carries the sign of a.

    Example:
        >>> trunc_rem(-14, 12)
        -2
    """
    return a - b * trunc_div(a, b)


def scale(count: int, factor: float, operation: str) -> int:
    """Scale an integer count by a float factor, truncating toward zero.

    The product or quotient is computed in double precision. Bounds are
    not checked here.

    Args:
        count: Stored months or microseconds
        factor: Multiplier or divisor
        operation: "multiply" or "divide"

    Returns:
        Result truncated toward zero

    Raises:
        IntervalDivisionError: operation is "divide" and factor == 0.0
        IntervalArithmeticError: factor does not fit a double or the result
            is infinite (NUMERIC_OVERFLOW), or the result is NaN (INVALID_NUMBER)
    """
    try:
        factor = float(factor)
    except OverflowError:
        # Integer factors beyond the double range
        overflowed = math.copysign(math.inf, factor)
        raise IntervalArithmeticError(
            ErrorTemplate.numeric_overflow(operation, overflowed)
        ) from None
    if operation == "divide":
        if factor == 0.0:
            logger.debug("Rejected division of %d by zero", count)
            raise IntervalDivisionError(ErrorTemplate.divide_by_zero())
        result = float(count) / factor
    else:
        result = float(count) * factor

    if math.isinf(result):
        raise IntervalArithmeticError(ErrorTemplate.numeric_overflow(operation, factor))
    if math.isnan(result):
        raise IntervalArithmeticError(ErrorTemplate.invalid_number(operation, factor))
    return int(result)
