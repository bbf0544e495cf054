"""Spelled-out, locale-aware rendering of durations.

Uses Babel's CLDR unit data, so the words, plural forms and list separators
follow the requested locale:

    >>> from durationlex import DayTimeDuration, YearMonthDuration
    >>> describe(YearMonthDuration.from_year_month(1, 2))
    '1 year, 2 months'
    >>> describe(-DayTimeDuration.from_parts(3, 4, 0, 0))
    '-3 days, 4 hours'

The sign is written once, in front of the whole list, with the locale's
minus sign. Zero fields are left out; a zero duration names its smallest
unit ("0 months", "0 seconds").

Python 3.13+.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Literal

from durationlex.constants import USECONDS_PER_SECOND
from durationlex.enums import FieldKind, IntervalKind, Sign
from durationlex.interval import DayTimeDuration, YearMonthDuration
from durationlex.locale_utils import resolve_locale

__all__ = ["UNIT_NAMES", "describe"]

logger = logging.getLogger(__name__)

type Length = Literal["long", "short", "narrow"]

# CLDR measurement unit for each field. FRACTION is folded into seconds.
UNIT_NAMES: dict[FieldKind, str] = {
    FieldKind.YEAR: "duration-year",
    FieldKind.MONTH: "duration-month",
    FieldKind.DAY: "duration-day",
    FieldKind.HOUR: "duration-hour",
    FieldKind.MINUTE: "duration-minute",
    FieldKind.SECOND: "duration-second",
}

# format_list style matching each unit length.
_LIST_STYLES: dict[str, str] = {
    "long": "unit",
    "short": "unit-short",
    "narrow": "unit-narrow",
}

# Seconds keep up to six fraction digits, no grouping needed below 60.
_SECONDS_FORMAT = "0.######"


def _amounts(
    duration: YearMonthDuration | DayTimeDuration,
) -> tuple[Sign, list[tuple[FieldKind, int | Decimal]]]:
    """Sign and unsigned (field, amount) pairs, smallest unit last."""
    match duration.KIND:
        case IntervalKind.YEAR_MONTH:
            sign, year, month = duration.extract()
            amounts: list[tuple[FieldKind, int | Decimal]] = [
                (FieldKind.YEAR, year),
                (FieldKind.MONTH, month),
            ]
        case IntervalKind.DAY_TIME:
            sign, day, hour, minute, second, microsecond = duration.extract()
            seconds = second + Decimal(microsecond) / USECONDS_PER_SECOND
            amounts = [
                (FieldKind.DAY, day),
                (FieldKind.HOUR, hour),
                (FieldKind.MINUTE, minute),
                (FieldKind.SECOND, seconds.normalize() if microsecond else Decimal(second)),
            ]
    return sign, amounts


def describe(
    duration: YearMonthDuration | DayTimeDuration,
    locale_code: str = "en_US",
    *,
    length: Length = "long",
) -> str:
    """Render a duration as localized words.

    Args:
        duration: Value to describe
        locale_code: BCP-47 or POSIX locale; unknown locales fall back to
            en_US with a logged warning
        length: CLDR unit length ("long", "short" or "narrow")

    Returns:
        Localized text such as "1 year, 2 months" or "-4.5 seconds"

    Raises:
        ValueError: If length is not one of the supported values

    Example:
        >>> describe(DayTimeDuration.ZERO)
        '0 seconds'
        >>> describe(DayTimeDuration.from_parts(0, 0, 0, 4, 500000), "en-US")
        '4.5 seconds'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel.lists import format_list  # noqa: PLC0415
    from babel.numbers import get_minus_sign_symbol  # noqa: PLC0415
    from babel.units import format_unit  # noqa: PLC0415

    if length not in _LIST_STYLES:
        msg = f"length must be one of {sorted(_LIST_STYLES)}, got {length!r}"
        raise ValueError(msg)

    locale = resolve_locale(locale_code)
    sign, amounts = _amounts(duration)

    present = [(field, amount) for field, amount in amounts if amount]
    if not present:
        present = [amounts[-1]]

    parts = []
    for field, amount in present:
        number_format = _SECONDS_FORMAT if isinstance(amount, Decimal) else None
        parts.append(
            format_unit(
                amount, UNIT_NAMES[field], length=length, format=number_format, locale=locale
            )
        )

    text = format_list(parts, style=_LIST_STYLES[length], locale=locale)
    if sign is Sign.NEGATIVE:
        text = get_minus_sign_symbol(locale) + text
    logger.debug("Described %r for %s as %r", duration, locale, text)
    return text
