"""Business day adjustment and day count fractions.

Business days are weekdays only; holiday calendars are not modelled.
Type definitions live in core/types.py. This module provides functions.
"""

from __future__ import annotations

import calendar as _cal
from datetime import date, timedelta
from decimal import Decimal
from typing import assert_never

from tenor.core.types import BusinessDayConvention, DayCountConvention

_WEEKEND: tuple[int, ...] = (5, 6)

# ---------------------------------------------------------------------------
# Business days
# ---------------------------------------------------------------------------


def is_business_day(d: date, weekend: tuple[int, ...] = _WEEKEND) -> bool:
    return d.weekday() not in weekend


def adjust_date(
    d: date, convention: BusinessDayConvention, weekend: tuple[int, ...] = _WEEKEND,
) -> date:
    """Move a date onto a business day.

    MODIFIED_FOLLOWING: next business day, unless that crosses a month
                        boundary, in which case the previous business day.
    FOLLOWING: next business day.
    PRECEDING: previous business day.
    NONE: unchanged.
    """
    match convention:
        case BusinessDayConvention.NONE:
            return d
        case BusinessDayConvention.FOLLOWING:
            result = d
            while not is_business_day(result, weekend):
                result += timedelta(days=1)
            return result
        case BusinessDayConvention.PRECEDING:
            result = d
            while not is_business_day(result, weekend):
                result -= timedelta(days=1)
            return result
        case BusinessDayConvention.MODIFIED_FOLLOWING:
            result = d
            while not is_business_day(result, weekend):
                result += timedelta(days=1)
            if result.month != d.month:
                result = d
                while not is_business_day(result, weekend):
                    result -= timedelta(days=1)
            return result
        case _never:
            assert_never(_never)


def add_business_days(start: date, days: int, weekend: tuple[int, ...] = _WEEKEND) -> date:
    """Shift by a number of business days; negative values move backwards."""
    step = timedelta(days=1 if days >= 0 else -1)
    current = start
    remaining = abs(days)
    while remaining > 0:
        current += step
        if is_business_day(current, weekend):
            remaining -= 1
    return current


# ---------------------------------------------------------------------------
# Day count fractions
# ---------------------------------------------------------------------------


def _days_in_year(y: int) -> int:
    return 366 if _cal.isleap(y) else 365


def _act_act_isda(start: date, end: date) -> Decimal:
    """Actual days over actual days in year, split across year boundaries."""
    total = Decimal("0")
    current = start
    while current.year < end.year:
        year_end = date(current.year + 1, 1, 1)
        total += Decimal((year_end - current).days) / Decimal(_days_in_year(current.year))
        current = year_end
    days_in_period = (end - current).days
    if days_in_period > 0:
        total += Decimal(days_in_period) / Decimal(_days_in_year(current.year))
    return total


def _thirty_360(start: date, end: date, *, eurobond: bool) -> Decimal:
    d1 = min(start.day, 30)
    if eurobond:
        d2 = min(end.day, 30)
    else:
        d2 = 30 if (end.day == 31 and d1 >= 30) else end.day
    days = 360 * (end.year - start.year) + 30 * (end.month - start.month) + (d2 - d1)
    return Decimal(days) / Decimal("360")


def day_count_fraction(start: date, end: date, convention: DayCountConvention) -> Decimal:
    """Year fraction for the accrual period [start, end).

    Precondition: start <= end, otherwise TypeError.
    """
    if start > end:
        raise TypeError(f"day_count_fraction: start ({start}) must be <= end ({end})")
    match convention:
        case DayCountConvention.ACT_360:
            return Decimal((end - start).days) / Decimal("360")
        case DayCountConvention.ACT_365:
            return Decimal((end - start).days) / Decimal("365")
        case DayCountConvention.THIRTY_360:
            return _thirty_360(start, end, eurobond=False)
        case DayCountConvention.THIRTY_E_360:
            return _thirty_360(start, end, eurobond=True)
        case DayCountConvention.ACT_ACT_ISDA:
            return _act_act_isda(start, end)
        case _never:
            assert_never(_never)
