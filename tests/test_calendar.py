"""Tests for tenor.core.calendar — business day adjustment and day counts."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from tenor.core.calendar import add_business_days, adjust_date, day_count_fraction
from tenor.core.types import BusinessDayConvention, DayCountConvention

SAT = date(2025, 5, 31)  # last day of May, Saturday
SUN = date(2025, 6, 1)


class TestAdjustDate:
    def test_business_day_unchanged(self) -> None:
        d = date(2025, 6, 2)  # Monday
        for convention in BusinessDayConvention:
            assert adjust_date(d, convention) == d

    def test_following(self) -> None:
        assert adjust_date(SAT, BusinessDayConvention.FOLLOWING) == date(2025, 6, 2)

    def test_preceding(self) -> None:
        assert adjust_date(SUN, BusinessDayConvention.PRECEDING) == date(2025, 5, 30)

    def test_modified_following_stays_in_month(self) -> None:
        assert adjust_date(SAT, BusinessDayConvention.MODIFIED_FOLLOWING) == date(2025, 5, 30)

    def test_none(self) -> None:
        assert adjust_date(SAT, BusinessDayConvention.NONE) == SAT

    def test_custom_weekend(self) -> None:
        friday = date(2025, 5, 30)
        assert adjust_date(
            friday, BusinessDayConvention.FOLLOWING, weekend=(4, 5),
        ) == date(2025, 6, 1)


class TestAddBusinessDays:
    def test_skips_weekend(self) -> None:
        assert add_business_days(date(2025, 5, 30), 1) == date(2025, 6, 2)

    def test_zero(self) -> None:
        assert add_business_days(SAT, 0) == SAT

    def test_negative(self) -> None:
        assert add_business_days(date(2025, 6, 2), -1) == date(2025, 5, 30)


class TestDayCountFraction:
    def test_act_360(self) -> None:
        assert day_count_fraction(
            date(2025, 1, 1), date(2025, 4, 1), DayCountConvention.ACT_360,
        ) == Decimal("90") / Decimal("360")

    def test_act_365(self) -> None:
        assert day_count_fraction(
            date(2025, 1, 1), date(2025, 4, 1), DayCountConvention.ACT_365,
        ) == Decimal("90") / Decimal("365")

    def test_thirty_360_end_of_month(self) -> None:
        assert day_count_fraction(
            date(2025, 1, 31), date(2025, 3, 31), DayCountConvention.THIRTY_360,
        ) == Decimal("60") / Decimal("360")

    def test_thirty_e_360(self) -> None:
        assert day_count_fraction(
            date(2025, 1, 15), date(2025, 2, 28), DayCountConvention.THIRTY_E_360,
        ) == Decimal("43") / Decimal("360")

    def test_act_act_isda_across_year_end(self) -> None:
        dcf = day_count_fraction(
            date(2023, 12, 1), date(2024, 2, 1), DayCountConvention.ACT_ACT_ISDA,
        )
        assert dcf == Decimal(31) / Decimal(365) + Decimal(31) / Decimal(366)

    def test_reversed_dates_raise(self) -> None:
        with pytest.raises(TypeError):
            day_count_fraction(date(2025, 2, 1), date(2025, 1, 1), DayCountConvention.ACT_360)
