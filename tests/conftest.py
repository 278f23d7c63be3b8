"""Hypothesis profiles and pytest fixtures for tenor."""

from __future__ import annotations

from datetime import date

import pytest
from hypothesis import HealthCheck, settings

from tenor.core.money import Money
from tenor.core.types import BusinessDayConvention, DayCountConvention, Period
from tenor.swap.calculation import OvernightIndex, OvernightRateCalculation
from tenor.swap.leg import OvernightRateSwapLeg
from tenor.swap.payment import PaymentRelativeTo, PaymentSchedule
from tenor.swap.schedule import PeriodicSchedule

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ===================================================================
# FIXTURES
# ===================================================================


@pytest.fixture
def accrual_schedule() -> PeriodicSchedule:
    """One year, quarterly, Monday 2025-01-06 to Tuesday 2026-01-06."""
    return PeriodicSchedule(
        start_date=date(2025, 1, 6),
        end_date=date(2026, 1, 6),
        frequency=Period(3, "M"),
        business_day_convention=BusinessDayConvention.MODIFIED_FOLLOWING,
    )


@pytest.fixture
def payment_schedule() -> PaymentSchedule:
    return PaymentSchedule(
        payment_frequency=Period(3, "M"),
        payment_relative_to=PaymentRelativeTo.PERIOD_END,
        payment_offset_days=2,
    )


@pytest.fixture
def sonia_calculation() -> OvernightRateCalculation:
    return OvernightRateCalculation(
        index=OvernightIndex.GBP_SONIA,
        notional=Money.of("GBP", "10000000"),
        day_count=DayCountConvention.ACT_365,
    )


@pytest.fixture
def leg(
    accrual_schedule: PeriodicSchedule,
    payment_schedule: PaymentSchedule,
    sonia_calculation: OvernightRateCalculation,
) -> OvernightRateSwapLeg:
    return OvernightRateSwapLeg(
        accrual_periods=accrual_schedule,
        payment_periods=payment_schedule,
        calculation=sonia_calculation,
    )
