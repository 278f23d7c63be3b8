"""Overnight rate calculation definition and accrual periods.

OvernightRateCalculation defines the index, notional, day count and
spread/gearing of a leg. OvernightAccrualCalculator applies it to a
materialized Schedule, producing one RateAccrualPeriod per schedule period.
Rates are observed later, at pricing time; no amounts are computed here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import final

from tenor.bean.bean import ImmutableBean
from tenor.core.calendar import day_count_fraction
from tenor.core.errors import CalculationError
from tenor.core.money import Currency, Money
from tenor.core.result import Err, Ok
from tenor.core.types import DayCountConvention, UtcDatetime
from tenor.swap.schedule import Schedule

logger = logging.getLogger(__name__)


class OvernightIndex(Enum):
    """Overnight benchmark rates."""

    GBP_SONIA = "GBP-SONIA"
    USD_FED_FUND = "USD-FED-FUND"
    USD_SOFR = "USD-SOFR"
    EUR_ESTR = "EUR-ESTR"
    CHF_SARON = "CHF-SARON"
    JPY_TONAR = "JPY-TONAR"

    @property
    def currency(self) -> Currency:
        return Currency(code=self.value[:3])


class OvernightAccrualMethod(Enum):
    """How daily fixings combine into the period rate."""

    COMPOUNDED = "COMPOUNDED"
    AVERAGED = "AVERAGED"


def _require_finite(owner: str, name: str, value: Decimal) -> None:
    if not value.is_finite():
        raise TypeError(f"{owner}.{name} must be finite Decimal, got {value!r}")


@final
@dataclass(frozen=True, slots=True, eq=False, repr=False)
class OvernightRateCalculation(ImmutableBean):
    """Floating rate calculation based on an overnight index.

    The period rate is (observed rate * gearing) + spread, where the observed
    rate compounds or averages the daily fixings over the accrual period.
    """

    index: OvernightIndex
    notional: Money
    day_count: DayCountConvention
    accrual_method: OvernightAccrualMethod = OvernightAccrualMethod.COMPOUNDED
    spread: Decimal = Decimal("0")
    gearing: Decimal = Decimal("1")

    def __post_init__(self) -> None:
        ImmutableBean.__post_init__(self)
        _require_finite("OvernightRateCalculation", "spread", self.spread)
        _require_finite("OvernightRateCalculation", "gearing", self.gearing)


@final
@dataclass(frozen=True, slots=True, eq=False, repr=False)
class OvernightRateObservation(ImmutableBean):
    """The index fixings needed for one accrual period."""

    index: OvernightIndex
    start_date: date
    end_date: date
    accrual_method: OvernightAccrualMethod


@final
@dataclass(frozen=True, slots=True, eq=False, repr=False)
class RateAccrualPeriod(ImmutableBean):
    """A dated accrual period with its year fraction and rate observation."""

    start_date: date
    end_date: date
    unadjusted_start_date: date
    unadjusted_end_date: date
    year_fraction: Decimal
    observation: OvernightRateObservation
    notional: Money
    gearing: Decimal = Decimal("1")
    spread: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        ImmutableBean.__post_init__(self)
        if self.start_date >= self.end_date:
            raise TypeError(
                f"RateAccrualPeriod: start_date ({self.start_date}) "
                f"must be < end_date ({self.end_date})"
            )
        _require_finite("RateAccrualPeriod", "year_fraction", self.year_fraction)


@final
class OvernightAccrualCalculator:
    """Creates one RateAccrualPeriod per schedule period."""

    def compute_accrual_periods(
        self, schedule: Schedule, calculation: OvernightRateCalculation,
    ) -> Ok[tuple[RateAccrualPeriod, ...]] | Err[CalculationError]:
        periods: list[RateAccrualPeriod] = []
        for sp in schedule.periods:
            yf = day_count_fraction(sp.start_date, sp.end_date, calculation.day_count)
            if yf <= 0:
                return Err(CalculationError(
                    message=(
                        f"Zero year fraction for {sp.start_date}..{sp.end_date} "
                        f"under {calculation.day_count.value}"
                    ),
                    code="ACCRUAL_YEAR_FRACTION",
                    timestamp=UtcDatetime.now(),
                    source="swap.calculation.OvernightAccrualCalculator.compute_accrual_periods",
                    reason="non-positive year fraction",
                ))
            periods.append(RateAccrualPeriod(
                start_date=sp.start_date,
                end_date=sp.end_date,
                unadjusted_start_date=sp.unadjusted_start_date,
                unadjusted_end_date=sp.unadjusted_end_date,
                year_fraction=yf,
                observation=OvernightRateObservation(
                    index=calculation.index,
                    start_date=sp.start_date,
                    end_date=sp.end_date,
                    accrual_method=calculation.accrual_method,
                ),
                notional=calculation.notional,
                gearing=calculation.gearing,
                spread=calculation.spread,
            ))
        logger.debug(
            "Created %d accrual periods on %s", len(periods), calculation.index.value,
        )
        return Ok(tuple(periods))
