"""Payment schedule definition and payment periods.

A PaymentSchedule says how accrual periods roll up into payments: the
payment frequency (a multiple of the accrual frequency), which end of the
period the payment is relative to, a business-day offset, and the
compounding method applied when more than one accrual period is paid at once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import final

from tenor.bean.bean import ImmutableBean
from tenor.core.calendar import add_business_days, adjust_date
from tenor.core.errors import CalculationError
from tenor.core.money import Money
from tenor.core.result import Err, Ok
from tenor.core.types import BusinessDayConvention, Period, UtcDatetime
from tenor.infra.config import DEFAULT_EXPANSION, ExpansionConfig
from tenor.swap.calculation import RateAccrualPeriod
from tenor.swap.schedule import Schedule

logger = logging.getLogger(__name__)


class PaymentRelativeTo(Enum):
    PERIOD_START = "PERIOD_START"
    PERIOD_END = "PERIOD_END"


class CompoundingMethod(Enum):
    """How accrual periods within one payment period compound.

    ISDA 2006 Section 6.3.
    """

    NONE = "NONE"
    STRAIGHT = "STRAIGHT"
    FLAT = "FLAT"
    SPREAD_EXCLUSIVE = "SPREAD_EXCLUSIVE"


@final
@dataclass(frozen=True, slots=True, eq=False, repr=False)
class PaymentSchedule(ImmutableBean):
    """How payment periods are derived from accrual periods."""

    payment_frequency: Period
    payment_relative_to: PaymentRelativeTo = PaymentRelativeTo.PERIOD_END
    payment_offset_days: int = 0
    compounding_method: CompoundingMethod = CompoundingMethod.NONE
    business_day_convention: BusinessDayConvention = BusinessDayConvention.MODIFIED_FOLLOWING


@final
@dataclass(frozen=True, slots=True, eq=False, repr=False)
class PaymentPeriod(ImmutableBean):
    """One payment: the accrual periods it covers and the date it is paid."""

    payment_date: date
    accrual_periods: tuple[RateAccrualPeriod, ...]
    compounding_method: CompoundingMethod = CompoundingMethod.NONE

    def __post_init__(self) -> None:
        ImmutableBean.__post_init__(self)
        if not self.accrual_periods:
            raise TypeError("PaymentPeriod must contain at least one accrual period")

    @property
    def start_date(self) -> date:
        return self.accrual_periods[0].start_date

    @property
    def end_date(self) -> date:
        return self.accrual_periods[-1].end_date

    @property
    def notional(self) -> Money:
        return self.accrual_periods[0].notional


@final
class PaymentScheduleAssembler:
    """Groups consecutive accrual periods into payment periods.

    Group size is payment_frequency / accrual frequency; the last group may
    be shorter when the schedule has a final stub.
    """

    def __init__(self, config: ExpansionConfig = DEFAULT_EXPANSION) -> None:
        self._config = config

    def assemble(
        self,
        accrual_periods: tuple[RateAccrualPeriod, ...],
        schedule: Schedule,
        payment: PaymentSchedule,
    ) -> Ok[tuple[PaymentPeriod, ...]] | Err[CalculationError]:
        match _group_size(payment.payment_frequency, schedule.frequency):
            case Err(reason):
                return Err(CalculationError(
                    message=f"Cannot create payment periods: {reason}",
                    code="PAYMENT_FREQUENCY",
                    timestamp=UtcDatetime.now(),
                    source="swap.payment.PaymentScheduleAssembler.assemble",
                    reason=reason,
                ))
            case Ok(size):
                pass
        payments: list[PaymentPeriod] = []
        for i in range(0, len(accrual_periods), size):
            group = accrual_periods[i:i + size]
            payments.append(PaymentPeriod(
                payment_date=self._payment_date(group, payment),
                accrual_periods=tuple(group),
                compounding_method=payment.compounding_method,
            ))
        logger.debug(
            "Assembled %d payment periods from %d accrual periods",
            len(payments), len(accrual_periods),
        )
        return Ok(tuple(payments))

    def _payment_date(
        self, group: tuple[RateAccrualPeriod, ...], payment: PaymentSchedule,
    ) -> date:
        match payment.payment_relative_to:
            case PaymentRelativeTo.PERIOD_START:
                base = group[0].start_date
            case PaymentRelativeTo.PERIOD_END:
                base = group[-1].end_date
        weekend = self._config.weekend_days
        base = adjust_date(base, payment.business_day_convention, weekend)
        return add_business_days(base, payment.payment_offset_days, weekend)


def _group_size(payment_frequency: Period, accrual_frequency: Period) -> Ok[int] | Err[str]:
    if payment_frequency == accrual_frequency:
        return Ok(1)
    pay_months = payment_frequency.months
    accrual_months = accrual_frequency.months
    if pay_months is None or accrual_months is None:
        return Err(
            f"payment frequency {payment_frequency} and accrual frequency "
            f"{accrual_frequency} must be equal or both month-based"
        )
    if pay_months % accrual_months != 0:
        return Err(
            f"payment frequency {payment_frequency} is not a multiple of "
            f"accrual frequency {accrual_frequency}"
        )
    return Ok(pay_months // accrual_months)
