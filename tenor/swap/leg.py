"""A floating rate swap leg based on an overnight interest rate."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Self, final

from tenor.bean.bean import ImmutableBean
from tenor.bean.builder import BeanBuilder
from tenor.bean.meta import meta_bean
from tenor.core.money import Currency
from tenor.core.result import Err, Ok
from tenor.swap.calculation import OvernightRateCalculation
from tenor.swap.expanded import ExpandedSwapLeg
from tenor.swap.expansion import expand
from tenor.swap.payment import PaymentSchedule
from tenor.swap.schedule import PeriodicSchedule


@final
@dataclass(frozen=True, slots=True, eq=False, repr=False)
class OvernightRateSwapLeg(ImmutableBean):
    """A swap leg paying an overnight rate such as GBP-SONIA or USD-FED-FUND.

    Interest accrues over accrual periods that follow a regular schedule.
    Payments are made over payment periods, usually the same as the accrual
    periods; when a payment period is longer, compounding may apply.
    The index, notional and day count live in the calculation.

    Supported:
    - regular accrual periods with an initial or final stub
    - payment periods longer than accrual periods, with compounding
    - payment offset from the start or end of each period
    - one overnight index, also used in the stubs
    - gearing and spread
    """

    accrual_periods: PeriodicSchedule
    """The accrual schedule; other dates in the leg derive from it."""

    payment_periods: PaymentSchedule
    """How accrual periods roll up into payments, including compounding."""

    calculation: OvernightRateCalculation
    """Index, notional and day count of the floating rate."""

    class Builder(BeanBuilder["OvernightRateSwapLeg"]):
        """Builder with one typed setter per property."""

        __slots__ = ()

        def accrual_periods(self, value: PeriodicSchedule) -> Self:
            return self.set_typed(self.meta["accrual_periods"], value)

        def payment_periods(self, value: PaymentSchedule) -> Self:
            return self.set_typed(self.meta["payment_periods"], value)

        def calculation(self, value: OvernightRateCalculation) -> Self:
            return self.set_typed(self.meta["calculation"], value)

    @classmethod
    def builder_class(cls) -> type[BeanBuilder[Any]]:
        return OvernightRateSwapLeg.Builder

    @classmethod
    def builder(cls) -> OvernightRateSwapLeg.Builder:
        return OvernightRateSwapLeg.Builder(meta_bean(cls))

    def to_builder(self) -> OvernightRateSwapLeg.Builder:
        return OvernightRateSwapLeg.Builder.copy_of(self)

    @property
    def start_date(self) -> date:
        """First accrual date (effective date), adjusted to a business day.

        Uses the default Saturday/Sunday weekend. For another weekend call
        ``accrual_periods.adjust(accrual_periods.start_date, weekend)``.
        """
        return self.accrual_periods.adjusted_start_date

    @property
    def end_date(self) -> date:
        """Last accrual date (maturity date), adjusted to a business day.

        Uses the default Saturday/Sunday weekend, like ``start_date``.
        """
        return self.accrual_periods.adjusted_end_date

    @property
    def currency(self) -> Currency:
        return self.calculation.notional.currency

    def to_expanded(self) -> Ok[ExpandedSwapLeg] | Err[Any]:
        """The equivalent leg resolved into payment periods."""
        return expand(self)
