"""Expansion of a swap leg into payment periods.

SwapLegExpander composes three collaborators:

  1. AccrualScheduleSource   PeriodicSchedule -> Schedule
  2. AccrualCalculator       Schedule + calculation -> accrual periods
  3. PaymentPeriodAssembler  accrual periods + Schedule + PaymentSchedule
                             -> payment periods

The first Err from any step is returned as-is; no partial leg is produced
and nothing is retried. Exceptions raised by a collaborator propagate.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol, final

from tenor.core.result import Err, Ok
from tenor.infra.config import DEFAULT_EXPANSION, ExpansionConfig
from tenor.swap.calculation import (
    OvernightAccrualCalculator,
    OvernightRateCalculation,
    RateAccrualPeriod,
)
from tenor.swap.expanded import ExpandedSwapLeg, NotionalExchange
from tenor.swap.payment import PaymentPeriod, PaymentSchedule, PaymentScheduleAssembler
from tenor.swap.schedule import PeriodicSchedule, PeriodicScheduleMaterializer, Schedule

if TYPE_CHECKING:
    from tenor.swap.leg import OvernightRateSwapLeg

logger = logging.getLogger(__name__)


class AccrualScheduleSource(Protocol):
    """Materializes the accrual schedule definition into dated periods."""

    def materialize(self, definition: PeriodicSchedule) -> Ok[Schedule] | Err[Any]: ...


class AccrualCalculator(Protocol):
    """Creates per-period accrual records from a schedule."""

    def compute_accrual_periods(
        self, schedule: Schedule, calculation: OvernightRateCalculation,
    ) -> Ok[tuple[RateAccrualPeriod, ...]] | Err[Any]: ...


class PaymentPeriodAssembler(Protocol):
    """Rolls accrual periods up into payment periods."""

    def assemble(
        self,
        accrual_periods: tuple[RateAccrualPeriod, ...],
        schedule: Schedule,
        payment: PaymentSchedule,
    ) -> Ok[tuple[PaymentPeriod, ...]] | Err[Any]: ...


@final
class SwapLegExpander:
    """Stateless expansion of OvernightRateSwapLeg into ExpandedSwapLeg."""

    def __init__(
        self,
        schedule_source: AccrualScheduleSource | None = None,
        calculator: AccrualCalculator | None = None,
        assembler: PaymentPeriodAssembler | None = None,
        config: ExpansionConfig = DEFAULT_EXPANSION,
    ) -> None:
        self._schedule_source = schedule_source or PeriodicScheduleMaterializer(config)
        self._calculator = calculator or OvernightAccrualCalculator()
        self._assembler = assembler or PaymentScheduleAssembler(config)

    def expand(self, leg: OvernightRateSwapLeg) -> Ok[ExpandedSwapLeg] | Err[Any]:
        match self._schedule_source.materialize(leg.accrual_periods):
            case Err() as e:
                logger.debug("Expansion stopped at schedule: %s", e.error)
                return e
            case Ok(schedule):
                pass
        match self._calculator.compute_accrual_periods(schedule, leg.calculation):
            case Err() as e:
                logger.debug("Expansion stopped at accrual periods: %s", e.error)
                return e
            case Ok(accrual_periods):
                pass
        match self._assembler.assemble(accrual_periods, schedule, leg.payment_periods):
            case Err() as e:
                logger.debug("Expansion stopped at payment periods: %s", e.error)
                return e
            case Ok(payment_periods):
                pass
        logger.debug(
            "Expanded leg %s..%s into %d payment periods",
            leg.accrual_periods.start_date, leg.accrual_periods.end_date,
            len(payment_periods),
        )
        # TODO: derive notional exchange once notional-resetting legs are supported
        return Ok(ExpandedSwapLeg(
            payment_periods=tuple(payment_periods),
            notional_exchange=NotionalExchange.NO_EXCHANGE,
        ))


_DEFAULT_EXPANDER = SwapLegExpander()


def expand(leg: OvernightRateSwapLeg) -> Ok[ExpandedSwapLeg] | Err[Any]:
    """Expand a leg with the reference collaborators."""
    return _DEFAULT_EXPANDER.expand(leg)
