"""The resolved form of a swap leg."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import final

from tenor.bean.bean import ImmutableBean
from tenor.core.money import Currency
from tenor.swap.payment import PaymentPeriod


class NotionalExchange(Enum):
    """Exchange of notional at the start/end of a leg.

    Only NO_EXCHANGE exists: expansion does not yet derive notional
    exchange for legs whose notional resets.
    """

    NO_EXCHANGE = "NO_EXCHANGE"


@final
@dataclass(frozen=True, slots=True, eq=False, repr=False)
class ExpandedSwapLeg(ImmutableBean):
    """A swap leg resolved into dated payment periods."""

    payment_periods: tuple[PaymentPeriod, ...]
    notional_exchange: NotionalExchange = NotionalExchange.NO_EXCHANGE

    @property
    def start_date(self) -> date | None:
        return self.payment_periods[0].start_date if self.payment_periods else None

    @property
    def end_date(self) -> date | None:
        return self.payment_periods[-1].end_date if self.payment_periods else None

    @property
    def currency(self) -> Currency | None:
        return self.payment_periods[0].notional.currency if self.payment_periods else None
