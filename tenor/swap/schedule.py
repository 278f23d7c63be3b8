"""Accrual schedule definition and its materialized form.

PeriodicSchedule is the leg-level definition (start, end, frequency,
conventions). Schedule is the concrete list of adjusted periods produced
from it by PeriodicScheduleMaterializer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import final

from tenor.bean.bean import ImmutableBean
from tenor.core.calendar import adjust_date
from tenor.core.errors import ScheduleError
from tenor.core.result import Err, Ok
from tenor.core.types import BusinessDayConvention, Period, UtcDatetime
from tenor.infra.config import DEFAULT_EXPANSION, ExpansionConfig

logger = logging.getLogger(__name__)


class StubConvention(Enum):
    """Where the odd-length period goes when the frequency does not divide the term."""

    SHORT_INITIAL = "SHORT_INITIAL"
    SHORT_FINAL = "SHORT_FINAL"


@final
@dataclass(frozen=True, slots=True, eq=False, repr=False)
class PeriodicSchedule(ImmutableBean):
    """Regular accrual periods between two dates.

    Dates are held unadjusted; the business day convention is applied when
    the schedule is materialized.
    """

    start_date: date
    end_date: date
    frequency: Period
    business_day_convention: BusinessDayConvention
    stub_convention: StubConvention = StubConvention.SHORT_FINAL

    def __post_init__(self) -> None:
        ImmutableBean.__post_init__(self)
        if self.start_date >= self.end_date:
            raise TypeError(
                f"PeriodicSchedule: start_date ({self.start_date}) "
                f"must be < end_date ({self.end_date})"
            )

    def adjust(self, d: date, weekend: tuple[int, ...] = DEFAULT_EXPANSION.weekend_days) -> date:
        """Apply this schedule's business day convention to a date."""
        return adjust_date(d, self.business_day_convention, weekend)

    @property
    def adjusted_start_date(self) -> date:
        """Start date adjusted against the default Saturday/Sunday weekend."""
        return self.adjust(self.start_date)

    @property
    def adjusted_end_date(self) -> date:
        """End date adjusted against the default Saturday/Sunday weekend."""
        return self.adjust(self.end_date)


@final
@dataclass(frozen=True, slots=True, eq=False, repr=False)
class SchedulePeriod(ImmutableBean):
    """One period of a materialized schedule."""

    start_date: date
    end_date: date
    unadjusted_start_date: date
    unadjusted_end_date: date

    def __post_init__(self) -> None:
        ImmutableBean.__post_init__(self)
        if self.start_date >= self.end_date:
            raise TypeError(
                f"SchedulePeriod: start_date ({self.start_date}) "
                f"must be < end_date ({self.end_date})"
            )


@final
@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Schedule(ImmutableBean):
    """Contiguous adjusted periods generated from a PeriodicSchedule.

    Invariants:
    - at least one period
    - periods[i].end_date == periods[i + 1].start_date
    """

    periods: tuple[SchedulePeriod, ...]
    frequency: Period

    def __post_init__(self) -> None:
        ImmutableBean.__post_init__(self)
        if not self.periods:
            raise TypeError("Schedule must contain at least one period")
        for i in range(len(self.periods) - 1):
            if self.periods[i].end_date != self.periods[i + 1].start_date:
                raise TypeError(
                    f"Schedule: periods[{i}].end_date={self.periods[i].end_date} "
                    f"!= periods[{i + 1}].start_date={self.periods[i + 1].start_date}"
                )

    @property
    def start_date(self) -> date:
        return self.periods[0].start_date

    @property
    def end_date(self) -> date:
        return self.periods[-1].end_date

    def dates(self) -> tuple[date, ...]:
        """Adjusted period boundaries, first start to last end."""
        return (self.periods[0].start_date, *(p.end_date for p in self.periods))


# ---------------------------------------------------------------------------
# Materialization
# ---------------------------------------------------------------------------


@final
class PeriodicScheduleMaterializer:
    """Turns a PeriodicSchedule into a Schedule.

    Unadjusted dates step from the start (SHORT_FINAL) or back from the end
    (SHORT_INITIAL) in multiples of the frequency, so month-end rolls do not
    drift. Each date is then adjusted; dates that adjust onto the previous
    one are dropped, except that the end date always survives and displaces
    the inner date it collides with.
    """

    def __init__(self, config: ExpansionConfig = DEFAULT_EXPANSION) -> None:
        self._config = config

    def materialize(self, definition: PeriodicSchedule) -> Ok[Schedule] | Err[ScheduleError]:
        match self._unadjusted_dates(definition):
            case Err() as e:
                return e
            case Ok(unadjusted):
                pass
        periods: list[SchedulePeriod] = []
        previous_unadjusted = unadjusted[0]
        previous = self._adjust(previous_unadjusted, definition)
        for current_unadjusted in unadjusted[1:]:
            current = self._adjust(current_unadjusted, definition)
            if current <= previous:
                if current_unadjusted == definition.end_date and periods:
                    # end collapsed onto the last inner date; that inner date goes instead
                    periods[-1] = replace(periods[-1], unadjusted_end_date=current_unadjusted)
                continue
            periods.append(SchedulePeriod(
                start_date=previous,
                end_date=current,
                unadjusted_start_date=previous_unadjusted,
                unadjusted_end_date=current_unadjusted,
            ))
            previous, previous_unadjusted = current, current_unadjusted
        if not periods:
            return Err(self._error(definition, "all dates adjust onto the same business day"))
        logger.debug("Materialized %d periods for %s", len(periods), definition)
        return Ok(Schedule(periods=tuple(periods), frequency=definition.frequency))

    def _adjust(self, d: date, definition: PeriodicSchedule) -> date:
        return definition.adjust(d, self._config.weekend_days)

    def _unadjusted_dates(
        self, definition: PeriodicSchedule,
    ) -> Ok[tuple[date, ...]] | Err[ScheduleError]:
        start, end = definition.start_date, definition.end_date
        step = definition.frequency.to_relativedelta()
        limit = self._config.max_schedule_periods
        inner: list[date] = []
        k = 1
        while True:
            if definition.stub_convention is StubConvention.SHORT_FINAL:
                candidate = start + step * k
                if candidate >= end:
                    break
            else:
                candidate = end - step * k
                if candidate <= start:
                    break
            inner.append(candidate)
            if len(inner) >= limit:
                return Err(self._error(
                    definition, f"more than {limit} periods between {start} and {end}",
                ))
            k += 1
        if definition.stub_convention is StubConvention.SHORT_INITIAL:
            inner.reverse()
        return Ok((start, *inner, end))

    @staticmethod
    def _error(definition: PeriodicSchedule, reason: str) -> ScheduleError:
        return ScheduleError(
            message=f"Cannot materialize schedule: {reason}",
            code="SCHEDULE_MATERIALIZE",
            timestamp=UtcDatetime.now(),
            source="swap.schedule.PeriodicScheduleMaterializer.materialize",
            reason=reason,
        )
