"""Core types: UtcDatetime, DayCountConvention, BusinessDayConvention, Period."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from typing import Literal, final

from dateutil.relativedelta import relativedelta

from tenor.core.result import Err, Ok

# ---------------------------------------------------------------------------
# Conventions
# ---------------------------------------------------------------------------


class DayCountConvention(Enum):
    """Day count conventions for accrual year fractions.

    ISDA 2006 Section 4.16.
    """

    ACT_360 = "ACT/360"
    ACT_365 = "ACT/365"
    THIRTY_360 = "30/360"
    ACT_ACT_ISDA = "ACT/ACT.ISDA"
    THIRTY_E_360 = "30E/360"


class BusinessDayConvention(Enum):
    """How a date falling on a non-business day is moved."""

    MODIFIED_FOLLOWING = "MOD_FOLLOWING"
    FOLLOWING = "FOLLOWING"
    PRECEDING = "PRECEDING"
    NONE = "NONE"


@final
@dataclass(frozen=True, slots=True)
class UtcDatetime:
    """Timezone-aware UTC datetime. Naive datetimes are rejected."""

    value: datetime

    def __post_init__(self) -> None:
        if self.value.tzinfo is None:
            raise TypeError("UtcDatetime requires timezone-aware datetime, got naive")

    @staticmethod
    def now() -> UtcDatetime:
        return UtcDatetime(value=datetime.now(tz=UTC))


# ---------------------------------------------------------------------------
# Period
# ---------------------------------------------------------------------------

type PeriodUnit = Literal["D", "W", "M", "Y"]

_UNITS: tuple[PeriodUnit, ...] = ("D", "W", "M", "Y")


@final
@dataclass(frozen=True, slots=True)
class Period:
    """A tenor such as 1D, 2W, 3M or 1Y.

    The string form is the canonical text conversion: str(Period(3, "M"))
    is "3M" and Period.parse("3M") recovers it.
    """

    multiplier: int
    unit: PeriodUnit

    def __post_init__(self) -> None:
        if self.multiplier <= 0:
            raise TypeError(f"Period.multiplier must be > 0, got {self.multiplier}")
        if self.unit not in _UNITS:
            raise TypeError(f"Period.unit must be one of {_UNITS}, got {self.unit!r}")

    @staticmethod
    def parse(raw: str) -> Ok[Period] | Err[str]:
        text = raw.strip().upper()
        digits = text[:-1]
        if len(text) < 2 or text[-1] not in _UNITS or not (digits.isascii() and digits.isdigit()):
            return Err(f"Period must look like '3M', got {raw!r}")
        multiplier = int(digits)
        if multiplier <= 0:
            return Err(f"Period.multiplier must be > 0, got {multiplier}")
        unit: PeriodUnit = text[-1]  # type: ignore[assignment]
        return Ok(Period(multiplier=multiplier, unit=unit))

    def __str__(self) -> str:
        return f"{self.multiplier}{self.unit}"

    def to_relativedelta(self) -> relativedelta:
        match self.unit:
            case "D":
                return relativedelta(days=self.multiplier)
            case "W":
                return relativedelta(weeks=self.multiplier)
            case "M":
                return relativedelta(months=self.multiplier)
            case "Y":
                return relativedelta(years=self.multiplier)

    @property
    def months(self) -> int | None:
        """Length in whole months, or None for day and week tenors."""
        match self.unit:
            case "M":
                return self.multiplier
            case "Y":
                return 12 * self.multiplier
            case _:
                return None
