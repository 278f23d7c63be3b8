"""Configuration objects for bean rendering and leg expansion.

Pure configuration data with defaults. Callers that need other values
construct their own instance and pass it in.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

# ---------------------------------------------------------------------------
# Bean rendering
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class BeanRenderingConfig:
    """Text used when rendering builders."""

    unset_marker: str = "<unset>"
    builder_suffix: str = ".Builder"


DEFAULT_RENDERING = BeanRenderingConfig()


# ---------------------------------------------------------------------------
# Expansion
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class ExpansionConfig:
    """Limits and calendar settings for the reference expansion collaborators."""

    max_schedule_periods: int = 1200  # 100 years of monthly periods
    weekend_days: tuple[int, ...] = (5, 6)  # date.weekday(): Sat, Sun

    def __post_init__(self) -> None:
        if self.max_schedule_periods <= 0:
            raise TypeError(
                "ExpansionConfig.max_schedule_periods must be > 0, "
                f"got {self.max_schedule_periods}"
            )
        if any(d not in range(7) for d in self.weekend_days):
            raise TypeError(
                f"ExpansionConfig.weekend_days must be in 0..6, got {self.weekend_days}"
            )
        if len(set(self.weekend_days)) == 7:
            raise TypeError("ExpansionConfig.weekend_days must leave at least one business day")


DEFAULT_EXPANSION = ExpansionConfig()
