"""RulesContext — read-only snapshot of history and readiness for one request."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class DailyMinutes:
    """Logged training minutes for one calendar day."""

    date: date
    minutes: int


@dataclass(frozen=True)
class Last7dStats:
    """Training volume over the 7 days preceding the plan start."""

    total_minutes: int = 0
    by_date: tuple[DailyMinutes, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TodayFatigue:
    """Self-reported readiness for the plan start date."""

    readiness: int  # 1-5
    sleep_score: float | None = None


@dataclass(frozen=True)
class RulesContext:
    """External state consumed by the rule engine.

    Assembled once per planning request by the history provider; the
    engine never modifies it.
    """

    last7d_stats: Last7dStats = field(default_factory=Last7dStats)
    today_fatigue: TodayFatigue | None = None

    @classmethod
    def empty(cls) -> RulesContext:
        """No history and no readiness report."""
        return cls()
