"""WeekPlan — the immutable aggregate threaded through the rule engine."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date, timedelta

from triathlon_engine.models.enums import PLAN_DAYS
from triathlon_engine.models.session import Session


@dataclass(frozen=True)
class WeekPlan:
    """Seven-day plan plus the warnings and audit entries added by rules.

    ``warnings`` and ``applied_rules`` are append-only within one
    ``apply_rules`` call: rules extend them via ``with_annotations`` and
    never drop entries placed by earlier rules.
    """

    start_date: date
    sessions: tuple[Session, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)
    applied_rules: tuple[str, ...] = field(default_factory=tuple)

    @property
    def end_date(self) -> date:
        """Last calendar day covered by the plan."""
        return self.start_date + timedelta(days=PLAN_DAYS - 1)

    @property
    def total_minutes(self) -> int:
        return sum(s.duration_min for s in self.sessions)

    def sessions_on(self, day: date) -> tuple[Session, ...]:
        """All sessions dated *day*, in plan order."""
        return tuple(s for s in self.sessions if s.date == day)

    def with_sessions(self, sessions: list[Session] | tuple[Session, ...]) -> WeekPlan:
        return dataclasses.replace(self, sessions=tuple(sessions))

    def with_annotations(
        self,
        warnings: list[str] | tuple[str, ...] = (),
        applied_rules: list[str] | tuple[str, ...] = (),
    ) -> WeekPlan:
        """Return a copy with *warnings* and *applied_rules* appended."""
        return dataclasses.replace(
            self,
            warnings=self.warnings + tuple(warnings),
            applied_rules=self.applied_rules + tuple(applied_rules),
        )

    def cleared(self) -> WeekPlan:
        """Return a copy with empty warnings and applied rules."""
        return dataclasses.replace(self, warnings=(), applied_rules=())
