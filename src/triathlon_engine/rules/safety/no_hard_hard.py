"""SAFETY rule: no hard sessions on two consecutive calendar days.

Sessions are walked in date order. A hard session dated exactly one day
after a hard session is downgraded, and the downgraded session then counts
as easy for the following day, so hard-hard-hard becomes hard-easy-hard.
Consecutiveness is judged on the dates themselves: a day with no session
breaks the chain.
"""

from __future__ import annotations

from datetime import date, timedelta

from triathlon_engine.classifier import downgrade, is_hard
from triathlon_engine.models.enums import Priority
from triathlon_engine.models.rules_context import RulesContext
from triathlon_engine.models.week_plan import WeekPlan
from triathlon_engine.rules.base import PlanRule


def is_next_day(previous: date, current: date) -> bool:
    """True if *current* is exactly one calendar day after *previous*."""
    return current - previous == timedelta(days=1)


class NoHardHardRule(PlanRule):
    """Prevents back-to-back hard training days."""

    rule_id = "no_hard_hard"
    version = "1.0.0"
    priority = Priority.SAFETY

    SUMMARY = "NoHardHard: Prevented consecutive hard training days"
    WARNING = "Adjusted plan to avoid back-to-back hard sessions"
    REASON = "No back-to-back hard sessions allowed"

    def apply(self, plan: WeekPlan, context: RulesContext) -> WeekPlan:
        # sorted() is stable: same-date sessions keep their relative order
        sessions = sorted(plan.sessions, key=lambda s: s.date)
        modified = False
        previous_was_hard = False
        previous_date: date | None = None

        for idx, session in enumerate(sessions):
            current_hard = is_hard(session)
            consecutive = previous_date is not None and is_next_day(previous_date, session.date)

            if consecutive and previous_was_hard and current_hard:
                sessions[idx] = downgrade(session, self.REASON)
                modified = True
                previous_was_hard = False
            else:
                previous_was_hard = current_hard

            previous_date = session.date

        if not modified:
            if tuple(sessions) == plan.sessions:
                return plan
            return plan.with_sessions(sessions)

        return plan.with_sessions(sessions).with_annotations(
            warnings=[self.WARNING],
            applied_rules=[self.SUMMARY],
        )
