"""VOLUME rule: cap planned weekly minutes at 110% of the previous 7 days.

When the plan exceeds the cap, every non-rest session is scaled by the same
factor with a 30-minute floor. The floor means the scaled total can still
land above the cap when many sessions are short; that residue is accepted
rather than re-normalized.
"""

from __future__ import annotations

import dataclasses
import math

from triathlon_engine.models.enums import (
    MIN_SCALED_DURATION_MIN,
    WEEKLY_LOAD_CAP_FACTOR,
    Priority,
)
from triathlon_engine.models.rules_context import RulesContext
from triathlon_engine.models.session import Session
from triathlon_engine.models.week_plan import WeekPlan
from triathlon_engine.rules.base import PlanRule


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


def weekly_cap_minutes(last_week_minutes: int) -> int:
    """Maximum planned minutes allowed given last week's total."""
    return round_half_up(last_week_minutes * WEEKLY_LOAD_CAP_FACTOR)


def scaled_duration(duration_min: int, scale: float) -> int:
    return max(MIN_SCALED_DURATION_MIN, round_half_up(duration_min * scale))


class WeeklyLoadCapRule(PlanRule):
    """Scales session durations down when the week outgrows last week's load."""

    rule_id = "weekly_load_cap"
    version = "1.0.0"
    priority = Priority.VOLUME

    def apply(self, plan: WeekPlan, context: RulesContext) -> WeekPlan:
        last_week_minutes = context.last7d_stats.total_minutes
        if last_week_minutes == 0:
            return plan  # No history to cap against

        planned_minutes = plan.total_minutes
        max_allowed = weekly_cap_minutes(last_week_minutes)
        if planned_minutes <= max_allowed:
            return plan

        scale = max_allowed / planned_minutes
        sessions: list[Session] = []
        for session in plan.sessions:
            if session.is_rest or session.duration_min <= 0:
                sessions.append(session)
                continue
            new_duration = scaled_duration(session.duration_min, scale)
            if new_duration != session.duration_min:
                session = dataclasses.replace(
                    session.with_note("Duration adjusted for progressive load management"),
                    duration_min=new_duration,
                )
            sessions.append(session)

        return plan.with_sessions(sessions).with_annotations(
            warnings=[
                f"Weekly load capped at 110% of last week "
                f"({last_week_minutes}min → {max_allowed}min max)"
            ],
            applied_rules=[
                f"WeeklyLoadCap: Scaled durations from {planned_minutes}min to {max_allowed}min"
            ],
        )
