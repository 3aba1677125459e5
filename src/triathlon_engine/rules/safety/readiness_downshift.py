"""SAFETY rule: downshift today's hard sessions on low readiness.

A readiness score of 2/5 or lower eases every hard session dated on the
plan start date to Z2. Sessions on any other date are left alone.
"""

from __future__ import annotations

from triathlon_engine.classifier import downgrade, is_hard
from triathlon_engine.models.enums import READINESS_DOWNSHIFT_MAX, Priority
from triathlon_engine.models.rules_context import RulesContext
from triathlon_engine.models.week_plan import WeekPlan
from triathlon_engine.rules.base import PlanRule


class ReadinessDownshiftRule(PlanRule):
    """Downgrades hard sessions on the start date when readiness is low."""

    rule_id = "readiness_downshift"
    version = "1.0.0"
    priority = Priority.SAFETY

    SUMMARY = "ReadinessDownshift: Downgraded hard sessions due to low readiness"

    def apply(self, plan: WeekPlan, context: RulesContext) -> WeekPlan:
        fatigue = context.today_fatigue
        if fatigue is None or fatigue.readiness > READINESS_DOWNSHIFT_MAX:
            return plan

        if not any(is_hard(s) for s in plan.sessions_on(plan.start_date)):
            return plan

        readiness = fatigue.readiness
        sessions = [
            downgrade(s, f"Low readiness ({readiness}/5)")
            if s.date == plan.start_date and is_hard(s)
            else s
            for s in plan.sessions
        ]

        return plan.with_sessions(sessions).with_annotations(
            warnings=[
                f"Low readiness detected ({readiness}/5). Hard sessions downgraded to Z2."
            ],
            applied_rules=[self.SUMMARY],
        )
