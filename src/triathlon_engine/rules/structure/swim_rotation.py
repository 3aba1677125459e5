"""STRUCTURE rule: fixed swim rotation.

Wednesday swims are technique sessions and Friday swims are interval
sessions. Runs before any safety or volume rule so those judge the
corrected session identities.
"""

from __future__ import annotations

import dataclasses

from triathlon_engine.models.enums import Intensity, Priority, Sport, Tag, Weekday
from triathlon_engine.models.rules_context import RulesContext
from triathlon_engine.models.session import Session
from triathlon_engine.models.week_plan import WeekPlan
from triathlon_engine.rules.base import PlanRule


class SwimRotationRule(PlanRule):
    """Rewrites mislabeled Wednesday/Friday swims into the rotation."""

    rule_id = "swim_rotation"
    version = "1.0.0"
    priority = Priority.STRUCTURE

    SUMMARY = "SwimRotation: Adjusted swim sessions to match Wed=technique, Fri=intervals"

    def apply(self, plan: WeekPlan, context: RulesContext) -> WeekPlan:
        sessions: list[Session] = []
        modified = False

        for session in plan.sessions:
            rotated = self._rotate(session)
            if rotated is not session:
                modified = True
            sessions.append(rotated)

        if not modified:
            return plan

        return plan.with_sessions(sessions).with_annotations(applied_rules=[self.SUMMARY])

    @staticmethod
    def _rotate(session: Session) -> Session:
        if session.sport != Sport.SWIM:
            return session

        if session.weekday == Weekday.WED and not session.has_tag(Tag.TECHNIQUE):
            return dataclasses.replace(
                session.with_note("Adjusted to technique session"),
                title="Swim Technique",
                tags=frozenset({Tag.TECHNIQUE}),
            )

        if session.weekday == Weekday.FRI and not session.has_tag(Tag.INTERVALS):
            return dataclasses.replace(
                session.with_note("Adjusted to intervals session"),
                title="Swim Intervals",
                tags=frozenset({Tag.INTERVALS}),
                intensity=Intensity.Z4,
            )

        return session
