"""Tests for SwimRotationRule — STRUCTURE tier swim rotation."""

from __future__ import annotations

from datetime import date

from triathlon_engine.models.enums import Intensity, Priority, Sport, Tag
from triathlon_engine.models.rules_context import RulesContext
from triathlon_engine.models.session import Session
from triathlon_engine.models.week_plan import WeekPlan
from triathlon_engine.rules.structure.swim_rotation import SwimRotationRule

MONDAY = date(2026, 2, 9)
WEDNESDAY = date(2026, 2, 11)
FRIDAY = date(2026, 2, 13)
SATURDAY = date(2026, 2, 14)


def _swim(on: date, tags: tuple[Tag, ...], intensity: Intensity = Intensity.Z2) -> Session:
    return Session(
        date=on,
        sport=Sport.SWIM,
        title="Swim Workout",
        duration_min=50,
        intensity=intensity,
        tags=frozenset(tags),
    )


class TestSwimRotationRule:
    def setup_method(self) -> None:
        self.rule = SwimRotationRule()
        self.context = RulesContext.empty()

    def test_is_structure_priority(self) -> None:
        assert self.rule.priority == Priority.STRUCTURE

    def test_wednesday_becomes_technique(self) -> None:
        plan = WeekPlan(MONDAY, sessions=(_swim(WEDNESDAY, (Tag.INTERVALS,), Intensity.Z4),))
        result = self.rule.apply(plan, self.context)
        wed = result.sessions[0]
        assert wed.title == "Swim Technique"
        assert wed.tags == frozenset({Tag.TECHNIQUE})
        assert "Adjusted to technique session" in wed.notes
        # technique rewrite does not touch intensity
        assert wed.intensity == Intensity.Z4

    def test_friday_becomes_intervals_at_z4(self) -> None:
        plan = WeekPlan(MONDAY, sessions=(_swim(FRIDAY, (Tag.TECHNIQUE,)),))
        result = self.rule.apply(plan, self.context)
        fri = result.sessions[0]
        assert fri.title == "Swim Intervals"
        assert fri.tags == frozenset({Tag.INTERVALS})
        assert fri.intensity == Intensity.Z4
        assert "Adjusted to intervals session" in fri.notes

    def test_single_summary_entry(self) -> None:
        plan = WeekPlan(
            MONDAY,
            sessions=(_swim(WEDNESDAY, (Tag.INTERVALS,)), _swim(FRIDAY, (Tag.TECHNIQUE,))),
        )
        result = self.rule.apply(plan, self.context)
        assert result.applied_rules == (SwimRotationRule.SUMMARY,)
        assert result.warnings == ()

    def test_correct_plan_unchanged(self) -> None:
        plan = WeekPlan(
            MONDAY,
            sessions=(_swim(WEDNESDAY, (Tag.TECHNIQUE,)), _swim(FRIDAY, (Tag.INTERVALS,))),
        )
        assert self.rule.apply(plan, self.context) is plan

    def test_idempotent(self) -> None:
        plan = WeekPlan(
            MONDAY,
            sessions=(_swim(WEDNESDAY, ()), _swim(FRIDAY, (Tag.OPTIONAL,))),
        )
        once = self.rule.apply(plan, self.context)
        twice = self.rule.apply(once, self.context)
        assert twice == once
        assert twice.applied_rules.count(SwimRotationRule.SUMMARY) == 1

    def test_other_days_and_sports_ignored(self) -> None:
        bike_wed = Session(WEDNESDAY, Sport.BIKE, "Bike", 60, Intensity.Z2)
        swim_sat = _swim(SATURDAY, ())
        plan = WeekPlan(MONDAY, sessions=(bike_wed, swim_sat))
        assert self.rule.apply(plan, self.context) is plan

    def test_keeps_existing_annotations(self) -> None:
        plan = WeekPlan(
            MONDAY,
            sessions=(_swim(WEDNESDAY, ()),),
            warnings=("earlier",),
            applied_rules=("Earlier: entry",),
        )
        result = self.rule.apply(plan, self.context)
        assert result.warnings == ("earlier",)
        assert result.applied_rules == ("Earlier: entry", SwimRotationRule.SUMMARY)
