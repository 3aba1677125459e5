"""Tests for draft plan generation and the optional Sunday swim."""

from __future__ import annotations

from datetime import date, timedelta

from triathlon_engine.engine import apply_rules
from triathlon_engine.models.enums import Intensity, Sport, Tag, Weekday
from triathlon_engine.models.profile import UserProfile
from triathlon_engine.models.rules_context import Last7dStats, RulesContext
from triathlon_engine.planner.generator import add_optional_sunday_swim, generate_draft_plan
from triathlon_engine.planner.templates import OPTIONAL_RECOVERY_SWIM

MONDAY = date(2026, 2, 9)
THURSDAY = date(2026, 2, 12)


def _by_weekday(plan) -> dict[Weekday, list]:
    result: dict[Weekday, list] = {}
    for s in plan.sessions:
        result.setdefault(s.weekday, []).append(s)
    return result


class TestGenerateDraftPlan:
    def test_seven_consecutive_days(self, default_user: UserProfile) -> None:
        plan = generate_draft_plan(default_user, MONDAY)
        assert [s.date for s in plan.sessions] == [
            MONDAY + timedelta(days=i) for i in range(7)
        ]

    def test_starts_unannotated(self, default_user: UserProfile) -> None:
        plan = generate_draft_plan(default_user, MONDAY)
        assert plan.start_date == MONDAY
        assert plan.warnings == ()
        assert plan.applied_rules == ()

    def test_default_template(self, default_user: UserProfile) -> None:
        days = _by_weekday(generate_draft_plan(default_user, MONDAY))

        mon = days[Weekday.MON][0]
        assert (mon.sport, mon.duration_min, mon.intensity) == (Sport.BIKE, 60, Intensity.Z2)

        tue = days[Weekday.TUE][0]
        assert (tue.sport, tue.duration_min, tue.intensity) == (Sport.RUN, 55, Intensity.Z4)

        wed = days[Weekday.WED][0]
        assert (wed.sport, wed.duration_min, wed.intensity) == (Sport.SWIM, 50, Intensity.Z2)
        assert wed.tags == frozenset({Tag.TECHNIQUE})

        thu = days[Weekday.THU][0]
        assert (thu.sport, thu.duration_min, thu.intensity) == (Sport.BIKE, 70, Intensity.Z5)
        assert thu.tags == frozenset({Tag.VO2})

        fri = days[Weekday.FRI][0]
        assert (fri.sport, fri.duration_min, fri.intensity) == (Sport.SWIM, 50, Intensity.Z4)
        assert fri.tags == frozenset({Tag.INTERVALS})

        sat = days[Weekday.SAT][0]
        assert (sat.sport, sat.duration_min, sat.intensity) == (Sport.RUN, 50, Intensity.Z3)

        sun = days[Weekday.SUN][0]
        assert (sun.sport, sun.duration_min, sun.intensity) == (Sport.BIKE, 180, Intensity.Z2)
        assert sun.tags == frozenset({Tag.LONG})

    def test_one_session_per_day(self, default_user: UserProfile) -> None:
        plan = generate_draft_plan(default_user, MONDAY)
        assert len({s.date for s in plan.sessions}) == len(plan.sessions) == 7

    def test_no_swim_days_become_rest(self, no_swim_user: UserProfile) -> None:
        days = _by_weekday(generate_draft_plan(no_swim_user, MONDAY))
        for weekday in (Weekday.WED, Weekday.FRI):
            rest = days[weekday][0]
            assert rest.sport == Sport.REST
            assert rest.duration_min == 0
            assert rest.intensity == Intensity.Z1

    def test_threshold_when_thursday_is_not_vo2_day(self, no_swim_user: UserProfile) -> None:
        thu = _by_weekday(generate_draft_plan(no_swim_user, MONDAY))[Weekday.THU][0]
        assert thu.intensity == Intensity.Z4
        assert thu.tags == frozenset({Tag.THRESHOLD})
        assert thu.duration_min == 70

    def test_vo2_day_elsewhere_does_not_move_session(self, no_swim_user: UserProfile) -> None:
        # bike_vo2_day=Tue does not turn Tuesday into a bike session
        tue = _by_weekday(generate_draft_plan(no_swim_user, MONDAY))[Weekday.TUE][0]
        assert tue.sport == Sport.RUN

    def test_sunday_endurance_when_not_long_day(self, no_swim_user: UserProfile) -> None:
        sun = _by_weekday(generate_draft_plan(no_swim_user, MONDAY))[Weekday.SUN][0]
        assert sun.duration_min == 90
        assert Tag.LONG not in sun.tags

    def test_template_follows_weekday_not_start_date(self, default_user: UserProfile) -> None:
        plan = generate_draft_plan(default_user, THURSDAY)
        assert plan.sessions[0].weekday == Weekday.THU
        assert plan.sessions[0].tags == frozenset({Tag.VO2})
        assert plan.sessions[-1].weekday == Weekday.WED
        assert plan.sessions[-1].sport == Sport.SWIM

    def test_deterministic(self, default_user: UserProfile) -> None:
        assert generate_draft_plan(default_user, MONDAY) == generate_draft_plan(
            default_user, MONDAY
        )


class TestAddOptionalSundaySwim:
    def test_adds_recovery_swim_on_sunday(self, default_user: UserProfile) -> None:
        plan = add_optional_sunday_swim(generate_draft_plan(default_user, MONDAY), default_user)
        sunday = plan.sessions_on(date(2026, 2, 15))
        assert len(sunday) == 2
        swim = sunday[1]
        assert swim.sport == Sport.SWIM
        assert swim.duration_min == 35
        assert swim.intensity == Intensity.Z1
        assert swim.tags == frozenset({Tag.OPTIONAL})
        assert "Recovery swim" in swim.notes

    def test_keeps_date_order_mid_week_start(self, default_user: UserProfile) -> None:
        plan = add_optional_sunday_swim(
            generate_draft_plan(default_user, THURSDAY), default_user
        )
        dates = [s.date for s in plan.sessions]
        assert dates == sorted(dates)
        assert len(plan.sessions) == 8

    def test_noop_without_sentinel(self) -> None:
        profile = UserProfile(swim_days=frozenset({"Wed", "Fri"}))
        draft = generate_draft_plan(profile, MONDAY)
        assert add_optional_sunday_swim(draft, profile) is draft

    def test_noop_without_sunday_session(self, default_user: UserProfile, plan_factory) -> None:
        empty = plan_factory()
        assert add_optional_sunday_swim(empty, default_user) is empty

    def test_adjusted_plan_matches_appended_swim(self, default_user: UserProfile) -> None:
        context = RulesContext(last7d_stats=Last7dStats(total_minutes=400))
        for start in (MONDAY, THURSDAY):
            draft = generate_draft_plan(default_user, start)
            sunday = next(s.date for s in draft.sessions if s.weekday == Weekday.SUN)
            appended = draft.with_sessions(
                draft.sessions + (OPTIONAL_RECOVERY_SWIM.on(sunday),)
            )
            inserted = add_optional_sunday_swim(draft, default_user)
            assert apply_rules(inserted, context) == apply_rules(appended, context)
