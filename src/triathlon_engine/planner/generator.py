"""Draft plan generation from the fixed weekday template.

Template:
    Mon  bike endurance Z2 60m
    Tue  run intervals Z4 55m
    Wed  swim technique Z2 50m (rest if Wed is not a swim day)
    Thu  bike 70m: VO2 Z5 on the VO2 day, threshold Z4 otherwise
    Fri  swim intervals Z4 50m (rest if Fri is not a swim day)
    Sat  run tempo Z3 50m
    Sun  long bike Z2 180m on the long-ride day, else endurance Z2 90m
         + optional easy swim Z1 35m when the profile asks for it
"""

from __future__ import annotations

from datetime import date, timedelta

from triathlon_engine.models.enums import PLAN_DAYS, Weekday
from triathlon_engine.models.profile import UserProfile
from triathlon_engine.models.session import Session
from triathlon_engine.models.week_plan import WeekPlan
from triathlon_engine.planner.templates import (
    BIKE_ENDURANCE,
    BIKE_THRESHOLD,
    BIKE_VO2,
    LONG_BIKE,
    OPTIONAL_RECOVERY_SWIM,
    REST_DAY,
    RUN_INTERVALS,
    RUN_TEMPO,
    SUNDAY_BIKE_ENDURANCE,
    SWIM_INTERVALS,
    SWIM_TECHNIQUE,
    SessionShape,
)


def _shape_for_day(weekday: Weekday, profile: UserProfile) -> SessionShape:
    """Pick the template shape for *weekday* given the profile's day roles."""
    if weekday == Weekday.MON:
        return BIKE_ENDURANCE
    if weekday == Weekday.TUE:
        return RUN_INTERVALS
    if weekday == Weekday.WED:
        return SWIM_TECHNIQUE if profile.swims_on(Weekday.WED) else REST_DAY
    if weekday == Weekday.THU:
        return BIKE_VO2 if profile.bike_vo2_day == Weekday.THU else BIKE_THRESHOLD
    if weekday == Weekday.FRI:
        return SWIM_INTERVALS if profile.swims_on(Weekday.FRI) else REST_DAY
    if weekday == Weekday.SAT:
        return RUN_TEMPO
    if weekday == Weekday.SUN:
        return LONG_BIKE if profile.long_bike_day == Weekday.SUN else SUNDAY_BIKE_ENDURANCE
    raise ValueError(f"Unhandled weekday: {weekday!r}")


def generate_draft_plan(profile: UserProfile, start_date: date) -> WeekPlan:
    """Expand the weekly template into one session per day for 7 days.

    Weekday roles in the profile are matched by weekday, so any calendar
    week follows the same template regardless of ``start_date``.

    Args:
        profile: The user's template parameters.
        start_date: First day of the plan window.

    Returns:
        A WeekPlan with 7 sessions and no warnings or applied rules.
    """
    sessions: list[Session] = []
    for offset in range(PLAN_DAYS):
        day = start_date + timedelta(days=offset)
        shape = _shape_for_day(Weekday(day.weekday()), profile)
        sessions.append(shape.on(day))

    return WeekPlan(start_date=start_date, sessions=tuple(sessions))


def add_optional_sunday_swim(plan: WeekPlan, profile: UserProfile) -> WeekPlan:
    """Add an easy recovery swim beside the Sunday session when requested.

    Rather than being appended at the end of the session list, the swim is
    inserted right after the first Sunday session so the plan stays in date
    order. The adjusted plan is the same either way, since the rule engine
    walks sessions sorted by date. Returns *plan* unchanged when the profile
    does not carry the ``Sun_optional`` sentinel or the plan has no Sunday
    session.
    """
    if not profile.wants_optional_sunday_swim:
        return plan

    sessions = list(plan.sessions)
    for idx, session in enumerate(sessions):
        if session.weekday == Weekday.SUN:
            sessions.insert(idx + 1, OPTIONAL_RECOVERY_SWIM.on(session.date))
            return plan.with_sessions(sessions)

    return plan
