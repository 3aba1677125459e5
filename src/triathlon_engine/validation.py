"""Precondition checks for data entering the engine.

The plan rules assume well-formed input. These validators are run at the
caller-facing boundary (loaders, history aggregation, the runner) and fail
fast with ``PlanValidationError`` instead of clamping values.
"""

from __future__ import annotations

from triathlon_engine.exceptions import PlanValidationError, ProfileError
from triathlon_engine.models.enums import (
    LOGGABLE_SPORTS,
    MAX_LOG_DURATION_MIN,
    MIN_LOG_DURATION_MIN,
    READINESS_MAX,
    READINESS_MIN,
    SUN_OPTIONAL_SWIM,
    Weekday,
)
from triathlon_engine.models.profile import UserProfile
from triathlon_engine.models.rules_context import RulesContext
from triathlon_engine.models.session import Session
from triathlon_engine.models.week_plan import WeekPlan
from triathlon_engine.models.workout_log import WorkoutLog

_VALID_SWIM_TOKENS = frozenset(d.token for d in Weekday) | {SUN_OPTIONAL_SWIM}

# Bounds accepted by the FTP setting command
MIN_FTP = 50
MAX_FTP = 600


def validate_readiness(readiness: int) -> None:
    if isinstance(readiness, bool) or not isinstance(readiness, int):
        raise PlanValidationError(
            f"readiness must be an integer, got {readiness!r}", field="readiness"
        )
    if not READINESS_MIN <= readiness <= READINESS_MAX:
        raise PlanValidationError(
            f"readiness must be between {READINESS_MIN} and {READINESS_MAX}, got {readiness}",
            field="readiness",
        )


def validate_profile(profile: UserProfile) -> None:
    """Reject profiles with unknown swim-day tokens or an out-of-range FTP."""
    if not MIN_FTP <= profile.ftp <= MAX_FTP:
        raise ProfileError(
            f"FTP must be between {MIN_FTP} and {MAX_FTP}, got {profile.ftp}", field="ftp"
        )
    unknown = sorted(set(profile.swim_days) - _VALID_SWIM_TOKENS)
    if unknown:
        raise ProfileError(f"Unknown swim day token(s): {unknown}", field="swim_days")
    for name in ("bike_vo2_day", "long_bike_day", "no_long_run_day"):
        if not isinstance(getattr(profile, name), Weekday):
            raise ProfileError(f"{name} must be a Weekday", field=name)


def validate_context(context: RulesContext) -> None:
    stats = context.last7d_stats
    if stats.total_minutes < 0:
        raise PlanValidationError(
            f"last-7-day total must be non-negative, got {stats.total_minutes}",
            field="last7d_stats.total_minutes",
        )
    for day in stats.by_date:
        if day.minutes < 0:
            raise PlanValidationError(
                f"minutes for {day.date.isoformat()} must be non-negative",
                field="last7d_stats.by_date",
            )
    if context.today_fatigue is not None:
        validate_readiness(context.today_fatigue.readiness)


def validate_session(session: Session) -> None:
    if session.duration_min < 0:
        raise PlanValidationError(
            f"{session.title!r} has negative duration {session.duration_min}",
            field="duration_min",
        )
    if session.duration_min == 0 and not session.is_rest:
        raise PlanValidationError(
            f"{session.title!r} has zero duration but is not a rest session",
            field="duration_min",
        )


def validate_plan(plan: WeekPlan) -> None:
    """Check durations and that sessions are in ascending date order."""
    previous = None
    for session in plan.sessions:
        validate_session(session)
        if previous is not None and session.date < previous:
            raise PlanValidationError(
                "sessions must be ordered by date ascending", field="sessions"
            )
        previous = session.date


def validate_workout_log(workout: WorkoutLog) -> None:
    if workout.sport not in LOGGABLE_SPORTS:
        allowed = ", ".join(s.name.lower() for s in sorted(LOGGABLE_SPORTS))
        raise PlanValidationError(f"Sport must be one of: {allowed}", field="sport")
    if not MIN_LOG_DURATION_MIN <= workout.duration_min <= MAX_LOG_DURATION_MIN:
        raise PlanValidationError(
            f"Duration must be between {MIN_LOG_DURATION_MIN} and "
            f"{MAX_LOG_DURATION_MIN} minutes",
            field="duration_min",
        )
