"""JSON-compatible dict conversion for plans, profiles and history.

Enum members are written as lower-case names (``"swim"``, ``"z4"``,
``"vo2"``) and dates as ISO strings. Parsers validate what they read and
raise ``PlanValidationError`` on malformed input.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
from datetime import date
from enum import IntEnum
from typing import Any, TypeVar

from triathlon_engine.exceptions import PlanValidationError, ProfileError
from triathlon_engine.models.enums import Intensity, Sport, Tag, Weekday
from triathlon_engine.models.profile import UserProfile
from triathlon_engine.models.rules_context import (
    DailyMinutes,
    Last7dStats,
    RulesContext,
    TodayFatigue,
)
from triathlon_engine.models.session import Session
from triathlon_engine.models.week_plan import WeekPlan
from triathlon_engine.models.workout_log import FatigueEntry, WorkoutLog
from triathlon_engine.validation import (
    validate_context,
    validate_plan,
    validate_profile,
    validate_session,
    validate_workout_log,
)

_E = TypeVar("_E", bound=IntEnum)


def _enum_name(member: IntEnum) -> str:
    return member.name.lower()


def _parse_enum(enum_cls: type[_E], raw: Any, field: str) -> _E:
    try:
        return enum_cls[str(raw).strip().upper()]
    except KeyError:
        allowed = ", ".join(_enum_name(m) for m in enum_cls)
        raise PlanValidationError(
            f"{field} must be one of: {allowed}, got {raw!r}", field=field
        ) from None


def _parse_date(raw: Any, field: str) -> date:
    if isinstance(raw, date):
        return raw
    try:
        return date.fromisoformat(str(raw))
    except ValueError:
        raise PlanValidationError(
            f"{field} must be an ISO date (YYYY-MM-DD), got {raw!r}", field=field
        ) from None


def _parse_int(raw: Any, field: str) -> int:
    if isinstance(raw, bool):
        raise PlanValidationError(f"{field} must be an integer, got {raw!r}", field=field)
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise PlanValidationError(
            f"{field} must be an integer, got {raw!r}", field=field
        ) from None


def _parse_float(raw: Any, field: str) -> float:
    if isinstance(raw, bool):
        raise PlanValidationError(f"{field} must be a number, got {raw!r}", field=field)
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise PlanValidationError(
            f"{field} must be a number, got {raw!r}", field=field
        ) from None


def as_json_object(raw: Any, field: str) -> dict:
    if not isinstance(raw, dict):
        raise PlanValidationError(
            f"{field} must be a JSON object, got {type(raw).__name__}", field=field
        )
    return raw


def as_json_list(raw: Any, field: str) -> list:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise PlanValidationError(
            f"{field} must be a JSON list, got {type(raw).__name__}", field=field
        )
    return raw


def _require(data: dict, key: str) -> Any:
    if key not in data:
        raise PlanValidationError(f"Missing required field {key!r}", field=key)
    return data[key]


# ---------------------------------------------------------------------------
# Sessions and plans
# ---------------------------------------------------------------------------


def session_to_dict(session: Session) -> dict:
    return {
        "date": session.date.isoformat(),
        "sport": _enum_name(session.sport),
        "title": session.title,
        "duration_min": session.duration_min,
        "intensity": _enum_name(session.intensity),
        "notes": session.notes,
        "tags": [_enum_name(t) for t in sorted(session.tags)],
    }


def session_from_dict(data: dict) -> Session:
    data = as_json_object(data, "session")
    session = Session(
        date=_parse_date(_require(data, "date"), "date"),
        sport=_parse_enum(Sport, _require(data, "sport"), "sport"),
        title=str(_require(data, "title")),
        duration_min=_parse_int(_require(data, "duration_min"), "duration_min"),
        intensity=_parse_enum(Intensity, _require(data, "intensity"), "intensity"),
        notes=str(data.get("notes") or ""),
        tags=frozenset(_parse_enum(Tag, t, "tags") for t in data.get("tags") or ()),
    )
    validate_session(session)
    return session


def plan_to_dict(plan: WeekPlan) -> dict:
    """Convert a WeekPlan to a JSON-serializable dict."""
    return {
        "start_date": plan.start_date.isoformat(),
        "total_minutes": plan.total_minutes,
        "sessions": [session_to_dict(s) for s in plan.sessions],
        "warnings": list(plan.warnings),
        "applied_rules": list(plan.applied_rules),
    }


def plan_to_json_string(plan: WeekPlan, indent: int = 2) -> str:
    """Convert a WeekPlan to a formatted JSON string."""
    return json.dumps(plan_to_dict(plan), indent=indent, ensure_ascii=False)


def plan_from_dict(data: dict) -> WeekPlan:
    data = as_json_object(data, "plan")
    plan = WeekPlan(
        start_date=_parse_date(_require(data, "start_date"), "start_date"),
        sessions=tuple(session_from_dict(s) for s in as_json_list(data.get("sessions"), "sessions")),
        warnings=tuple(str(w) for w in data.get("warnings") or ()),
        applied_rules=tuple(str(r) for r in data.get("applied_rules") or ()),
    )
    validate_plan(plan)
    return plan


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


def _parse_weekday(raw: Any, field: str) -> Weekday:
    try:
        return Weekday.from_token(str(raw))
    except KeyError:
        raise ProfileError(f"{field} must be a weekday token, got {raw!r}", field=field) from None


def profile_to_dict(profile: UserProfile) -> dict:
    order = {d.token: d.value for d in Weekday}
    return {
        "ftp": profile.ftp,
        "timezone": profile.timezone,
        "swim_days": sorted(profile.swim_days, key=lambda t: (order.get(t, 7), t)),
        "bike_vo2_day": profile.bike_vo2_day.token,
        "long_bike_day": profile.long_bike_day.token,
        "no_long_run_day": profile.no_long_run_day.token,
    }


def profile_from_dict(data: dict) -> UserProfile:
    """Build a UserProfile; missing keys fall back to the default profile."""
    if not isinstance(data, dict):
        raise ProfileError("profile must be a JSON object", field="profile")
    defaults = UserProfile()
    swim_days = data.get("swim_days")
    if swim_days is not None and (
        not isinstance(swim_days, (list, tuple))
        or not all(isinstance(t, str) for t in swim_days)
    ):
        raise ProfileError("swim_days must be a list of weekday tokens", field="swim_days")

    profile = UserProfile(
        ftp=_parse_int(data.get("ftp", defaults.ftp), "ftp"),
        timezone=str(data.get("timezone", defaults.timezone)),
        swim_days=frozenset(swim_days) if swim_days is not None else defaults.swim_days,
        bike_vo2_day=_parse_weekday(
            data.get("bike_vo2_day", defaults.bike_vo2_day.token), "bike_vo2_day"
        ),
        long_bike_day=_parse_weekday(
            data.get("long_bike_day", defaults.long_bike_day.token), "long_bike_day"
        ),
        no_long_run_day=_parse_weekday(
            data.get("no_long_run_day", defaults.no_long_run_day.token), "no_long_run_day"
        ),
    )
    validate_profile(profile)
    return profile


# ---------------------------------------------------------------------------
# History
# ---------------------------------------------------------------------------


def workout_log_from_dict(data: dict) -> WorkoutLog:
    data = as_json_object(data, "workout")
    raw_intensity = data.get("intensity")
    workout = WorkoutLog(
        date=_parse_date(_require(data, "date"), "date"),
        sport=_parse_enum(Sport, _require(data, "sport"), "sport"),
        duration_min=_parse_int(_require(data, "duration_min"), "duration_min"),
        intensity=(
            _parse_enum(Intensity, raw_intensity, "intensity")
            if raw_intensity is not None
            else None
        ),
    )
    validate_workout_log(workout)
    return workout


def fatigue_entry_from_dict(data: dict) -> FatigueEntry:
    data = as_json_object(data, "fatigue")
    readiness = data.get("readiness")
    sleep_score = data.get("sleep_score")
    return FatigueEntry(
        date=_parse_date(_require(data, "date"), "date"),
        readiness=_parse_int(readiness, "readiness") if readiness is not None else None,
        sleep_score=(
            _parse_float(sleep_score, "sleep_score") if sleep_score is not None else None
        ),
    )


def context_to_dict(context: RulesContext) -> dict:
    fatigue = context.today_fatigue
    return {
        "last7d_stats": {
            "total_minutes": context.last7d_stats.total_minutes,
            "by_date": [
                {"date": d.date.isoformat(), "minutes": d.minutes}
                for d in context.last7d_stats.by_date
            ],
        },
        "today_fatigue": (
            {"readiness": fatigue.readiness, "sleep_score": fatigue.sleep_score}
            if fatigue is not None
            else None
        ),
    }


def context_from_dict(data: dict) -> RulesContext:
    """Build a RulesContext from pre-aggregated stats."""
    data = as_json_object(data, "context")
    stats = as_json_object(data.get("last7d_stats") or {}, "last7d_stats")
    by_date = [as_json_object(d, "by_date") for d in as_json_list(stats.get("by_date"), "by_date")]
    fatigue = data.get("today_fatigue")
    if fatigue is not None:
        fatigue = as_json_object(fatigue, "today_fatigue")
    context = RulesContext(
        last7d_stats=Last7dStats(
            total_minutes=_parse_int(stats.get("total_minutes", 0), "total_minutes"),
            by_date=tuple(
                DailyMinutes(
                    date=_parse_date(_require(d, "date"), "date"),
                    minutes=_parse_int(_require(d, "minutes"), "minutes"),
                )
                for d in by_date
            ),
        ),
        today_fatigue=(
            TodayFatigue(
                readiness=_parse_int(_require(fatigue, "readiness"), "readiness"),
                sleep_score=(
                    _parse_float(fatigue["sleep_score"], "sleep_score")
                    if fatigue.get("sleep_score") is not None
                    else None
                ),
            )
            if fatigue
            else None
        ),
    )
    validate_context(context)
    return context
