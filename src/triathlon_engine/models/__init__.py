"""Data models for the triathlon plan engine."""

from triathlon_engine.models.decision_trace import DecisionTrace, RuleResult, RuleStatus
from triathlon_engine.models.enums import (
    Intensity,
    Priority,
    Sport,
    Tag,
    Weekday,
)
from triathlon_engine.models.profile import DEFAULT_PROFILE, UserProfile, default_profile
from triathlon_engine.models.rules_context import (
    DailyMinutes,
    Last7dStats,
    RulesContext,
    TodayFatigue,
)
from triathlon_engine.models.session import Session
from triathlon_engine.models.week_plan import WeekPlan
from triathlon_engine.models.workout_log import FatigueEntry, WorkoutLog

__all__ = [
    "DEFAULT_PROFILE",
    "DailyMinutes",
    "DecisionTrace",
    "FatigueEntry",
    "Intensity",
    "Last7dStats",
    "Priority",
    "RuleResult",
    "RuleStatus",
    "RulesContext",
    "Session",
    "Sport",
    "Tag",
    "TodayFatigue",
    "UserProfile",
    "WeekPlan",
    "Weekday",
    "WorkoutLog",
    "default_profile",
]
