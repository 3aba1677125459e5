"""Aggregate logged workouts and readiness into a RulesContext.

The window is the 7 calendar days before the plan start:
``[start_date - 7 days, start_date)``. Workouts outside it are ignored.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterable

import numpy as np
import pandas as pd

from triathlon_engine.models.enums import DEFAULT_READINESS, HISTORY_WINDOW_DAYS
from triathlon_engine.models.rules_context import (
    DailyMinutes,
    Last7dStats,
    RulesContext,
    TodayFatigue,
)
from triathlon_engine.models.workout_log import FatigueEntry, WorkoutLog
from triathlon_engine.validation import validate_context, validate_workout_log

logger = logging.getLogger(__name__)


def summarize_last7d(workouts: Iterable[WorkoutLog], start_date: date) -> Last7dStats:
    """Sum logged minutes per date over the window preceding *start_date*.

    Args:
        workouts: Logged workouts in any order.
        start_date: First day of the plan; excluded from the window.

    Returns:
        Last7dStats with per-date totals in ascending date order.
    """
    window_start = start_date - timedelta(days=HISTORY_WINDOW_DAYS)
    rows = [
        {"date": w.date, "minutes": w.duration_min}
        for w in workouts
        if window_start <= w.date < start_date
    ]
    if not rows:
        return Last7dStats()

    frame = pd.DataFrame(rows)
    per_day = frame.groupby("date", sort=True)["minutes"].sum().astype(np.int64)
    by_date = tuple(
        DailyMinutes(date=day, minutes=int(minutes)) for day, minutes in per_day.items()
    )
    return Last7dStats(total_minutes=int(per_day.sum()), by_date=by_date)


def today_fatigue(
    entries: Iterable[FatigueEntry], start_date: date
) -> TodayFatigue | None:
    """Readiness report dated *start_date*, if one was logged.

    A stored row without a readiness value counts as a neutral 3/5.
    """
    for entry in entries:
        if entry.date == start_date:
            readiness = entry.readiness if entry.readiness is not None else DEFAULT_READINESS
            return TodayFatigue(readiness=readiness, sleep_score=entry.sleep_score)
    return None


def build_rules_context(
    workouts: Iterable[WorkoutLog],
    start_date: date,
    fatigue: Iterable[FatigueEntry] = (),
) -> RulesContext:
    """Build and validate the rule engine input for a plan starting *start_date*.

    Raises:
        PlanValidationError: if a workout or the readiness report is out of range.
    """
    workouts = list(workouts)
    for workout in workouts:
        validate_workout_log(workout)

    context = RulesContext(
        last7d_stats=summarize_last7d(workouts, start_date),
        today_fatigue=today_fatigue(fatigue, start_date),
    )
    validate_context(context)
    logger.debug(
        "Context for %s: %d min over last 7 days, readiness=%s",
        start_date.isoformat(),
        context.last7d_stats.total_minutes,
        context.today_fatigue.readiness if context.today_fatigue else None,
    )
    return context
