"""Logged history records supplied by the persistence layer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from triathlon_engine.models.enums import Intensity, Sport


@dataclass(frozen=True)
class WorkoutLog:
    """One completed workout as logged by the user."""

    date: date
    sport: Sport
    duration_min: int
    intensity: Intensity | None = None


@dataclass(frozen=True)
class FatigueEntry:
    """Daily readiness report. ``readiness`` may be missing in stored rows."""

    date: date
    readiness: int | None = None
    sleep_score: float | None = None
