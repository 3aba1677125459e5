"""Session shapes — the undated building blocks of the weekly template.

A shape carries everything about a session except its date. The generator
picks one shape per weekday and stamps it with a calendar date.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from triathlon_engine.models.enums import Intensity, Sport, Tag
from triathlon_engine.models.session import Session


@dataclass(frozen=True)
class SessionShape:
    """Template for a single session.

    Attributes:
        sport: Sport performed.
        title: Human-readable label.
        duration_min: Planned duration in minutes (0 only for rest).
        intensity: Target zone.
        notes: Coaching notes shown with the session.
        tags: Semantic tags (technique, intervals, vo2, ...).
    """

    sport: Sport
    title: str
    duration_min: int
    intensity: Intensity
    notes: str = ""
    tags: frozenset[Tag] = field(default_factory=frozenset)

    def on(self, day: date) -> Session:
        """Materialize this shape as a Session dated *day*."""
        return Session(
            date=day,
            sport=self.sport,
            title=self.title,
            duration_min=self.duration_min,
            intensity=self.intensity,
            notes=self.notes,
            tags=self.tags,
        )


# ---------------------------------------------------------------------------
# Template shapes
# ---------------------------------------------------------------------------

REST_DAY = SessionShape(
    sport=Sport.REST,
    title="Rest Day",
    duration_min=0,
    intensity=Intensity.Z1,
)

BIKE_ENDURANCE = SessionShape(
    sport=Sport.BIKE,
    title="Bike Endurance",
    duration_min=60,
    intensity=Intensity.Z2,
    notes="Easy spin, focus on cadence",
)

RUN_INTERVALS = SessionShape(
    sport=Sport.RUN,
    title="Run Intervals",
    duration_min=55,
    intensity=Intensity.Z4,
    notes="Warm up 15min, 5x3min Z4 (2min rest), cool down",
)

SWIM_TECHNIQUE = SessionShape(
    sport=Sport.SWIM,
    title="Swim Technique",
    duration_min=50,
    intensity=Intensity.Z2,
    notes="Drills and technique work",
    tags=frozenset({Tag.TECHNIQUE}),
)

BIKE_VO2 = SessionShape(
    sport=Sport.BIKE,
    title="Bike VO2 Max",
    duration_min=70,
    intensity=Intensity.Z5,
    notes="Warm up 20min, 5x5min Z5 (3min rest), cool down",
    tags=frozenset({Tag.VO2}),
)

BIKE_THRESHOLD = SessionShape(
    sport=Sport.BIKE,
    title="Bike Threshold",
    duration_min=70,
    intensity=Intensity.Z4,
    tags=frozenset({Tag.THRESHOLD}),
)

SWIM_INTERVALS = SessionShape(
    sport=Sport.SWIM,
    title="Swim Intervals",
    duration_min=50,
    intensity=Intensity.Z4,
    notes="10x100m at threshold pace",
    tags=frozenset({Tag.INTERVALS}),
)

RUN_TEMPO = SessionShape(
    sport=Sport.RUN,
    title="Run Tempo",
    duration_min=50,
    intensity=Intensity.Z3,
    notes="Warm up 15min, 20min Z3, cool down",
)

LONG_BIKE = SessionShape(
    sport=Sport.BIKE,
    title="Long Bike",
    duration_min=180,
    intensity=Intensity.Z2,
    notes="Steady endurance ride, nutrition practice",
    tags=frozenset({Tag.LONG}),
)

# Sunday fallback when Sunday is not the long-ride day
SUNDAY_BIKE_ENDURANCE = SessionShape(
    sport=Sport.BIKE,
    title="Bike Endurance",
    duration_min=90,
    intensity=Intensity.Z2,
)

OPTIONAL_RECOVERY_SWIM = SessionShape(
    sport=Sport.SWIM,
    title="Optional Easy Swim",
    duration_min=35,
    intensity=Intensity.Z1,
    notes="Recovery swim after long bike",
    tags=frozenset({Tag.OPTIONAL}),
)
