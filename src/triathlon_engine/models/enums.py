"""Enumerations and planning constants for the triathlon plan engine."""

from __future__ import annotations

from enum import IntEnum, auto


class Priority(IntEnum):
    """Rule classification tiers used in the decision trace.

    Lower value = stricter rule. Ordering of evaluation is NOT derived from
    this value; the engine applies rules in a fixed literal order.
    """

    SAFETY = 0
    VOLUME = 1
    STRUCTURE = 2


class Sport(IntEnum):
    """Closed set of session sports."""

    SWIM = auto()
    BIKE = auto()
    RUN = auto()
    STRENGTH = auto()
    REST = auto()


class Intensity(IntEnum):
    """Ordinal training intensity zones (Z1 easiest, Z5 hardest)."""

    Z1 = 1
    Z2 = 2
    Z3 = 3
    Z4 = 4
    Z5 = 5


class Tag(IntEnum):
    """Session tags that carry meaning for generation and rules."""

    TECHNIQUE = auto()
    INTERVALS = auto()
    VO2 = auto()
    THRESHOLD = auto()
    OPTIONAL = auto()
    LONG = auto()


class Weekday(IntEnum):
    """Day of week, numbered like ``datetime.date.weekday()``."""

    MON = 0
    TUE = 1
    WED = 2
    THU = 3
    FRI = 4
    SAT = 5
    SUN = 6

    @property
    def token(self) -> str:
        """Short weekday token as stored in profiles, e.g. ``"Wed"``."""
        return self.name.capitalize()

    @classmethod
    def from_token(cls, token: str) -> Weekday:
        """Parse a weekday token (``"Wed"``, ``"wed"``, ``"WED"``).

        Raises:
            KeyError: if the token does not name a weekday.
        """
        return cls[token.strip().upper()]


# ---------------------------------------------------------------------------
# Classification and adjustment constants
# ---------------------------------------------------------------------------

HARD_INTENSITIES = frozenset({Intensity.Z4, Intensity.Z5})
HARD_TAGS = frozenset({Tag.VO2, Tag.THRESHOLD})

DOWNGRADE_INTENSITY = Intensity.Z2
DOWNGRADE_TITLE_SUFFIX = " (downgraded to Z2)"

# Profile swim_days sentinel requesting an easy swim after the Sunday ride
SUN_OPTIONAL_SWIM = "Sun_optional"

PLAN_DAYS = 7

# Readiness scale is 1-5; at or below this value hard sessions today are downgraded
READINESS_MIN = 1
READINESS_MAX = 5
READINESS_DOWNSHIFT_MAX = 2
DEFAULT_READINESS = 3

# Weekly load may grow at most 10% over the previous 7 days
WEEKLY_LOAD_CAP_FACTOR = 1.10
MIN_SCALED_DURATION_MIN = 30

# Workout log bounds accepted from the logging command
LOGGABLE_SPORTS = frozenset({Sport.SWIM, Sport.BIKE, Sport.RUN})
MIN_LOG_DURATION_MIN = 1
MAX_LOG_DURATION_MIN = 1440

HISTORY_WINDOW_DAYS = 7
