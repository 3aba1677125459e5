"""User profile — static template parameters supplied by the profile provider."""

from __future__ import annotations

from dataclasses import dataclass, field

from triathlon_engine.models.enums import SUN_OPTIONAL_SWIM, Weekday


@dataclass(frozen=True)
class UserProfile:
    """Immutable weekly-template parameters for one user.

    ``swim_days`` holds weekday tokens (``"Wed"``, ``"Fri"``) plus the
    ``"Sun_optional"`` sentinel. ``ftp`` and ``no_long_run_day`` are carried
    through for callers; the plan rules do not read them.
    """

    ftp: int = 355  # watts
    timezone: str = "Europe/Prague"
    swim_days: frozenset[str] = field(
        default_factory=lambda: frozenset({"Wed", "Fri", SUN_OPTIONAL_SWIM})
    )
    bike_vo2_day: Weekday = Weekday.THU
    long_bike_day: Weekday = Weekday.SUN
    no_long_run_day: Weekday = Weekday.SUN

    def swims_on(self, weekday: Weekday) -> bool:
        return weekday.token in self.swim_days

    @property
    def wants_optional_sunday_swim(self) -> bool:
        return SUN_OPTIONAL_SWIM in self.swim_days


def default_profile() -> UserProfile:
    """Profile assigned to a brand-new user."""
    return UserProfile()


DEFAULT_PROFILE = default_profile()
