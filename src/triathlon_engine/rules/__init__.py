"""Plan adjustment rules, in the order the engine applies them."""

from triathlon_engine.rules.base import PlanRule
from triathlon_engine.rules.safety.no_hard_hard import NoHardHardRule
from triathlon_engine.rules.safety.readiness_downshift import ReadinessDownshiftRule
from triathlon_engine.rules.safety.weekly_load_cap import WeeklyLoadCapRule
from triathlon_engine.rules.structure.swim_rotation import SwimRotationRule

__all__ = [
    "NoHardHardRule",
    "PlanRule",
    "ReadinessDownshiftRule",
    "SwimRotationRule",
    "WeeklyLoadCapRule",
]
