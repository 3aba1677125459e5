"""Triathlon weekly plan engine: template expansion and rule-based adjustment."""

from triathlon_engine.engine import RulesEngine, apply_rules
from triathlon_engine.planner import (
    add_optional_sunday_swim,
    build_week_plan,
    generate_draft_plan,
)

__all__ = [
    "RulesEngine",
    "add_optional_sunday_swim",
    "apply_rules",
    "build_week_plan",
    "generate_draft_plan",
]
