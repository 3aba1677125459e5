"""Plan generation: weekly template expansion and the full planning pipeline."""

from triathlon_engine.planner.generator import add_optional_sunday_swim, generate_draft_plan
from triathlon_engine.planner.pipeline import build_week_plan

__all__ = ["add_optional_sunday_swim", "build_week_plan", "generate_draft_plan"]
