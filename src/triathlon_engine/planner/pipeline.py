"""Full planning pipeline for one request: draft, optional swim, rules."""

from __future__ import annotations

from datetime import date

from triathlon_engine.engine import RulesEngine
from triathlon_engine.models.profile import UserProfile
from triathlon_engine.models.rules_context import RulesContext
from triathlon_engine.models.week_plan import WeekPlan
from triathlon_engine.planner.generator import add_optional_sunday_swim, generate_draft_plan


def build_week_plan(
    profile: UserProfile,
    start_date: date,
    context: RulesContext,
    engine: RulesEngine | None = None,
) -> WeekPlan:
    """Generate and adjust the 7-day plan starting at *start_date*."""
    plan = generate_draft_plan(profile, start_date)
    plan = add_optional_sunday_swim(plan, profile)
    return (engine or RulesEngine()).apply(plan, context)
