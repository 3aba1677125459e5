"""History aggregation — turns logged workouts into a RulesContext."""

from triathlon_engine.history.context_builder import (
    build_rules_context,
    summarize_last7d,
    today_fatigue,
)

__all__ = ["build_rules_context", "summarize_last7d", "today_fatigue"]
