"""RulesEngine — threads a WeekPlan through the ordered adjustment rules."""

from __future__ import annotations

import logging

from triathlon_engine.models.decision_trace import DecisionTrace, RuleResult, RuleStatus
from triathlon_engine.models.rules_context import RulesContext
from triathlon_engine.models.week_plan import WeekPlan
from triathlon_engine.rules.base import PlanRule
from triathlon_engine.rules.safety.no_hard_hard import NoHardHardRule
from triathlon_engine.rules.safety.readiness_downshift import ReadinessDownshiftRule
from triathlon_engine.rules.safety.weekly_load_cap import WeeklyLoadCapRule
from triathlon_engine.rules.structure.swim_rotation import SwimRotationRule

logger = logging.getLogger(__name__)

# Order is load-bearing: fix swim identity first, react to today's readiness,
# then check consecutive days, and cap volume on the final intensities.
DEFAULT_RULES: tuple[PlanRule, ...] = (
    SwimRotationRule(),
    ReadinessDownshiftRule(),
    NoHardHardRule(),
    WeeklyLoadCapRule(),
)


class RulesEngine:
    """Applies a fixed, ordered sequence of rules to a plan.

    Usage:
        engine = RulesEngine()
        final_plan = engine.apply(draft_plan, context)
        final_plan, trace = engine.apply_with_trace(draft_plan, context)
    """

    def __init__(self) -> None:
        self.rules: tuple[PlanRule, ...] = DEFAULT_RULES

    @property
    def rule_ids(self) -> list[str]:
        return [rule.rule_id for rule in self.rules]

    def apply(self, plan: WeekPlan, context: RulesContext) -> WeekPlan:
        """Reset annotations and fold *plan* through every rule in order."""
        final_plan, _ = self.apply_with_trace(plan, context)
        return final_plan

    def apply_with_trace(
        self, plan: WeekPlan, context: RulesContext
    ) -> tuple[WeekPlan, DecisionTrace]:
        """Apply all rules and record what each one changed.

        Args:
            plan: Draft plan. Any warnings or applied rules it already
                  carries are discarded before the first rule runs.
            context: History and readiness snapshot for this request.

        Returns:
            A tuple of (final WeekPlan, DecisionTrace).
        """
        initial = plan.cleared()
        current = initial
        results: list[RuleResult] = []

        for rule in self.rules:
            before = current
            current = rule.apply(current, context)
            new_warnings = current.warnings[len(before.warnings):]
            new_entries = current.applied_rules[len(before.applied_rules):]
            status = RuleStatus.FIRED if new_entries else RuleStatus.SKIPPED

            if status == RuleStatus.FIRED:
                logger.debug("Rule %s fired: %s", rule.rule_id, "; ".join(new_entries))
            results.append(
                RuleResult(
                    rule_id=rule.rule_id,
                    status=status,
                    priority=rule.priority,
                    warnings=new_warnings,
                    applied_rules=new_entries,
                    plan_after=current,
                )
            )

        trace = DecisionTrace(
            rule_results=tuple(results),
            initial_plan=initial,
            final_plan=current,
        )
        logger.info(
            "Adjusted plan %s..%s: %d sessions, %d min, %d rule(s) fired",
            current.start_date.isoformat(),
            current.end_date.isoformat(),
            len(current.sessions),
            current.total_minutes,
            len(trace.fired_rule_ids),
        )
        return current, trace


def apply_rules(plan: WeekPlan, context: RulesContext) -> WeekPlan:
    """Apply the default rule sequence to *plan*."""
    return RulesEngine().apply(plan, context)
