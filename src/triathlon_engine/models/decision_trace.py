"""Decision trace — audit trail of how each rule changed the plan."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import auto, IntEnum

from triathlon_engine.models.enums import Priority
from triathlon_engine.models.week_plan import WeekPlan


class RuleStatus(IntEnum):
    """Whether a rule changed the plan."""

    FIRED = auto()
    SKIPPED = auto()


@dataclass(frozen=True)
class RuleResult:
    """Record of a single rule application during an engine call."""

    rule_id: str
    status: RuleStatus
    priority: Priority
    warnings: tuple[str, ...] = field(default_factory=tuple)
    applied_rules: tuple[str, ...] = field(default_factory=tuple)
    plan_after: WeekPlan | None = None


@dataclass(frozen=True)
class DecisionTrace:
    """Complete audit trail for a single ``RulesEngine.apply_with_trace`` call.

    Keeps the plan as it was before the first rule and after every rule so
    callers can diff any step.
    """

    rule_results: tuple[RuleResult, ...] = field(default_factory=tuple)
    initial_plan: WeekPlan | None = None
    final_plan: WeekPlan | None = None

    @property
    def fired_rule_ids(self) -> list[str]:
        return [r.rule_id for r in self.rule_results if r.status == RuleStatus.FIRED]
