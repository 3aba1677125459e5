"""Abstract base class for plan adjustment rules."""

from __future__ import annotations

from abc import ABC, abstractmethod

from triathlon_engine.models.enums import Priority
from triathlon_engine.models.rules_context import RulesContext
from triathlon_engine.models.week_plan import WeekPlan


class PlanRule(ABC):
    """Base class for all rules applied by the RulesEngine.

    Each rule encapsulates one adjustment policy. A rule is a pure
    transformation: it receives a WeekPlan and returns a new one, possibly
    appending warnings and applied-rule entries, never removing entries
    added by earlier rules.

    Subclasses must define:
        rule_id: unique identifier (e.g. "no_hard_hard")
        version: semantic version string
        priority: Priority tier (SAFETY, VOLUME, STRUCTURE)
        apply(): the rule's transformation
    """

    rule_id: str
    version: str
    priority: Priority

    @abstractmethod
    def apply(self, plan: WeekPlan, context: RulesContext) -> WeekPlan:
        """Apply this rule to *plan*.

        Returns *plan* itself when nothing changes, otherwise a new WeekPlan.
        """
        ...

    def __call__(self, plan: WeekPlan, context: RulesContext) -> WeekPlan:
        return self.apply(plan, context)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rule_id={self.rule_id!r}, version={self.version!r})"
