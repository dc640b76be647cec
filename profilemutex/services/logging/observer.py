import logging
from typing import Optional, Sequence

from profilemutex.core.exclusion_group import ExclusionGroup
from profilemutex.core.rule_set import EvaluationResult, ExclusionRuleSet

logger = logging.getLogger(__name__)


class LoggingObserver:
    """Reports the progress of a rule set evaluation through :mod:`logging`."""

    def __init__(self, log: Optional[logging.Logger] = None) -> None:
        self._log = log or logger
        self._active: Sequence[str] = ()

    def before_evaluate(self, rule_set: ExclusionRuleSet, active_labels: Sequence[str]) -> None:
        self._active = active_labels
        self._log.info("Mutually Exclusive Profiles: %s", rule_set)
        self._log.info("Profiles Active: [%s]", ", ".join(active_labels))

    def group_evaluated(self, group: ExclusionGroup, satisfied: bool) -> None:
        self._log.info("Profile Set: %s", group)
        self._log.debug(
            "  active members: [%s] -> %s",
            ", ".join(group.active_members(self._active)),
            "satisfied" if satisfied else "violated",
        )

    def after_evaluate(self, result: EvaluationResult) -> None:
        if result.satisfied:
            self._log.info("All mutually exclusive profile sets are satisfied")
        else:
            self._log.debug("%d profile set(s) violated", len(result.violations))


__all__ = ["LoggingObserver"]
