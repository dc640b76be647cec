from __future__ import annotations

from .exclusion_group import ExclusionGroup, parse_labels
from .rule_set import EvaluationObserver, EvaluationResult, ExclusionRuleSet

__all__ = [
    "ExclusionGroup",
    "ExclusionRuleSet",
    "EvaluationObserver",
    "EvaluationResult",
    "parse_labels",
]
