"""Mutually exclusive build profile rule."""

from profilemutex.config.exceptions import (
    ConfigError,
    ConfigurationError,
    RuleViolationError,
)
from profilemutex.core import EvaluationResult, ExclusionGroup, ExclusionRuleSet

__version__ = "1.0.0"

__all__ = [
    "ConfigError",
    "ConfigurationError",
    "EvaluationResult",
    "ExclusionGroup",
    "ExclusionRuleSet",
    "RuleViolationError",
    "__version__",
]
