from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from profilemutex.core.rule_set import EvaluationResult


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Raised when configuration validation fails."""


class ConfigurationError(ConfigValidationError):
    """Raised when a mutually exclusive profile set names no profile."""


class ConfigIOError(ConfigError):
    """Raised when configuration read/write fails."""


class RuleViolationError(Exception):
    """Raised by the enforcing caller when a rule set is violated."""

    def __init__(self, result: "EvaluationResult") -> None:
        super().__init__(result.format_message())
        self.result = result


__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "ConfigurationError",
    "ConfigIOError",
    "RuleViolationError",
]
