from __future__ import annotations

from .exceptions import (
    ConfigError,
    ConfigValidationError,
    ConfigurationError,
    ConfigIOError,
    RuleViolationError,
)
from .storage import ConfigStorage

__all__ = [
    "ConfigStorage",
    "ConfigError",
    "ConfigValidationError",
    "ConfigurationError",
    "ConfigIOError",
    "RuleViolationError",
]
