from __future__ import annotations

from typing import Any, Dict, List, Tuple

from jsonschema import Draft202012Validator

from .defaults import CONFIG_SCHEMA
from .exceptions import ConfigValidationError

_validator = Draft202012Validator(CONFIG_SCHEMA)


def _error_sort_key(error: Any) -> List[Tuple[int, int, str]]:
    # Array indices sort numerically and ahead of property names at the same depth.
    return [
        (0, part, "") if isinstance(part, int) else (1, 0, str(part))
        for part in error.path
    ]


def validate_config(data: Dict[str, Any]) -> None:
    """Raise :class:`ConfigValidationError` describing the first schema error."""
    if not isinstance(data, dict):
        raise ConfigValidationError("Configuration root must be a table")
    errors = sorted(_validator.iter_errors(data), key=_error_sort_key)
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.path)
        message = f"{location}: {first.message}" if location else first.message
        raise ConfigValidationError(message)


__all__ = ["_validator", "validate_config"]
