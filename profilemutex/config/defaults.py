from __future__ import annotations

from typing import Any, Dict

from .compat import tomllib

DEFAULT_CONFIG_TOML = """\
# Version tracking for migrations
config_version = "1.0"

[rules]
# Reject profile sets that do not name any profile
reject_empty_groups = true

# Each [[groups]] entry is one mutually exclusive profile set.
# require_one = true demands exactly one active profile, otherwise at most one.
[[groups]]
profiles = "dev, staging, prod"
require_one = true

[[groups]]
profiles = "postgres, mysql, sqlite"
require_one = false
"""

DEFAULT_CONFIG: Dict[str, Any] = tomllib.loads(DEFAULT_CONFIG_TOML)

CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "config_version": {"type": "string"},
        "rules": {
            "type": "object",
            "properties": {
                "reject_empty_groups": {"type": "boolean"},
            },
            "additionalProperties": True,
        },
        "groups": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "profiles": {"type": "string"},
                    "require_one": {"type": "boolean"},
                },
                "required": ["profiles"],
                "additionalProperties": False,
            },
        },
    },
    "required": ["groups"],
    "additionalProperties": True,
}

__all__ = ["DEFAULT_CONFIG_TOML", "DEFAULT_CONFIG", "CONFIG_SCHEMA"]
