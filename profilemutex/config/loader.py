from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from profilemutex.core.exclusion_group import ExclusionGroup
from profilemutex.core.rule_set import ExclusionRuleSet

from .exceptions import ConfigurationError
from .storage import ConfigStorage
from .validation import validate_config

logger = logging.getLogger(__name__)


def rule_set_from_dict(
    data: Dict[str, Any], reject_empty_groups: Optional[bool] = None
) -> ExclusionRuleSet:
    """
    Build a rule set from an already parsed configuration mapping.

    Args:
        data: Configuration mapping with a ``groups`` array.
        reject_empty_groups: Overrides ``rules.reject_empty_groups`` when
            not None.

    Raises:
        ConfigValidationError: If the mapping does not match the schema.
        ConfigurationError: If a group names no profile while empty
            groups are rejected.
    """
    validate_config(data)

    if reject_empty_groups is None:
        reject_empty_groups = bool(
            data.get("rules", {}).get("reject_empty_groups", True)
        )

    groups: List[ExclusionGroup] = []
    for index, entry in enumerate(data["groups"]):
        try:
            group = ExclusionGroup.from_spec(
                entry["profiles"],
                entry.get("require_one", False),
                allow_empty=not reject_empty_groups,
            )
        except ConfigurationError as exc:
            raise ConfigurationError(f"groups.{index}: {exc}") from exc
        if not group.members:
            logger.warning(
                "Profile set groups.%d is empty and will never be violated", index
            )
        groups.append(group)
    return ExclusionRuleSet(groups)


class RuleConfigLoader:
    """Loads and validates rule configuration files."""

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        reject_empty_groups: Optional[bool] = None,
    ) -> None:
        self.storage = ConfigStorage(path)
        self._reject_empty_groups = reject_empty_groups

    @property
    def config_path(self) -> Path:
        return self.storage.path

    def load(self) -> ExclusionRuleSet:
        logger.debug("Loading profile rules from %s", self.storage.path)
        data = self.storage.read_config()
        rule_set = rule_set_from_dict(data, self._reject_empty_groups)
        logger.debug(
            "Loaded %d mutually exclusive profile set(s) from %s",
            len(rule_set),
            self.storage.path,
        )
        return rule_set


__all__ = ["RuleConfigLoader", "rule_set_from_dict"]
