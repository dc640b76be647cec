# profilemutex/core/exclusion_group.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from profilemutex.config.exceptions import ConfigurationError


def parse_labels(raw: str) -> Tuple[str, ...]:
    """Split a comma-separated label string into trimmed, unique labels.

    Empty tokens are dropped and the first occurrence of a label keeps its
    position, so ``" a, b,,a "`` becomes ``("a", "b")``.
    """
    tokens = (token.strip() for token in raw.split(","))
    return tuple(dict.fromkeys(token for token in tokens if token))


@dataclass(frozen=True)
class ExclusionGroup:
    """A set of labels of which at most one (or exactly one) may be active."""

    members: Tuple[str, ...]
    require_one: bool = False

    def __post_init__(self) -> None:
        # Direct construction gets the same trimming and de-duplication as from_spec.
        labels = (str(member).strip() for member in self.members)
        object.__setattr__(self, "members", tuple(dict.fromkeys(label for label in labels if label)))
        object.__setattr__(self, "require_one", bool(self.require_one))

    @classmethod
    def from_spec(
        cls, raw: str, require_one: bool = False, *, allow_empty: bool = True
    ) -> "ExclusionGroup":
        """
        Build a group from its configuration string.

        Args:
            raw: Comma-separated label names, e.g. ``"dev, staging, prod"``.
            require_one: Require exactly one member to be active instead of
                at most one.
            allow_empty: Accept a specification without any label. Such a
                group can never be violated unless ``require_one`` is set.

        Raises:
            ConfigurationError: If ``raw`` is not a string, or it holds no
                labels and ``allow_empty`` is False.
        """
        if not isinstance(raw, str):
            raise ConfigurationError(
                f"Profile list must be a comma-separated string, got {type(raw).__name__}"
            )
        members = parse_labels(raw)
        if not members and not allow_empty:
            raise ConfigurationError(
                f"Mutually exclusive profile set {raw!r} does not name any profile"
            )
        return cls(members=members, require_one=bool(require_one))

    def count_active(self, active_labels: Iterable[str]) -> int:
        # Occurrences are counted, duplicates in the input are not collapsed.
        members = set(self.members)
        return sum(1 for label in active_labels if label.strip() in members)

    def active_members(self, active_labels: Iterable[str]) -> Tuple[str, ...]:
        active = {label.strip() for label in active_labels}
        return tuple(member for member in self.members if member in active)

    def is_satisfied(self, active_labels: Iterable[str]) -> bool:
        count = self.count_active(active_labels)
        if self.require_one:
            return count == 1
        return count <= 1

    def __str__(self) -> str:
        return (
            f"ExclusionGroup[oneRequired={'true' if self.require_one else 'false'}, "
            f"profileList=[{', '.join(self.members)}]]"
        )


__all__ = ["ExclusionGroup", "parse_labels"]
