# profilemutex/core/rule_set.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Protocol, Sequence, Tuple

from .exclusion_group import ExclusionGroup

FAILURE_HEADER = "The following Mutually Exclusive Profile Set rule(s) failed:"


class EvaluationObserver(Protocol):
    """Hooks a caller may attach around :meth:`ExclusionRuleSet.evaluate`."""

    def before_evaluate(
        self, rule_set: "ExclusionRuleSet", active_labels: Sequence[str]
    ) -> None:
        ...

    def group_evaluated(self, group: ExclusionGroup, satisfied: bool) -> None:
        ...

    def after_evaluate(self, result: "EvaluationResult") -> None:
        ...


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of evaluating a rule set: satisfied, or violated with diagnostics."""

    violations: Tuple[str, ...] = ()
    active_labels: Tuple[str, ...] = ()

    @classmethod
    def satisfied_result(cls, active_labels: Iterable[str] = ()) -> "EvaluationResult":
        return cls(violations=(), active_labels=tuple(active_labels))

    @classmethod
    def violated(
        cls, violations: Iterable[str], active_labels: Iterable[str] = ()
    ) -> "EvaluationResult":
        violations = tuple(violations)
        if not violations:
            raise ValueError("A violated result needs at least one violation")
        return cls(violations=violations, active_labels=tuple(active_labels))

    @property
    def satisfied(self) -> bool:
        return not self.violations

    def __bool__(self) -> bool:
        return self.satisfied

    def format_message(self) -> str:
        """
        Render the composite failure message.

        Returns:
            The header line, one indented line per violated group and the
            list of active profiles, newline-joined. Empty when satisfied.
        """
        if self.satisfied:
            return ""
        lines = [FAILURE_HEADER]
        lines.extend(f"  {violation}" for violation in self.violations)
        lines.append(f"Profiles Active were: [{', '.join(self.active_labels)}]")
        return "\n".join(lines)


class ExclusionRuleSet:
    """Ordered collection of exclusion groups evaluated together."""

    __slots__ = ("_groups",)

    def __init__(self, groups: Iterable[ExclusionGroup] = ()) -> None:
        self._groups: Tuple[ExclusionGroup, ...] = tuple(groups)

    @property
    def groups(self) -> Tuple[ExclusionGroup, ...]:
        return self._groups

    def __iter__(self) -> Iterator[ExclusionGroup]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def evaluate(
        self,
        active_labels: Iterable[str],
        observer: Optional[EvaluationObserver] = None,
    ) -> EvaluationResult:
        """
        Check every group against the active labels.

        All groups are evaluated even after a failure so that every
        violation is reported at once, in configuration order.

        Args:
            active_labels: Labels active for the current build.
            observer: Optional hooks notified before, during and after
                the evaluation.

        Returns:
            EvaluationResult: Satisfied, or violated with the display text
            of each failing group.
        """
        active = tuple(label.strip() for label in active_labels)
        if observer is not None:
            observer.before_evaluate(self, active)

        violations = []
        for group in self._groups:
            satisfied = group.is_satisfied(active)
            if observer is not None:
                observer.group_evaluated(group, satisfied)
            if not satisfied:
                violations.append(str(group))

        if violations:
            result = EvaluationResult.violated(violations, active)
        else:
            result = EvaluationResult.satisfied_result(active)

        if observer is not None:
            observer.after_evaluate(result)
        return result

    def __repr__(self) -> str:
        return f"ExclusionRuleSet(groups={list(self._groups)!r})"

    def __str__(self) -> str:
        rendered = ", ".join(str(group) for group in self._groups)
        return f"MutuallyExclusiveProfiles[profilesRuleList=[{rendered}]]"


__all__ = [
    "EvaluationObserver",
    "EvaluationResult",
    "ExclusionRuleSet",
    "FAILURE_HEADER",
]
