from typing import List, Sequence

import pytest

from profilemutex.core.exclusion_group import ExclusionGroup
from profilemutex.core.rule_set import (
    FAILURE_HEADER,
    EvaluationResult,
    ExclusionRuleSet,
)


@pytest.fixture
def rule_set() -> ExclusionRuleSet:
    return ExclusionRuleSet(
        [
            ExclusionGroup.from_spec("dev, staging, prod", True),
            ExclusionGroup.from_spec("postgres, mysql"),
            ExclusionGroup.from_spec("prod, debug"),
        ]
    )


class RecordingObserver:
    def __init__(self) -> None:
        self.calls: List[str] = []

    def before_evaluate(self, rule_set: ExclusionRuleSet, active_labels: Sequence[str]) -> None:
        self.calls.append(f"before:{len(rule_set)}:{','.join(active_labels)}")

    def group_evaluated(self, group: ExclusionGroup, satisfied: bool) -> None:
        self.calls.append(f"group:{group.members[0]}:{satisfied}")

    def after_evaluate(self, result: EvaluationResult) -> None:
        self.calls.append(f"after:{result.satisfied}")


def test_satisfied_rule_set(rule_set: ExclusionRuleSet):
    result = rule_set.evaluate(["dev", "postgres"])
    assert result.satisfied
    assert bool(result) is True
    assert result.violations == ()
    assert result.format_message() == ""


def test_empty_rule_set_is_always_satisfied():
    assert ExclusionRuleSet().evaluate(["anything"]).satisfied


def test_all_violations_are_reported_in_configuration_order(rule_set: ExclusionRuleSet):
    result = rule_set.evaluate(["prod", "debug", "postgres", "mysql"])
    assert not result.satisfied
    assert result.violations == (
        "ExclusionGroup[oneRequired=false, profileList=[postgres, mysql]]",
        "ExclusionGroup[oneRequired=false, profileList=[prod, debug]]",
    )


def test_missing_required_profile_is_a_violation(rule_set: ExclusionRuleSet):
    result = rule_set.evaluate([])
    assert result.violations == (
        "ExclusionGroup[oneRequired=true, profileList=[dev, staging, prod]]",
    )


def test_overlapping_groups_are_evaluated_independently(rule_set: ExclusionRuleSet):
    result = rule_set.evaluate(["prod"])
    assert result.satisfied


def test_evaluate_is_idempotent(rule_set: ExclusionRuleSet):
    active = ["dev", "staging", "mysql"]
    first = rule_set.evaluate(active)
    second = rule_set.evaluate(active)
    assert first == second
    assert active == ["dev", "staging", "mysql"]


def test_evaluate_accepts_one_shot_iterators(rule_set: ExclusionRuleSet):
    result = rule_set.evaluate(iter(["dev", "postgres", "mysql"]))
    assert len(result.violations) == 1
    assert result.active_labels == ("dev", "postgres", "mysql")


def test_failure_message_layout(rule_set: ExclusionRuleSet):
    result = rule_set.evaluate(["dev", "staging"])
    assert result.format_message() == "\n".join(
        [
            FAILURE_HEADER,
            "  ExclusionGroup[oneRequired=true, profileList=[dev, staging, prod]]",
            "Profiles Active were: [dev, staging]",
        ]
    )


def test_violated_result_requires_violations():
    with pytest.raises(ValueError):
        EvaluationResult.violated([], ["a"])


def test_observer_sees_every_group(rule_set: ExclusionRuleSet):
    observer = RecordingObserver()
    rule_set.evaluate(["staging", "prod"], observer=observer)
    assert observer.calls == [
        "before:3:staging,prod",
        "group:dev:False",
        "group:postgres:True",
        "group:prod:True",
        "after:False",
    ]


def test_rule_set_stringification(rule_set: ExclusionRuleSet):
    text = str(ExclusionRuleSet(list(rule_set)[:2]))
    assert text == (
        "MutuallyExclusiveProfiles[profilesRuleList=["
        "ExclusionGroup[oneRequired=true, profileList=[dev, staging, prod]], "
        "ExclusionGroup[oneRequired=false, profileList=[postgres, mysql]]]]"
    )
