from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

from profilemutex.cli.parser import ACTIVE_PROFILES_ENV
from profilemutex.config import RuleViolationError
from profilemutex.config.defaults import DEFAULT_CONFIG_TOML
from profilemutex.core.application import EXIT_FAILURE, EXIT_OK, enforce, main
from profilemutex.core.exclusion_group import ExclusionGroup
from profilemutex.core.rule_set import ExclusionRuleSet


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.delenv(ACTIVE_PROFILES_ENV, raising=False)
    path = tmp_path / "profilemutex.toml"
    path.write_text(DEFAULT_CONFIG_TOML, encoding="utf-8")
    return path


def run_cli(config_file: Path, *extra: str) -> int:
    return main(["--config", str(config_file), "--no-color", *extra])


def test_enforce_returns_result_when_satisfied():
    rule_set = ExclusionRuleSet([ExclusionGroup.from_spec("a, b")])
    assert enforce(rule_set, ["a"]).satisfied


def test_enforce_raises_with_composite_message():
    rule_set = ExclusionRuleSet([ExclusionGroup.from_spec("a, b", True)])
    with pytest.raises(RuleViolationError) as excinfo:
        enforce(rule_set, ["c"])
    assert excinfo.value.result.violations == (
        "ExclusionGroup[oneRequired=true, profileList=[a, b]]",
    )
    assert str(excinfo.value).endswith("Profiles Active were: [c]")


def test_cli_passes_with_compatible_profiles(logger_state, config_file, capsys):
    assert run_cli(config_file, "-P", "staging,sqlite") == EXIT_OK
    assert "rules satisfied" in capsys.readouterr().out


def test_cli_fails_and_prints_every_violation(logger_state, config_file, capsys):
    assert run_cli(config_file, "-P", "dev,prod", "-P", "mysql,sqlite") == EXIT_FAILURE
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "The following Mutually Exclusive Profile Set rule(s) failed:",
        "  ExclusionGroup[oneRequired=true, profileList=[dev, staging, prod]]",
        "  ExclusionGroup[oneRequired=false, profileList=[postgres, mysql, sqlite]]",
        "Profiles Active were: [dev, prod, mysql, sqlite]",
    ]


def test_cli_reads_profiles_from_environment(
    logger_state, config_file, capsys, monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.setenv(ACTIVE_PROFILES_ENV, "prod")
    assert run_cli(config_file) == EXIT_OK


def test_cli_config_validate(logger_state, config_file, capsys):
    assert run_cli(config_file, "--config-validate") == EXIT_OK
    assert "Configuration is valid (2 profile set(s))." in capsys.readouterr().out


def test_cli_config_validate_reports_empty_group(logger_state, tmp_path, capsys):
    path = tmp_path / "broken.toml"
    path.write_text('[[groups]]\nprofiles = " , "\n', encoding="utf-8")

    assert run_cli(path, "--config-validate") == EXIT_FAILURE
    assert "Configuration validation failed." in capsys.readouterr().out
    assert run_cli(path, "--config-validate", "--lenient") == EXIT_OK


def test_cli_missing_config_fails(logger_state, tmp_path, capsys):
    assert run_cli(tmp_path / "missing.toml", "-P", "dev") == EXIT_FAILURE


def test_cli_config_init_writes_example(logger_state, tmp_path, capsys):
    path = tmp_path / "conf" / "profilemutex.toml"
    assert run_cli(path, "--config-init") == EXIT_OK
    assert path.read_text(encoding="utf-8") == DEFAULT_CONFIG_TOML

    path.write_text("# local edits\n", encoding="utf-8")
    assert run_cli(path, "--config-init") == EXIT_OK
    backups = list(path.parent.glob("profilemutex.toml.backup.*.bak"))
    assert len(backups) == 1
    assert backups[0].read_text(encoding="utf-8") == "# local edits\n"


class TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_cli_verdict_is_plain_when_stdout_is_redirected(
    logger_state, config_file, capsys, monkeypatch: pytest.MonkeyPatch
):
    for name in ("FORCE_COLOR", "NO_COLOR", "COLORTERM"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TERM", "xterm-256color")
    monkeypatch.setattr(sys, "stderr", TtyStream())

    assert main(["--config", str(config_file), "-P", "dev,prod"]) == EXIT_FAILURE
    out = capsys.readouterr().out
    assert out.startswith("The following Mutually Exclusive Profile Set rule(s) failed:")
    assert "\x1b[" not in out
