# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering the command line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from pyrevive import cli
from pyrevive.rules import DEFAULT_RULES, RuleRegistry
from tests.helpers.rules import NeedleRule, quiet_registry

runner = CliRunner()


def _write_settings(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "revive.toml"
    path.write_text(body, encoding="utf-8")
    return path


def test_config_command_prints_defaults(tmp_path: Path) -> None:
    result = runner.invoke(cli.app, ["config", "--config", str(tmp_path / "absent.toml")])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["confidence"] == 0.8
    assert payload["severity"] == "warning"
    assert sorted(payload["rule"]) == sorted(DEFAULT_RULES)


def test_config_command_reports_invalid_settings(tmp_path: Path) -> None:
    path = _write_settings(tmp_path, 'severity = "fatal"\n')

    result = runner.invoke(cli.app, ["config", "--config", str(path)])

    assert result.exit_code == 1
    assert "invalid revive settings" in result.stdout


def test_lint_command_uses_configured_exit_codes(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    settings = _write_settings(
        tmp_path,
        'error-code = 3\nwarning-code = 2\n[[rules]]\nname = "var-naming"\nseverity = "error"\n',
    )
    source = tmp_path / "mod.py"
    source.write_text("# TODO\n", encoding="utf-8")
    monkeypatch.setattr(cli, "load_rule_plugins", lambda: quiet_registry(NeedleRule(name="var-naming")))

    result = runner.invoke(cli.app, ["lint", "--config", str(settings), "--no-emoji", "--no-color", str(source)])

    assert result.exit_code == 3
    assert "var-naming: found TODO" in result.stdout


def test_lint_command_reports_clean_runs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    source = tmp_path / "mod.py"
    source.write_text("value = 1\n", encoding="utf-8")
    monkeypatch.setattr(cli, "load_rule_plugins", quiet_registry)

    result = runner.invoke(
        cli.app,
        ["lint", "--config", str(tmp_path / "absent.toml"), "--no-emoji", str(source)],
    )

    assert result.exit_code == 0
    assert "No issues found." in result.stdout


def test_lint_command_fails_on_missing_rules(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    source = tmp_path / "mod.py"
    source.write_text("value = 1\n", encoding="utf-8")
    monkeypatch.setattr(cli, "load_rule_plugins", RuleRegistry)

    result = runner.invoke(cli.app, ["lint", "--config", str(tmp_path / "absent.toml"), str(source)])

    assert result.exit_code == 1
    assert "cannot find rule" in result.stdout


def test_group_units_splits_by_directory(tmp_path: Path) -> None:
    paths = [tmp_path / "a" / "x.py", tmp_path / "b" / "y.py", tmp_path / "a" / "z.py"]

    units = cli.group_units(paths)

    assert [(unit.name, len(unit.files)) for unit in units] == [
        (str(tmp_path / "a"), 2),
        (str(tmp_path / "b"), 1),
    ]
