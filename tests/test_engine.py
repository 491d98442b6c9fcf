# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering the threaded rule engine."""

from __future__ import annotations

import threading
from pathlib import Path

import pytest

from pyrevive.engine import Linter, is_generated, read_file
from pyrevive.errors import EngineExecutionError
from pyrevive.lint_config import ResolvedConfig, RuleConfig
from pyrevive.normalize import normalize_config
from tests.helpers.rules import CrashingRule, NeedleRule


def _config(*names: str, ignore_generated_header: bool = False, arguments: list[object] | None = None) -> ResolvedConfig:
    rules = {name: RuleConfig(arguments=list(arguments or [])) for name in names}
    return normalize_config(ResolvedConfig(rules=rules, ignore_generated_header=ignore_generated_header))


def _write(tmp_path: Path, name: str, content: str) -> str:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return str(path)


def test_is_generated_detects_marker() -> None:
    assert is_generated("# Code generated by protoc. DO NOT EDIT.\nx = 1\n")
    assert is_generated("// Code generated by stringer; DO NOT EDIT.\npackage x\n")
    assert not is_generated("# Hand written module\n")


def test_lint_streams_failures_from_every_file(tmp_path: Path) -> None:
    first = _write(tmp_path, "a.py", "x = 1  # TODO\ny = 2\n")
    second = _write(tmp_path, "b.py", "# TODO\n# TODO\n")
    rule = NeedleRule(name="todo")

    failures = list(Linter().lint([[first, second]], [rule], _config("todo")))

    assert sorted((failure.position.start.filename, failure.position.start.line) for failure in failures) == [
        (first, 1),
        (second, 1),
        (second, 2),
    ]


def test_lint_passes_configured_arguments(tmp_path: Path) -> None:
    source = _write(tmp_path, "a.py", "value = 1\n")
    rule = NeedleRule(name="line-length-limit")

    list(Linter().lint([[source]], [rule], _config("line-length-limit", arguments=[80])))

    assert rule.seen_arguments == [[80]]


def test_generated_files_are_skipped_by_default(tmp_path: Path) -> None:
    generated = _write(tmp_path, "gen.py", "# Code generated by tool. DO NOT EDIT.\n# TODO\n")
    rule = NeedleRule(name="todo")

    assert list(Linter().lint([[generated]], [rule], _config("todo"))) == []
    linted = list(Linter().lint([[generated]], [rule], _config("todo", ignore_generated_header=True)))
    assert len(linted) == 1


def test_unreadable_file_fails_before_iteration(tmp_path: Path) -> None:
    with pytest.raises(EngineExecutionError, match="cannot read"):
        Linter().lint([[str(tmp_path / "missing.py")]], [NeedleRule(name="todo")], _config("todo"))


def test_rule_crash_surfaces_while_iterating(tmp_path: Path) -> None:
    source = _write(tmp_path, "a.py", "x = 1\n")
    failures = Linter().lint([[source]], [CrashingRule()], _config("crashing"))

    with pytest.raises(EngineExecutionError, match="boom"):
        list(failures)


def test_max_open_files_bounds_concurrent_reads(tmp_path: Path) -> None:
    names = [_write(tmp_path, f"m{index}.py", "x = 1\n") for index in range(12)]
    active = 0
    peak = 0
    lock = threading.Lock()

    def reader(name: str) -> bytes:
        nonlocal active, peak
        with lock:
            active += 1
            peak = max(peak, active)
        try:
            return read_file(name)
        finally:
            with lock:
                active -= 1

    list(Linter(reader, max_open_files=2).lint([names], [NeedleRule(name="todo")], _config("todo")))

    assert 1 <= peak <= 2


def test_no_rules_yields_nothing(tmp_path: Path) -> None:
    source = _write(tmp_path, "a.py", "# TODO\n")

    assert list(Linter().lint([[source]], [], _config())) == []
