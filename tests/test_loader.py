# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering settings loading from TOML documents."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from pyrevive.errors import SettingsLoadError
from pyrevive.loader import load_settings, settings_from_mapping
from pyrevive.settings import ReviveSettings
from pyrevive.severity import Severity


def test_missing_file_yields_default_settings(tmp_path: Path) -> None:
    assert load_settings(tmp_path / "revive.toml") == ReviveSettings()


def test_pyproject_section_is_read(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text(
        dedent(
            """
            [project]
            name = "demo"

            [tool.pyrevive]
            confidence = 0.6
            severity = "error"
            enable-all-rules = true
            max-open-files = 8

            [[tool.pyrevive.rules]]
            name = "add-constant"
            severity = "warning"
            arguments = [{ maxLitCount = "3", allow-strs = '""' }]

            [[tool.pyrevive.directives]]
            name = "specify-disable-reason"
            """,
        ),
        encoding="utf-8",
    )

    settings = load_settings(path)

    assert settings.confidence == 0.6
    assert settings.severity is Severity.ERROR
    assert settings.enable_all_rules is True
    assert settings.max_open_files == 8
    rule = settings.rules[0]
    assert rule.name == "add-constant"
    assert rule.severity is Severity.WARNING
    assert rule.arguments == ({"maxLitCount": "3", "allow-strs": '""'},)
    assert settings.directives[0].name == "specify-disable-reason"
    assert settings.directives[0].severity is None


def test_pyproject_without_section_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "demo"\n', encoding="utf-8")

    assert load_settings(path) == ReviveSettings()


def test_standalone_file_reads_revive_table(tmp_path: Path) -> None:
    path = tmp_path / "lint.toml"
    path.write_text('[revive]\nignore-generated-header = true\nerror-code = 3\n', encoding="utf-8")

    settings = load_settings(path)

    assert settings.ignore_generated_header is True
    assert settings.error_code == 3


def test_standalone_file_reads_top_level_keys(tmp_path: Path) -> None:
    path = tmp_path / "revive.toml"
    path.write_text('warning_code = 2\n[[rules]]\nname = "exported"\ndisabled = true\n', encoding="utf-8")

    settings = load_settings(path)

    assert settings.warning_code == 2
    assert settings.rules[0].disabled is True


def test_invalid_toml_raises(tmp_path: Path) -> None:
    path = tmp_path / "revive.toml"
    path.write_text("confidence = \n", encoding="utf-8")

    with pytest.raises(SettingsLoadError, match="cannot read"):
        load_settings(path)


def test_invalid_values_raise() -> None:
    with pytest.raises(SettingsLoadError, match="invalid revive settings"):
        settings_from_mapping({"severity": "fatal"})
    with pytest.raises(SettingsLoadError):
        settings_from_mapping({"confidence": 1.5})
