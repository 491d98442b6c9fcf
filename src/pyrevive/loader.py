# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load :class:`ReviveSettings` from TOML documents."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from .errors import SettingsLoadError
from .settings import ReviveSettings

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "pyrevive"
SETTINGS_SECTION_KEY: Final[str] = "revive"
_VERBATIM_KEYS: Final[frozenset[str]] = frozenset({"arguments"})


def load_settings(path: Path) -> ReviveSettings:
    """Read settings from ``path``.

    ``pyproject.toml`` files are read from ``[tool.pyrevive]``; other files
    from their ``[revive]`` table, or from the top level when the table is
    absent. A missing file or section yields the default settings.

    Args:
        path: TOML document to read.

    Returns:
        ReviveSettings: Validated settings.

    Raises:
        SettingsLoadError: If the document is not valid TOML or does not
            describe valid settings.
    """

    if not path.exists():
        return ReviveSettings()
    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise SettingsLoadError(f"cannot read {path}: {exc}") from exc

    section = _select_section(document, pyproject=path.name == PYPROJECT_FILENAME)
    return settings_from_mapping(section, source=str(path))


def settings_from_mapping(data: Mapping[str, Any], *, source: str = "<mapping>") -> ReviveSettings:
    """Validate a raw settings mapping using kebab-case or snake_case keys.

    Raises:
        SettingsLoadError: If ``data`` does not describe valid settings.
    """

    try:
        return ReviveSettings.model_validate(_normalise_keys(data))
    except ValidationError as exc:
        raise SettingsLoadError(f"invalid revive settings in {source}: {exc}") from exc


def _select_section(document: Mapping[str, Any], *, pyproject: bool) -> Mapping[str, Any]:
    if pyproject:
        tool_section = document.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        return section if isinstance(section, Mapping) else {}
    section = document.get(SETTINGS_SECTION_KEY)
    if isinstance(section, Mapping):
        return section
    return document


def _normalise_keys(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {
            str(key).replace("-", "_"): item if key in _VERBATIM_KEYS else _normalise_keys(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [_normalise_keys(item) for item in value]
    return value


__all__ = ["load_settings", "settings_from_mapping"]
