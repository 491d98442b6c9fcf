# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration normalisation and result translation for revive-style rule engines."""

from __future__ import annotations

from importlib import metadata

from .collector import ResultCollector
from .config import get_revive_config
from .converter import failure_to_issue
from .errors import (
    ConfigDecodingError,
    ConfigEncodingError,
    EngineExecutionError,
    InvalidArgumentKind,
    ResultDecodingError,
    ReviveError,
    RuleResolutionError,
    SettingsLoadError,
)
from .linter import CompilationUnit, ReviveLinter
from .models import Failure, Issue, LineRange, Position
from .orchestrator import run_revive
from .rules import ALL_RULES, DEFAULT_RULES, RuleRegistry
from .settings import DirectiveSettings, ReviveSettings, RuleSettings

__all__ = [
    "ALL_RULES",
    "DEFAULT_RULES",
    "CompilationUnit",
    "ConfigDecodingError",
    "ConfigEncodingError",
    "DirectiveSettings",
    "EngineExecutionError",
    "Failure",
    "InvalidArgumentKind",
    "Issue",
    "LineRange",
    "Position",
    "ResultCollector",
    "ResultDecodingError",
    "ReviveError",
    "ReviveLinter",
    "ReviveSettings",
    "RuleRegistry",
    "RuleResolutionError",
    "RuleSettings",
    "SettingsLoadError",
    "__version__",
    "failure_to_issue",
    "get_revive_config",
    "run_revive",
]

try:
    __version__ = metadata.version("pyrevive")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
