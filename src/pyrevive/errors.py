# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised while resolving configuration and running the engine."""

from __future__ import annotations


class ReviveError(Exception):
    """Base class for every error raised by :mod:`pyrevive`."""


class InvalidArgumentKind(ReviveError, TypeError):
    """Raised when a rule argument cannot be expressed in the engine grammar."""


class SettingsLoadError(ReviveError):
    """Raised when a settings document cannot be read or validated."""


class ConfigEncodingError(ReviveError):
    """Raised when the merged settings tree cannot be serialised."""


class ConfigDecodingError(ReviveError):
    """Raised when the serialised settings do not match the engine schema."""


class RuleResolutionError(ReviveError):
    """Raised when a configured rule has no implementation in the catalogue."""

    def __init__(self, rule_name: str) -> None:
        super().__init__(f"cannot find rule: {rule_name}")
        self.rule_name = rule_name


class EngineExecutionError(ReviveError):
    """Raised when the analysis engine fails to lint a compilation unit."""


class ResultDecodingError(ReviveError):
    """Raised when formatted failures cannot be parsed back into records."""


__all__ = [
    "ConfigDecodingError",
    "ConfigEncodingError",
    "EngineExecutionError",
    "InvalidArgumentKind",
    "ResultDecodingError",
    "ReviveError",
    "RuleResolutionError",
    "SettingsLoadError",
]
