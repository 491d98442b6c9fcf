# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Engine-native configuration models.

Field aliases mirror the keys of the engine's serialised configuration so the
raw tree produced from user settings can be validated directly.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .severity import Severity


class RuleConfig(BaseModel):
    """Configuration attached to a single rule."""

    model_config = ConfigDict(validate_assignment=True, populate_by_name=True, extra="forbid")

    arguments: list[Any] = Field(default_factory=list)
    severity: Severity | None = None
    disabled: bool = False


class DirectiveConfig(BaseModel):
    """Configuration attached to a single directive."""

    model_config = ConfigDict(validate_assignment=True, populate_by_name=True, extra="forbid")

    severity: Severity | None = None


class ResolvedConfig(BaseModel):
    """Configuration consumed by the engine, formatter and orchestrator.

    ``confidence == 0`` and ``severity is None`` mean "unset" until the
    configuration has been normalised.
    """

    model_config = ConfigDict(validate_assignment=True, populate_by_name=True, extra="forbid")

    ignore_generated_header: bool = Field(default=False, alias="ignoreGeneratedHeader")
    confidence: float = 0.0
    severity: Severity | None = None
    enable_all_rules: bool = Field(default=False, alias="enableAllRules")
    error_code: int = Field(default=0, alias="errorCode")
    warning_code: int = Field(default=0, alias="warningCode")
    rules: dict[str, RuleConfig] | None = Field(default=None, alias="rule")
    directives: dict[str, DirectiveConfig] = Field(default_factory=dict, alias="directive")

    def active_rules(self) -> dict[str, RuleConfig]:
        """Return the configured rules that are not disabled, in insertion order."""
        return {name: rule for name, rule in (self.rules or {}).items() if not rule.disabled}


__all__ = ["DirectiveConfig", "ResolvedConfig", "RuleConfig"]
