# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing settings describing how the rule engine should be configured."""

from __future__ import annotations

from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .severity import DEFAULT_SEVERITY, Severity, coerce_severity

DEFAULT_CONFIDENCE: Final[float] = 0.8


class RuleSettings(BaseModel):
    """Override for a single rule.

    ``arguments`` is transported as-is; keys of mapping arguments are only
    checked when the settings are mapped onto the engine configuration.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    severity: Severity | None = None
    arguments: tuple[Any, ...] = Field(default_factory=tuple)
    disabled: bool = False

    @field_validator("severity", mode="before")
    @classmethod
    def _coerce_severity(cls, value: object) -> object:
        if value is None or isinstance(value, str):
            return coerce_severity(value)
        return value


class DirectiveSettings(BaseModel):
    """Override for a single engine directive."""

    model_config = ConfigDict(frozen=True)

    name: str
    severity: Severity | None = None

    @field_validator("severity", mode="before")
    @classmethod
    def _coerce_severity(cls, value: object) -> object:
        if value is None or isinstance(value, str):
            return coerce_severity(value)
        return value


class ReviveSettings(BaseModel):
    """Sparse user settings; ``ReviveSettings()`` means "no overrides"."""

    model_config = ConfigDict(frozen=True)

    max_open_files: int = Field(default=0, ge=0)
    ignore_generated_header: bool = False
    confidence: float = Field(default=DEFAULT_CONFIDENCE, ge=0.0, le=1.0)
    severity: Severity = DEFAULT_SEVERITY
    enable_all_rules: bool = False
    error_code: int = 0
    warning_code: int = 0
    rules: tuple[RuleSettings, ...] = Field(default_factory=tuple)
    directives: tuple[DirectiveSettings, ...] = Field(default_factory=tuple)

    @field_validator("severity", mode="before")
    @classmethod
    def _default_severity(cls, value: object) -> object:
        if value is None or isinstance(value, str):
            return coerce_severity(value) or DEFAULT_SEVERITY
        return value

    def has_overrides(self) -> bool:
        """Return ``True`` when any engine-facing field differs from the defaults.

        ``max_open_files`` only tunes the engine and is not part of its
        configuration, so it is ignored here. A confidence of ``0`` is
        normalised to the default threshold and therefore counts as unset.
        """

        effective = self.model_copy(
            update={"max_open_files": 0, "confidence": self.confidence or DEFAULT_CONFIDENCE},
        )
        return effective != ReviveSettings()


__all__ = ["DEFAULT_CONFIDENCE", "DirectiveSettings", "ReviveSettings", "RuleSettings"]
