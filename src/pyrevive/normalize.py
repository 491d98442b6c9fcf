# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Default filling and severity inheritance for engine configurations."""

from __future__ import annotations

from .lint_config import ResolvedConfig, RuleConfig
from .rules import ALL_RULES, DEFAULT_RULES
from .settings import DEFAULT_CONFIDENCE
from .severity import DEFAULT_SEVERITY


def normalize_config(config: ResolvedConfig) -> ResolvedConfig:
    """Fill defaults and propagate the global severity in place.

    Explicitly configured rules always win over entries added by
    ``enable_all_rules``. Running the function twice yields the same result.

    Args:
        config: Configuration decoded from user settings.

    Returns:
        ResolvedConfig: The same instance, normalised.
    """

    if config.confidence == 0:
        config.confidence = DEFAULT_CONFIDENCE
    if config.severity is None:
        config.severity = DEFAULT_SEVERITY

    if config.rules is None:
        config.rules = {}
    rules = config.rules
    if config.enable_all_rules:
        for rule_name in ALL_RULES:
            if rule_name not in rules:
                rules[rule_name] = RuleConfig()

    # Must run after the expansion so that added rules inherit too.
    for rule in rules.values():
        if rule.severity is None:
            rule.severity = config.severity
    for directive in config.directives.values():
        if directive.severity is None:
            directive.severity = config.severity
    return config


def default_config() -> ResolvedConfig:
    """Return the configuration used when no settings were supplied."""
    config = ResolvedConfig(
        confidence=DEFAULT_CONFIDENCE,
        severity=DEFAULT_SEVERITY,
        rules={name: RuleConfig() for name in DEFAULT_RULES},
    )
    return normalize_config(config)


__all__ = ["default_config", "normalize_config"]
