# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate user settings into the engine's raw configuration tree."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeAlias

from .errors import InvalidArgumentKind
from .settings import DirectiveSettings, ReviveSettings, RuleSettings

ArgumentScalar: TypeAlias = str | int | float | bool
RuleArgument: TypeAlias = ArgumentScalar | Sequence[Any] | dict[str, Any]
RawTree: TypeAlias = dict[str, Any]


def create_config_map(settings: ReviveSettings) -> RawTree:
    """Return the raw configuration tree equivalent to ``settings``.

    Args:
        settings: User settings to translate.

    Returns:
        RawTree: Mapping shaped like the engine's native configuration, with
        ``directive`` and ``rule`` tables only present when non-empty.

    Raises:
        InvalidArgumentKind: If a rule argument mapping has non-string keys.
    """

    raw_root: RawTree = {
        "ignoreGeneratedHeader": settings.ignore_generated_header,
        "confidence": settings.confidence,
        "severity": settings.severity.value,
        "errorCode": settings.error_code,
        "warningCode": settings.warning_code,
        "enableAllRules": settings.enable_all_rules,
    }

    raw_directives = {directive.name: _directive_entry(directive) for directive in settings.directives}
    if raw_directives:
        raw_root["directive"] = raw_directives

    raw_rules = {rule.name: _rule_entry(rule) for rule in settings.rules}
    if raw_rules:
        raw_root["rule"] = raw_rules

    return raw_root


def _directive_entry(directive: DirectiveSettings) -> dict[str, Any]:
    entry: dict[str, Any] = {}
    if directive.severity is not None:
        entry["severity"] = directive.severity.value
    return entry


def _rule_entry(rule: RuleSettings) -> dict[str, Any]:
    entry: dict[str, Any] = {"disabled": rule.disabled}
    if rule.severity is not None:
        entry["severity"] = rule.severity.value
    arguments = safe_arguments(rule.arguments, rule_name=rule.name)
    if arguments is not None:
        entry["arguments"] = arguments
    return entry


def safe_arguments(arguments: Sequence[Any], *, rule_name: str = "") -> list[RuleArgument] | None:
    """Downcast mapping arguments to string-keyed dictionaries.

    Args:
        arguments: Free-form argument list taken from the settings.
        rule_name: Rule owning the arguments, used in error messages.

    Returns:
        list[RuleArgument] | None: ``None`` for an empty list, otherwise the
        arguments with every mapping element rebuilt with ``str`` keys. Other
        elements are returned unchanged.

    Raises:
        InvalidArgumentKind: If any mapping in the arguments, at any depth,
            carries a non-string key.
    """

    if not arguments:
        return None
    coerced: list[RuleArgument] = []
    for value in arguments:
        if isinstance(value, Mapping):
            coerced.append(_string_keyed(value, rule_name))
        else:
            _check_nested_keys(value, rule_name)
            coerced.append(value)
    return coerced


def _string_keyed(value: Mapping[Any, Any], rule_name: str) -> dict[str, Any]:
    typed: dict[str, Any] = {}
    for key, item in value.items():
        if not isinstance(key, str):
            label = f" of rule {rule_name!r}" if rule_name else ""
            raise InvalidArgumentKind(
                f"argument keys{label} must be strings, got {type(key).__name__} ({key!r})",
            )
        _check_nested_keys(item, rule_name)
        typed[key] = item
    return typed


def _check_nested_keys(value: Any, rule_name: str) -> None:
    """Reject non-string keys anywhere below a mapping argument."""

    if isinstance(value, Mapping):
        _string_keyed(value, rule_name)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _check_nested_keys(item, rule_name)


__all__ = ["RawTree", "RuleArgument", "create_config_map", "safe_arguments"]
