# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Entry-point discovery of rule implementations.

Packages contribute rules by exposing, under the ``pyrevive.rules`` group, a
rule instance, an iterable of rules, or a zero-argument callable returning
either of those.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from importlib import metadata
from importlib.metadata import EntryPoint, EntryPoints
from typing import Final, TypeAlias, cast

from .rules import Rule, RuleRegistry

LOGGER = logging.getLogger(__name__)

RULE_PLUGIN_GROUP: Final[str] = "pyrevive.rules"

RuleContribution: TypeAlias = Rule | Iterable[Rule] | Callable[[], Rule | Iterable[Rule]]

_EntryPointSource: TypeAlias = EntryPoints | Mapping[str, Sequence[EntryPoint]]


def _select_entry_points(entries: _EntryPointSource, group: str) -> Iterable[EntryPoint]:
    """Return entry points exposed under ``group`` from ``entries``."""

    if isinstance(entries, Mapping):
        return entries.get(group, ())
    return entries.select(group=group)


def _expand_contribution(contribution: RuleContribution) -> tuple[Rule, ...]:
    """Flatten a plugin contribution into a tuple of rules.

    Raises:
        TypeError: If ``contribution`` yields something other than rules.
    """

    if isinstance(contribution, Rule):
        return (contribution,)
    if callable(contribution):
        return _expand_contribution(contribution())
    rules = tuple(contribution)
    for rule in rules:
        if not isinstance(rule, Rule):
            raise TypeError(f"{rule!r} does not implement the rule protocol")
    return rules


def load_rule_plugins(
    group: str = RULE_PLUGIN_GROUP,
    *,
    entries: _EntryPointSource | None = None,
) -> RuleRegistry:
    """Return a registry holding every rule contributed through ``group``.

    Entry points that fail to load are logged and skipped.

    Args:
        group: Entry-point group to inspect.
        entries: Entry-point container; defaults to the installed distributions.

    Returns:
        RuleRegistry: Registry of discovered rules.
    """

    source = entries if entries is not None else cast(_EntryPointSource, metadata.entry_points())
    rules: list[Rule] = []
    for entry in _select_entry_points(source, group):
        try:
            rules.extend(_expand_contribution(cast(RuleContribution, entry.load())))
        except (AttributeError, ImportError, TypeError, ValueError) as exc:
            LOGGER.warning("ignoring rule plugin %s: %s", entry.name, exc)
    return RuleRegistry.from_rules(rules)


__all__ = ["RULE_PLUGIN_GROUP", "RuleContribution", "load_rule_plugins"]
