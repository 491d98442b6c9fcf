# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rule catalogue tables and resolution of configured rules to implementations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, Protocol, runtime_checkable

from .errors import RuleResolutionError
from .models import Failure, SourceFile

if TYPE_CHECKING:
    from .lint_config import ResolvedConfig

EXPORTED_RULE: Final[str] = "exported"

DEFAULT_RULES: Final[tuple[str, ...]] = (
    "var-declaration",
    "package-comments",
    "dot-imports",
    "blank-imports",
    EXPORTED_RULE,
    "var-naming",
    "indent-error-flow",
    "range",
    "errorf",
    "error-naming",
    "error-strings",
    "receiver-naming",
    "increment-decrement",
    "error-return",
    "unexported-return",
    "time-naming",
    "context-keys-type",
    "context-as-argument",
    "empty-block",
    "superfluous-else",
    "unused-parameter",
    "unreachable-code",
    "redefines-builtin-id",
)

_OPTIONAL_RULES: Final[tuple[str, ...]] = (
    "argument-limit",
    "cyclomatic",
    "file-header",
    "confusing-naming",
    "get-return",
    "modifies-parameter",
    "confusing-results",
    "deep-exit",
    "add-constant",
    "flag-parameter",
    "unnecessary-stmt",
    "struct-tag",
    "modifies-value-receiver",
    "constant-logical-expr",
    "bool-literal-in-expr",
    "imports-blacklist",
    "function-result-limit",
    "max-public-structs",
    "range-val-in-closure",
    "range-val-address",
    "waitgroup-by-value",
    "atomic",
    "empty-lines",
    "line-length-limit",
    "call-to-gc",
    "duplicated-imports",
    "import-shadowing",
    "bare-return",
    "unused-receiver",
    "unhandled-error",
    "cognitive-complexity",
    "string-of-int",
    "string-format",
    "early-return",
    "unconditional-recursion",
    "identical-branches",
    "defer",
    "unexported-naming",
    "function-length",
    "nested-structs",
    "useless-break",
    "unchecked-type-assertion",
    "time-equal",
    "banned-characters",
    "optimize-operands-order",
    "use-any",
    "datarace",
    "comment-spacings",
    "if-return",
    "redundant-import-alias",
    "import-alias-naming",
    "enforce-map-style",
    "enforce-repeated-arg-type-style",
    "enforce-slice-style",
)

ALL_RULES: Final[tuple[str, ...]] = _OPTIONAL_RULES + DEFAULT_RULES


@runtime_checkable
class Rule(Protocol):
    """Analysis rule executed by the engine against a single file."""

    name: str

    def apply(self, file: SourceFile, arguments: Sequence[Any]) -> Iterable[Failure]:
        """Return the failures found in ``file``."""


class RuleRegistry:
    """Immutable catalogue mapping rule names to implementations."""

    def __init__(self, rules: Mapping[str, Rule] | None = None) -> None:
        self._rules: Mapping[str, Rule] = MappingProxyType(dict(rules or {}))

    @classmethod
    def from_rules(cls, rules: Iterable[Rule]) -> RuleRegistry:
        """Build a registry keyed by each rule's ``name``.

        Args:
            rules: Rule implementations; later entries replace earlier ones
                sharing the same name.

        Returns:
            RuleRegistry: Registry containing ``rules``.
        """

        return cls({rule.name: rule for rule in rules})

    def merged(self, rules: Iterable[Rule]) -> RuleRegistry:
        """Return a new registry extended with ``rules``."""
        combined = dict(self._rules)
        combined.update({rule.name: rule for rule in rules})
        return RuleRegistry(combined)

    def get(self, name: str) -> Rule | None:
        """Return the implementation registered under ``name``."""
        return self._rules.get(name)

    def names(self) -> tuple[str, ...]:
        """Return registered rule names in registration order."""
        return tuple(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)


def get_linting_rules(
    config: ResolvedConfig,
    registry: RuleRegistry,
    extra_rules: Iterable[Rule] = (),
) -> list[Rule]:
    """Resolve every enabled rule of ``config`` to its implementation.

    Args:
        config: Normalised engine configuration.
        registry: Catalogue of available rule implementations.
        extra_rules: Additional rules made available for this resolution only.

    Returns:
        list[Rule]: Implementations in configuration order.

    Raises:
        RuleResolutionError: If a configured rule is missing from the catalogue.
    """

    catalogue = registry.merged(extra_rules)
    resolved: list[Rule] = []
    for name in config.active_rules():
        rule = catalogue.get(name)
        if rule is None:
            raise RuleResolutionError(name)
        resolved.append(rule)
    return resolved


__all__ = [
    "ALL_RULES",
    "DEFAULT_RULES",
    "EXPORTED_RULE",
    "Rule",
    "RuleRegistry",
    "get_linting_rules",
]
