# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Host-facing linter running revive once per compilation unit."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Final

from .collector import ResultCollector
from .converter import LINTER_NAME
from .models import Issue
from .orchestrator import EngineFactory, default_engine, run_revive
from .rules import RuleRegistry
from .settings import ReviveSettings

LOGGER = logging.getLogger(__name__)

LINTER_DESCRIPTION: Final[str] = (
    "Fast, configurable, extensible, flexible, and beautiful linter. Drop-in replacement of golint."
)


@dataclass(frozen=True, slots=True)
class CompilationUnit:
    """Smallest group of files the engine is invoked on."""

    name: str
    files: tuple[str, ...] = field(default_factory=tuple)


class ReviveLinter:
    """Adapter exposing the revive pipeline to a host analyser.

    The host calls :meth:`run` for each compilation unit, possibly from
    several threads, then reads :meth:`issues` once every run has finished.
    """

    name = LINTER_NAME
    description = LINTER_DESCRIPTION

    def __init__(
        self,
        settings: ReviveSettings,
        registry: RuleRegistry,
        *,
        engine_factory: EngineFactory = default_engine,
    ) -> None:
        self._settings = settings
        self._registry = registry
        self._engine_factory = engine_factory
        self._collector = ResultCollector()

    @property
    def settings(self) -> ReviveSettings:
        """Return the settings every run uses."""
        return self._settings

    def run(self, unit: CompilationUnit) -> list[Issue]:
        """Lint ``unit`` and record its issues.

        Args:
            unit: Compilation unit supplied by the host.

        Returns:
            list[Issue]: Issues found in ``unit``.

        Raises:
            ReviveError: If the run fails; nothing is recorded in that case.
        """

        issues = run_revive(
            unit.files,
            self._settings,
            self._registry,
            engine_factory=self._engine_factory,
        )
        LOGGER.debug("revive reported %d issue(s) for %s", len(issues), unit.name)
        self._collector.append(issues)
        return issues

    def run_units(self, units: Iterable[CompilationUnit], *, jobs: int | None = None) -> list[Issue]:
        """Lint ``units`` concurrently and return every collected issue.

        Args:
            units: Compilation units to lint.
            jobs: Maximum worker threads; ``None`` lets the executor decide.

        Returns:
            list[Issue]: Issues collected from all units.

        Raises:
            ReviveError: The first failure observed. Remaining runs are
                allowed to finish, and the issues they collected are
                discarded before it propagates.
        """

        pending: Sequence[CompilationUnit] = tuple(units)
        with ThreadPoolExecutor(max_workers=jobs, thread_name_prefix="pyrevive-unit") as executor:
            futures = {executor.submit(self.run, unit): unit for unit in pending}
            errors: list[BaseException] = []
            for future in as_completed(futures):
                error = future.exception()
                if error is not None:
                    LOGGER.error("revive failed for %s: %s", futures[future].name, error)
                    errors.append(error)
        if errors:
            self._collector.drain()
            raise errors[0]
        return self.issues()

    def issues(self) -> list[Issue]:
        """Return the issues collected so far and reset the collector."""
        return self._collector.drain()


__all__ = ["CompilationUnit", "LINTER_DESCRIPTION", "ReviveLinter"]
