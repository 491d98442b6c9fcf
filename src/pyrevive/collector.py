# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Thread-safe accumulation of issues produced by concurrent lint runs."""

from __future__ import annotations

from collections.abc import Iterable
from threading import Lock

from .models import Issue


class ResultCollector:
    """Collect issues appended from any number of worker threads.

    Issues from a single :meth:`append` call keep their order; the relative
    order of concurrent appends is unspecified.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._issues: list[Issue] = []

    def append(self, issues: Iterable[Issue]) -> None:
        """Add ``issues`` to the collected results."""
        batch = list(issues)
        if not batch:
            return
        with self._lock:
            self._issues.extend(batch)

    def drain(self) -> list[Issue]:
        """Return every collected issue and reset the collector."""
        with self._lock:
            issues, self._issues = self._issues, []
        return issues

    def __len__(self) -> int:
        with self._lock:
            return len(self._issues)


__all__ = ["ResultCollector"]
