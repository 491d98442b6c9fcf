# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering concurrent issue aggregation."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from pyrevive.collector import ResultCollector
from pyrevive.models import Issue, LineRange, Position


def _issue(worker: int, index: int) -> Issue:
    return Issue(
        severity="warning",
        text=f"rule: {worker}-{index}",
        pos=Position(filename=f"file{worker}.py", line=index + 1),
        line_range=LineRange(from_line=index + 1, to_line=index + 1),
        from_linter="revive",
    )


def test_concurrent_appends_lose_nothing() -> None:
    workers, per_worker = 16, 250
    collector = ResultCollector()

    def append(worker: int) -> None:
        collector.append(_issue(worker, index) for index in range(per_worker))

    with ThreadPoolExecutor(max_workers=8) as executor:
        list(executor.map(append, range(workers)))

    drained = collector.drain()
    assert len(drained) == workers * per_worker
    assert len({issue.text for issue in drained}) == workers * per_worker


def test_append_preserves_batch_order() -> None:
    collector = ResultCollector()
    batch = [_issue(0, index) for index in range(5)]

    collector.append(batch)

    assert collector.drain() == batch


def test_drain_resets_the_collector() -> None:
    collector = ResultCollector()
    collector.append([_issue(0, 0)])

    assert len(collector) == 1
    assert len(collector.drain()) == 1
    assert collector.drain() == []
    assert len(collector) == 0
