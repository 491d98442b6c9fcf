# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Failure stream plumbing and the JSON formatter consuming it."""

from __future__ import annotations

import json
import queue
from collections.abc import Callable, Iterator
from typing import Final, Protocol, cast

from .errors import EngineExecutionError
from .lint_config import ResolvedConfig
from .models import Failure, FormattedFailure
from .severity import Severity

_CLOSED: Final = object()


class FailureStream:
    """Closable hand-off of failures between a producer and one consumer.

    Iteration blocks until the next failure arrives and stops once
    :meth:`close` has been called and every pending failure was consumed.
    """

    def __init__(self) -> None:
        self._queue: queue.SimpleQueue[object] = queue.SimpleQueue()
        self._closed = False

    def put(self, failure: Failure) -> None:
        """Push ``failure`` to the consumer."""
        if self._closed:
            raise RuntimeError("cannot push to a closed failure stream")
        self._queue.put(failure)

    def close(self) -> None:
        """Signal that no more failures will be pushed."""
        if not self._closed:
            self._closed = True
            self._queue.put(_CLOSED)

    def __iter__(self) -> Iterator[Failure]:
        while True:
            item = self._queue.get()
            if item is _CLOSED:
                return
            yield cast(Failure, item)


class Formatter(Protocol):
    """Consume a failure stream and render it to text."""

    name: str

    def format(self, failures: FailureStream, config: ResolvedConfig) -> str:
        """Return the rendered failures once the stream is closed."""


def failure_severity(config: ResolvedConfig, failure: Failure) -> Severity:
    """Return ``error`` when the failure's rule or directive is configured as an error.

    Args:
        config: Normalised engine configuration.
        failure: Failure being formatted.

    Returns:
        Severity: Severity reported for ``failure``.
    """

    rule = (config.rules or {}).get(failure.rule_name)
    if rule is not None and rule.severity is Severity.ERROR:
        return Severity.ERROR
    directive = config.directives.get(failure.rule_name)
    if directive is not None and directive.severity is Severity.ERROR:
        return Severity.ERROR
    return Severity.WARNING


class JsonFormatter:
    """Render failures as a JSON array of severity-annotated records."""

    name = "json"

    def format(self, failures: FailureStream, config: ResolvedConfig) -> str:
        records = [
            FormattedFailure.model_validate(
                {
                    **failure.model_dump(exclude={"severity"}),
                    "severity": failure_severity(config, failure),
                },
            ).model_dump(mode="json", by_alias=True)
            for failure in failures
        ]
        return json.dumps(records)


_FORMATTERS: Final[dict[str, Callable[[], Formatter]]] = {
    JsonFormatter.name: JsonFormatter,
}


def get_formatter(name: str) -> Formatter:
    """Return a new formatter registered under ``name``.

    Raises:
        EngineExecutionError: If no formatter is registered under ``name``.
    """

    factory = _FORMATTERS.get(name)
    if factory is None:
        raise EngineExecutionError(f"unknown formatter {name!r}")
    return factory()


__all__ = ["FailureStream", "Formatter", "JsonFormatter", "failure_severity", "get_formatter"]
