# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run the engine for one compilation unit and translate its output into issues."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Final, TypeAlias

from pydantic import TypeAdapter, ValidationError

from .config import get_revive_config
from .converter import failure_to_issue
from .engine import Linter
from .errors import EngineExecutionError, ResultDecodingError, ReviveError
from .formatter import FailureStream, Formatter, get_formatter
from .lint_config import ResolvedConfig
from .models import Failure, FormattedFailure, Issue
from .rules import Rule, RuleRegistry, get_linting_rules
from .settings import ReviveSettings

LOGGER = logging.getLogger(__name__)

FORMATTER_NAME: Final[str] = "json"

Engine: TypeAlias = Callable[[Sequence[Sequence[str]], Sequence[Rule], ResolvedConfig], Iterable[Failure]]
EngineFactory: TypeAlias = Callable[[ReviveSettings], Engine]

_RESULTS_ADAPTER: Final[TypeAdapter[list[FormattedFailure] | None]] = TypeAdapter(list[FormattedFailure] | None)


def default_engine(settings: ReviveSettings) -> Engine:
    """Return the lint entry point of a :class:`Linter` honouring ``settings``."""
    return Linter(max_open_files=settings.max_open_files).lint


def run_revive(
    files: Sequence[str],
    settings: ReviveSettings,
    registry: RuleRegistry,
    *,
    engine_factory: EngineFactory = default_engine,
    extra_rules: Iterable[Rule] = (),
) -> list[Issue]:
    """Lint ``files`` as one compilation unit and return the resulting issues.

    Args:
        files: File names forming the compilation unit.
        settings: User settings.
        registry: Catalogue of rule implementations.
        engine_factory: Builds the engine entry point for ``settings``.
        extra_rules: Rules available in addition to ``registry``.

    Returns:
        list[Issue]: Issues in the order the formatter recorded them.

    Raises:
        ReviveError: Any configuration, rule resolution, engine or decoding
            failure. No partial result is returned.
    """

    config = get_revive_config(settings)
    formatter = get_formatter(FORMATTER_NAME)
    try:
        engine = engine_factory(settings)
    except ReviveError:
        raise
    except Exception as exc:
        raise EngineExecutionError(f"failed to initialise the engine: {exc}") from exc
    rules = get_linting_rules(config, registry, extra_rules)

    try:
        failures = engine([list(files)], rules, config)
    except ReviveError:
        raise
    except Exception as exc:
        raise EngineExecutionError(f"engine failed: {exc}") from exc

    output = _format_failures(failures, formatter, config)
    return [failure_to_issue(record) for record in decode_results(output)]


def _format_failures(failures: Iterable[Failure], formatter: Formatter, config: ResolvedConfig) -> str:
    """Stream ``failures`` above the confidence threshold through ``formatter``.

    The stream is always closed and the formatter always awaited, so the
    formatter thread never outlives the call.
    """

    stream = FailureStream()
    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="pyrevive-format") as executor:
        pending = executor.submit(formatter.format, stream, config)
        try:
            for failure in failures:
                if failure.confidence < config.confidence:
                    continue
                stream.put(failure)
        except ReviveError:
            raise
        except Exception as exc:
            raise EngineExecutionError(f"engine failed: {exc}") from exc
        finally:
            stream.close()
            formatting_error = pending.exception()

    if formatting_error is not None:
        LOGGER.error("Format error: %s", formatting_error)
        raise ResultDecodingError(f"failed to format failures: {formatting_error}") from formatting_error
    return pending.result()


def decode_results(output: str) -> list[FormattedFailure]:
    """Parse the formatter output back into structured failures.

    Raises:
        ResultDecodingError: If ``output`` is not a valid list of failures.
    """

    try:
        records = _RESULTS_ADAPTER.validate_json(output)
    except ValidationError as exc:
        raise ResultDecodingError(f"failed to decode formatted failures: {exc}") from exc
    return records or []


__all__ = ["Engine", "EngineFactory", "FORMATTER_NAME", "decode_results", "default_engine", "run_revive"]
