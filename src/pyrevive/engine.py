# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rule execution engine streaming failures for groups of files."""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Callable, Iterator, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, wait
from pathlib import Path
from typing import Final, TypeAlias

from .errors import EngineExecutionError
from .formatter import FailureStream
from .lint_config import ResolvedConfig
from .models import Failure, SourceFile
from .rules import Rule

LOGGER = logging.getLogger(__name__)

ReadFile: TypeAlias = Callable[[str], bytes]

_GENERATED_HEADER: Final[re.Pattern[str]] = re.compile(
    r"^\s*(?://|#)\s*Code generated .* DO NOT EDIT\.\s*$",
    re.MULTILINE,
)


def read_file(name: str) -> bytes:
    """Return the raw bytes stored at ``name``."""
    return Path(name).read_bytes()


def is_generated(content: str) -> bool:
    """Return ``True`` when ``content`` carries a ``Code generated ... DO NOT EDIT.`` marker."""
    return _GENERATED_HEADER.search(content) is not None


class Linter:
    """Run rules over files, pushing every failure into a shared stream.

    Args:
        reader: Callable returning the bytes of a file name.
        max_open_files: Upper bound on files read concurrently; ``0`` means
            unbounded.
    """

    def __init__(self, reader: ReadFile = read_file, max_open_files: int = 0) -> None:
        self._reader = reader
        self._read_tokens = threading.BoundedSemaphore(max_open_files) if max_open_files > 0 else None

    def lint(
        self,
        packages: Sequence[Sequence[str]],
        rules: Sequence[Rule],
        config: ResolvedConfig,
    ) -> Iterator[Failure]:
        """Read every file and return an iterator over the failures found.

        Files are read before this method returns, so unreadable input fails
        here rather than during iteration.

        Args:
            packages: Groups of file names, one group per compilation unit.
            rules: Resolved rule implementations.
            config: Normalised engine configuration.

        Returns:
            Iterator[Failure]: Failures in completion order.

        Raises:
            EngineExecutionError: If a file cannot be read or decoded. Rule
                crashes are raised while iterating.
        """

        files: list[SourceFile] = []
        for package in packages:
            for source in self._read_package(package):
                if not config.ignore_generated_header and is_generated(source.content):
                    LOGGER.debug("skipping generated file %s", source.name)
                    continue
                files.append(source)
        return self._stream(files, rules, config)

    def _read_package(self, names: Sequence[str]) -> list[SourceFile]:
        if not names:
            return []
        with ThreadPoolExecutor(thread_name_prefix="pyrevive-read") as executor:
            return list(executor.map(self._read, names))

    def _read(self, name: str) -> SourceFile:
        if self._read_tokens is None:
            return self._decode(name)
        with self._read_tokens:
            return self._decode(name)

    def _decode(self, name: str) -> SourceFile:
        try:
            content = self._reader(name).decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise EngineExecutionError(f"cannot read {name}: {exc}") from exc
        return SourceFile(name=name, content=content)

    def _stream(
        self,
        files: Sequence[SourceFile],
        rules: Sequence[Rule],
        config: ResolvedConfig,
    ) -> Iterator[Failure]:
        stream = FailureStream()
        if not files or not rules:
            stream.close()
            yield from stream
            return

        with ThreadPoolExecutor(thread_name_prefix="pyrevive-lint") as executor:
            futures = [executor.submit(_lint_file, source, rules, config, stream) for source in files]
            closer = threading.Thread(target=_close_when_done, args=(futures, stream), daemon=True)
            closer.start()
            yield from stream
            closer.join()

        for future in futures:
            error = future.exception()
            if error is not None:
                raise EngineExecutionError(f"rule execution failed: {error}") from error


def _lint_file(
    source: SourceFile,
    rules: Sequence[Rule],
    config: ResolvedConfig,
    stream: FailureStream,
) -> None:
    configured = config.rules or {}
    for rule in rules:
        rule_config = configured.get(rule.name)
        arguments = rule_config.arguments if rule_config is not None else []
        for failure in rule.apply(source, arguments):
            stream.put(failure)


def _close_when_done(futures: Sequence[Future[None]], stream: FailureStream) -> None:
    wait(futures)
    stream.close()


__all__ = ["Linter", "ReadFile", "is_generated", "read_file"]
