# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line interface for resolving configuration and linting files."""

from __future__ import annotations

import json
from collections import defaultdict
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Final

import typer

from .config import get_revive_config
from .errors import ReviveError
from .linter import CompilationUnit, ReviveLinter
from .loader import load_settings
from .logging import CLILogger, build_cli_logger, configure_logging
from .models import Issue
from .plugins import load_rule_plugins
from .settings import ReviveSettings
from .severity import Severity

DEFAULT_SETTINGS_PATH: Final[Path] = Path("pyproject.toml")
FAILURE_EXIT_CODE: Final[int] = 1

app = typer.Typer(help="Run revive-style rule engines with normalised configuration.", no_args_is_help=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Configure logging shared by every command."""

    configure_logging(verbose=verbose)


def _load(settings_path: Path, logger: CLILogger) -> ReviveSettings:
    try:
        return load_settings(settings_path)
    except ReviveError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=FAILURE_EXIT_CODE) from exc


@app.command("config")
def config_show(
    settings_path: Path = typer.Option(DEFAULT_SETTINGS_PATH, "--config", "-c", help="Settings file."),
) -> None:
    """Print the resolved engine configuration as JSON."""

    logger = build_cli_logger(emoji=False)
    settings = _load(settings_path, logger)
    try:
        config = get_revive_config(settings)
    except ReviveError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=FAILURE_EXIT_CODE) from exc
    payload = config.model_dump(mode="json", by_alias=True)
    logger.echo(json.dumps(payload, indent=2, sort_keys=True))


@app.command("lint")
def lint(
    files: list[Path] = typer.Argument(..., exists=True, dir_okay=False, help="Files to lint."),
    settings_path: Path = typer.Option(DEFAULT_SETTINGS_PATH, "--config", "-c", help="Settings file."),
    jobs: int | None = typer.Option(None, "--jobs", "-j", min=1, help="Parallel compilation units."),
    no_emoji: bool = typer.Option(False, "--no-emoji", help="Disable emoji output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable coloured output."),
) -> None:
    """Lint FILES, treating each directory as one compilation unit."""

    logger = build_cli_logger(emoji=not no_emoji, no_color=no_color)
    settings = _load(settings_path, logger)
    linter = ReviveLinter(settings, load_rule_plugins())
    try:
        issues = linter.run_units(group_units(files), jobs=jobs)
    except ReviveError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=FAILURE_EXIT_CODE) from exc

    render_issues(issues, logger)
    code = exit_code(issues, settings)
    if code:
        raise typer.Exit(code=code)


def group_units(files: Iterable[Path]) -> list[CompilationUnit]:
    """Group ``files`` by parent directory into compilation units."""
    grouped: dict[Path, list[str]] = defaultdict(list)
    for path in files:
        grouped[path.parent].append(str(path))
    return [CompilationUnit(name=str(directory), files=tuple(names)) for directory, names in grouped.items()]


def render_issues(issues: Sequence[Issue], logger: CLILogger) -> None:
    """Print ``issues`` sorted by location followed by a summary line."""
    if not issues:
        logger.ok("No issues found.")
        return
    logger.section("revive")
    ordered = sorted(issues, key=lambda issue: (issue.pos.filename, issue.pos.line, issue.pos.column))
    for issue in ordered:
        location = f"{issue.pos.filename}:{issue.pos.line}:{issue.pos.column}"
        message = f"{location}: [{issue.severity}] {issue.text}"
        if issue.severity == Severity.ERROR.value:
            logger.fail(message)
        else:
            logger.warn(message)
    logger.info(f"{len(issues)} issue(s) reported by {ordered[0].from_linter}.")


def exit_code(issues: Sequence[Issue], settings: ReviveSettings) -> int:
    """Return the configured exit code for ``issues``."""
    if any(issue.severity == Severity.ERROR.value for issue in issues):
        return settings.error_code
    if issues:
        return settings.warning_code
    return 0


__all__ = ["app", "exit_code", "group_units", "render_issues"]
