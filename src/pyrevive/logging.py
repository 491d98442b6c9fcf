# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing console output with optional colour and emoji support."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


@dataclass(slots=True)
class CLILogger:
    """Console writer used by the command line interface."""

    console: Console
    use_emoji: bool = True

    def section(self, title: str) -> None:
        """Print a section header."""
        self.console.print(f"\n[bold blue]───[/] [bold cyan]{escape(title)}[/] [bold blue]───[/]", soft_wrap=True)

    def info(self, message: str) -> None:
        """Emit an informational message."""
        self.console.print(f"{emoji('ℹ️ ', self.use_emoji)}{escape(message)}", soft_wrap=True)

    def ok(self, message: str) -> None:
        """Emit a success message."""
        self.console.print(f"{emoji('✅ ', self.use_emoji)}[green]{escape(message)}[/]", soft_wrap=True)

    def warn(self, message: str) -> None:
        """Emit a warning message."""
        self.console.print(f"{emoji('⚠️ ', self.use_emoji)}[yellow]{escape(message)}[/]", soft_wrap=True)

    def fail(self, message: str) -> None:
        """Emit an error message."""
        self.console.print(f"{emoji('❌ ', self.use_emoji)}[red]{escape(message)}[/]", soft_wrap=True)

    def echo(self, message: str) -> None:
        """Write ``message`` verbatim."""
        self.console.print(message, markup=False, highlight=False, emoji=False, soft_wrap=True)


def build_cli_logger(*, emoji: bool, no_color: bool = False) -> CLILogger:
    """Return a :class:`CLILogger` bound to a dedicated Rich console.

    Args:
        emoji: Whether output may include emoji glyphs.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Configured logger.
    """

    console = Console(no_color=no_color, highlight=False)
    return CLILogger(console=console, use_emoji=emoji)


def configure_logging(*, verbose: bool) -> None:
    """Route library log records through Rich, at DEBUG when ``verbose``."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


__all__ = ["CLILogger", "build_cli_logger", "configure_logging", "emoji"]
