# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Per-invocation logger shared by the CLI commands."""

from __future__ import annotations

from dataclasses import dataclass

from rich.text import Text

from ..errors import SuicError, iter_causes
from ..logging import fail, info, print_text


@dataclass(slots=True)
class CLILogger:
    """Route command messages through :mod:`suic.logging` with the invocation's flags."""

    use_emoji: bool
    debug_enabled: bool = False

    def info(self, message: str) -> None:
        """Print a progress or status message."""

        info(message, use_emoji=self.use_emoji)

    def debug(self, message: str) -> None:
        """Print ``message`` when ``--debug`` is set, highlighting ``key=value`` fields."""

        if not self.debug_enabled:
            return
        text = Text(f"[debug] {message}", style="dim")
        text.highlight_regex(r"[\w-]+(?==)", "bold magenta")
        text.highlight_regex(r"(?<==)\S+", "bold green")
        print_text(text)

    def report_error(self, error: SuicError, *, context: str | None = None) -> None:
        """Print ``error`` under ``context``; with ``--debug`` also print its causes.

        Args:
            error: Failure raised while running a command.
            context: Command-level description printed first.
        """

        if context:
            fail(context, use_emoji=self.use_emoji)
        fail(str(error), use_emoji=self.use_emoji)
        for depth, cause in enumerate(iter_causes(error) if self.debug_enabled else (), start=1):
            self.debug(f"{'  ' * depth}caused_by={type(cause).__name__} {cause}")


def build_cli_logger(*, emoji: bool, debug: bool = False) -> CLILogger:
    """Return the logger for one command invocation."""

    return CLILogger(use_emoji=emoji, debug_enabled=debug)


__all__ = ["CLILogger", "build_cli_logger"]
