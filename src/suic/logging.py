# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing console output with optional colour and emoji prefixes.

Every helper writes to stdout through one Rich console per colour setting.
Colour is only used when stdout is a terminal, so captured or piped output
stays plain text.
"""

from __future__ import annotations

import sys
from functools import lru_cache

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.text import Text


def stdout_is_tty() -> bool:
    """Return ``True`` when stdout is attached to a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=2)
def get_console(color: bool) -> Console:
    """Return the shared stdout console for the ``color`` setting.

    The console resolves ``sys.stdout`` on every print, so redirected streams
    are honoured after the console is cached.
    """

    return Console(
        color_system="auto" if color else None,
        no_color=not color,
        highlight=False,
        soft_wrap=True,
    )


def print_text(text: Text) -> None:
    """Print pre-styled ``text``; styles are dropped when stdout is not a terminal."""

    get_console(stdout_is_tty()).print(text)


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise an empty string."""

    return symbol if enable else ""


def _line(msg: str, style: str | None = None, *, indent: int = 0) -> None:
    text = Text(" " * indent + msg)
    if style:
        text.stylize(style)
    print_text(text)


def section(title: str) -> None:
    """Print a header separating one block of output from the next."""

    color = stdout_is_tty()
    console = get_console(color)
    if color:
        console.print()
        console.print(Rule(escape(title)))
    else:
        console.print(Text(f"\n--- {title} ---"))


def blank() -> None:
    """Print an empty spacer line."""

    get_console(stdout_is_tty()).print()


def bullet(msg: str, *, indent: int = 2) -> None:
    """Print ``msg`` as a list item indented by ``indent`` spaces."""

    _line(f"- {msg}", indent=indent)


def info(msg: str, *, use_emoji: bool) -> None:
    """Print an informational message."""

    _line(f"{emoji('ℹ️ ', use_emoji)}{msg}", "cyan")


def ok(msg: str, *, use_emoji: bool) -> None:
    """Print a success message."""

    _line(f"{emoji('✅ ', use_emoji)}{msg}", "green")


def warn(msg: str, *, use_emoji: bool) -> None:
    """Print a warning; used for dependency advice and conflicts."""

    _line(f"{emoji('⚠️ ', use_emoji)}{msg}", "yellow")


def fail(msg: str, *, use_emoji: bool) -> None:
    """Print an error or a per-component failure."""

    _line(f"{emoji('❌ ', use_emoji)}{msg}", "red")


__all__ = [
    "blank",
    "bullet",
    "emoji",
    "fail",
    "get_console",
    "info",
    "ok",
    "print_text",
    "section",
    "stdout_is_tty",
    "warn",
]
