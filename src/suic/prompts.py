# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Interactive prompts backed by Typer and Rich."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

import typer
from rich.console import Console

from .errors import PromptCancelledError
from .naming import normalize_name


class Prompter(Protocol):
    """Interactive collaborator consulted by commands and the reconciliation engine."""

    def confirm(self, message: str, *, default: bool = True) -> bool:
        """Return the user's yes/no answer to ``message``."""
        ...

    def multi_select(self, message: str, choices: Sequence[str]) -> list[str]:
        """Return one or more entries picked from ``choices``."""
        ...


def parse_selection(answer: str, choices: Sequence[str]) -> list[str]:
    """Translate a comma/space separated answer into entries of ``choices``.

    Tokens may be 1-based indexes or names (case-insensitive).

    Args:
        answer: Raw text typed by the user.
        choices: Options that were displayed.

    Returns:
        list[str]: Selected choices in the order given, without repeats.

    Raises:
        ValueError: If a token matches neither an index nor a name.
    """

    by_name = {normalize_name(choice): choice for choice in choices}
    selected: list[str] = []
    for token in answer.replace(",", " ").split():
        if token.isdigit() and 1 <= int(token) <= len(choices):
            choice = choices[int(token) - 1]
        elif normalize_name(token) in by_name:
            choice = by_name[normalize_name(token)]
        else:
            raise ValueError(token)
        if choice not in selected:
            selected.append(choice)
    return selected


class TerminalPrompter:
    """Prompt on the controlling terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(highlight=False)

    def confirm(self, message: str, *, default: bool = True) -> bool:
        """Ask a yes/no question; an aborted prompt counts as "no".

        Args:
            message: Question shown to the user.
            default: Answer used when the user just presses enter.

        Returns:
            bool: ``True`` when the user agreed.
        """

        try:
            return typer.confirm(message, default=default)
        except typer.Abort:
            return False

    def multi_select(self, message: str, choices: Sequence[str]) -> list[str]:
        """Ask the user to pick at least one of ``choices``.

        Args:
            message: Prompt headline.
            choices: Options to list.

        Returns:
            list[str]: Selected options.

        Raises:
            PromptCancelledError: If the prompt is aborted or nothing is chosen.
        """

        self._console.print(message)
        for index, choice in enumerate(choices, start=1):
            self._console.print(f"  {index:>2}. {choice}")
        while True:
            try:
                answer = typer.prompt("Enter numbers or names (comma separated)", default="", show_default=False)
            except typer.Abort as exc:
                raise PromptCancelledError("No selection made.") from exc
            if not answer.strip():
                raise PromptCancelledError("No selection made.")
            try:
                return parse_selection(answer, choices)
            except ValueError as exc:
                self._console.print(f"Unknown choice '{exc}'. Try again.")


class AutoConfirmPrompter(TerminalPrompter):
    """Terminal prompter that answers every confirmation with "yes"."""

    def confirm(self, message: str, *, default: bool = True) -> bool:
        del message, default
        return True


__all__ = ["AutoConfirmPrompter", "Prompter", "TerminalPrompter", "parse_selection"]
