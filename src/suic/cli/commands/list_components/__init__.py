# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""List CLI command."""

from __future__ import annotations

import typer

from .command import list_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the list command with ``app``.

    Args:
        app: Typer application receiving the list command registration.
    """

    app.command(name="list")(list_command)
