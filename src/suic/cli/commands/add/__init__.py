# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Add CLI command."""

from __future__ import annotations

import typer

from .command import add_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the add command with ``app``.

    Args:
        app: Typer application receiving the add command registration.
    """

    app.command(name="add")(add_command)
