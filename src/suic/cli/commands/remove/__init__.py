# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Remove CLI command."""

from __future__ import annotations

import typer

from .command import remove_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the remove command with ``app``.

    Args:
        app: Typer application receiving the remove command registration.
    """

    app.command(name="remove")(remove_command)
