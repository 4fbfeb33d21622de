# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Init CLI command."""

from __future__ import annotations

import typer

from .command import init_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Register the init command with ``app``.

    Args:
        app: Typer application receiving the init command registration.
    """

    app.command(name="init")(init_command)
