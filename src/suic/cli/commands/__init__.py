# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command registry."""

from __future__ import annotations

import typer

from . import add, init, list_components, remove

__all__ = ["register_commands"]


def register_commands(app: typer.Typer) -> None:
    """Register built-in CLI commands on ``app``.

    Args:
        app: Typer application receiving command registrations.
    """

    init.register(app)
    add.register(app)
    remove.register(app)
    list_components.register(app)
