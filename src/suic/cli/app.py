# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

from typing import Annotated

import typer

from .. import __version__
from .commands import register_commands

app = typer.Typer(
    name="suic",
    help="Manage and install UI components effortlessly.",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"suic {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Manage and install UI components effortlessly."""

    del version


register_commands(app)


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "main"]
