# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reusable Typer option declarations shared by the commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..constants import BASE_URL_ENV

ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Project root containing suic.config.json."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji in CLI output."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Print diagnostic details and underlying error causes."),
]
REGISTRY_URL_OPTION = Annotated[
    str | None,
    typer.Option(
        "--registry-url",
        envvar=BASE_URL_ENV,
        help="Base URL of the component registry.",
    ),
]
YES_OPTION = Annotated[
    bool,
    typer.Option("--yes", "-y", help="Answer yes to every confirmation prompt."),
]
COMPONENTS_ARGUMENT = Annotated[
    list[str] | None,
    typer.Argument(help="Component names (case-insensitive). Prompts when omitted.", show_default=False),
]

__all__ = [
    "COMPONENTS_ARGUMENT",
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "REGISTRY_URL_OPTION",
    "ROOT_OPTION",
    "YES_OPTION",
]
