# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``suic init`` command."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ....bootstrap import initialise_project
from ....constants import DEFAULT_INSTALL_PATH
from ....errors import SuicError
from ....reporting import report_init
from ...options import DEBUG_OPTION, EMOJI_OPTION, REGISTRY_URL_OPTION, ROOT_OPTION, YES_OPTION
from ...services import build_client, build_prompter
from ...shared import build_cli_logger

INSTALL_PATH_OPTION = Annotated[
    str,
    typer.Option("--install-path", "-i", help="Custom installation directory."),
]


def init_command(
    install_path: INSTALL_PATH_OPTION = DEFAULT_INSTALL_PATH,
    root: ROOT_OPTION = Path("."),
    registry_url: REGISTRY_URL_OPTION = None,
    yes: YES_OPTION = False,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Set up Simple UI Components in your project."""

    resolved_root = root.resolve()
    logger = build_cli_logger(emoji=emoji, debug=debug)
    prompter = build_prompter(assume_yes=yes)
    if not prompter.confirm(f"Confirm {resolved_root} is the project root (with package.json).", default=True):
        logger.info("Initialization cancelled.")
        raise typer.Exit(code=0)

    try:
        result = initialise_project(
            resolved_root,
            build_client(registry_url),
            install_path=install_path,
            on_file=lambda path: logger.debug(f"bootstrap file={path}"),
        )
    except SuicError as exc:
        logger.report_error(exc, context="Error in initialization")
        raise typer.Exit(code=exc.exit_code) from exc

    if result.alias_added:
        logger.info("Added 'suic/*' path alias to tsconfig.json.")
    report_init(result.registry, result.config.install_path, resolved_root, use_emoji=emoji)
    raise typer.Exit(code=0)


__all__ = ["init_command"]
