# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``suic remove`` command."""

from __future__ import annotations

from pathlib import Path

import typer

from ....errors import SuicError
from ....reporting import report_remove
from ....state import InstalledStateStore
from ...options import COMPONENTS_ARGUMENT, DEBUG_OPTION, EMOJI_OPTION, ROOT_OPTION
from ...services import build_engine, build_prompter
from ...shared import build_cli_logger


def remove_command(
    components: COMPONENTS_ARGUMENT = None,
    root: ROOT_OPTION = Path("."),
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Remove one or more components from your project."""

    resolved_root = root.resolve()
    logger = build_cli_logger(emoji=emoji, debug=debug)
    try:
        prompter = build_prompter(assume_yes=False)
        engine = build_engine(resolved_root, prompter, logger=logger)
        installed = InstalledStateStore.for_root(resolved_root).load()
        if not installed:
            raise SuicError("No components were installed or the installed-registry file is missing.")
        requested = list(components or [])
        if not requested:
            requested = prompter.multi_select("Select components to remove:", list(installed))
        report = engine.remove(requested)
    except SuicError as exc:
        logger.report_error(exc, context="Error in component removal")
        raise typer.Exit(code=exc.exit_code) from exc

    for path in report.deleted_files:
        logger.debug(f"deleted file={path}")
    for path in report.pruned_directories:
        logger.debug(f"pruned directory={path}")
    report_remove(report, resolved_root, use_emoji=emoji)
    raise typer.Exit(code=0)


__all__ = ["remove_command"]
