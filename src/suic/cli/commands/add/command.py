# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``suic add`` command."""

from __future__ import annotations

from pathlib import Path

import typer

from ....errors import SuicError
from ....reporting import report_add
from ...options import COMPONENTS_ARGUMENT, DEBUG_OPTION, EMOJI_OPTION, REGISTRY_URL_OPTION, ROOT_OPTION, YES_OPTION
from ...services import build_client, build_engine, build_prompter
from ...shared import build_cli_logger


def add_command(
    components: COMPONENTS_ARGUMENT = None,
    root: ROOT_OPTION = Path("."),
    registry_url: REGISTRY_URL_OPTION = None,
    yes: YES_OPTION = False,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Add one or more components to your project."""

    resolved_root = root.resolve()
    logger = build_cli_logger(emoji=emoji, debug=debug)
    try:
        client = build_client(registry_url)
        prompter = build_prompter(assume_yes=yes)
        engine = build_engine(resolved_root, prompter, logger=logger, client=client)
        catalog = client.fetch_catalog()
        if not catalog:
            raise SuicError("No components available.")
        requested = list(components or [])
        if not requested:
            requested = prompter.multi_select("Select components to add:", [entry.name for entry in catalog])
        report = engine.add(requested, catalog)
    except SuicError as exc:
        logger.report_error(exc, context="Error in component installation")
        raise typer.Exit(code=exc.exit_code) from exc

    report_add(report, resolved_root, use_emoji=emoji)
    raise typer.Exit(code=1 if report.failed else 0)


__all__ = ["add_command"]
