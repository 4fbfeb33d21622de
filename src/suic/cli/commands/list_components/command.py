# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``suic list`` command."""

from __future__ import annotations

import typer

from ....errors import SuicError
from ....reporting import render_catalog
from ...options import DEBUG_OPTION, EMOJI_OPTION, REGISTRY_URL_OPTION
from ...services import build_client
from ...shared import build_cli_logger


def list_command(
    registry_url: REGISTRY_URL_OPTION = None,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Show all available components with descriptions."""

    logger = build_cli_logger(emoji=emoji, debug=debug)
    try:
        catalog = build_client(registry_url).fetch_catalog()
        if not catalog:
            raise SuicError("No components available.")
    except SuicError as exc:
        logger.report_error(exc, context="Error in listing components")
        raise typer.Exit(code=exc.exit_code) from exc

    render_catalog(catalog, use_emoji=emoji)
    raise typer.Exit(code=0)


__all__ = ["list_command"]
