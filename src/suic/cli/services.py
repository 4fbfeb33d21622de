# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Factories wiring CLI commands to the reconciliation subsystem."""

from __future__ import annotations

from pathlib import Path

from ..config import install_dir, load_config
from ..constants import resolve_base_url
from ..fetch import RegistryClient
from ..materializer import FileMaterializer
from ..prompts import AutoConfirmPrompter, Prompter, TerminalPrompter
from ..reconcile import ReconciliationEngine
from ..state import InstalledStateStore
from .shared import CLILogger


def build_client(registry_url: str | None) -> RegistryClient:
    """Return a registry client for ``registry_url`` or the configured default."""

    return RegistryClient(resolve_base_url(registry_url))


def build_prompter(*, assume_yes: bool) -> Prompter:
    """Return the terminal prompter, auto-confirming when ``assume_yes`` is set."""

    return AutoConfirmPrompter() if assume_yes else TerminalPrompter()


def build_engine(
    root: Path,
    prompter: Prompter,
    *,
    logger: CLILogger,
    client: RegistryClient | None = None,
) -> ReconciliationEngine:
    """Construct a :class:`ReconciliationEngine` for the project at ``root``.

    Args:
        root: Resolved project root.
        prompter: Interactive collaborator for reinstall confirmations.
        logger: CLI logger receiving progress messages.
        client: Registry client supplying component files; omitted when the
            engine only removes components.

    Returns:
        ReconciliationEngine: Engine bound to the project's store and install directory.

    Raises:
        ConfigError: If the project configuration is missing or invalid.
    """

    config = load_config(root)
    target = install_dir(root, config)
    store = InstalledStateStore.for_root(root)
    logger.debug(f"install_dir={target} registry={store.path}")
    if client is None:
        materializer = FileMaterializer()
        source_base = ""
    else:
        logger.debug(f"base_url={client.base_url}")
        materializer = FileMaterializer(client.fetch_text)
        source_base = client.base_url
    return ReconciliationEngine(
        store,
        materializer,
        prompter,
        install_dir=target,
        source_base=source_base,
        on_install=lambda name: logger.debug(f"installing component={name}"),
        on_remove=lambda name: logger.debug(f"removed component={name}"),
    )


__all__ = ["build_client", "build_engine", "build_prompter"]
