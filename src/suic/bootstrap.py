# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project bootstrap performed by ``suic init``."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from . import state
from .config import create_config, install_dir
from .constants import TS_PATH_ALIAS, TSCONFIG_FILE, ts_alias_target
from .errors import ConfigError, FileSystemError
from .fetch import RegistryClient
from .materializer import FileMaterializer
from .models import InitRegistry, ProjectConfig


@dataclass(slots=True)
class InitResult:
    """Summary of a bootstrap run."""

    config: ProjectConfig
    registry: InitRegistry
    written: list[Path]
    alias_added: bool


def _object_member(parent: dict[str, Any], key: str) -> dict[str, Any]:
    """Return ``parent[key]``, replacing a missing or non-object value with ``{}``."""

    member = parent.get(key)
    if not isinstance(member, dict):
        member = {}
        parent[key] = member
    return member


def add_path_alias(root: Path, alias: str, value: str) -> bool:
    """Register ``alias`` in ``tsconfig.json`` unless the project already maps it.

    Args:
        root: Project root directory.
        alias: Path alias key such as ``suic/*``.
        value: Directory pattern the alias resolves to.

    Returns:
        bool: ``True`` when the file was updated.

    Raises:
        ConfigError: If ``tsconfig.json`` exists but is not a JSON object.
    """

    path = root / TSCONFIG_FILE
    if not path.is_file():
        return False
    try:
        tsconfig = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Cannot add path alias: {TSCONFIG_FILE} is not valid JSON") from exc
    if not isinstance(tsconfig, dict):
        raise ConfigError(f"Cannot add path alias: {TSCONFIG_FILE} must contain a JSON object")
    compiler_options = _object_member(tsconfig, "compilerOptions")
    paths = _object_member(compiler_options, "paths")
    if alias in paths:
        return False
    paths[alias] = [value]
    try:
        path.write_text(json.dumps(tsconfig, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise FileSystemError(f"Failed to update {path}") from exc
    return True


def initialise_project(
    root: Path,
    client: RegistryClient,
    *,
    install_path: str | None = None,
    on_file: Callable[[str], None] | None = None,
) -> InitResult:
    """Write configuration, create the installed registry and install shared files.

    Args:
        root: Project root directory.
        client: Registry client used to fetch bootstrap files.
        install_path: Component directory requested by the user.
        on_file: Optional callback invoked with each bootstrap file path.

    Returns:
        InitResult: Configuration, bootstrap registry and written paths.
    """

    config = create_config(root, install_path)
    state.create(root)
    registry = client.fetch_init_registry()
    if on_file is not None:
        for relative in registry.files:
            on_file(relative)
    materializer = FileMaterializer(client.fetch_text)
    written = materializer.install(registry.files, client.base_url, install_dir(root, config))
    alias_added = add_path_alias(root, TS_PATH_ALIAS, ts_alias_target(config.install_path))
    return InitResult(config=config, registry=registry, written=written, alias_added=alias_added)


__all__ = ["InitResult", "add_path_alias", "initialise_project"]
