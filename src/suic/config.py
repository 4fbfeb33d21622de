# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load and create the project configuration file."""

from __future__ import annotations

import json
from pathlib import Path, PurePosixPath

from pydantic import ValidationError

from .constants import CONFIG_FILE, DEFAULT_INSTALL_PATH
from .errors import ConfigError
from .models import ProjectConfig


def config_path(root: Path) -> Path:
    """Return the configuration file location for ``root``."""

    return root / CONFIG_FILE


def sanitize_install_path(raw: str | None) -> str:
    """Normalise a user supplied install directory into a project-relative path.

    Leading slashes are stripped, backslashes become forward slashes and
    redundant segments collapse.

    Args:
        raw: Directory as typed by the user; ``None`` selects the default.

    Returns:
        str: Relative POSIX-style directory.

    Raises:
        ConfigError: If the path is empty or climbs above the project root.
    """

    candidate = (raw or DEFAULT_INSTALL_PATH).replace("\\", "/").lstrip("/")
    parts = [part for part in PurePosixPath(candidate).parts if part not in ("", ".")]
    if not parts:
        raise ConfigError("Install path must name a directory inside the project.")
    if ".." in parts:
        raise ConfigError(f"Install path '{raw}' must not leave the project root.")
    return "/".join(parts)


def load_config(root: Path) -> ProjectConfig:
    """Return the configuration stored under ``root``.

    Args:
        root: Project root directory.

    Returns:
        ProjectConfig: Parsed configuration.

    Raises:
        ConfigError: If the file is missing or malformed.
    """

    path = config_path(root)
    if not path.is_file():
        raise ConfigError(f"Config file not found at ./{CONFIG_FILE}. Run 'suic init' first.")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        config = ProjectConfig.model_validate(payload)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigError(
            f"Invalid config at ./{CONFIG_FILE}. Run 'suic init' to reinitialize "
            "(may overwrite changes) or fix the file manually.",
        ) from exc
    return config.model_copy(update={"install_path": sanitize_install_path(config.install_path)})


def create_config(root: Path, install_path: str | None = None) -> ProjectConfig:
    """Write a fresh configuration for ``root`` and return it.

    Args:
        root: Project root directory.
        install_path: Requested component directory; defaults to ``src/suic``.

    Returns:
        ProjectConfig: The configuration that was written.

    Raises:
        ConfigError: If the install path is invalid or the file cannot be written.
    """

    config = ProjectConfig(
        installPath=sanitize_install_path(install_path),
        cwd=root.as_posix(),
    )
    try:
        config_path(root).write_text(json.dumps(config.to_json(), indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ConfigError("Failed to create config file") from exc
    return config


def install_dir(root: Path, config: ProjectConfig) -> Path:
    """Return the absolute component directory configured for ``root``."""

    return root / config.install_path


__all__ = ["config_path", "create_config", "install_dir", "load_config", "sanitize_install_path"]
