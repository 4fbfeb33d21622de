# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants for registry locations and project files."""

from __future__ import annotations

import os
from typing import Final

DEFAULT_BASE_URL: Final[str] = "https://raw.githubusercontent.com/vishnudt2004/test-repo/main/"
BASE_URL_ENV: Final[str] = "SUIC_REGISTRY_URL"
HTTP_TIMEOUT_ENV: Final[str] = "SUIC_HTTP_TIMEOUT"

INIT_REGISTRY_FILE: Final[str] = "registries/init.json"
COMPONENTS_REGISTRY_FILE: Final[str] = "registries/components.json"
CONFIG_FILE: Final[str] = "suic.config.json"
INSTALLED_REGISTRY_FILE: Final[str] = "suic.installed.json"
PACKAGE_MANIFEST_FILE: Final[str] = "package.json"
TSCONFIG_FILE: Final[str] = "tsconfig.json"

DEFAULT_INSTALL_PATH: Final[str] = "src/suic"
TS_PATH_ALIAS: Final[str] = "suic/*"
COMPONENTS_DOC_URL: Final[str] = "https://github.com/vishnudt2004/test-repo#components"

DEFAULT_HTTP_TIMEOUT: Final[float] = 15.0
HTTP_RETRIES: Final[int] = 2
HTTP_BACKOFF_SECONDS: Final[float] = 0.5

DEPENDENCY_KINDS: Final[tuple[str, str, str]] = (
    "dependencies",
    "devDependencies",
    "peerDependencies",
)


def resolve_base_url(override: str | None = None) -> str:
    """Return the registry base URL honouring CLI and environment overrides.

    Args:
        override: Explicit base URL supplied on the command line.

    Returns:
        str: Base URL guaranteed to end with a trailing slash.
    """

    candidate = override or os.environ.get(BASE_URL_ENV) or DEFAULT_BASE_URL
    return candidate if candidate.endswith("/") else f"{candidate}/"


def ts_alias_target(install_path: str) -> str:
    """Return the ``tsconfig`` path mapping target for ``install_path``."""

    return f"./{install_path.strip('/')}/*"


__all__ = [
    "BASE_URL_ENV",
    "COMPONENTS_DOC_URL",
    "COMPONENTS_REGISTRY_FILE",
    "CONFIG_FILE",
    "DEFAULT_BASE_URL",
    "DEFAULT_HTTP_TIMEOUT",
    "DEFAULT_INSTALL_PATH",
    "DEPENDENCY_KINDS",
    "HTTP_BACKOFF_SECONDS",
    "HTTP_RETRIES",
    "HTTP_TIMEOUT_ENV",
    "INIT_REGISTRY_FILE",
    "INSTALLED_REGISTRY_FILE",
    "PACKAGE_MANIFEST_FILE",
    "TSCONFIG_FILE",
    "TS_PATH_ALIAS",
    "resolve_base_url",
    "ts_alias_target",
]
