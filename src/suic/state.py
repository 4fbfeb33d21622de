# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Persistence for the installed-component registry.

The registry file is the single source of truth for what ``suic`` has written
into a project. Every mutation re-reads the file, applies one change and
rewrites it through a temporary sibling so an interrupted write never
truncates the previous state.
"""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .constants import INSTALLED_REGISTRY_FILE
from .errors import CorruptStateError, FileSystemError
from .models import CatalogEntry, InstalledRecord, InstalledRegistry
from .naming import index_by_name, normalize_name


def registry_path(root: Path) -> Path:
    """Return the installed-registry location for the project at ``root``."""

    return root / INSTALLED_REGISTRY_FILE


def _parse_registry(path: Path, raw: str) -> InstalledRegistry:
    try:
        payload: Any = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CorruptStateError(path, f"invalid JSON: {exc.msg}") from exc
    if not isinstance(payload, Mapping):
        raise CorruptStateError(path, "expected a JSON object at the top level")

    registry: InstalledRegistry = {}
    for name, record in payload.items():
        try:
            registry[str(name)] = InstalledRecord.model_validate(record)
        except ValidationError as exc:
            raise CorruptStateError(path, f"entry '{name}' is malformed") from exc
    return registry


def read_registry(path: Path) -> InstalledRegistry:
    """Return the registry stored at ``path``; a missing file is an empty registry.

    Args:
        path: Installed-registry file location.

    Returns:
        InstalledRegistry: Mapping of original-cased names to installed records.

    Raises:
        CorruptStateError: If the file exists but cannot be parsed.
    """

    if not path.is_file():
        return {}
    return _parse_registry(path, path.read_text(encoding="utf-8"))


def write_registry(path: Path, registry: Mapping[str, InstalledRecord]) -> None:
    """Persist ``registry`` to ``path`` via a temporary file and atomic rename.

    Args:
        path: Destination installed-registry file.
        registry: Records keyed by their display name.

    Raises:
        FileSystemError: If the file cannot be written.
    """

    payload = {name: record.to_json() for name, record in registry.items()}
    text = json.dumps(payload, indent=2) + "\n"
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            handle.write(text)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        raise FileSystemError(f"Failed to write installed registry at {path}") from exc


def load(root: Path) -> tuple[Path, InstalledRegistry]:
    """Return the registry path and its current contents for ``root``."""

    path = registry_path(root)
    return path, read_registry(path)


def record_add(path: Path, entry: CatalogEntry) -> InstalledRegistry:
    """Upsert ``entry`` into the registry at ``path`` and persist immediately.

    An existing record matching ``entry.name`` case-insensitively keeps its
    stored key so the first-seen casing survives reinstalls.

    Args:
        path: Installed-registry file location.
        entry: Catalog entry that was installed successfully.

    Returns:
        InstalledRegistry: Registry contents after the write.
    """

    registry = read_registry(path)
    key = index_by_name(registry).get(normalize_name(entry.name), entry.name)
    registry[key] = InstalledRecord.from_entry(entry)
    write_registry(path, registry)
    return registry


def record_remove(path: Path, name: str) -> InstalledRegistry:
    """Delete the record matching ``name`` and persist; unknown names are ignored.

    Args:
        path: Installed-registry file location.
        name: Component name in any casing.

    Returns:
        InstalledRegistry: Registry contents after the call.
    """

    registry = read_registry(path)
    key = index_by_name(registry).get(normalize_name(name))
    if key is None:
        return registry
    del registry[key]
    write_registry(path, registry)
    return registry


def create(root: Path) -> Path:
    """Create an empty registry for ``root`` unless one already exists."""

    path = registry_path(root)
    if not path.exists():
        write_registry(path, {})
    return path


class InstalledStateStore:
    """Handle bound to one project's installed-registry file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    @classmethod
    def for_root(cls, root: Path) -> InstalledStateStore:
        """Return a store for the project rooted at ``root``."""

        return cls(registry_path(root))

    def exists(self) -> bool:
        """Return ``True`` when the registry file is present on disk."""

        return self.path.is_file()

    def load(self) -> InstalledRegistry:
        """Return a fresh copy of the persisted registry."""

        return read_registry(self.path)

    def record_add(self, entry: CatalogEntry) -> None:
        """Persist ``entry`` as installed."""

        record_add(self.path, entry)

    def record_remove(self, name: str) -> None:
        """Persist the removal of ``name``."""

        record_remove(self.path, name)


__all__ = [
    "InstalledStateStore",
    "create",
    "load",
    "read_registry",
    "record_add",
    "record_remove",
    "registry_path",
    "write_registry",
]
