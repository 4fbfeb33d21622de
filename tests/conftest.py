# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest

from suic.errors import HTTPStatusError
from suic.fetch import build_url
from suic.models import CatalogEntry, InitRegistry, InstalledRecord, InstalledRegistry
from suic.naming import index_by_name, normalize_name

BASE_URL = "https://registry.test/main/"


class FakeRegistryClient:
    """In-memory stand-in for :class:`suic.fetch.RegistryClient`."""

    def __init__(
        self,
        catalog: Sequence[dict[str, Any]] = (),
        *,
        files: dict[str, str] | None = None,
        init_registry: dict[str, Any] | None = None,
        base_url: str = BASE_URL,
    ) -> None:
        self.base_url = base_url
        self.catalog = [CatalogEntry.model_validate(item) for item in catalog]
        self.init_registry = InitRegistry.model_validate(init_registry or {"files": []})
        self.files: dict[str, str] = {}
        for relative, content in (files or {}).items():
            self.files[build_url(base_url, relative)] = content
        self.requested: list[str] = []

    def fetch_text(self, url: str) -> str:
        self.requested.append(url)
        if url not in self.files:
            raise HTTPStatusError(f"Request for {url} failed with HTTP 404", url=url, status_code=404)
        return self.files[url]

    def fetch_catalog(self) -> list[CatalogEntry]:
        return list(self.catalog)

    def fetch_init_registry(self) -> InitRegistry:
        return self.init_registry


class FakePrompter:
    """Prompter returning scripted answers."""

    def __init__(self, *, confirm: bool = True, selection: Sequence[str] = ()) -> None:
        self.answer = confirm
        self.selection = list(selection)
        self.questions: list[str] = []

    def confirm(self, message: str, *, default: bool = True) -> bool:
        del default
        self.questions.append(message)
        return self.answer

    def multi_select(self, message: str, choices: Sequence[str]) -> list[str]:
        self.questions.append(message)
        return [choice for choice in self.selection if choice in choices] or list(self.selection)


class MemoryStore:
    """Installed-state store kept entirely in memory."""

    def __init__(self, registry: InstalledRegistry | None = None) -> None:
        self.registry: InstalledRegistry = dict(registry or {})
        self.present = registry is not None
        self.writes: list[tuple[str, str]] = []

    def exists(self) -> bool:
        return self.present

    def load(self) -> InstalledRegistry:
        return dict(self.registry)

    def record_add(self, entry: CatalogEntry) -> None:
        key = index_by_name(self.registry).get(normalize_name(entry.name), entry.name)
        self.registry[key] = InstalledRecord.from_entry(entry)
        self.present = True
        self.writes.append(("add", key))

    def record_remove(self, name: str) -> None:
        key = index_by_name(self.registry).get(normalize_name(name))
        if key is not None:
            del self.registry[key]
            self.writes.append(("remove", key))


SCENARIO_CATALOG: list[dict[str, Any]] = [
    {
        "name": "Card",
        "description": "A card.",
        "files": ["card.tsx"],
        "dependencies": {"react": "^18.0.0"},
    },
    {
        "name": "Button",
        "description": "A button.",
        "files": ["button.tsx", "shared/utils.ts"],
        "dependencies": {"react": "^18.0.0"},
    },
]

SCENARIO_FILES: dict[str, str] = {
    "card.tsx": "export const Card = () => null;\n",
    "button.tsx": "export const Button = () => null;\n",
    "shared/utils.ts": "export const cn = () => '';\n",
}


@pytest.fixture
def scenario_client() -> FakeRegistryClient:
    """Return a fake registry serving the Card/Button catalog."""

    return FakeRegistryClient(SCENARIO_CATALOG, files=SCENARIO_FILES)


@pytest.fixture
def make_client() -> Callable[..., FakeRegistryClient]:
    """Return a factory for fake registry clients."""

    return FakeRegistryClient


@pytest.fixture
def make_prompter() -> Callable[..., FakePrompter]:
    """Return a factory for scripted prompters."""

    return FakePrompter


@pytest.fixture
def make_store() -> Callable[..., MemoryStore]:
    """Return a factory for in-memory installed-state stores."""

    return MemoryStore


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Return an initialised project root with ``components`` as install path."""

    root = tmp_path / "app"
    root.mkdir()
    (root / "suic.config.json").write_text(
        json.dumps({"cwd": root.as_posix(), "installPath": "components"}),
        encoding="utf-8",
    )
    return root
