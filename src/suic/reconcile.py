# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reconcile requested component changes against the installed registry.

The engine decides, per requested name, whether to install, skip, reinstall
or remove a component. Every successful change is committed to the
installed-state store before the next name is processed, so an interrupted
batch leaves the registry describing exactly the components handled so far.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from .dependencies import DependencyConflict, diff_unused, find_conflicts, merge_dependency_sets
from .errors import FileSystemError, HTTPStatusError, SuicError
from .materializer import FileMaterializer
from .models import CatalogEntry, DependencySet, InstalledRegistry
from .naming import dedupe_names, index_by_name, normalize_name
from .prompts import Prompter

Notify = Callable[[str], None]


class StateStore(Protocol):
    """Installed-state persistence consumed by the engine."""

    def exists(self) -> bool:
        """Return ``True`` when persisted state is present."""
        ...

    def load(self) -> InstalledRegistry:
        """Return a fresh snapshot of the installed registry."""
        ...

    def record_add(self, entry: CatalogEntry) -> None:
        """Persist ``entry`` as installed."""
        ...

    def record_remove(self, name: str) -> None:
        """Persist the removal of ``name``."""
        ...


@dataclass(slots=True)
class AddReport:
    """Result of an add batch."""

    added: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    invalid: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)
    dependencies: DependencySet = field(default_factory=DependencySet)
    conflicts: list[DependencyConflict] = field(default_factory=list)


@dataclass(slots=True)
class RemoveReport:
    """Result of a remove batch."""

    removed: list[str] = field(default_factory=list)
    invalid: list[str] = field(default_factory=list)
    unused_files: list[str] = field(default_factory=list)
    deleted_files: list[Path] = field(default_factory=list)
    pruned_directories: list[Path] = field(default_factory=list)
    unused_dependencies: DependencySet = field(default_factory=DependencySet)


class ReconciliationEngine:
    """Apply add/remove batches to one project's installed components."""

    def __init__(
        self,
        store: StateStore,
        materializer: FileMaterializer,
        prompter: Prompter,
        *,
        install_dir: Path,
        source_base: str = "",
        on_install: Notify | None = None,
        on_remove: Notify | None = None,
    ) -> None:
        """Bind the engine to its collaborators.

        Args:
            store: Installed-state store for the project.
            materializer: File writer/remover.
            prompter: Source of reinstall confirmations.
            install_dir: Absolute directory receiving component files.
            source_base: Base URL component files are fetched from.
            on_install: Optional callback invoked before a component is written.
            on_remove: Optional callback invoked for each removed component.
        """

        self._store = store
        self._materializer = materializer
        self._prompter = prompter
        self._install_dir = install_dir
        self._source_base = source_base
        self._on_install = on_install
        self._on_remove = on_remove

    def add(self, names: Sequence[str], catalog: Sequence[CatalogEntry]) -> AddReport:
        """Install the components named in ``names`` from ``catalog``.

        Args:
            names: Requested component names in any casing; repeats are ignored.
            catalog: Remote catalog entries.

        Returns:
            AddReport: Per-name outcomes and the merged dependency requirements.

        Raises:
            CorruptStateError: If the installed registry cannot be read.
            NetworkError: On transport failures, which abort the whole batch.
        """

        catalog_index: dict[str, CatalogEntry] = {}
        for entry in catalog:
            catalog_index.setdefault(normalize_name(entry.name), entry)
        installed = self._store.load()
        installed_index = index_by_name(installed)

        report = AddReport()
        batch_sets: dict[str, DependencySet] = {}
        for raw in dedupe_names(names):
            key = normalize_name(raw)
            entry = catalog_index.get(key)
            if entry is None:
                report.invalid.append(raw)
                continue
            if key in installed_index and not self._confirm_reinstall(entry):
                report.skipped.append(entry.name)
                continue

            if self._on_install is not None:
                self._on_install(entry.name)
            try:
                self._materializer.install(entry.files, self._source_base, self._install_dir)
            except (FileSystemError, HTTPStatusError) as exc:
                report.failed[entry.name] = str(exc)
                continue

            self._store.record_add(entry)
            installed_index.setdefault(key, entry.name)
            report.added.append(entry.name)
            batch_sets[entry.name] = entry.dependency_set()

        report.dependencies = merge_dependency_sets(batch_sets.values())
        report.conflicts = self._batch_conflicts(installed, batch_sets)
        return report

    def remove(self, names: Sequence[str]) -> RemoveReport:
        """Remove the components named in ``names`` and clean up unused files.

        Lookups use the installed registry only, so removal works without the
        remote catalog.

        Args:
            names: Requested component names in any casing; repeats are ignored.

        Returns:
            RemoveReport: Removed and invalid names, deleted paths and the
            dependencies no remaining component needs.

        Raises:
            SuicError: If nothing is installed.
            CorruptStateError: If the installed registry cannot be read.
            FileSystemError: If cleanup fails part way.
        """

        if not self._store.exists():
            raise SuicError("No components were installed or the installed-registry file is missing.")
        working = self._store.load()
        index = index_by_name(working)

        report = RemoveReport()
        removed_entries: InstalledRegistry = {}
        for raw in dedupe_names(names):
            stored_name = index.get(normalize_name(raw))
            if stored_name is None or stored_name not in working:
                report.invalid.append(raw)
                continue
            removed_entries[stored_name] = working.pop(stored_name)
            self._store.record_remove(stored_name)
            report.removed.append(stored_name)
            if self._on_remove is not None:
                self._on_remove(stored_name)

        keep_files = {path for record in working.values() for path in record.files}
        unused_files: list[str] = []
        for record in removed_entries.values():
            for path in record.files:
                if path not in keep_files and path not in unused_files:
                    unused_files.append(path)
        report.unused_files = unused_files
        report.unused_dependencies = diff_unused(removed_entries.values(), working.values())

        if unused_files:
            report.deleted_files = self._materializer.uninstall(unused_files, self._install_dir)
            report.pruned_directories = self._materializer.prune_empty_directories(
                self._install_dir,
                unused_files,
                protected_dirs=(self._install_dir,),
            )
        return report

    def _confirm_reinstall(self, entry: CatalogEntry) -> bool:
        return self._prompter.confirm(
            f"Component '{entry.name}' already installed. Reinstall? "
            "(Warning: modified files will be lost, including files shared with other components)",
            default=True,
        )

    @staticmethod
    def _batch_conflicts(
        installed: InstalledRegistry,
        batch_sets: dict[str, DependencySet],
    ) -> list[DependencyConflict]:
        if not batch_sets:
            return []
        batch_keys = {normalize_name(name) for name in batch_sets}
        named: dict[str, DependencySet] = {
            name: record for name, record in installed.items() if normalize_name(name) not in batch_keys
        }
        named.update(batch_sets)
        touched = merge_dependency_sets(batch_sets.values())
        return [
            conflict for conflict in find_conflicts(named) if conflict.package in touched.kind(conflict.kind)
        ]


__all__ = [
    "AddReport",
    "Notify",
    "ReconciliationEngine",
    "RemoveReport",
    "StateStore",
]
