# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pydantic models describing catalog documents and persisted project state."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

DependencyMap = dict[str, str]


class DependencySet(BaseModel):
    """Package requirements grouped by dependency kind."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    dependencies: DependencyMap = Field(default_factory=dict)
    dev_dependencies: DependencyMap = Field(default_factory=dict, alias="devDependencies")
    peer_dependencies: DependencyMap = Field(default_factory=dict, alias="peerDependencies")

    @field_validator("dependencies", "dev_dependencies", "peer_dependencies", mode="before")
    @classmethod
    def _coerce_missing(cls, value: Mapping[str, str] | None) -> Mapping[str, str]:
        """Treat ``null`` dependency maps as empty.

        Args:
            value: Raw mapping (or ``None``) read from JSON.

        Returns:
            Mapping[str, str]: Mapping safe to validate.
        """

        return {} if value is None else value

    def kind(self, name: str) -> DependencyMap:
        """Return the mapping stored under the JSON key ``name``.

        Args:
            name: One of ``dependencies``, ``devDependencies`` or ``peerDependencies``.

        Returns:
            DependencyMap: Package to version-range mapping for that kind.

        Raises:
            KeyError: If ``name`` is not a known dependency kind.
        """

        if name == "dependencies":
            return self.dependencies
        if name == "devDependencies":
            return self.dev_dependencies
        if name == "peerDependencies":
            return self.peer_dependencies
        raise KeyError(name)

    def is_empty(self) -> bool:
        """Return ``True`` when no kind lists any package."""

        return not (self.dependencies or self.dev_dependencies or self.peer_dependencies)

    def dependency_set(self) -> DependencySet:
        """Return only the dependency triple carried by this model."""

        return DependencySet(
            dependencies=dict(self.dependencies),
            devDependencies=dict(self.dev_dependencies),
            peerDependencies=dict(self.peer_dependencies),
        )


class CatalogEntry(DependencySet):
    """Installable component advertised by the remote catalog."""

    name: str
    description: str | None = None
    doc_url: str | None = Field(default=None, alias="docUrl")
    files: tuple[str, ...] = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("component name must not be blank")
        return value


class InstalledRecord(DependencySet):
    """Snapshot of a component's files and dependencies taken at install time."""

    files: tuple[str, ...] = Field(default_factory=tuple)

    @classmethod
    def from_entry(cls, entry: CatalogEntry) -> InstalledRecord:
        """Copy the installable parts of ``entry`` into a new record.

        Args:
            entry: Catalog entry that was just installed.

        Returns:
            InstalledRecord: Record to persist in the installed registry.
        """

        return cls(
            files=tuple(entry.files),
            dependencies=dict(entry.dependencies),
            devDependencies=dict(entry.dev_dependencies),
            peerDependencies=dict(entry.peer_dependencies),
        )

    def to_json(self) -> dict[str, object]:
        """Return the persisted JSON shape of the record."""

        return {
            "files": list(self.files),
            "dependencies": dict(self.dependencies),
            "devDependencies": dict(self.dev_dependencies),
            "peerDependencies": dict(self.peer_dependencies),
        }


class Instruction(BaseModel):
    """Manual setup step shipped with the bootstrap registry."""

    title: str
    description: str


class InitRegistry(DependencySet):
    """Bootstrap document listing shared files installed by ``suic init``."""

    files: tuple[str, ...] = Field(default_factory=tuple)
    additional_instructions: tuple[Instruction, ...] = Field(
        default_factory=tuple,
        alias="additionalInstructions",
    )


class ProjectConfig(BaseModel):
    """Project configuration written by ``suic init``."""

    model_config = ConfigDict(populate_by_name=True)

    install_path: str = Field(alias="installPath", min_length=1)
    cwd: str | None = None

    def to_json(self) -> dict[str, str]:
        """Return the persisted JSON shape of the configuration."""

        payload = {"installPath": self.install_path}
        if self.cwd is not None:
            payload = {"cwd": self.cwd, **payload}
        return payload


InstalledRegistry = dict[str, InstalledRecord]


__all__ = [
    "CatalogEntry",
    "DependencyMap",
    "DependencySet",
    "InitRegistry",
    "InstalledRecord",
    "InstalledRegistry",
    "Instruction",
    "ProjectConfig",
]
