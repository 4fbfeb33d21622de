# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Merge, diff and classify package requirements across components."""

from __future__ import annotations

import json
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Final

from packaging.version import InvalidVersion, Version

from .constants import DEPENDENCY_KINDS, PACKAGE_MANIFEST_FILE
from .models import DependencyMap, DependencySet

_VERSION_PATTERN: Final[re.Pattern[str]] = re.compile(r"(\d+(?:\.\d+)*)")


class VersionMatch(str, Enum):
    """Relationship between a required range and the locally declared version."""

    EXACT = "exact"
    FAMILY_MISMATCH = "family-mismatch"
    MAJOR_MISMATCH = "major-mismatch"
    NOT_INSTALLED = "not-installed"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class DependencyStatus:
    """Advisory classification for one required package."""

    kind: str
    package: str
    required: str
    installed: str | None
    match: VersionMatch


@dataclass(frozen=True, slots=True)
class DependencyConflict:
    """Package requested with different ranges by different components."""

    kind: str
    package: str
    requests: tuple[tuple[str, str], ...]


def _union(sets: Iterable[DependencySet]) -> dict[str, DependencyMap]:
    merged: dict[str, DependencyMap] = {kind: {} for kind in DEPENDENCY_KINDS}
    for dep_set in sets:
        for kind in DEPENDENCY_KINDS:
            merged[kind].update(dep_set.kind(kind))
    return merged


def merge_dependency_sets(sets: Iterable[DependencySet]) -> DependencySet:
    """Union ``sets`` per dependency kind; the last range seen for a package wins.

    Args:
        sets: Dependency sets in iteration order.

    Returns:
        DependencySet: Aggregate requirements.
    """

    merged = _union(sets)
    return DependencySet(
        dependencies=merged["dependencies"],
        devDependencies=merged["devDependencies"],
        peerDependencies=merged["peerDependencies"],
    )


def find_conflicts(named_sets: Mapping[str, DependencySet]) -> list[DependencyConflict]:
    """Return packages that components request with differing version ranges.

    Args:
        named_sets: Dependency sets keyed by component name.

    Returns:
        list[DependencyConflict]: Conflicts ordered by kind then package name.
    """

    conflicts: list[DependencyConflict] = []
    for kind in DEPENDENCY_KINDS:
        requests: dict[str, list[tuple[str, str]]] = {}
        for component, dep_set in named_sets.items():
            for package, version in dep_set.kind(kind).items():
                requests.setdefault(package, []).append((component, version))
        for package in sorted(requests):
            entries = requests[package]
            if len({version for _, version in entries}) > 1:
                conflicts.append(DependencyConflict(kind=kind, package=package, requests=tuple(entries)))
    return conflicts


def diff_unused(
    removed: Iterable[DependencySet],
    remaining: Iterable[DependencySet],
) -> DependencySet:
    """Return packages required by ``removed`` sets and by none of ``remaining``.

    A package still needed by any surviving component never appears in the
    result, whichever dependency kind lists it on either side.

    Args:
        removed: Dependency sets of components removed in this batch.
        remaining: Dependency sets of components still installed.

    Returns:
        DependencySet: Packages that are safe to suggest uninstalling.
    """

    removed_union = _union(removed)
    keep = {pkg for packages in _union(remaining).values() for pkg in packages}
    unused = {
        kind: {pkg: ver for pkg, ver in removed_union[kind].items() if pkg not in keep}
        for kind in DEPENDENCY_KINDS
    }
    return DependencySet(
        dependencies=unused["dependencies"],
        devDependencies=unused["devDependencies"],
        peerDependencies=unused["peerDependencies"],
    )


def read_installed_versions(root: Path) -> dict[str, str] | None:
    """Return the packages declared in ``package.json`` under ``root``.

    Args:
        root: Project root directory.

    Returns:
        dict[str, str] | None: Runtime and dev dependencies merged, or ``None``
        when the manifest is missing or unreadable.
    """

    manifest = root / PACKAGE_MANIFEST_FILE
    if not manifest.is_file():
        return None
    try:
        data = json.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return None
    if not isinstance(data, Mapping):
        return None
    declared: dict[str, str] = {}
    for key in ("dependencies", "devDependencies"):
        section = data.get(key)
        if isinstance(section, Mapping):
            declared.update({str(name): str(version) for name, version in section.items()})
    return declared


def _parse_version(raw: str) -> Version | None:
    match = _VERSION_PATTERN.search(raw)
    if match is None:
        return None
    try:
        return Version(match.group(1))
    except InvalidVersion:
        return None


def classify_version(required: str, installed: str | None) -> VersionMatch:
    """Compare the base versions of ``required`` and ``installed`` ranges.

    Args:
        required: Version range requested by a component (``^18.0.0``).
        installed: Version declared by the project manifest, if any.

    Returns:
        VersionMatch: Advisory classification.
    """

    if installed is None:
        return VersionMatch.NOT_INSTALLED
    wanted = _parse_version(required)
    have = _parse_version(installed)
    if wanted is None or have is None:
        return VersionMatch.EXACT if required.strip() == installed.strip() else VersionMatch.UNKNOWN
    if wanted == have:
        return VersionMatch.EXACT
    if wanted.major == have.major:
        return VersionMatch.FAMILY_MISMATCH
    return VersionMatch.MAJOR_MISMATCH


def classify_installed(
    required: DependencySet,
    installed: Mapping[str, str],
) -> list[DependencyStatus]:
    """Classify every package in ``required`` against ``installed`` versions.

    Args:
        required: Aggregate requirements to report.
        installed: Package to declared-version mapping from the project manifest.

    Returns:
        list[DependencyStatus]: One status per required package, in kind order.
    """

    statuses: list[DependencyStatus] = []
    for kind in DEPENDENCY_KINDS:
        for package, version in required.kind(kind).items():
            current = installed.get(package)
            statuses.append(
                DependencyStatus(
                    kind=kind,
                    package=package,
                    required=version,
                    installed=current,
                    match=classify_version(version, current),
                ),
            )
    return statuses


__all__ = [
    "DependencyConflict",
    "DependencyStatus",
    "VersionMatch",
    "classify_installed",
    "classify_version",
    "diff_unused",
    "find_conflicts",
    "merge_dependency_sets",
    "read_installed_versions",
]
