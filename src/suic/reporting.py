# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console rendering for command summaries."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Final

from .constants import COMPONENTS_DOC_URL, DEPENDENCY_KINDS
from .dependencies import (
    DependencyConflict,
    DependencyStatus,
    VersionMatch,
    classify_installed,
    read_installed_versions,
)
from .logging import blank, bullet, fail, info, ok, section, warn
from .models import CatalogEntry, DependencySet, InitRegistry
from .reconcile import AddReport, RemoveReport

KIND_TITLES: Final[dict[str, str]] = {
    "dependencies": "Dependencies",
    "devDependencies": "Dev Dependencies",
    "peerDependencies": "Peer Dependencies",
}

_MATCH_NOTES: Final[dict[VersionMatch, str]] = {
    VersionMatch.EXACT: "installed",
    VersionMatch.FAMILY_MISMATCH: "installed, same major",
    VersionMatch.MAJOR_MISMATCH: "installed, different major",
    VersionMatch.UNKNOWN: "installed, version not comparable",
}


def format_names(names: Iterable[str]) -> str:
    """Return ``names`` joined for a single summary line."""

    return ", ".join(names)


def _format_status(status: DependencyStatus) -> str:
    line = f"{status.package}@{status.required}"
    if status.installed is None:
        return line
    return f"{line} ({_MATCH_NOTES[status.match]}: {status.installed})"


def report_dependencies(
    description: str,
    deps: DependencySet,
    root: Path,
    *,
    use_emoji: bool,
) -> list[DependencyStatus]:
    """Print ``deps`` grouped by kind, annotated with locally declared versions.

    Args:
        description: Headline describing what the user should do.
        deps: Requirements to report.
        root: Project root holding ``package.json``.
        use_emoji: Flag indicating whether emoji output is desired.

    Returns:
        list[DependencyStatus]: Classification for each reported package.
    """

    if deps.is_empty():
        return []
    installed = read_installed_versions(root)
    if installed is None:
        warn("package.json not found. Cannot detect installed dependencies.", use_emoji=use_emoji)
    statuses = classify_installed(deps, installed or {})
    blank()
    warn(description, use_emoji=use_emoji)
    for kind in DEPENDENCY_KINDS:
        entries = [status for status in statuses if status.kind == kind]
        if not entries:
            continue
        info(f"{KIND_TITLES[kind]}:", use_emoji=False)
        for status in entries:
            bullet(_format_status(status))
    blank()
    return statuses


def report_conflicts(conflicts: Sequence[DependencyConflict], *, use_emoji: bool) -> None:
    """Warn about packages requested with differing ranges."""

    for conflict in conflicts:
        ranges = ", ".join(f"{component} wants {version}" for component, version in conflict.requests)
        warn(
            f"Conflicting {KIND_TITLES[conflict.kind].lower()} for {conflict.package}: {ranges}",
            use_emoji=use_emoji,
        )


def report_add(report: AddReport, root: Path, *, use_emoji: bool) -> None:
    """Print the summary of an add batch."""

    blank()
    if report.added:
        report_dependencies(
            "Required dependencies (install if missing, skip if already installed and compatible):",
            report.dependencies,
            root,
            use_emoji=use_emoji,
        )
        report_conflicts(report.conflicts, use_emoji=use_emoji)
        ok(f"Successfully added components: {format_names(report.added)}", use_emoji=use_emoji)
    if report.skipped:
        info(f"Skipped components (already installed): {format_names(report.skipped)}", use_emoji=use_emoji)
    if report.invalid:
        fail(
            f"Failed to add components (not found in the registry): {format_names(report.invalid)}",
            use_emoji=use_emoji,
        )
    for name, reason in report.failed.items():
        fail(f"Failed to install {name}: {reason}", use_emoji=use_emoji)
    if report.added:
        blank()
        info(f"Docs: {COMPONENTS_DOC_URL}", use_emoji=use_emoji)


def report_remove(report: RemoveReport, root: Path, *, use_emoji: bool) -> None:
    """Print the summary of a remove batch."""

    blank()
    if report.removed:
        report_dependencies(
            "No longer required dependencies (uninstall if unused, skip if still needed):",
            report.unused_dependencies,
            root,
            use_emoji=use_emoji,
        )
        ok(f"Successfully removed components: {format_names(report.removed)}", use_emoji=use_emoji)
    if report.invalid:
        fail(
            f"Invalid components (not installed / not found): {format_names(report.invalid)}",
            use_emoji=use_emoji,
        )


def report_init(registry: InitRegistry, install_path: str, root: Path, *, use_emoji: bool) -> None:
    """Print dependency requirements and manual steps after ``suic init``."""

    report_dependencies(
        "Required dependencies (install if missing, skip if already installed and compatible):",
        registry.dependency_set(),
        root,
        use_emoji=use_emoji,
    )
    if registry.additional_instructions:
        info("Additional setup instructions:", use_emoji=use_emoji)
        for instruction in registry.additional_instructions:
            bullet(f"{instruction.title}:")
            bullet(instruction.description, indent=4)
        blank()
    ok(
        f"Simple UI Components ready at '{install_path}'. Run 'suic add [components...]' to use.",
        use_emoji=use_emoji,
    )


def render_catalog(catalog: Sequence[CatalogEntry], *, use_emoji: bool) -> None:
    """List every catalog entry with its description and documentation link."""

    section("Available components")
    for entry in catalog:
        info(entry.name, use_emoji=False)
        bullet(entry.description or "(no description)", indent=4)
        if entry.doc_url:
            bullet(f"Docs: {entry.doc_url}", indent=4)
    blank()
    info("Use 'suic add [components...]' to install.", use_emoji=use_emoji)
    info("Or run 'suic add' to select from the list.", use_emoji=use_emoji)


__all__ = [
    "KIND_TITLES",
    "format_names",
    "render_catalog",
    "report_add",
    "report_conflicts",
    "report_dependencies",
    "report_init",
    "report_remove",
]
