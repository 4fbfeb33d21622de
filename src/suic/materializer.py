# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Write component files into a project and clean them up again."""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterable, Sequence
from pathlib import Path

from .errors import FileSystemError
from .fetch import build_url

FetchText = Callable[[str], str]


def resolve_target(target_dir: Path, relative: str) -> Path:
    """Return ``target_dir / relative`` after checking it stays inside ``target_dir``.

    Args:
        target_dir: Install root for component files.
        relative: Catalog-relative file path.

    Returns:
        Path: Absolute destination path.

    Raises:
        FileSystemError: If ``relative`` escapes the install root.
    """

    root = target_dir.resolve()
    candidate = (root / relative.lstrip("/\\")).resolve()
    if candidate != root and root not in candidate.parents:
        raise FileSystemError(f"Refusing to touch '{relative}': path escapes {root}")
    return candidate


class FileMaterializer:
    """Materialise catalog files on disk using an injected text fetcher.

    Removal needs no fetcher, so one may be omitted for remove-only use.
    """

    def __init__(self, fetch_text: FetchText | None = None) -> None:
        self._fetch_text = fetch_text

    def install(self, files: Sequence[str], source_base: str, target_dir: Path) -> list[Path]:
        """Fetch each of ``files`` from ``source_base`` and write it under ``target_dir``.

        Existing files are overwritten; deciding whether that is acceptable is
        the caller's job.

        Args:
            files: Relative file paths in write order.
            source_base: Base URL the relative paths are resolved against.
            target_dir: Install root inside the project.

        Returns:
            list[Path]: Paths written, in input order.

        Raises:
            FileSystemError: If a destination cannot be written.
            NetworkError: If a file cannot be fetched.
            RuntimeError: If the materializer has no text fetcher.
        """

        if self._fetch_text is None:
            raise RuntimeError("FileMaterializer was created without a text fetcher")
        written: list[Path] = []
        for relative in files:
            destination = resolve_target(target_dir, relative)
            content = self._fetch_text(build_url(source_base, relative))
            try:
                destination.parent.mkdir(parents=True, exist_ok=True)
                destination.write_text(content, encoding="utf-8")
            except OSError as exc:
                raise FileSystemError(f"Failed to write {destination}") from exc
            written.append(destination)
        return written

    def uninstall(self, files: Iterable[str], target_dir: Path) -> list[Path]:
        """Delete ``files`` below ``target_dir``; files already gone are skipped.

        Args:
            files: Relative file paths to delete.
            target_dir: Install root inside the project.

        Returns:
            list[Path]: Paths that were actually deleted.

        Raises:
            FileSystemError: If an existing file cannot be removed.
        """

        removed: list[Path] = []
        for relative in files:
            path = resolve_target(target_dir, relative)
            if not path.is_file():
                continue
            try:
                path.unlink()
            except FileNotFoundError:
                continue
            except OSError as exc:
                raise FileSystemError(f"Failed to remove {path}") from exc
            removed.append(path)
        return removed

    def prune_empty_directories(
        self,
        target_dir: Path,
        affected_files: Iterable[str],
        protected_dirs: Collection[Path] = (),
    ) -> list[Path]:
        """Remove directories emptied by a cleanup, walking upward from each file.

        The walk for a file stops at the first directory that still has
        entries, at ``target_dir`` itself, or at any of ``protected_dirs``.
        Emptiness is always checked by listing the directory.

        Args:
            target_dir: Install root; never removed.
            affected_files: Relative paths of files that were deleted.
            protected_dirs: Additional directories that must survive.

        Returns:
            list[Path]: Directories removed, in removal order.

        Raises:
            FileSystemError: If an empty directory cannot be removed.
        """

        root = target_dir.resolve()
        protected = {root, *(path.resolve() for path in protected_dirs)}
        removed: list[Path] = []
        for relative in affected_files:
            current = resolve_target(target_dir, relative).parent
            while current not in protected and root in current.parents:
                if not current.exists():
                    current = current.parent
                    continue
                if not current.is_dir() or any(current.iterdir()):
                    break
                try:
                    current.rmdir()
                except OSError as exc:
                    raise FileSystemError(f"Failed to remove empty directory {current}") from exc
                removed.append(current)
                current = current.parent
        return removed


__all__ = ["FetchText", "FileMaterializer", "resolve_target"]
