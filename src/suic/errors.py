# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the reconciliation subsystem and the CLI."""

from __future__ import annotations

from pathlib import Path


class SuicError(RuntimeError):
    """Base error for failures that should terminate a command with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


class ConfigError(SuicError):
    """Raised when the project configuration is missing or malformed."""


class CorruptStateError(SuicError):
    """Raised when the installed-registry file cannot be parsed."""

    def __init__(self, path: Path, detail: str) -> None:
        """Describe the corrupt registry located at ``path``.

        Args:
            path: Location of the unreadable installed-registry file.
            detail: Parser or validation message explaining the corruption.
        """

        super().__init__(
            f"Installed registry at {path} is corrupt ({detail}). "
            "Run 'suic init' to reinitialize or repair the file manually.",
        )
        self.path = path


class NetworkError(SuicError):
    """Raised when a registry or file fetch fails."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class NetworkTimeoutError(NetworkError):
    """Raised when a fetch exceeds the configured timeout."""


class HTTPStatusError(NetworkError):
    """Raised when the registry answers with a non-success HTTP status."""

    def __init__(self, message: str, *, url: str, status_code: int) -> None:
        super().__init__(message, url=url)
        self.status_code = status_code


class FileSystemError(SuicError):
    """Raised when component files cannot be written or removed."""


class PromptCancelledError(SuicError):
    """Raised when the user aborts an interactive prompt."""


def iter_causes(error: BaseException) -> list[BaseException]:
    """Return the ``__cause__``/``__context__`` chain below ``error``.

    Args:
        error: Exception whose underlying causes should be collected.

    Returns:
        list[BaseException]: Chained exceptions ordered from outermost to innermost.
    """

    chain: list[BaseException] = []
    seen: set[int] = {id(error)}
    current = error.__cause__ or error.__context__
    while current is not None and id(current) not in seen:
        chain.append(current)
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return chain


__all__ = [
    "ConfigError",
    "CorruptStateError",
    "FileSystemError",
    "HTTPStatusError",
    "NetworkError",
    "NetworkTimeoutError",
    "PromptCancelledError",
    "SuicError",
    "iter_causes",
]
