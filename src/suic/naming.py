# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Case-insensitive identity helpers for component names."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TypeVar

ValueT = TypeVar("ValueT")


def normalize_name(name: str) -> str:
    """Return the identity key for ``name``.

    Args:
        name: Component name as typed by the user or stored in a registry.

    Returns:
        str: Lowercased name with surrounding whitespace removed.
    """

    return name.strip().lower()


def dedupe_names(names: Iterable[str]) -> list[str]:
    """Drop repeated names while preserving first-seen order and casing.

    Args:
        names: Raw names, typically CLI arguments.

    Returns:
        list[str]: Names with later case-insensitive duplicates removed.
    """

    seen: set[str] = set()
    unique: list[str] = []
    for name in names:
        key = normalize_name(name)
        if key in seen:
            continue
        seen.add(key)
        unique.append(name)
    return unique


def index_by_name(items: Mapping[str, ValueT]) -> dict[str, str]:
    """Return a lookup from normalized key to the original mapping key."""

    index: dict[str, str] = {}
    for original in items:
        index.setdefault(normalize_name(original), original)
    return index


__all__ = ["dedupe_names", "index_by_name", "normalize_name"]
