# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

from __future__ import annotations

from suic.naming import dedupe_names, index_by_name, normalize_name


def test_normalize_name_ignores_case_and_whitespace() -> None:
    assert normalize_name("  Button ") == normalize_name("BUTTON") == "button"


def test_dedupe_names_keeps_first_seen_casing() -> None:
    assert dedupe_names(["Card", "button", "CARD", "Button", "modal"]) == ["Card", "button", "modal"]


def test_index_by_name_prefers_first_key() -> None:
    index = index_by_name({"Button": 1, "card": 2, "BUTTON": 3})

    assert index == {"button": "Button", "card": "card"}
