# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI tests for the init, add, remove and list commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from suic.cli.app import app
from suic.errors import NetworkError


def _patch_services(monkeypatch: pytest.MonkeyPatch, command: str, client, prompter) -> None:
    module = f"suic.cli.commands.{command}.command"
    if command != "remove":
        monkeypatch.setattr(f"{module}.build_client", lambda registry_url: client)
    if command != "list_components":
        monkeypatch.setattr(f"{module}.build_prompter", lambda *, assume_yes: prompter)


def _installed(root: Path) -> dict:
    return json.loads((root / "suic.installed.json").read_text(encoding="utf-8"))


def test_version_flag() -> None:
    result = CliRunner().invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.stdout.startswith("suic ")


def test_init_writes_config_and_reports_dependencies(monkeypatch, tmp_path: Path, make_client, make_prompter) -> None:
    client = make_client(
        init_registry={"files": ["lib/utils.ts"], "dependencies": {"clsx": "^2.0.0"}},
        files={"lib/utils.ts": "export {};\n"},
    )
    prompter = make_prompter()
    _patch_services(monkeypatch, "init", client, prompter)

    result = CliRunner().invoke(
        app,
        ["init", "--root", str(tmp_path), "--install-path", "/src/ui", "--no-emoji"],
    )

    assert result.exit_code == 0
    assert json.loads((tmp_path / "suic.config.json").read_text(encoding="utf-8"))["installPath"] == "src/ui"
    assert (tmp_path / "src" / "ui" / "lib" / "utils.ts").is_file()
    assert _installed(tmp_path) == {}
    assert "package.json not found" in result.stdout
    assert "clsx@^2.0.0" in result.stdout
    assert "Simple UI Components ready at 'src/ui'" in result.stdout
    assert "is the project root" in prompter.questions[0]


def test_init_cancelled_leaves_project_untouched(monkeypatch, tmp_path: Path, make_client, make_prompter) -> None:
    _patch_services(monkeypatch, "init", make_client(), make_prompter(confirm=False))

    result = CliRunner().invoke(app, ["init", "--root", str(tmp_path), "--no-emoji"])

    assert result.exit_code == 0
    assert "Initialization cancelled." in result.stdout
    assert list(tmp_path.iterdir()) == []


def test_add_installs_components_and_lists_dependencies(
    monkeypatch, project: Path, scenario_client, make_prompter
) -> None:
    (project / "package.json").write_text(json.dumps({"dependencies": {"react": "^18.2.0"}}), encoding="utf-8")
    _patch_services(monkeypatch, "add", scenario_client, make_prompter())

    result = CliRunner().invoke(app, ["add", "card", "Button", "Tooltip", "--root", str(project), "--no-emoji"])

    assert result.exit_code == 0
    assert (project / "components" / "shared" / "utils.ts").is_file()
    assert list(_installed(project)) == ["Card", "Button"]
    assert "react@^18.0.0 (installed, same major: ^18.2.0)" in result.stdout
    assert "Successfully added components: Card, Button" in result.stdout
    assert "not found in the registry): Tooltip" in result.stdout
    assert "✅" not in result.stdout


def test_add_prompts_when_no_names_given(monkeypatch, project: Path, scenario_client, make_prompter) -> None:
    prompter = make_prompter(selection=["Card"])
    _patch_services(monkeypatch, "add", scenario_client, prompter)

    result = CliRunner().invoke(app, ["add", "--root", str(project), "--no-emoji"])

    assert result.exit_code == 0
    assert prompter.questions == ["Select components to add:"]
    assert list(_installed(project)) == ["Card"]


def test_add_reports_failed_component_with_exit_code(
    monkeypatch, project: Path, make_client, make_prompter
) -> None:
    client = make_client([{"name": "Broken", "files": ["broken.tsx"]}])
    _patch_services(monkeypatch, "add", client, make_prompter())

    result = CliRunner().invoke(app, ["add", "Broken", "--root", str(project), "--no-emoji"])

    assert result.exit_code == 1
    assert "Failed to install Broken" in result.stdout
    assert not (project / "suic.installed.json").exists()


def test_add_without_config_fails(monkeypatch, tmp_path: Path, scenario_client, make_prompter) -> None:
    _patch_services(monkeypatch, "add", scenario_client, make_prompter())

    result = CliRunner().invoke(app, ["add", "Card", "--root", str(tmp_path), "--no-emoji"])

    assert result.exit_code == 1
    assert "Error in component installation" in result.stdout
    assert "Run 'suic init' first." in result.stdout


def test_add_network_failure_shows_cause_in_debug(
    monkeypatch, project: Path, scenario_client, make_prompter
) -> None:
    def offline() -> list:
        try:
            raise ConnectionError("connection refused")
        except ConnectionError as exc:
            raise NetworkError("Could not connect while fetching catalog", url="https://registry.test/") from exc

    scenario_client.fetch_catalog = offline
    _patch_services(monkeypatch, "add", scenario_client, make_prompter())

    result = CliRunner().invoke(app, ["add", "Card", "--root", str(project), "--no-emoji", "--debug"])

    assert result.exit_code == 1
    assert "Could not connect while fetching catalog" in result.stdout
    assert "caused_by=ConnectionError connection refused" in result.stdout


def test_remove_reports_unused_dependencies(monkeypatch, project: Path, scenario_client, make_prompter) -> None:
    _patch_services(monkeypatch, "add", scenario_client, make_prompter())
    _patch_services(monkeypatch, "remove", scenario_client, make_prompter())
    runner = CliRunner()
    runner.invoke(app, ["add", "Card", "Button", "--root", str(project), "--no-emoji"])

    partial = runner.invoke(app, ["remove", "card", "--root", str(project), "--no-emoji"])
    assert partial.exit_code == 0
    assert "No longer required" not in partial.stdout
    assert (project / "components" / "shared" / "utils.ts").is_file()

    result = runner.invoke(app, ["remove", "BUTTON", "Ghost", "--root", str(project), "--no-emoji"])

    assert result.exit_code == 0
    assert "react@^18.0.0" in result.stdout
    assert "Successfully removed components: Button" in result.stdout
    assert "(not installed / not found): Ghost" in result.stdout
    assert _installed(project) == {}
    assert list((project / "components").iterdir()) == []


def test_remove_with_nothing_installed(monkeypatch, project: Path, scenario_client, make_prompter) -> None:
    _patch_services(monkeypatch, "remove", scenario_client, make_prompter())

    result = CliRunner().invoke(app, ["remove", "Card", "--root", str(project), "--no-emoji"])

    assert result.exit_code == 1
    assert "No components were installed" in result.stdout


def test_remove_rejects_corrupt_registry(monkeypatch, project: Path, scenario_client, make_prompter) -> None:
    (project / "suic.installed.json").write_text("{oops", encoding="utf-8")
    _patch_services(monkeypatch, "remove", scenario_client, make_prompter())

    result = CliRunner().invoke(app, ["remove", "Card", "--root", str(project), "--no-emoji"])

    assert result.exit_code == 1
    assert "is corrupt" in result.stdout
    assert (project / "suic.installed.json").read_text(encoding="utf-8") == "{oops"


def test_list_renders_catalog(monkeypatch, make_client) -> None:
    client = make_client(
        [
            {"name": "Card", "description": "A card.", "files": ["card.tsx"], "docUrl": "https://docs.test/card"},
            {"name": "Badge", "files": ["badge.tsx"]},
        ],
    )
    _patch_services(monkeypatch, "list_components", client, None)

    result = CliRunner().invoke(app, ["list", "--no-emoji"])

    assert result.exit_code == 0
    assert "Available components" in result.stdout
    assert "Docs: https://docs.test/card" in result.stdout
    assert "(no description)" in result.stdout


def test_list_with_empty_catalog_fails(monkeypatch, make_client) -> None:
    _patch_services(monkeypatch, "list_components", make_client([]), None)

    result = CliRunner().invoke(app, ["list", "--no-emoji"])

    assert result.exit_code == 1
    assert "No components available." in result.stdout


def test_remove_works_offline_and_takes_no_registry_option(
    monkeypatch, project: Path, scenario_client, make_prompter
) -> None:
    _patch_services(monkeypatch, "add", scenario_client, make_prompter())
    _patch_services(monkeypatch, "remove", None, make_prompter())

    def no_network(registry_url):
        raise AssertionError("remove must not build a registry client")

    monkeypatch.setattr("suic.cli.services.build_client", no_network)
    runner = CliRunner()
    runner.invoke(app, ["add", "Card", "--root", str(project), "--no-emoji"])

    result = runner.invoke(app, ["remove", "Card", "--root", str(project), "--no-emoji"])
    rejected = runner.invoke(app, ["remove", "Card", "--registry-url", "https://x.test/", "--root", str(project)])

    assert result.exit_code == 0
    assert _installed(project) == {}
    assert rejected.exit_code == 2
