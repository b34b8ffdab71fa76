# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for extension settings parsing and the per-document store."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from ansible_lint_ls.config.settings import (
    AnsibleLintSettings,
    DocumentSettings,
    ExtensionSettings,
    SettingsError,
    load_settings,
    parse_settings,
)


def test_defaults() -> None:
    settings = ExtensionSettings()

    assert settings.ansible_lint.enabled is True
    assert settings.ansible_lint.path == "ansible-lint"
    assert settings.ansible_lint.arguments == ""
    assert settings.python.interpreter_path == ""
    assert settings.python.activation_script == ""


def test_parse_accepts_editor_camel_case() -> None:
    settings = parse_settings(
        {
            "ansibleLint": {"enabled": False, "arguments": "--strict"},
            "python": {"interpreterPath": "/venv/bin/python", "activationScript": "/venv/bin/activate"},
        },
    )

    assert settings.ansible_lint.enabled is False
    assert settings.ansible_lint.arguments == "--strict"
    assert settings.python.interpreter_path == "/venv/bin/python"
    assert settings.python.activation_script == "/venv/bin/activate"


def test_parse_accepts_snake_case() -> None:
    settings = parse_settings({"ansible_lint": {"path": "/opt/ansible-lint"}})

    assert settings.ansible_lint.path == "/opt/ansible-lint"


def test_parse_rejects_invalid_values() -> None:
    with pytest.raises(SettingsError, match="invalid settings"):
        parse_settings({"ansible_lint": {"enabled": "sometimes"}})


def test_load_without_pyproject_returns_defaults(tmp_path: Path) -> None:
    assert load_settings(tmp_path) == ExtensionSettings()


def test_load_without_table_returns_defaults(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "site"\n', encoding="utf-8")

    assert load_settings(tmp_path) == ExtensionSettings()


def test_load_reads_tool_table(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.ansible-lint-ls.ansible_lint]\narguments = "-c lint.yml"\n\n'
        '[tool.ansible-lint-ls.python]\ninterpreter_path = "/venv/bin/python"\n',
        encoding="utf-8",
    )

    settings = load_settings(tmp_path)

    assert settings.ansible_lint.arguments == "-c lint.yml"
    assert settings.python.interpreter_path == "/venv/bin/python"


@pytest.mark.parametrize(
    "content",
    [
        "[tool\nbroken",
        '[tool]\n"ansible-lint-ls" = 3\n',
        '[tool.ansible-lint-ls.ansible_lint]\nenabled = "sometimes"\n',
    ],
)
def test_load_rejects_invalid_input(tmp_path: Path, content: str) -> None:
    (tmp_path / "pyproject.toml").write_text(content, encoding="utf-8")

    with pytest.raises(SettingsError):
        load_settings(tmp_path)


def test_document_settings_prefers_override() -> None:
    store = DocumentSettings()
    disabled = ExtensionSettings(ansible_lint=AnsibleLintSettings(enabled=False))
    store.set("file:///ws/site.yml", disabled)

    assert asyncio.run(store.get("file:///ws/site.yml")) is disabled
    assert asyncio.run(store.get("file:///ws/other.yml")) == ExtensionSettings()

    store.forget("file:///ws/site.yml")
    assert asyncio.run(store.get("file:///ws/site.yml")) == ExtensionSettings()


def test_update_defaults_drops_overrides() -> None:
    store = DocumentSettings()
    store.set("file:///ws/site.yml", ExtensionSettings(ansible_lint=AnsibleLintSettings(path="custom")))
    replacement = ExtensionSettings(ansible_lint=AnsibleLintSettings(arguments="--strict"))

    store.update_defaults(replacement)

    assert store.defaults is replacement
    assert asyncio.run(store.get("file:///ws/site.yml")) is replacement
