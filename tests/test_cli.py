# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the ``ansible-lint-ls`` command line."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner, Result

from ansible_lint_ls.cli.app import app
from ansible_lint_ls.filesystem.uris import path_to_uri

FAKE_TOOL = """\
import json
import os
import sys

target = os.path.relpath(sys.argv[-1])
findings = [
    {{"check_name": "[name] All tasks should be named", "location": {{"path": target, "lines": {{"begin": 3}}}}}},
    {{
        "check_name": "[yaml] Too many spaces",
        "categories": ["formatting"],
        "location": {{"path": target, "lines": {{"begin": {{"line": 5, "column": 7}}}}}},
    }},
]
print(json.dumps(findings))
sys.exit({exit_code})
"""


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _install_fake_tool(workspace: Path, tmp_path: Path, *, exit_code: int = 2) -> Path:
    script = tmp_path / "fake-ansible-lint"
    script.write_text(f"#!{sys.executable}\n{FAKE_TOOL.format(exit_code=exit_code)}", encoding="utf-8")
    script.chmod(0o755)
    (workspace / "pyproject.toml").write_text(
        f'[tool.ansible-lint-ls.ansible_lint]\npath = "{script.as_posix()}"\n',
        encoding="utf-8",
    )
    return script


def _check(runner: CliRunner, workspace: Path, *extra: str) -> Result:
    playbook = workspace / "a" / "b" / "playbook.yml"
    return runner.invoke(app, ["check", str(playbook), "--workspace", str(workspace), "--no-color", *extra])


def test_check_json_reports_errors(runner: CliRunner, workspace: Path, tmp_path: Path) -> None:
    _install_fake_tool(workspace, tmp_path)

    result = _check(runner, workspace, "--json")

    assert result.exit_code == 1, result.output
    payload = json.loads(result.stdout)
    playbook_uri = path_to_uri((workspace / "a" / "b" / "playbook.yml").as_posix())
    assert payload[playbook_uri] == [
        {"column": 1, "line": 3, "message": "[name] All tasks should be named", "severity": "error", "source": "Ansible"},
        {"column": 7, "line": 5, "message": "[yaml] Too many spaces", "severity": "error", "source": "Ansible"},
    ]


def test_check_warn_list_downgrades_to_success(runner: CliRunner, workspace: Path, tmp_path: Path) -> None:
    _install_fake_tool(workspace, tmp_path)
    (workspace / ".ansible-lint").write_text("warn_list:\n  - name\n  - formatting\n", encoding="utf-8")

    result = _check(runner, workspace, "--json")

    assert result.exit_code == 0, result.output
    severities = [entry["severity"] for entries in json.loads(result.stdout).values() for entry in entries]
    assert severities == ["warning", "warning"]


def test_check_renders_table_and_summary(runner: CliRunner, workspace: Path, tmp_path: Path) -> None:
    _install_fake_tool(workspace, tmp_path)

    result = _check(runner, workspace, "--no-emoji")

    assert result.exit_code == 1
    assert "a/b/playbook.yml" in result.stdout
    assert "All tasks should be named" in result.stdout
    assert "2 error(s), 0 warning(s) in 1 file(s)" in result.stdout


def test_check_tool_failure_exits_with_two(runner: CliRunner, workspace: Path, tmp_path: Path) -> None:
    _install_fake_tool(workspace, tmp_path, exit_code=3)

    result = _check(runner, workspace, "--json", "--no-emoji")

    assert result.exit_code == 2
    assert "Command failed" in result.output


def test_check_invalid_settings_exit_with_two(runner: CliRunner, workspace: Path) -> None:
    (workspace / "pyproject.toml").write_text('[tool.ansible-lint-ls.ansible_lint]\nenabled = "maybe"\n', encoding="utf-8")

    result = _check(runner, workspace, "--json", "--no-emoji")

    assert result.exit_code == 2
    assert "invalid settings" in result.output


def test_check_disabled_produces_no_diagnostics(runner: CliRunner, workspace: Path) -> None:
    (workspace / "pyproject.toml").write_text("[tool.ansible-lint-ls.ansible_lint]\nenabled = false\n", encoding="utf-8")

    result = _check(runner, workspace, "--json")

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {}


def test_config_json_shows_nearest_file(runner: CliRunner, workspace: Path) -> None:
    config_path = workspace / "a" / ".ansible-lint"
    config_path.write_text("warn_list: [no-changed-when, experimental]\n", encoding="utf-8")
    playbook = workspace / "a" / "b" / "playbook.yml"

    result = runner.invoke(app, ["config", str(playbook), "--workspace", str(workspace), "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "source": path_to_uri(config_path.as_posix()),
        "warn_list": ["experimental", "no-changed-when"],
    }


def test_config_without_file_prints_notice(runner: CliRunner, workspace: Path) -> None:
    playbook = workspace / "a" / "b" / "playbook.yml"

    result = runner.invoke(app, ["config", str(playbook), "--workspace", str(workspace), "--no-color"])

    assert result.exit_code == 0
    assert "No .ansible-lint configuration found" in result.stdout


def test_check_without_findings_reports_success(runner: CliRunner, workspace: Path) -> None:
    (workspace / "pyproject.toml").write_text("[tool.ansible-lint-ls.ansible_lint]\nenabled = false\n", encoding="utf-8")

    result = _check(runner, workspace, "--no-emoji")

    assert result.exit_code == 0
    assert "ansible-lint reported no findings" in result.stdout
