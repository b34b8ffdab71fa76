# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from ansible_lint_ls.filesystem.uris import path_to_uri
from tests.helpers.doubles import RecordingConnection


@pytest.fixture
def connection() -> RecordingConnection:
    """Return a fresh recording connection."""

    return RecordingConnection()


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Return a workspace directory containing ``a/b/playbook.yml``."""

    root = tmp_path / "ws"
    playbook = root / "a" / "b" / "playbook.yml"
    playbook.parent.mkdir(parents=True)
    playbook.write_text("- hosts: all\n  tasks: []\n", encoding="utf-8")
    return root


@pytest.fixture
def workspace_uri(workspace: Path) -> str:
    """Return the URI of the workspace folder."""

    return path_to_uri(workspace.as_posix())


@pytest.fixture
def playbook_uri(workspace: Path) -> str:
    """Return the URI of the nested playbook."""

    return path_to_uri((workspace / "a" / "b" / "playbook.yml").as_posix())
