# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Test doubles for the client connection and ansible-lint invoker."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field

from ansible_lint_ls.execution.invocation import InvocationOutcome, InvocationSuccess, LintCommand
from ansible_lint_ls.interfaces.connection import ProgressTracker


@dataclass
class RecordingConsole:
    """Console capturing log lines per level."""

    infos: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


@dataclass
class RecordingProgress:
    """Progress tracker recording lifecycle events."""

    events: list[str]

    def begin(self, title: str, percentage: int | None = None, message: str | None = None) -> None:
        self.events.append(f"begin:{title}:{message}")

    def done(self) -> None:
        self.events.append("done")


@dataclass
class RecordingWindow:
    """Window capturing user-visible error messages and progress events."""

    errors: list[str] = field(default_factory=list)
    progress_events: list[str] = field(default_factory=list)

    def show_error_message(self, message: str) -> None:
        self.errors.append(message)

    async def create_work_done_progress(self) -> ProgressTracker:
        self.progress_events.append("create")
        return RecordingProgress(self.progress_events)


@dataclass
class RecordingConnection:
    """Client connection double used across service tests."""

    console: RecordingConsole = field(default_factory=RecordingConsole)
    window: RecordingWindow = field(default_factory=RecordingWindow)


@dataclass
class FakeInvoker:
    """Invoker returning a canned outcome and recording each call."""

    outcome: InvocationOutcome = field(default_factory=lambda: InvocationSuccess(stdout="[]"))
    calls: list[tuple[LintCommand, str]] = field(default_factory=list)
    on_run: Callable[[], None] | None = None

    async def run(self, command: LintCommand, *, cwd: str) -> InvocationOutcome:
        self.calls.append((command, cwd))
        if self.on_run is not None:
            self.on_run()
        return self.outcome


def report_item(
    check_name: str = "[no-changed-when] Commands should not change things if nothing needs doing.",
    *,
    path: str = "playbook.yml",
    begin: object = 1,
    description: str | None = None,
    categories: list[str] | None = None,
) -> dict[str, object]:
    """Return one codeclimate finding as emitted by ansible-lint."""

    item: dict[str, object] = {
        "type": "issue",
        "check_name": check_name,
        "location": {"path": path, "lines": {"begin": begin}},
    }
    if description is not None:
        item["description"] = description
    if categories is not None:
        item["categories"] = categories
    return item


def report_text(*items: dict[str, object]) -> str:
    """Serialise findings the way ansible-lint prints them."""

    return json.dumps(list(items))
