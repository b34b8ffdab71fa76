# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Terminal-backed implementation of the client connection interfaces."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TaskID, TextColumn, TimeElapsedColumn

from ..core.logging import fail, get_console, info, warn
from ..interfaces.connection import ClientConnection, ClientConsole, ClientWindow, ProgressTracker

LOGGER = logging.getLogger("ansible_lint_ls.client")


@dataclass(frozen=True, slots=True)
class DisplayOptions:
    """Presentation toggles shared by console output helpers."""

    use_color: bool = True
    use_emoji: bool = True
    verbose: bool = False


class TerminalConsole(ClientConsole):
    """Client log console printing to the terminal and the ``logging`` module.

    Informational output is only printed in verbose mode; it is always
    forwarded to :data:`LOGGER`.
    """

    def __init__(self, display: DisplayOptions) -> None:
        self._display = display

    def info(self, message: str) -> None:
        LOGGER.info(message)
        if self._display.verbose:
            info(message, use_emoji=self._display.use_emoji, use_color=self._display.use_color)

    def warn(self, message: str) -> None:
        LOGGER.warning(message)
        if self._display.verbose:
            warn(message, use_emoji=self._display.use_emoji, use_color=self._display.use_color)

    def error(self, message: str) -> None:
        LOGGER.error(message)
        if self._display.verbose:
            fail(message, use_emoji=self._display.use_emoji, use_color=self._display.use_color)


class SpinnerProgress(ProgressTracker):
    """Progress tracker rendered as a transient Rich spinner."""

    def __init__(self, console: Console) -> None:
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("{task.description}"),
            TimeElapsedColumn(),
            console=console,
            transient=True,
        )
        self._task: TaskID | None = None

    def begin(self, title: str, percentage: int | None = None, message: str | None = None) -> None:
        description = f"{title}: {message}" if message else title
        self._progress.start()
        self._task = self._progress.add_task(description, total=100, completed=percentage or 0)

    def done(self) -> None:
        if self._task is not None:
            self._progress.update(self._task, completed=100)
        self._progress.stop()


@dataclass
class TerminalWindow(ClientWindow):
    """Client window showing errors on stderr and progress as a spinner."""

    display: DisplayOptions
    errors: list[str] = field(default_factory=list)

    def show_error_message(self, message: str) -> None:
        self.errors.append(message)
        fail(message, use_emoji=self.display.use_emoji, use_color=self.display.use_color)

    async def create_work_done_progress(self) -> ProgressTracker:
        console = get_console(color=self.display.use_color, emoji=self.display.use_emoji, stderr=True)
        return SpinnerProgress(console)


class TerminalConnection(ClientConnection):
    """Client connection used when running outside an editor."""

    def __init__(self, display: DisplayOptions | None = None) -> None:
        self._display = display or DisplayOptions()
        self._console = TerminalConsole(self._display)
        self._window = TerminalWindow(self._display)

    @property
    def console(self) -> TerminalConsole:
        return self._console

    @property
    def window(self) -> TerminalWindow:
        return self._window

    @property
    def display(self) -> DisplayOptions:
        """Return the presentation toggles of this connection."""

        return self._display


__all__ = [
    "DisplayOptions",
    "SpinnerProgress",
    "TerminalConnection",
    "TerminalConsole",
    "TerminalWindow",
]
