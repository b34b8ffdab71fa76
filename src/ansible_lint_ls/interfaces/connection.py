# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Client connection interfaces consumed by the lint service."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class ClientConsole(Protocol):
    """Log sink exposed by the editor (the ``Ansible Server`` output channel)."""

    @abstractmethod
    def info(self, message: str) -> None:
        """Log an informational ``message``."""

    @abstractmethod
    def warn(self, message: str) -> None:
        """Log a warning ``message``."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Log an error ``message``."""


@runtime_checkable
class ProgressTracker(Protocol):
    """Work-done progress handle created by the client window."""

    @abstractmethod
    def begin(self, title: str, percentage: int | None = None, message: str | None = None) -> None:
        """Start reporting progress.

        Args:
            title: Short title shown by the client.
            percentage: Optional completion percentage.
            message: Optional detail message.
        """

    @abstractmethod
    def done(self) -> None:
        """Finish reporting progress."""


@runtime_checkable
class ClientWindow(Protocol):
    """User-visible window operations."""

    @abstractmethod
    def show_error_message(self, message: str) -> None:
        """Display ``message`` to the user as an error."""

    @abstractmethod
    async def create_work_done_progress(self) -> ProgressTracker:
        """Return a new progress tracker."""


@runtime_checkable
class ClientConnection(Protocol):
    """Subset of the editor connection used for logging, progress and errors."""

    @property
    @abstractmethod
    def console(self) -> ClientConsole:
        """Return the client log console."""

    @property
    @abstractmethod
    def window(self) -> ClientWindow:
        """Return the client window facade."""


__all__ = ["ClientConnection", "ClientConsole", "ClientWindow", "ProgressTracker"]
