# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Per-workspace-folder context shared by language services."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..config.settings import DocumentSettings
from ..filesystem.uris import path_to_uri, uri_to_path
from ..interfaces.connection import ClientConnection


@dataclass(slots=True)
class WorkspaceFolderContext:
    """Bundle the collaborators that belong to one workspace folder.

    Attributes:
        workspace_uri: ``file://`` URI of the workspace folder.
        connection: Client connection for logging, progress and errors.
        document_settings: Store resolving settings per document.
        work_done_progress: ``True`` when the client supports work-done progress.
    """

    workspace_uri: str
    connection: ClientConnection
    document_settings: DocumentSettings = field(default_factory=DocumentSettings)
    work_done_progress: bool = False

    @classmethod
    def for_directory(
        cls,
        root: Path,
        connection: ClientConnection,
        *,
        document_settings: DocumentSettings | None = None,
        work_done_progress: bool = False,
    ) -> WorkspaceFolderContext:
        """Build a context for the workspace rooted at ``root``."""

        return cls(
            workspace_uri=path_to_uri(root.resolve().as_posix()),
            connection=connection,
            document_settings=document_settings or DocumentSettings(),
            work_done_progress=work_done_progress,
        )

    @property
    def workspace_path(self) -> str:
        """Return the decoded filesystem path of the workspace folder."""

        return uri_to_path(self.workspace_uri)


__all__ = ["WorkspaceFolderContext"]
