# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Language services built on top of ansible-lint."""

from __future__ import annotations

from .validation import AnsibleLintService, TextDocumentLike
from .workspace import WorkspaceFolderContext

__all__ = ["AnsibleLintService", "TextDocumentLike", "WorkspaceFolderContext"]
