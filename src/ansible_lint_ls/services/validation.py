# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Validation service composing invocation, configuration and report parsing.

ansible-lint may report diagnostics for more than the file that triggered
validation, so results are returned grouped per file URI.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from lsprotocol import types

from ..config.resolver import ConfigCache, ConfigResolver
from ..constants import PROGRESS_MESSAGE, PROGRESS_TITLE, STDERR_PREFIX
from ..core.models import DiagnosticsByFile, LintConfig
from ..execution.invocation import (
    InvocationFailure,
    InvocationOutcome,
    LintInvoker,
    SubprocessInvoker,
    build_lint_command,
)
from ..filesystem.uris import uri_to_path
from ..interfaces.connection import ProgressTracker
from ..parsers.report import parse_report
from .workspace import WorkspaceFolderContext

LOGGER = logging.getLogger(__name__)


class TextDocumentLike(Protocol):
    """Any document handle exposing the document ``uri``."""

    @property
    def uri(self) -> str:
        """Return the document URI."""

        raise NotImplementedError


class AnsibleLintService:
    """Run ansible-lint for documents of one workspace folder.

    Args:
        context: Workspace folder the service belongs to.
        invoker: Runner executing ansible-lint; defaults to a subprocess runner.
        cache: Configuration cache; a fresh cache is created when omitted.
    """

    def __init__(
        self,
        context: WorkspaceFolderContext,
        *,
        invoker: LintInvoker | None = None,
        cache: ConfigCache | None = None,
    ) -> None:
        self._context = context
        self._invoker: LintInvoker = invoker if invoker is not None else SubprocessInvoker()
        self._cache = cache if cache is not None else ConfigCache()
        self._resolver = ConfigResolver(context.workspace_uri, self._cache, context.connection)

    @property
    def config_cache(self) -> ConfigCache:
        """Return the configuration cache owned by the service."""

        return self._cache

    @property
    def resolver(self) -> ConfigResolver:
        """Return the configuration resolver used by the service."""

        return self._resolver

    async def validate(self, document: TextDocumentLike) -> DiagnosticsByFile:
        """Lint ``document`` and return diagnostics grouped by file URI.

        Configuration resolution and the ansible-lint run happen concurrently.
        Failures are reported through the client connection and produce an
        empty mapping.

        Args:
            document: Document to validate.

        Returns:
            DiagnosticsByFile: Diagnostics keyed by file URI.
        """

        connection = self._context.connection
        settings = await self._context.document_settings.get(document.uri)
        if not settings.ansible_lint.enabled:
            return {}
        try:
            document_path = uri_to_path(document.uri)
        except ValueError as exc:
            connection.console.error(f"Exception in AnsibleLint service: {exc}")
            return {}

        working_directory = self._context.workspace_path
        try:
            command = build_lint_command(settings, document_path)
        except ValueError as exc:
            connection.window.show_error_message(
                f"Invalid ansible-lint arguments '{settings.ansible_lint.arguments}': {exc}",
            )
            return {}
        tracker = await self._begin_progress()
        try:
            outcome, config = await asyncio.gather(
                self._invoker.run(command, cwd=working_directory),
                self._resolver.resolve(document.uri),
            )
        finally:
            if tracker is not None:
                tracker.done()
        return self._process_outcome(outcome, config, working_directory)

    def handle_watched_files_change(self, params: types.DidChangeWatchedFilesParams) -> None:
        """Evict cached configuration for every file named in ``params``."""

        evicted = self._cache.invalidate_many(change.uri for change in params.changes)
        if evicted:
            LOGGER.debug("evicted %d cached configuration(s)", evicted)

    async def _begin_progress(self) -> ProgressTracker | None:
        if not self._context.work_done_progress:
            return None
        tracker = await self._context.connection.window.create_work_done_progress()
        tracker.begin(PROGRESS_TITLE, None, PROGRESS_MESSAGE)
        return tracker

    def _process_outcome(
        self,
        outcome: InvocationOutcome,
        config: LintConfig | None,
        working_directory: str,
    ) -> DiagnosticsByFile:
        connection = self._context.connection
        if outcome.stderr:
            connection.console.info(f"{STDERR_PREFIX} {outcome.stderr}")
        if isinstance(outcome, InvocationFailure):
            connection.window.show_error_message(outcome.message)
            return {}
        return parse_report(outcome.stdout, config, working_directory, connection)


__all__ = ["AnsibleLintService", "TextDocumentLike"]
