# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""``check`` and ``config`` CLI commands."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

import typer
from lsprotocol import types

from ..config.settings import DocumentSettings, SettingsError, load_settings
from ..core.logging import detect_tty, fail, get_console, ok
from ..core.models import DiagnosticsByFile
from ..core.serialization import dumps, serialize_config, serialize_diagnostics
from ..core.severity import Severity
from ..filesystem.uris import path_to_uri
from ..runtime.connection import DisplayOptions, TerminalConnection
from ..services.validation import AnsibleLintService
from ..services.workspace import WorkspaceFolderContext
from .rendering import count_by_severity, render_config, render_diagnostics, render_summary

WorkspaceOption = Annotated[
    Path | None,
    typer.Option(
        "--workspace",
        "-w",
        file_okay=False,
        resolve_path=True,
        help="Workspace folder bounding configuration discovery (defaults to the current directory).",
    ),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Emit machine-readable JSON.")]
NoColorOption = Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")]
NoEmojiOption = Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Show tool logs.")]


def _build_service(
    workspace: Path | None,
    display: DisplayOptions,
    *,
    progress: bool,
) -> tuple[AnsibleLintService, TerminalConnection, Path]:
    root = workspace or Path.cwd().resolve()
    try:
        settings = load_settings(root)
    except SettingsError as exc:
        fail(str(exc), use_emoji=display.use_emoji, use_color=display.use_color)
        raise typer.Exit(code=2) from exc
    connection = TerminalConnection(display)
    context = WorkspaceFolderContext.for_directory(
        root,
        connection,
        document_settings=DocumentSettings(settings),
        work_done_progress=progress,
    )
    return AnsibleLintService(context), connection, root


async def _validate_all(service: AnsibleLintService, files: Sequence[Path]) -> DiagnosticsByFile:
    merged: DiagnosticsByFile = {}
    for path in files:
        document = types.TextDocumentIdentifier(uri=path_to_uri(path.as_posix()))
        merged.update(await service.validate(document))
    return merged


def check_command(
    files: Annotated[
        list[Path],
        typer.Argument(exists=True, dir_okay=False, resolve_path=True, help="Playbooks or task files to lint."),
    ],
    workspace: WorkspaceOption = None,
    json_output: JsonOption = False,
    no_color: NoColorOption = False,
    no_emoji: NoEmojiOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Run ansible-lint on FILES and report the resulting diagnostics."""

    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    display = DisplayOptions(use_color=not no_color, use_emoji=not no_emoji, verbose=verbose)
    service, connection, root = _build_service(
        workspace,
        display,
        progress=not json_output and detect_tty(),
    )
    diagnostics = asyncio.run(_validate_all(service, files))

    if json_output:
        typer.echo(dumps(serialize_diagnostics(diagnostics)))
    else:
        console = get_console(color=display.use_color, emoji=display.use_emoji)
        render_diagnostics(console, diagnostics, root)
        if diagnostics or connection.window.errors:
            render_summary(console, diagnostics)
        else:
            ok("ansible-lint reported no findings", use_emoji=display.use_emoji, use_color=display.use_color)

    if connection.window.errors:
        raise typer.Exit(code=2)
    if count_by_severity(diagnostics)[Severity.ERROR]:
        raise typer.Exit(code=1)


def config_command(
    file: Annotated[
        Path,
        typer.Argument(exists=True, dir_okay=False, resolve_path=True, help="Document whose configuration to show."),
    ],
    workspace: WorkspaceOption = None,
    json_output: JsonOption = False,
    no_color: NoColorOption = False,
    no_emoji: NoEmojiOption = False,
) -> None:
    """Show the .ansible-lint configuration that applies to FILE."""

    display = DisplayOptions(use_color=not no_color, use_emoji=not no_emoji)
    service, connection, root = _build_service(workspace, display, progress=False)
    document_uri = path_to_uri(file.as_posix())
    config_uri = service.resolver.find_config_uri(document_uri)
    config = asyncio.run(service.resolver.resolve(document_uri))

    if json_output:
        typer.echo(dumps(serialize_config(config)))
    else:
        render_config(get_console(color=display.use_color, emoji=display.use_emoji), config_uri, config, root)
    if connection.window.errors:
        raise typer.Exit(code=2)


__all__ = ["check_command", "config_command"]
