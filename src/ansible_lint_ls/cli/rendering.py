# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render diagnostics and configuration summaries to the terminal."""

from __future__ import annotations

from pathlib import Path

from lsprotocol import types
from rich import box
from rich.console import Console
from rich.table import Table

from ..core.models import DiagnosticsByFile, LintConfig
from ..core.severity import Severity, severity_from_lsp
from ..filesystem.uris import uri_to_path

_SEVERITY_STYLES = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
}


def display_path(uri: str, root: Path) -> str:
    """Return ``uri`` as a path relative to ``root`` when possible."""

    path = Path(uri_to_path(uri))
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def count_by_severity(diagnostics: DiagnosticsByFile) -> dict[Severity, int]:
    """Return the number of diagnostics per severity."""

    counts = dict.fromkeys(Severity, 0)
    for entries in diagnostics.values():
        for diag in entries:
            counts[severity_from_lsp(diag.severity)] += 1
    return counts


def _first_line(diag: types.Diagnostic) -> str:
    return diag.message.splitlines()[0] if diag.message else ""


def render_diagnostics(console: Console, diagnostics: DiagnosticsByFile, root: Path) -> None:
    """Print one table per file listing its diagnostics in report order.

    Args:
        console: Rich console receiving the output.
        diagnostics: Diagnostics grouped by file URI.
        root: Directory used to shorten displayed paths.
    """

    for uri in sorted(diagnostics):
        table = Table(title=display_path(uri, root), box=box.SIMPLE, title_justify="left")
        table.add_column("Line", justify="right")
        table.add_column("Col", justify="right")
        table.add_column("Severity")
        table.add_column("Message", overflow="fold")
        for diag in diagnostics[uri]:
            severity = severity_from_lsp(diag.severity)
            table.add_row(
                str(diag.range.start.line + 1),
                str(diag.range.start.character + 1),
                f"[{_SEVERITY_STYLES[severity]}]{severity.value}[/]",
                _first_line(diag),
            )
        console.print(table)


def render_summary(console: Console, diagnostics: DiagnosticsByFile) -> None:
    """Print a one-line summary of diagnostic counts."""

    counts = count_by_severity(diagnostics)
    console.print(
        f"{counts[Severity.ERROR]} error(s), {counts[Severity.WARNING]} warning(s) in {len(diagnostics)} file(s)",
    )


def render_config(console: Console, config_uri: str | None, config: LintConfig | None, root: Path) -> None:
    """Print the configuration file discovered for a document and its warn-list."""

    if config_uri is None or config is None:
        console.print("No .ansible-lint configuration found; every finding is reported as an error.")
        return
    console.print(f"Configuration: {display_path(config_uri, root)}")
    if not config.warn_list:
        console.print("warn_list: (empty)")
        return
    console.print("warn_list:")
    for entry in sorted(config.warn_list):
        console.print(f"  - {entry}", markup=False)


__all__ = ["count_by_severity", "display_path", "render_config", "render_diagnostics", "render_summary"]
