# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .commands import check_command, config_command

app = typer.Typer(
    help="Run ansible-lint and report editor-style diagnostics.",
    no_args_is_help=True,
    add_completion=False,
)
app.command("check")(check_command)
app.command("config")(config_command)


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "main"]
