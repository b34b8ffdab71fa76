# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime adapters for running the lint service from a terminal."""

from __future__ import annotations

from .connection import DisplayOptions, SpinnerProgress, TerminalConnection, TerminalConsole, TerminalWindow

__all__ = ["DisplayOptions", "SpinnerProgress", "TerminalConnection", "TerminalConsole", "TerminalWindow"]
