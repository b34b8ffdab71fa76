# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocols describing collaborators of the lint service."""

from __future__ import annotations

from .connection import ClientConnection, ClientConsole, ClientWindow, ProgressTracker

__all__ = ["ClientConnection", "ClientConsole", "ClientWindow", "ProgressTracker"]
