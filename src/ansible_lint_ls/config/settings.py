# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Extension settings models and the per-document settings store."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..constants import PYPROJECT_TABLE, TOOL_NAME


class SettingsError(ValueError):
    """Raised when settings input is invalid."""


class AnsibleLintSettings(BaseModel):
    """Settings controlling how ansible-lint is invoked."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    enabled: bool = True
    path: str = TOOL_NAME
    arguments: str = ""


class PythonSettings(BaseModel):
    """Settings describing the Python environment ansible-lint runs in."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    interpreter_path: str = Field(default="", alias="interpreterPath")
    activation_script: str = Field(default="", alias="activationScript")


class ExtensionSettings(BaseModel):
    """Top-level settings bundle resolved for a document.

    Accepts both the snake_case keys used in ``pyproject.toml`` and the
    camelCase keys sent by editor clients.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    ansible_lint: AnsibleLintSettings = Field(default_factory=AnsibleLintSettings, alias="ansibleLint")
    python: PythonSettings = Field(default_factory=PythonSettings)


def parse_settings(payload: Mapping[str, Any]) -> ExtensionSettings:
    """Validate ``payload`` into :class:`ExtensionSettings`.

    Args:
        payload: Raw mapping of settings values.

    Returns:
        ExtensionSettings: Validated settings.

    Raises:
        SettingsError: If the payload does not satisfy the settings schema.
    """

    try:
        return ExtensionSettings.model_validate(dict(payload))
    except ValidationError as exc:
        raise SettingsError(f"invalid settings: {exc}") from exc


def load_settings(root: Path) -> ExtensionSettings:
    """Load settings from ``[tool.ansible-lint-ls]`` in ``root/pyproject.toml``.

    Args:
        root: Workspace directory that may contain a ``pyproject.toml``.

    Returns:
        ExtensionSettings: Settings from the table, or defaults when absent.

    Raises:
        SettingsError: If the file cannot be parsed or the table is invalid.
    """

    pyproject = root / "pyproject.toml"
    if not pyproject.is_file():
        return ExtensionSettings()
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise SettingsError(f"unable to read {pyproject}: {exc}") from exc
    tool = data.get("tool")
    table = tool.get(PYPROJECT_TABLE) if isinstance(tool, dict) else None
    if table is None:
        return ExtensionSettings()
    if not isinstance(table, dict):
        raise SettingsError(f"[tool.{PYPROJECT_TABLE}] in {pyproject} must be a table")
    return parse_settings(table)


class DocumentSettings:
    """In-memory store resolving settings per document URI."""

    def __init__(self, defaults: ExtensionSettings | None = None) -> None:
        self._defaults = defaults or ExtensionSettings()
        self._overrides: dict[str, ExtensionSettings] = {}

    @property
    def defaults(self) -> ExtensionSettings:
        """Return the settings applied to documents without an override."""

        return self._defaults

    def update_defaults(self, settings: ExtensionSettings) -> None:
        """Replace the global settings and drop per-document overrides."""

        self._defaults = settings
        self._overrides.clear()

    def set(self, uri: str, settings: ExtensionSettings) -> None:
        """Register ``settings`` for the document at ``uri``."""

        self._overrides[uri] = settings

    def forget(self, uri: str) -> None:
        """Drop the override registered for ``uri`` if any."""

        self._overrides.pop(uri, None)

    async def get(self, uri: str) -> ExtensionSettings:
        """Return the settings that apply to ``uri``."""

        return self._overrides.get(uri, self._defaults)


__all__ = [
    "AnsibleLintSettings",
    "DocumentSettings",
    "ExtensionSettings",
    "PythonSettings",
    "SettingsError",
    "load_settings",
    "parse_settings",
]
