# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Settings and ``.ansible-lint`` configuration resolution."""

from __future__ import annotations

from .resolver import ConfigCache, ConfigResolver, parse_lint_config
from .settings import (
    AnsibleLintSettings,
    DocumentSettings,
    ExtensionSettings,
    PythonSettings,
    SettingsError,
    load_settings,
    parse_settings,
)

__all__ = [
    "AnsibleLintSettings",
    "ConfigCache",
    "ConfigResolver",
    "DocumentSettings",
    "ExtensionSettings",
    "PythonSettings",
    "SettingsError",
    "load_settings",
    "parse_lint_config",
    "parse_settings",
]
