# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants describing the ansible-lint integration."""

from __future__ import annotations

from typing import Final

CONFIG_FILENAME: Final[str] = ".ansible-lint"
DIAGNOSTIC_SOURCE: Final[str] = "Ansible"
TOOL_NAME: Final[str] = "ansible-lint"
STDERR_PREFIX: Final[str] = f"[{TOOL_NAME}]"

# ansible-lint exits with 2 when it ran fine but reported violations.
FINDINGS_EXIT_CODE: Final[int] = 2
TIMEOUT_EXIT_CODE: Final[int] = 124

REPORT_FLAGS: Final[tuple[str, ...]] = ("--offline", "--nocolor", "-f", "codeclimate")

# Largest value accepted for an LSP ``uinteger`` character offset.
END_OF_LINE_CHARACTER: Final[int] = 2**31 - 1

PROGRESS_TITLE: Final[str] = TOOL_NAME
PROGRESS_MESSAGE: Final[str] = "Processing files..."

PARSE_FAILURE_MESSAGE: Final[str] = (
    "Could not parse ansible-lint output. Please check your ansible-lint installation & configuration."
    " More info in `Ansible Server` output."
)
EMPTY_OUTPUT_MESSAGE: Final[str] = "Standard output from ansible-lint is suspiciously empty."

PYPROJECT_TABLE: Final[str] = "ansible-lint-ls"

__all__ = [
    "CONFIG_FILENAME",
    "DIAGNOSTIC_SOURCE",
    "EMPTY_OUTPUT_MESSAGE",
    "END_OF_LINE_CHARACTER",
    "FINDINGS_EXIT_CODE",
    "PARSE_FAILURE_MESSAGE",
    "PROGRESS_MESSAGE",
    "PROGRESS_TITLE",
    "PYPROJECT_TABLE",
    "REPORT_FLAGS",
    "STDERR_PREFIX",
    "TIMEOUT_EXIT_CODE",
    "TOOL_NAME",
]
