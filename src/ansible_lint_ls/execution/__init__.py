# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""ansible-lint command construction and execution."""

from __future__ import annotations

from .invocation import (
    FindingsReported,
    InvocationFailure,
    InvocationOutcome,
    InvocationSuccess,
    LintCommand,
    LintInvoker,
    SubprocessInvoker,
    build_lint_command,
    classify_exit,
)

__all__ = [
    "FindingsReported",
    "InvocationFailure",
    "InvocationOutcome",
    "InvocationSuccess",
    "LintCommand",
    "LintInvoker",
    "SubprocessInvoker",
    "build_lint_command",
    "classify_exit",
]
