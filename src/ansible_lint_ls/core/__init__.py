# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core models, severity policy and presentation helpers."""

from __future__ import annotations

from .models import DiagnosticsByFile, JsonValue, LintConfig, RawReportItem
from .severity import Severity, classify, extract_rule_name, severity_from_lsp, severity_to_lsp

__all__ = [
    "DiagnosticsByFile",
    "JsonValue",
    "LintConfig",
    "RawReportItem",
    "Severity",
    "classify",
    "extract_rule_name",
    "severity_from_lsp",
    "severity_to_lsp",
]
