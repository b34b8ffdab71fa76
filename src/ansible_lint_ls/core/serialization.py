# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for converting diagnostics to serializable data."""

from __future__ import annotations

import json
from typing import TypeAlias

from lsprotocol import types

from .models import DiagnosticsByFile, JsonValue, LintConfig
from .severity import severity_from_lsp

SerializableMapping: TypeAlias = dict[str, JsonValue]


def serialize_diagnostic(diag: types.Diagnostic) -> SerializableMapping:
    """Convert a diagnostic into a JSON-friendly mapping with 1-based positions."""

    return {
        "line": diag.range.start.line + 1,
        "column": diag.range.start.character + 1,
        "severity": severity_from_lsp(diag.severity).value,
        "message": diag.message,
        "source": diag.source,
    }


def serialize_diagnostics(diagnostics: DiagnosticsByFile) -> dict[str, JsonValue]:
    """Serialize a diagnostics mapping keyed by file URI."""

    return {uri: [serialize_diagnostic(diag) for diag in entries] for uri, entries in diagnostics.items()}


def serialize_config(config: LintConfig | None) -> SerializableMapping:
    """Serialize a resolved lint configuration."""

    if config is None:
        return {"source": None, "warn_list": []}
    return {"source": config.source, "warn_list": sorted(config.warn_list)}


def dumps(payload: JsonValue) -> str:
    """Return ``payload`` as indented JSON."""

    return json.dumps(payload, indent=2, sort_keys=True)


__all__ = ["dumps", "serialize_config", "serialize_diagnostic", "serialize_diagnostics"]
