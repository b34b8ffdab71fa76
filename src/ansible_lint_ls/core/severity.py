# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING, Final

from lsprotocol import types

if TYPE_CHECKING:
    from .models import LintConfig


class Severity(str, Enum):
    """Severity levels assigned to ansible-lint findings."""

    ERROR = "error"
    WARNING = "warning"


RULE_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"\[(?P<name>[a-z\-]+)\]")

_SEVERITY_TO_LSP: Final[dict[Severity, types.DiagnosticSeverity]] = {
    Severity.ERROR: types.DiagnosticSeverity.Error,
    Severity.WARNING: types.DiagnosticSeverity.Warning,
}


def extract_rule_name(check_name: str) -> str | None:
    """Return the short rule name embedded in an ansible-lint check name.

    The rule name is the last bracketed token consisting solely of lowercase
    letters and hyphens, e.g. ``no-changed-when`` for
    ``"[no-changed-when] Commands should not change things"``.

    Args:
        check_name: ``check_name`` field reported by ansible-lint.

    Returns:
        str | None: Extracted rule name, or ``None`` when no bracketed token exists.
    """

    matches = RULE_NAME_PATTERN.findall(check_name)
    if not matches:
        return None
    return matches[-1]


def classify(
    check_name: str,
    categories: Iterable[str],
    config: LintConfig | None,
) -> Severity:
    """Decide the severity of a finding given the active lint configuration.

    Args:
        check_name: ``check_name`` field reported by ansible-lint.
        categories: Category tags attached to the finding.
        config: Configuration resolved for the document, ``None`` when no
            configuration file was discovered.

    Returns:
        Severity: ``Severity.WARNING`` when the rule name or any category is
        warn-listed, otherwise ``Severity.ERROR``.
    """

    if config is None:
        return Severity.ERROR
    rule_name = extract_rule_name(check_name)
    if rule_name is not None and rule_name in config.warn_list:
        return Severity.WARNING
    if any(category in config.warn_list for category in categories):
        return Severity.WARNING
    return Severity.ERROR


def severity_to_lsp(severity: Severity) -> types.DiagnosticSeverity:
    """Map :class:`Severity` to the LSP diagnostic severity."""

    return _SEVERITY_TO_LSP[severity]


def severity_from_lsp(severity: types.DiagnosticSeverity | None) -> Severity:
    """Return the :class:`Severity` matching an LSP severity, defaulting to error."""

    for candidate, lsp_value in _SEVERITY_TO_LSP.items():
        if lsp_value == severity:
            return candidate
    return Severity.ERROR


__all__ = [
    "RULE_NAME_PATTERN",
    "Severity",
    "classify",
    "extract_rule_name",
    "severity_from_lsp",
    "severity_to_lsp",
]
