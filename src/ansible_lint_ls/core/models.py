# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the ansible_lint_ls package."""

from __future__ import annotations

from lsprotocol import types
from pydantic import BaseModel, ConfigDict, Field, field_validator

type JsonScalar = str | int | float | bool | None
type JsonValue = JsonScalar | list[JsonValue] | dict[str, JsonValue]

type DiagnosticsByFile = dict[str, list[types.Diagnostic]]


class LintConfig(BaseModel):
    """Severity policy extracted from an ``.ansible-lint`` configuration file."""

    model_config = ConfigDict(frozen=True)

    warn_list: frozenset[str] = Field(default_factory=frozenset)
    source: str | None = None

    def merged_with(self, warn_items: frozenset[str]) -> LintConfig:
        """Return a copy whose warn-list also contains ``warn_items``.

        Args:
            warn_items: Additional rule identifiers or category tags.

        Returns:
            LintConfig: New configuration carrying the union of both warn-lists.
        """

        return self.model_copy(update={"warn_list": self.warn_list | warn_items})


class RawReportItem(BaseModel):
    """Capture one well-formed finding from an ansible-lint codeclimate report.

    Line and column are kept 1-based exactly as the tool reports them.
    """

    model_config = ConfigDict(frozen=True)

    check_name: str
    path: str
    line: int = 1
    column: int = 1
    description: str | None = None
    categories: tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("line", "column", mode="before")
    @classmethod
    def _clamp_position(cls, value: int | None) -> int:
        """Fall back to the first line or column for absent or non-positive values.

        Args:
            value: Position reported by the tool.

        Returns:
            int: Positive 1-based position.
        """

        if value is None or value < 1:
            return 1
        return value

    @property
    def message(self) -> str:
        """Return the diagnostic message combining check name and description."""

        if self.description:
            return f"{self.check_name}\nDescription: {self.description}"
        return self.check_name


__all__ = [
    "DiagnosticsByFile",
    "JsonScalar",
    "JsonValue",
    "LintConfig",
    "RawReportItem",
]
