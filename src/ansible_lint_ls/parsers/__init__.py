# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parsers converting ansible-lint output into diagnostics."""

from __future__ import annotations

from .report import (
    ReportShapeError,
    build_diagnostic,
    coerce_report_item,
    iter_report_items,
    map_report,
    parse_report,
)

__all__ = [
    "ReportShapeError",
    "build_diagnostic",
    "coerce_report_item",
    "iter_report_items",
    "map_report",
    "parse_report",
]
