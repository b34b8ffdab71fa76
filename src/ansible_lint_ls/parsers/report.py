# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parse ansible-lint codeclimate reports into editor diagnostics."""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping, Sequence
from typing import cast

from lsprotocol import types

from ..constants import DIAGNOSTIC_SOURCE, EMPTY_OUTPUT_MESSAGE, END_OF_LINE_CHARACTER, PARSE_FAILURE_MESSAGE
from ..core.models import DiagnosticsByFile, JsonValue, LintConfig, RawReportItem
from ..core.severity import classify, severity_to_lsp
from ..filesystem.uris import join_report_path, path_to_uri
from ..interfaces.connection import ClientConnection


class ReportShapeError(ValueError):
    """Raised when a report is valid JSON but not a list of findings."""


# Largest 1-based position whose 0-based offset still fits an LSP ``uinteger``.
_MAX_POSITION = END_OF_LINE_CHARACTER + 1


def _optional_int(value: JsonValue | None) -> int | None:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _in_range(*positions: int | None) -> bool:
    return all(position is None or position <= _MAX_POSITION for position in positions)


def _string_sequence(value: JsonValue | None) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, str))


def coerce_report_item(value: JsonValue) -> RawReportItem | None:
    """Return a :class:`RawReportItem` when ``value`` matches the codeclimate shape.

    ``location.lines.begin`` may be a bare line number or a ``{line, column}``
    mapping. Items missing ``check_name``, ``location.path`` or a begin
    position yield ``None``, as do items whose line or column exceeds what an
    LSP position can hold.

    Args:
        value: One element of the decoded report array.

    Returns:
        RawReportItem | None: Normalised item, or ``None`` for malformed input.
    """

    if not isinstance(value, Mapping):
        return None
    check_name = value.get("check_name")
    location = value.get("location")
    if not isinstance(check_name, str) or not isinstance(location, Mapping):
        return None
    path = location.get("path")
    lines = location.get("lines")
    if not isinstance(path, str) or not isinstance(lines, Mapping):
        return None
    begin = lines.get("begin")
    if isinstance(begin, Mapping):
        line = _optional_int(begin.get("line"))
        column = _optional_int(begin.get("column"))
    else:
        line = _optional_int(begin)
        column = None
        if line is None:
            return None
    if not _in_range(line, column):
        return None
    description = value.get("description")
    return RawReportItem(
        check_name=check_name,
        path=path,
        line=line,
        column=column,
        description=description if isinstance(description, str) else None,
        categories=_string_sequence(value.get("categories")),
    )


def iter_report_items(payload: JsonValue) -> Iterator[RawReportItem]:
    """Yield well-formed items from a decoded report, skipping malformed ones."""

    if not isinstance(payload, list):
        raise ReportShapeError(f"expected a JSON array of findings, got {type(payload).__name__}")
    for entry in payload:
        item = coerce_report_item(entry)
        if item is not None:
            yield item


def build_diagnostic(item: RawReportItem, config: LintConfig | None) -> types.Diagnostic:
    """Convert ``item`` into an LSP diagnostic spanning the rest of its line."""

    line = item.line - 1
    severity = classify(item.check_name, item.categories, config)
    return types.Diagnostic(
        range=types.Range(
            start=types.Position(line=line, character=item.column - 1),
            end=types.Position(line=line, character=END_OF_LINE_CHARACTER),
        ),
        message=item.message,
        severity=severity_to_lsp(severity),
        source=DIAGNOSTIC_SOURCE,
    )


def map_report(
    items: Sequence[RawReportItem] | Iterator[RawReportItem],
    config: LintConfig | None,
    working_directory: str,
) -> DiagnosticsByFile:
    """Group diagnostics for ``items`` by file URI, preserving report order."""

    diagnostics: DiagnosticsByFile = {}
    for item in items:
        uri = path_to_uri(join_report_path(working_directory, item.path))
        diagnostics.setdefault(uri, []).append(build_diagnostic(item, config))
    return diagnostics


def parse_report(
    result: str,
    config: LintConfig | None,
    working_directory: str,
    connection: ClientConnection,
) -> DiagnosticsByFile:
    """Parse ansible-lint codeclimate output into diagnostics keyed by file URI.

    Args:
        result: Standard output captured from ansible-lint.
        config: Configuration resolved for the validated document.
        working_directory: Directory ansible-lint ran in; reported paths are relative to it.
        connection: Client connection used for logging and user-visible errors.

    Returns:
        DiagnosticsByFile: Diagnostics grouped per file, empty when the output
        is blank or cannot be parsed.
    """

    if not result.strip():
        connection.console.warn(EMPTY_OUTPUT_MESSAGE)
        return {}
    try:
        payload = cast(JsonValue, json.loads(result))
        return map_report(list(iter_report_items(payload)), config, working_directory)
    except ValueError as exc:
        connection.window.show_error_message(PARSE_FAILURE_MESSAGE)
        connection.console.error(
            f"Exception while parsing ansible-lint output: {exc}\nTried to parse the following:\n{result}",
        )
        return {}


__all__ = [
    "ReportShapeError",
    "build_diagnostic",
    "coerce_report_item",
    "iter_report_items",
    "map_report",
    "parse_report",
]
