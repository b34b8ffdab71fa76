# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for converting between ``file://`` URIs and filesystem paths."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Final
from urllib.parse import quote, unquote, urlsplit

FILE_SCHEME: Final[str] = "file"
_URI_PREFIX: Final[str] = f"{FILE_SCHEME}://"
# Characters left untouched by JavaScript's ``encodeURI`` besides alphanumerics.
_ENCODE_URI_SAFE: Final[str] = ";,/?:@&=+$-_.!~*'()#"


def path_to_uri(path: str | PurePosixPath | Path) -> str:
    """Return a ``file://`` URI for ``path`` using ``encodeURI`` escaping rules.

    Args:
        path: Absolute POSIX path.

    Returns:
        str: Percent-encoded file URI.
    """

    return f"{_URI_PREFIX}{quote(str(path), safe=_ENCODE_URI_SAFE)}"


def uri_to_path(uri: str) -> str:
    """Return the decoded filesystem path component of ``uri``.

    Args:
        uri: ``file://`` URI supplied by the editor.

    Returns:
        str: Decoded absolute path.

    Raises:
        ValueError: If ``uri`` does not use the ``file`` scheme.
    """

    parts = urlsplit(uri)
    if parts.scheme != FILE_SCHEME:
        raise ValueError(f"unsupported URI scheme in '{uri}'")
    return unquote(parts.path)


def join_report_path(working_directory: str, reported_path: str) -> PurePosixPath:
    """Return the absolute location of a path reported relative to ``working_directory``.

    Args:
        working_directory: Directory the tool was executed in.
        reported_path: Path as emitted by the tool.

    Returns:
        PurePosixPath: Joined path; absolute reported paths are kept as-is.
    """

    return PurePosixPath(working_directory) / reported_path


def uri_segments(uri: str) -> list[str]:
    """Split ``uri`` into ``/``-separated segments, ignoring a trailing slash."""

    return uri.rstrip("/").split("/")


def is_within(uri: str, root_uri: str) -> bool:
    """Return ``True`` when ``uri`` equals ``root_uri`` or lies beneath it.

    Args:
        uri: Candidate directory URI.
        root_uri: Workspace folder URI bounding the search.

    Returns:
        bool: Segment-aware containment result.
    """

    candidate = uri_segments(uri)
    root = uri_segments(root_uri)
    return candidate[: len(root)] == root


__all__ = [
    "FILE_SCHEME",
    "is_within",
    "join_report_path",
    "path_to_uri",
    "uri_segments",
    "uri_to_path",
]
