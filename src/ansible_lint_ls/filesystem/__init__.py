# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem and URI helpers."""

from __future__ import annotations

from .uris import FILE_SCHEME, is_within, join_report_path, path_to_uri, uri_segments, uri_to_path

__all__ = [
    "FILE_SCHEME",
    "is_within",
    "join_report_path",
    "path_to_uri",
    "uri_segments",
    "uri_to_path",
]
