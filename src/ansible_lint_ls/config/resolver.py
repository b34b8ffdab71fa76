# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Discovery, parsing and caching of ``.ansible-lint`` configuration files.

Configuration files are located by walking from the document's directory up
to the workspace folder. Parsed results are cached by the URI of the file
that was found; entries live until a watched-file event names that URI.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

import yaml

from ..constants import CONFIG_FILENAME
from ..core.models import JsonValue, LintConfig
from ..filesystem.uris import is_within, uri_segments, uri_to_path
from ..interfaces.connection import ClientConnection

LOGGER = logging.getLogger(__name__)

_WARN_LIST_KEY = "warn_list"


class ConfigCache:
    """Map configuration-file URIs to their parsed :class:`LintConfig`."""

    def __init__(self) -> None:
        self._entries: dict[str, LintConfig] = {}

    def get(self, uri: str) -> LintConfig | None:
        """Return the cached configuration for ``uri`` if present."""

        return self._entries.get(uri)

    def store(self, uri: str, config: LintConfig) -> None:
        """Cache ``config`` under ``uri``; a concurrent store simply overwrites."""

        self._entries[uri] = config

    def invalidate(self, uri: str) -> bool:
        """Remove the entry for exactly ``uri``.

        Returns:
            bool: ``True`` when an entry was evicted.
        """

        return self._entries.pop(uri, None) is not None

    def invalidate_many(self, uris: Iterable[str]) -> int:
        """Remove every entry named in ``uris`` and return how many were evicted."""

        return sum(1 for uri in uris if self.invalidate(uri))

    def __contains__(self, uri: object) -> bool:
        return uri in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


def parse_lint_config(text: str, *, source: str | None = None) -> LintConfig:
    """Parse every YAML document in ``text`` and merge their warn-lists.

    Args:
        text: Contents of an ``.ansible-lint`` file.
        source: Optional URI recorded on the resulting configuration.

    Returns:
        LintConfig: Merged configuration. Non-string warn-list entries are ignored.

    Raises:
        yaml.YAMLError: If ``text`` is not valid YAML.
    """

    config = LintConfig(source=source)
    for document in yaml.safe_load_all(text):
        config = config.merged_with(_warn_items(document))
    return config


def _warn_items(document: JsonValue) -> frozenset[str]:
    if not isinstance(document, dict):
        return frozenset()
    warn_list = document.get(_WARN_LIST_KEY)
    if not isinstance(warn_list, list):
        return frozenset()
    return frozenset(item for item in warn_list if isinstance(item, str))


class ConfigResolver:
    """Resolve the lint configuration applicable to a document.

    Args:
        workspace_uri: URI of the workspace folder bounding the search.
        cache: Cache shared by every resolution in the workspace.
        connection: Client connection used to report unreadable files.
    """

    def __init__(self, workspace_uri: str, cache: ConfigCache, connection: ClientConnection) -> None:
        self._workspace_uri = workspace_uri
        self._cache = cache
        self._connection = connection

    @property
    def cache(self) -> ConfigCache:
        """Return the cache backing this resolver."""

        return self._cache

    async def resolve(self, document_uri: str) -> LintConfig | None:
        """Return the configuration for ``document_uri``.

        Args:
            document_uri: URI of the document being validated.

        Returns:
            LintConfig | None: Parsed configuration of the nearest file, or
            ``None`` when no file exists between the document and the workspace root.
        """

        config_uri = await asyncio.to_thread(self.find_config_uri, document_uri)
        if config_uri is None:
            return None
        config = self._cache.get(config_uri)
        if config is None:
            LOGGER.debug("config cache miss for %s", config_uri)
            config = await self._read(config_uri)
            self._cache.store(config_uri, config)
        return config

    def find_config_uri(self, document_uri: str) -> str | None:
        """Return the URI of the nearest configuration file for ``document_uri``."""

        for candidate in self.candidate_uris(document_uri):
            if _exists(candidate):
                return candidate
        return None

    def candidate_uris(self, document_uri: str) -> Iterator[str]:
        """Yield candidate configuration URIs from the document directory upwards.

        Iteration stops once the directory leaves the workspace folder.
        """

        segments = uri_segments(document_uri)
        for index in range(len(segments) - 1, 0, -1):
            directory = "/".join(segments[:index])
            if not is_within(directory, self._workspace_uri):
                return
            yield f"{directory}/{CONFIG_FILENAME}"

    async def _read(self, config_uri: str) -> LintConfig:
        try:
            text = await asyncio.to_thread(Path(uri_to_path(config_uri)).read_text, encoding="utf-8")
            return parse_lint_config(text, source=config_uri)
        except (OSError, ValueError, yaml.YAMLError) as exc:
            LOGGER.debug("failed to read %s: %s", config_uri, exc)
            self._connection.window.show_error_message(f"Failed to read {config_uri}: {exc}")
            return LintConfig(source=config_uri)


def _exists(uri: str) -> bool:
    try:
        return Path(uri_to_path(uri)).is_file()
    except (OSError, ValueError):
        return False


__all__ = ["ConfigCache", "ConfigResolver", "parse_lint_config"]
