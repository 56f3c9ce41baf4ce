# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Simple file-based caching of successful lint checks.

Each entry is an empty marker file whose name is the flattened candidate path.
Only the marker's modification time matters: an entry is valid while it is
strictly newer than the file it describes. Entries are never removed, editing
the file is what invalidates them.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Final

LOGGER = logging.getLogger(__name__)

KEY_SEPARATOR: Final[str] = "%"


def cache_key(path: Path) -> str:
    """Return the flat token used to name the cache entry for ``path``.

    Args:
        path: Candidate path, absolute or relative.

    Returns:
        str: Path text with every separator replaced by :data:`KEY_SEPARATOR`.
    """

    text = path.as_posix()
    if os.sep != "/":
        text = text.replace(os.sep, "/")
    return text.strip("/").replace("/", KEY_SEPARATOR)


class ResultCache:
    """Timestamp markers recording the last successful check of each file."""

    def __init__(self, directory: Path) -> None:
        """Initialise the cache store rooted at ``directory``.

        Args:
            directory: Filesystem directory holding the markers, created on
                first :meth:`record`.
        """

        self._dir = directory

    @property
    def directory(self) -> Path:
        """Return the directory holding cache entries."""

        return self._dir

    def entry_path(self, path: Path) -> Path:
        """Return the marker file associated with ``path``."""

        return self._dir / cache_key(path)

    def is_valid(self, path: Path) -> bool:
        """Return whether ``path`` passed its last check and is unchanged since.

        Args:
            path: Candidate file to look up.

        Returns:
            bool: ``True`` only when an entry exists and its timestamp is
            strictly newer than the file's modification time.
        """

        try:
            recorded = self.entry_path(path).stat().st_mtime_ns
            modified = path.stat().st_mtime_ns
        except FileNotFoundError:
            return False
        valid = recorded > modified
        LOGGER.debug("cache path=%s valid=%s", path, valid)
        return valid

    def record(self, path: Path) -> None:
        """Mark ``path`` as successfully checked at the current time.

        Args:
            path: Candidate file that just passed.
        """

        self._dir.mkdir(parents=True, exist_ok=True)
        entry = self.entry_path(path)
        entry.touch(exist_ok=True)
        os.utime(entry)
        LOGGER.debug("cache record path=%s entry=%s", path, entry)


__all__ = ["KEY_SEPARATOR", "ResultCache", "cache_key"]
