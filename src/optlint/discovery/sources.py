# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""File-listing sources feeding the candidate classifiers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from pathlib import Path
from typing import Protocol, TextIO, runtime_checkable

from ..core.runtime.process import CommandOptions, run_command

GitRunner = Callable[[Sequence[str], Path], list[str]]

TRACKED_COMMAND: tuple[str, ...] = ("git", "ls-files")
STAGED_COMMAND: tuple[str, ...] = ("git", "diff", "--name-only", "--cached", "--diff-filter=ACMR")


@runtime_checkable
class FileSource(Protocol):
    """Anything producing a sequence of candidate file paths."""

    def paths(self) -> Iterable[Path]:
        """Return the paths to consider, in source order."""
        ...


class GitFileSource:
    """List repository files through git.

    The default lists every tracked file; ``staged=True`` restricts the list to
    files added, copied, modified, or renamed in the index.
    """

    def __init__(self, root: Path, *, staged: bool = False, runner: GitRunner | None = None) -> None:
        """Create a git-backed source rooted at ``root``.

        Args:
            root: Repository root used as the git working directory.
            staged: List staged changes instead of all tracked files.
            runner: Optional command runner returning stdout lines.
        """

        self._root = root
        self._staged = staged
        self._runner = runner or self._default_runner

    @property
    def command(self) -> tuple[str, ...]:
        """Return the git command used by this source."""

        return STAGED_COMMAND if self._staged else TRACKED_COMMAND

    def paths(self) -> Iterator[Path]:
        """Yield resolved paths reported by git.

        Yields:
            Path: Files relative to the repository root, resolved.
        """

        for raw in self._runner(self.command, self._root):
            stripped = raw.strip()
            if not stripped:
                continue
            yield (self._root / stripped).resolve()

    @staticmethod
    def _default_runner(cmd: Sequence[str], root: Path) -> list[str]:
        """Execute ``cmd`` returning stdout lines, or nothing when git fails.

        Args:
            cmd: Git command to execute.
            root: Repository root directory.

        Returns:
            list[str]: Raw stdout lines produced by git.
        """

        try:
            cp = run_command(cmd, options=CommandOptions(cwd=root, capture_output=True, check=False))
        except FileNotFoundError:
            return []
        if cp.returncode != 0:
            return []
        return (cp.stdout or "").splitlines()


class StreamFileSource:
    """Read one path per line from a text stream such as stdin."""

    def __init__(self, stream: TextIO, root: Path) -> None:
        """Create a source reading from ``stream``.

        Args:
            stream: Open text stream yielding newline-delimited paths.
            root: Directory relative paths are resolved against.
        """

        self._stream = stream
        self._root = root

    def paths(self) -> Iterator[Path]:
        """Yield resolved paths for each non-blank line of the stream."""

        for line in self._stream:
            stripped = line.strip()
            if not stripped:
                continue
            candidate = Path(stripped)
            if not candidate.is_absolute():
                candidate = self._root / candidate
            yield candidate.resolve()


class StaticFileSource:
    """Serve an explicit list of paths, typically from command-line arguments."""

    def __init__(self, entries: Iterable[Path], root: Path) -> None:
        self._entries = tuple(entries)
        self._root = root

    def paths(self) -> Iterator[Path]:
        """Yield the configured entries resolved against the root."""

        for entry in self._entries:
            candidate = entry if entry.is_absolute() else self._root / entry
            yield candidate.resolve()


__all__ = [
    "FileSource",
    "GitFileSource",
    "GitRunner",
    "STAGED_COMMAND",
    "StaticFileSource",
    "StreamFileSource",
    "TRACKED_COMMAND",
]
