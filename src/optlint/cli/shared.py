# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, inputs)."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

import typer

from ..core.logging import fail as core_fail
from ..core.logging import warn as core_warn
from ..discovery.sources import FileSource, GitFileSource, StaticFileSource, StreamFileSource


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI presentation flags."""

    use_emoji: bool
    use_color: bool

    def fail(self, message: str) -> None:
        """Log a failure message to stderr."""

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color, stderr=True)

    def warn(self, message: str) -> None:
        """Log a warning message to stderr, the diagnostic channel."""

        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color, stderr=True)


def build_cli_logger(*, emoji: bool, color: bool, debug: bool = False) -> CLILogger:
    """Return a ``CLILogger`` and configure debug logging when requested.

    Args:
        emoji: Whether log output may include emoji glyphs.
        color: Whether terminal colour output is enabled.
        debug: Whether internal debug records should be printed.

    Returns:
        CLILogger: Logger bound to the presentation flags.
    """

    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[debug] %(name)s: %(message)s", stream=sys.stderr)
    return CLILogger(use_emoji=emoji, use_color=color)


def resolve_root(root: Path | None) -> Path:
    """Return the resolved working root, validating that it is a directory.

    Raises:
        typer.BadParameter: If ``root`` is not an existing directory.
    """

    resolved = (root or Path.cwd()).resolve()
    if not resolved.is_dir():
        raise typer.BadParameter(f"{resolved} is not a directory", param_hint="--root")
    return resolved


def select_file_source(
    paths: Sequence[Path],
    *,
    root: Path,
    stdin: TextIO,
) -> FileSource:
    """Choose where a driver command reads its candidate paths from.

    Explicit arguments win; otherwise a piped stdin is read one path per line;
    otherwise git lists the repository files.

    Args:
        paths: Paths passed on the command line.
        root: Working root.
        stdin: Standard input stream.

    Returns:
        FileSource: Source producing candidate paths.
    """

    if paths:
        return StaticFileSource(paths, root)
    if not _is_interactive(stdin):
        return StreamFileSource(stdin, root)
    return GitFileSource(root)


def _is_interactive(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


__all__ = [
    "CLIError",
    "CLILogger",
    "build_cli_logger",
    "resolve_root",
    "select_file_source",
]
