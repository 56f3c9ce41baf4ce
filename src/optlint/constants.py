# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across optlint modules."""

from __future__ import annotations

from pathlib import Path
from typing import Final

CACHE_DIR_ENV: Final[str] = "OPTLINT_CACHE_DIR"
DEFAULT_CACHE_DIR: Final[Path] = Path(".lint-cache")

EXIT_OK: Final[int] = 0
EXIT_LINT_FAILURE: Final[int] = 1
EXIT_NO_CANDIDATES: Final[int] = 2
# Mirrors the shell's "command not found" status so environment problems stand
# apart from ordinary lint failures when exit codes are aggregated with max().
EXIT_TOOL_MISSING: Final[int] = 127

VERSION_FLAG: Final[str] = "--version"

CACHED_LABEL: Final[str] = "deja-vu"

__all__ = [
    "CACHED_LABEL",
    "CACHE_DIR_ENV",
    "DEFAULT_CACHE_DIR",
    "EXIT_LINT_FAILURE",
    "EXIT_NO_CANDIDATES",
    "EXIT_OK",
    "EXIT_TOOL_MISSING",
    "VERSION_FLAG",
]
