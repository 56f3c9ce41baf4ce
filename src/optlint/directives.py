# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Detection of opt-in lint directives in file headers.

Only the leading comment block of a file is inspected. The block ends at the
first blank line or at the first comment line carrying nothing but ``#`` and
whitespace; anything below that point is never examined, even when it would
match a directive pattern.
"""

from __future__ import annotations

import logging
import re
import shlex
from collections.abc import Iterable
from pathlib import Path
from re import Pattern
from typing import Final

from .config import DriverSpec
from .models import ABSENT_DIRECTIVE, Directive, DirectiveState

LOGGER = logging.getLogger(__name__)

_BLANK_COMMENT: Final[Pattern[str]] = re.compile(r"^#\s*$")


def is_header_boundary(line: str) -> bool:
    """Return ``True`` when ``line`` terminates the leading comment block.

    Args:
        line: Single line of file content without its newline.

    Returns:
        bool: ``True`` for blank lines and blank comment lines.
    """

    return not line.strip() or bool(_BLANK_COMMENT.match(line.strip()))


def header_lines(lines: Iterable[str]) -> Iterable[str]:
    """Yield lines up to, but excluding, the first header boundary."""

    for line in lines:
        stripped = line.rstrip("\r\n")
        if is_header_boundary(stripped):
            return
        yield stripped


def _split_options(raw: str) -> tuple[str, ...]:
    try:
        return tuple(shlex.split(raw))
    except ValueError:
        return tuple(raw.split())


def scan_directive(
    text: str | Iterable[str],
    *,
    directive: Pattern[str],
    options: Pattern[str] | None = None,
) -> Directive:
    """Classify the directive carried by ``text``.

    A line matching ``directive`` enables the file. Without an ``options``
    pattern the scan stops at the first match. With one, scanning continues to
    the end of the header and every line matching ``options`` contributes the
    arguments captured by its first group. A header carrying only the options
    marker is still enabled.

    Args:
        text: Full file content, or an iterable of its lines.
        directive: Anchored pattern identifying the plain opt-in marker.
        options: Optional anchored pattern whose first group captures tool
            arguments.

    Returns:
        Directive: Parsed directive state plus any collected options.
    """

    lines = text.splitlines() if isinstance(text, str) else text
    enabled = False
    collected: list[str] = []
    saw_options = False
    for line in header_lines(lines):
        if options is not None:
            match = options.match(line)
            if match:
                saw_options = True
                suffix = match.group(1) if match.groups() else ""
                collected.extend(_split_options(suffix or ""))
                continue
        if directive.match(line):
            enabled = True
            if options is None:
                break
    if saw_options:
        return Directive(state=DirectiveState.PRESENT_WITH_OPTIONS, options=tuple(collected))
    if enabled:
        return Directive(state=DirectiveState.PRESENT)
    return ABSENT_DIRECTIVE


def scan_file(path: Path, spec: DriverSpec) -> Directive:
    """Read ``path`` and scan its header using the patterns from ``spec``.

    Args:
        path: File to inspect.
        spec: Driver specification providing the directive patterns.

    Returns:
        Directive: Parsed directive for the file.

    Raises:
        OSError: If the file cannot be read.
    """

    with path.open(encoding="utf-8", errors="replace") as handle:
        directive = scan_directive(handle, directive=spec.directive, options=spec.options_pattern)
    LOGGER.debug("directive path=%s state=%s", path, directive.state.value)
    return directive


__all__ = ["header_lines", "is_header_boundary", "scan_directive", "scan_file"]
