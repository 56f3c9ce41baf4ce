# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Content sniffing for files that lack a recognised extension."""

from __future__ import annotations

from pathlib import Path
from typing import Final, Protocol, runtime_checkable

from ..models import LinterKind

_SHEBANG: Final[bytes] = b"#!"
_MAX_SHEBANG_BYTES: Final[int] = 256


@runtime_checkable
class FileKindDetector(Protocol):
    """Capability mapping a file to the linter kind its content implies."""

    def classify(self, path: Path) -> LinterKind | None:
        """Return the kind of ``path`` or ``None`` when it is unrecognised.

        Args:
            path: File to inspect.

        Returns:
            LinterKind | None: Detected kind, if any.
        """
        ...


def interpreter_kind(shebang: str) -> LinterKind | None:
    """Map a shebang line to a linter kind.

    Handles both direct interpreter paths (``#!/usr/bin/python3``) and the
    ``/usr/bin/env`` indirection, including ``env -S`` style flags.

    Args:
        shebang: First line of the file including the ``#!`` prefix.

    Returns:
        LinterKind | None: Kind implied by the interpreter.
    """

    parts = shebang[2:].strip().split()
    if not parts:
        return None
    program = Path(parts[0]).name
    if program == "env":
        interpreters = [part for part in parts[1:] if not part.startswith("-") and "=" not in part]
        if not interpreters:
            return None
        program = Path(interpreters[0]).name
    if program.startswith("python"):
        return LinterKind.PYTHON
    return None


class ShebangDetector:
    """Detect script kinds from their ``#!`` interpreter line."""

    def classify(self, path: Path) -> LinterKind | None:
        """Return the kind implied by the shebang of ``path``.

        Args:
            path: File whose first line is inspected.

        Returns:
            LinterKind | None: Detected kind, ``None`` for unreadable files or
            files without a recognised interpreter.
        """

        try:
            with path.open("rb") as handle:
                head = handle.readline(_MAX_SHEBANG_BYTES)
        except OSError:
            return None
        if not head.startswith(_SHEBANG):
            return None
        return interpreter_kind(head.decode("utf-8", errors="replace"))


__all__ = ["FileKindDetector", "ShebangDetector", "interpreter_kind"]
