# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Accumulate per-candidate classifications and render the run summary."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from rich.console import Console
from rich.text import Text

from ..config import RunConfig
from ..constants import CACHED_LABEL
from ..core.logging import fail as core_fail
from ..models import Classification, LintResult, RunSummary
from ..runtime.console.manager import get_console_manager

_STYLES: Final[dict[str, str]] = {
    Classification.PASSED.value: "green",
    Classification.FAILED.value: "bold red",
    Classification.SKIPPED.value: "dim",
    CACHED_LABEL: "cyan",
}


def display_relative_path(path: Path, root: Path) -> str:
    """Return a stable display string for ``path`` relative to ``root`` when possible."""

    try:
        return path.resolve().relative_to(root.resolve()).as_posix()
    except (ValueError, OSError):
        return str(path)


class RunAggregator:
    """Own the :class:`RunSummary` of one driver run and render it.

    Args:
        config: Run configuration providing colour and emoji preferences.
        console: Optional console, defaults to the shared stdout console.
    """

    def __init__(self, config: RunConfig, *, console: Console | None = None) -> None:
        self._config = config
        self._console = console or get_console_manager().get(color=config.color, emoji=config.emoji)
        self._summary = RunSummary()

    @property
    def summary(self) -> RunSummary:
        """Return the summary accumulated so far."""

        return self._summary

    def add(self, result: LintResult) -> None:
        """Record ``result`` as the next processed candidate."""

        self._summary.add(result)

    def exit_code(self) -> int:
        """Return the exit status derived from the accumulated results."""

        return self._summary.exit_code(require_candidates=self._config.require_candidates)

    def lines(self) -> list[tuple[str, str]]:
        """Return ``(label, text)`` pairs describing the summary in order.

        Cached candidates are folded into a single ``deja-vu`` entry placed
        after the per-file lines.
        """

        root = self._config.root
        rendered: list[tuple[str, str]] = []
        for result in self._summary.results:
            if result.classification is Classification.CACHED:
                continue
            label = result.classification.value
            rendered.append((label, display_relative_path(result.candidate.path, root)))
        if self._summary.cached_paths:
            cached = " ".join(display_relative_path(path, root) for path in self._summary.cached_paths)
            rendered.append((CACHED_LABEL, cached))
        return rendered

    def totals(self) -> str:
        """Return the one-line counter summary."""

        summary = self._summary
        return f"{summary.passed} passed, {summary.failed} failed, {summary.skipped} skipped"

    def render(self) -> None:
        """Print the per-candidate lines followed by the totals line."""

        for label, value in self.lines():
            text = Text(f"{label} {value}")
            if self._config.color:
                text.stylize(_STYLES.get(label, ""), 0, len(label))
            self._console.print(text)
        self._console.print(self.totals())

    def finalize(self) -> int:
        """Render the summary and return the run's exit status.

        Returns:
            int: Exit status; empty required runs are reported as a
            configuration problem.
        """

        if self._config.require_candidates and not self._summary.results:
            core_fail(
                "no candidate files found; check the file list passed to optlint",
                use_emoji=self._config.emoji,
                use_color=self._config.color,
                stderr=True,
            )
            return self.exit_code()
        self.render()
        return self.exit_code()


__all__ = ["RunAggregator", "display_relative_path"]
