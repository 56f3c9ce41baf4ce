# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the optlint package."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .constants import EXIT_LINT_FAILURE, EXIT_NO_CANDIDATES, EXIT_OK, EXIT_TOOL_MISSING


class LinterKind(str, Enum):
    """File families understood by the bundled drivers."""

    PYTHON = "python"
    SHELL = "shell"
    YAML = "yaml"


class Classification(str, Enum):
    """Per-candidate outcome of a single driver run."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"
    CACHED = "cached"

    @property
    def counts_as_skipped(self) -> bool:
        """Return ``True`` for classifications totalled under *skipped*."""

        return self in {Classification.SKIPPED, Classification.CACHED}


class DirectiveState(str, Enum):
    """Outcome of scanning a file header for an opt-in marker."""

    ABSENT = "absent"
    PRESENT = "present"
    PRESENT_WITH_OPTIONS = "present-with-options"


@dataclass(frozen=True, slots=True)
class Directive:
    """Parsed opt-in signal extracted from a file's leading comment block."""

    state: DirectiveState = DirectiveState.ABSENT
    options: tuple[str, ...] = ()

    @property
    def enabled(self) -> bool:
        """Return whether the directive requests the linter for this file."""

        return self.state is not DirectiveState.ABSENT


ABSENT_DIRECTIVE = Directive()


class Candidate(BaseModel):
    """File under consideration by one driver."""

    model_config = ConfigDict(frozen=True)

    path: Path
    kind: LinterKind
    options: tuple[str, ...] = Field(default_factory=tuple)

    def with_options(self, options: tuple[str, ...]) -> Candidate:
        """Return a copy of the candidate carrying ``options``."""

        return self.model_copy(update={"options": options})


class LintResult(BaseModel):
    """Classification produced for one candidate.

    ``returncode`` is ``None`` whenever the underlying tool was not invoked,
    for instance on skips and cache hits.
    """

    model_config = ConfigDict(frozen=True)

    candidate: Candidate
    classification: Classification
    returncode: int | None = None

    @property
    def tool_missing(self) -> bool:
        """Return ``True`` when the failure stems from an unusable tool."""

        return self.classification is Classification.FAILED and self.returncode == EXIT_TOOL_MISSING


@dataclass(slots=True)
class RunSummary:
    """Ordered record of every classification emitted during one run."""

    results: list[LintResult] = field(default_factory=list)
    passed: int = 0
    failed: int = 0
    skipped: int = 0
    cached_paths: list[Path] = field(default_factory=list)

    def add(self, result: LintResult) -> None:
        """Append ``result`` and update the running counters.

        Args:
            result: Classification produced for the next processed candidate.
        """

        self.results.append(result)
        classification = result.classification
        if classification is Classification.PASSED:
            self.passed += 1
        elif classification is Classification.FAILED:
            self.failed += 1
        else:
            self.skipped += 1
            if classification is Classification.CACHED:
                self.cached_paths.append(result.candidate.path)

    @property
    def total(self) -> int:
        """Return the number of candidates processed so far."""

        return len(self.results)

    def exit_code(self, *, require_candidates: bool = True) -> int:
        """Derive the process exit status for the run.

        Args:
            require_candidates: Treat an empty run as a configuration problem.

        Returns:
            int: ``0`` when nothing failed, ``EXIT_TOOL_MISSING`` when a failure
            came from an unusable tool, ``EXIT_LINT_FAILURE`` for ordinary lint
            failures, and ``EXIT_NO_CANDIDATES`` for empty required runs.
        """

        if require_candidates and not self.results:
            return EXIT_NO_CANDIDATES
        if not self.failed:
            return EXIT_OK
        if any(result.tool_missing for result in self.results):
            return EXIT_TOOL_MISSING
        return EXIT_LINT_FAILURE


__all__ = [
    "ABSENT_DIRECTIVE",
    "Candidate",
    "Classification",
    "Directive",
    "DirectiveState",
    "LintResult",
    "LinterKind",
    "RunSummary",
]
