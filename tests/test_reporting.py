# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for run aggregation and summary rendering."""

from __future__ import annotations

import io
from pathlib import Path

from rich.console import Console

from optlint.config import RunConfig
from optlint.constants import EXIT_LINT_FAILURE, EXIT_NO_CANDIDATES, EXIT_OK, EXIT_TOOL_MISSING
from optlint.models import Candidate, Classification, LinterKind, LintResult, RunSummary
from optlint.reporting import RunAggregator, display_relative_path


def _result(root: Path, name: str, classification: Classification, returncode: int | None = None) -> LintResult:
    return LintResult(
        candidate=Candidate(path=root / name, kind=LinterKind.PYTHON),
        classification=classification,
        returncode=returncode,
    )


def test_summary_counts_cached_as_skipped(tmp_path: Path) -> None:
    summary = RunSummary()
    summary.add(_result(tmp_path, "a.py", Classification.PASSED, 0))
    summary.add(_result(tmp_path, "b.py", Classification.CACHED))
    summary.add(_result(tmp_path, "c.py", Classification.SKIPPED))

    assert (summary.passed, summary.failed, summary.skipped) == (1, 0, 2)
    assert summary.cached_paths == [tmp_path / "b.py"]
    assert summary.exit_code() == EXIT_OK


def test_exit_code_distinguishes_missing_tool(tmp_path: Path) -> None:
    lint_failure = RunSummary()
    lint_failure.add(_result(tmp_path, "a.py", Classification.FAILED, 4))
    missing = RunSummary()
    missing.add(_result(tmp_path, "a.py", Classification.FAILED, 4))
    missing.add(_result(tmp_path, "b.py", Classification.FAILED, EXIT_TOOL_MISSING))

    assert lint_failure.exit_code() == EXIT_LINT_FAILURE
    assert missing.exit_code() == EXIT_TOOL_MISSING


def test_empty_summary_requires_candidates() -> None:
    assert RunSummary().exit_code() == EXIT_NO_CANDIDATES
    assert RunSummary().exit_code(require_candidates=False) == EXIT_OK


def test_render_orders_lines_and_folds_cached_paths(tmp_path: Path) -> None:
    buffer = io.StringIO()
    config = RunConfig(root=tmp_path, color=False, emoji=False)
    aggregator = RunAggregator(config, console=Console(file=buffer, no_color=True, soft_wrap=True))
    aggregator.add(_result(tmp_path, "one.py", Classification.CACHED))
    aggregator.add(_result(tmp_path, "two.py", Classification.FAILED, 1))
    aggregator.add(_result(tmp_path, "sub/three.py", Classification.CACHED))
    aggregator.add(_result(tmp_path, "four.py", Classification.SKIPPED))

    exit_code = aggregator.finalize()

    assert exit_code == EXIT_LINT_FAILURE
    assert buffer.getvalue().splitlines() == [
        "failed two.py",
        "skipped four.py",
        "deja-vu one.py sub/three.py",
        "0 passed, 1 failed, 3 skipped",
    ]


def test_display_relative_path_falls_back_outside_root(tmp_path: Path) -> None:
    outside = Path("/elsewhere/file.py")

    assert display_relative_path(tmp_path / "x" / "y.py", tmp_path) == "x/y.py"
    assert display_relative_path(outside, tmp_path) == str(outside.resolve())
