# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the linter invoker classification rules."""

from __future__ import annotations

import os
import time
from collections.abc import Callable
from pathlib import Path

from optlint.cache import ResultCache
from optlint.config import RunConfig
from optlint.constants import EXIT_TOOL_MISSING
from optlint.drivers import PYTHON_DRIVER, SHELL_DRIVER, YAML_DRIVER
from optlint.execution import LinterInvoker, ToolStatus, probe_tool
from optlint.models import Candidate, Classification, LinterKind


def _candidate(path: Path, kind: LinterKind = LinterKind.PYTHON) -> Candidate:
    return Candidate(path=path, kind=kind)


def test_probe_tool_reports_missing(tool_runner) -> None:
    tool_runner.installed = False

    probe = probe_tool("pylint", runner=tool_runner)

    assert probe.status is ToolStatus.MISSING
    assert not probe.usable


def test_probe_tool_reports_incompatible(tool_runner) -> None:
    tool_runner.version_returncode = 3

    assert probe_tool("pylint", runner=tool_runner).status is ToolStatus.INCOMPATIBLE


def test_probe_tool_reports_available(tool_runner) -> None:
    probe = probe_tool("pylint", runner=tool_runner)

    assert probe.status is ToolStatus.AVAILABLE
    assert probe.detail == "pylint 1.0"


def test_file_without_directive_is_skipped_without_running(
    run_config: RunConfig, tool_runner, write_file: Callable[..., Path]
) -> None:
    source = write_file("b.py", "import os\nprint(  os )\n")
    invoker = LinterInvoker(PYTHON_DRIVER, run_config, runner=tool_runner)

    result = invoker.invoke(_candidate(source))

    assert result.classification is Classification.SKIPPED
    assert result.returncode is None
    assert tool_runner.calls == []
    assert tool_runner.version_queries == 0


def test_passing_file_records_cache(run_config: RunConfig, tool_runner, write_file: Callable[..., Path]) -> None:
    source = write_file("a.py", "# pylint: disable=invalid-name\nx = 1\n")
    cache = ResultCache(run_config.cache_dir_for(PYTHON_DRIVER))
    invoker = LinterInvoker(PYTHON_DRIVER, run_config, cache=cache, runner=tool_runner)

    result = invoker.invoke(_candidate(source))

    assert result.classification is Classification.PASSED
    assert result.returncode == 0
    assert tool_runner.calls == [["pylint", str(source)]]
    assert cache.is_valid(source)


def test_second_invocation_uses_cache(run_config: RunConfig, tool_runner, write_file: Callable[..., Path]) -> None:
    source = write_file("a.py", "# pylint: disable=invalid-name\nx = 1\n")
    cache = ResultCache(run_config.cache_dir_for(PYTHON_DRIVER))

    first = LinterInvoker(PYTHON_DRIVER, run_config, cache=cache, runner=tool_runner).invoke(_candidate(source))
    second = LinterInvoker(PYTHON_DRIVER, run_config, cache=cache, runner=tool_runner).invoke(_candidate(source))

    assert first.classification is Classification.PASSED
    assert second.classification is Classification.CACHED
    assert second.classification.counts_as_skipped
    assert len(tool_runner.calls) == 1


def test_modified_file_is_linted_again(run_config: RunConfig, tool_runner, write_file: Callable[..., Path]) -> None:
    source = write_file("a.py", "# pylint: disable=invalid-name\nx = 1\n")
    cache = ResultCache(run_config.cache_dir_for(PYTHON_DRIVER))
    LinterInvoker(PYTHON_DRIVER, run_config, cache=cache, runner=tool_runner).invoke(_candidate(source))

    future = time.time() + 60
    os.utime(source, (future, future))
    result = LinterInvoker(PYTHON_DRIVER, run_config, cache=cache, runner=tool_runner).invoke(_candidate(source))

    assert result.classification is Classification.PASSED
    assert len(tool_runner.calls) == 2


def test_failing_file_is_not_cached(run_config: RunConfig, tool_runner, write_file: Callable[..., Path]) -> None:
    source = write_file("bad.py", "# pylint: disable=invalid-name\nimport os\n")
    tool_runner.returncodes["bad.py"] = 20
    cache = ResultCache(run_config.cache_dir_for(PYTHON_DRIVER))

    result = LinterInvoker(PYTHON_DRIVER, run_config, cache=cache, runner=tool_runner).invoke(_candidate(source))

    assert result.classification is Classification.FAILED
    assert result.returncode == 20
    assert not cache.is_valid(source)


def test_cache_ignored_for_drivers_without_caching(
    run_config: RunConfig, tool_runner, write_file: Callable[..., Path]
) -> None:
    source = write_file("s.sh", "# shellcheck shell=sh\necho hi\n")
    cache = ResultCache(run_config.cache_dir_for(SHELL_DRIVER))
    cache.record(source)

    result = LinterInvoker(SHELL_DRIVER, run_config, cache=cache, runner=tool_runner).invoke(
        _candidate(source, LinterKind.SHELL)
    )

    assert result.classification is Classification.PASSED
    assert tool_runner.calls == [["shellcheck", str(source)]]


def test_missing_tool_fails_every_enabled_file_and_warns_once(
    run_config: RunConfig, tool_runner, warnings_sink: list[str], write_file: Callable[..., Path]
) -> None:
    tool_runner.installed = False
    first = write_file("one.sh", "# shellcheck shell=sh\necho 1\n")
    second = write_file("two.sh", "# shellcheck shell=sh\necho 2\n")
    skipped = write_file("three.sh", "echo 3\n")
    invoker = LinterInvoker(SHELL_DRIVER, run_config, runner=tool_runner, on_warning=warnings_sink.append)

    results = [invoker.invoke(_candidate(path, LinterKind.SHELL)) for path in (first, second, skipped)]

    assert [result.classification for result in results] == [
        Classification.FAILED,
        Classification.FAILED,
        Classification.SKIPPED,
    ]
    assert results[0].returncode == EXIT_TOOL_MISSING
    assert results[0].tool_missing
    assert len(warnings_sink) == 1
    assert "shellcheck is not installed" in warnings_sink[0]


def test_incompatible_tool_fails_with_distinct_warning(
    run_config: RunConfig, tool_runner, warnings_sink: list[str], write_file: Callable[..., Path]
) -> None:
    tool_runner.version_returncode = 2
    source = write_file("x.yml", "# yamllint disable rule:line-length\na: 1\n")
    invoker = LinterInvoker(YAML_DRIVER, run_config, runner=tool_runner, on_warning=warnings_sink.append)

    result = invoker.invoke(_candidate(source, LinterKind.YAML))

    assert result.classification is Classification.FAILED
    assert result.returncode == EXIT_TOOL_MISSING
    assert tool_runner.calls == []
    assert len(warnings_sink) == 1
    assert "--version failed" in warnings_sink[0]


def test_force_all_lints_files_without_directive(tmp_path: Path, tool_runner, write_file: Callable[..., Path]) -> None:
    source = write_file("c.yml", "a: 1\n")
    config = RunConfig(root=tmp_path, color=False, emoji=False, force_all=True)

    result = LinterInvoker(YAML_DRIVER, config, runner=tool_runner).invoke(_candidate(source, LinterKind.YAML))

    assert result.classification is Classification.PASSED
    assert tool_runner.calls == [["yamllint", str(source)]]


def test_inline_options_and_rc_override_are_passed(tmp_path: Path, tool_runner, write_file: Callable[..., Path]) -> None:
    source = write_file("opt.py", "# pylint: disable=all\n# pylint-options: --jobs=1 --score=n\n")
    config = RunConfig(root=tmp_path, color=False, emoji=False, environ={"PYLINTRC": "/etc/pylintrc"})

    LinterInvoker(PYTHON_DRIVER, config, runner=tool_runner).invoke(_candidate(source))

    assert tool_runner.calls == [["pylint", "--rcfile=/etc/pylintrc", "--jobs=1", "--score=n", str(source)]]


def test_unreadable_file_fails(run_config: RunConfig, tool_runner, warnings_sink: list[str], tmp_path: Path) -> None:
    missing = tmp_path / "vanished.py"
    invoker = LinterInvoker(PYTHON_DRIVER, run_config, runner=tool_runner, on_warning=warnings_sink.append)

    result = invoker.invoke(_candidate(missing))

    assert result.classification is Classification.FAILED
    assert warnings_sink and "cannot read" in warnings_sink[0]
