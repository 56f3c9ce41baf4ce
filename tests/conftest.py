# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import os
import stat
import time
from collections.abc import Callable, Sequence
from pathlib import Path
from subprocess import CompletedProcess

import pytest

from optlint.config import RunConfig
from optlint.core.runtime.process import CommandOptions


class FakeToolRunner:
    """Stand-in for :func:`run_command` recording every lint invocation."""

    def __init__(self) -> None:
        self.installed = True
        self.version_returncode = 0
        self.returncodes: dict[str, int] = {}
        self.default_returncode = 0
        self.calls: list[list[str]] = []
        self.version_queries = 0

    def __call__(self, cmd: Sequence[str], *, options: CommandOptions | None = None) -> CompletedProcess[str]:
        command = list(cmd)
        if not self.installed:
            raise FileNotFoundError(f"Executable '{command[0]}' was not found on PATH")
        if command[1:] == ["--version"]:
            self.version_queries += 1
            return CompletedProcess(command, self.version_returncode, stdout=f"{command[0]} 1.0\n", stderr="")
        self.calls.append(command)
        target = Path(command[-1]).name
        return CompletedProcess(command, self.returncodes.get(target, self.default_returncode), stdout="", stderr="")


@pytest.fixture
def tool_runner() -> FakeToolRunner:
    """Return a fake tool runner with every tool installed and passing."""

    return FakeToolRunner()


@pytest.fixture
def warnings_sink() -> list[str]:
    """Collect environment warnings instead of printing them."""

    return []


@pytest.fixture
def run_config(tmp_path: Path) -> RunConfig:
    """Return a colourless configuration rooted at ``tmp_path``."""

    return RunConfig(root=tmp_path, cache_root=tmp_path / ".lint-cache", color=False, emoji=False, environ={})


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing files whose mtime lies safely in the past."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        past = time.time() - 60
        os.utime(path, (past, past))
        return path

    return _write


@pytest.fixture
def fake_tool(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[..., Path]:
    """Return a helper installing executable stand-ins for lint tools on ``PATH``.

    Every invocation appends its arguments to ``<tool>.log`` beside the script.
    The ``PATH`` is replaced so only the fakes (plus ``/bin`` for ``sh``) resolve.
    """

    bin_dir = tmp_path / "fake-bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", os.pathsep.join([str(bin_dir), "/bin", "/usr/bin"]))

    def _install(name: str, *, exit_code: int = 0) -> Path:
        script = bin_dir / name
        log = bin_dir / f"{name}.log"
        script.write_text(
            f'#!/bin/sh\nif [ "$1" = "--version" ]; then echo "{name} 1.0"; exit 0; fi\n'
            f'echo "$@" >> "{log}"\nexit {exit_code}\n',
            encoding="utf-8",
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return log

    return _install


@pytest.fixture
def empty_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point ``PATH`` at an empty directory so no lint tool resolves."""

    empty = tmp_path / "empty-bin"
    empty.mkdir()
    monkeypatch.setenv("PATH", str(empty))
