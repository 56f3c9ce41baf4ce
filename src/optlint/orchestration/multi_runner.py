# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run every registered driver in sequence and aggregate exit codes."""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from ..config import DriverSpec, OptlintError, RunConfig
from ..constants import EXIT_LINT_FAILURE, EXIT_NO_CANDIDATES, EXIT_OK
from ..core.logging import fail as core_fail
from ..core.logging import info as core_info
from ..core.logging import ok as core_ok
from ..core.logging import section
from ..core.runtime.process import SubprocessExecutionError, run_command
from ..discovery.sniffing import FileKindDetector
from ..drivers.registry import DriverRegistry
from ..execution.invoker import ToolRunner, WarningSink
from ..execution.runner import DriverOutcome, SelectiveLintRunner

PathProvider = Callable[[], Iterable[Path]]


@dataclass(slots=True)
class MultiRunResult:
    """Per-driver exit codes collected by :class:`MultiRunner`."""

    outcomes: list[DriverOutcome] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)
    exit_codes: dict[str, int] = field(default_factory=dict)

    @property
    def candidate_count(self) -> int:
        """Return the number of candidates seen across all drivers."""

        return sum(outcome.summary.total for outcome in self.outcomes)

    @property
    def exit_code(self) -> int:
        """Return the maximum exit code observed across drivers."""

        return max(self.exit_codes.values(), default=EXIT_OK)


class MultiRunner:
    """Sequence driver runs without letting one driver's failure mask another."""

    def __init__(
        self,
        registry: DriverRegistry,
        config: RunConfig,
        *,
        exclude: Collection[str] = (),
        detector: FileKindDetector | None = None,
        runner: ToolRunner = run_command,
        on_warning: WarningSink | None = None,
        console: Console | None = None,
    ) -> None:
        """Create a multi-runner over ``registry``.

        Args:
            registry: Drivers to execute, in registration order.
            config: Configuration shared by every driver run. Individual
                drivers never fail on an empty candidate list; the aggregate
                check happens here instead.
            exclude: Driver names to skip.
            detector: Content sniffer shared by the classifiers.
            runner: Command runner used by every driver.
            on_warning: Sink for environment warnings.
            console: Console receiving driver summaries.
        """

        self._registry = registry
        self._config = config.model_copy(update={"require_candidates": False})
        self._require_candidates = config.require_candidates
        self._exclude = frozenset(exclude)
        self._detector = detector
        self._runner = runner
        self._on_warning = on_warning
        self._console = console

    def selected(self) -> list[DriverSpec]:
        """Return the drivers that will run, excluding skipped names."""

        return [spec for name, spec in self._registry.items() if name not in self._exclude]

    def run(self, provider: PathProvider) -> MultiRunResult:
        """Run each selected driver over the paths returned by ``provider``.

        The provider is called once per driver so each driver sees a fresh
        iteration of the file list.

        Args:
            provider: Callable returning the candidate file paths.

        Returns:
            MultiRunResult: Outcomes and aggregated exit code.
        """

        result = MultiRunResult()
        for name in sorted(self._exclude & set(self._registry)):
            core_info(f"{name} excluded from this run", use_emoji=self._config.emoji, use_color=self._config.color)
        for spec in self.selected():
            section(f"{spec.name} ({spec.tool})", use_color=self._config.color)
            try:
                outcome = self._run_driver(spec, provider)
            except (OptlintError, OSError, SubprocessExecutionError) as exc:
                result.errors[spec.name] = str(exc)
                result.exit_codes[spec.name] = EXIT_LINT_FAILURE
                self._fail(f"{spec.name}: {exc}")
                continue
            result.outcomes.append(outcome)
            result.exit_codes[spec.name] = outcome.exit_code
            self._report(outcome)
        if self._require_candidates and not result.errors and result.candidate_count == 0:
            self._fail("no candidate files found for any driver")
            result.exit_codes["<all>"] = EXIT_NO_CANDIDATES
        return result

    def _run_driver(self, spec: DriverSpec, provider: PathProvider) -> DriverOutcome:
        runner = SelectiveLintRunner(
            spec,
            self._config,
            detector=self._detector,
            runner=self._runner,
            on_warning=self._on_warning,
            console=self._console,
        )
        return runner.run(provider())

    def _report(self, outcome: DriverOutcome) -> None:
        if outcome.exit_code == EXIT_OK:
            core_ok(f"{outcome.driver} passed", use_emoji=self._config.emoji, use_color=self._config.color)
        else:
            self._fail(f"{outcome.driver} failed with exit code {outcome.exit_code}")

    def _fail(self, message: str) -> None:
        core_fail(message, use_emoji=self._config.emoji, use_color=self._config.color)


__all__ = ["MultiRunResult", "MultiRunner", "PathProvider"]
