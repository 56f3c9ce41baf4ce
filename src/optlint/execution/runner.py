# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Generic selective-lint pipeline shared by every driver."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from ..cache.result_store import ResultCache
from ..config import DriverSpec, RunConfig
from ..core.runtime.process import run_command
from ..discovery.classifier import CandidateClassifier
from ..discovery.sniffing import FileKindDetector
from ..models import RunSummary
from ..reporting.summary import RunAggregator
from .invoker import LinterInvoker, ToolRunner, WarningSink

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DriverOutcome:
    """Final state of one driver run."""

    driver: str
    summary: RunSummary
    exit_code: int


class SelectiveLintRunner:
    """Classify, filter, lint, cache, and aggregate the files of one driver.

    Candidates are processed strictly one after another: each is fully
    classified before the next is read from the source.
    """

    def __init__(
        self,
        spec: DriverSpec,
        config: RunConfig,
        *,
        detector: FileKindDetector | None = None,
        runner: ToolRunner = run_command,
        on_warning: WarningSink | None = None,
        console: Console | None = None,
    ) -> None:
        """Create a runner for ``spec``.

        Args:
            spec: Driver specification.
            config: Run-wide configuration.
            detector: Content sniffer used by the candidate classifier.
            runner: Command runner used for tool probes and invocations.
            on_warning: Sink for environment warnings.
            console: Console receiving the summary, defaults to stdout.
        """

        self._spec = spec
        self._config = config
        self._classifier = CandidateClassifier(spec, detector=detector)
        self._runner = runner
        self._on_warning = on_warning
        self._console = console

    @property
    def spec(self) -> DriverSpec:
        """Return the driver specification."""

        return self._spec

    def build_cache(self) -> ResultCache | None:
        """Return the result cache for this driver, ``None`` when disabled."""

        if not self._spec.use_cache:
            return None
        return ResultCache(self._config.cache_dir_for(self._spec))

    def run(self, paths: Iterable[Path]) -> DriverOutcome:
        """Process ``paths`` and render the summary.

        Args:
            paths: Lazy sequence of file paths from a file-listing source.

        Returns:
            DriverOutcome: Summary and exit status for the run.
        """

        invoker = LinterInvoker(
            self._spec,
            self._config,
            cache=self.build_cache(),
            runner=self._runner,
            on_warning=self._on_warning,
        )
        aggregator = RunAggregator(self._config, console=self._console)
        for candidate in self._classifier.classify(paths):
            result = invoker.invoke(candidate)
            LOGGER.debug("classified path=%s as=%s", candidate.path, result.classification.value)
            aggregator.add(result)
        exit_code = aggregator.finalize()
        return DriverOutcome(driver=self._spec.name, summary=aggregator.summary, exit_code=exit_code)


__all__ = ["DriverOutcome", "SelectiveLintRunner"]
