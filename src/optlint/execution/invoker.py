# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run one external lint tool against one candidate and classify the result."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from subprocess import CompletedProcess

from ..cache.result_store import ResultCache
from ..config import DriverSpec, MissingToolPolicy, RunConfig
from ..constants import EXIT_TOOL_MISSING, VERSION_FLAG
from ..core.logging import warn as core_warn
from ..core.runtime.process import CommandOptions, run_command
from ..directives import scan_file
from ..models import Candidate, Classification, Directive, LintResult

LOGGER = logging.getLogger(__name__)

ToolRunner = Callable[..., CompletedProcess[str]]
WarningSink = Callable[[str], None]


class ToolStatus(str, Enum):
    """Availability of a driver's lint tool on the execution path."""

    AVAILABLE = "available"
    MISSING = "missing"
    INCOMPATIBLE = "incompatible"


@dataclass(frozen=True, slots=True)
class ToolProbe:
    """Result of querying a lint tool for its version."""

    status: ToolStatus
    detail: str = ""

    @property
    def usable(self) -> bool:
        """Return ``True`` when the tool can be invoked."""

        return self.status is ToolStatus.AVAILABLE


def probe_tool(tool: str, *, runner: ToolRunner = run_command) -> ToolProbe:
    """Query ``tool --version`` to decide whether the tool can be used.

    Args:
        tool: Executable name.
        runner: Command runner compatible with :func:`run_command`.

    Returns:
        ToolProbe: ``MISSING`` when the executable cannot be resolved,
        ``INCOMPATIBLE`` when the version query fails, else ``AVAILABLE``.
    """

    try:
        completed = runner([tool, VERSION_FLAG], options=CommandOptions(capture_output=True, check=False))
    except FileNotFoundError as exc:
        return ToolProbe(ToolStatus.MISSING, str(exc))
    output = "\n".join(part.strip() for part in (completed.stdout, completed.stderr) if part and part.strip())
    if completed.returncode != 0:
        return ToolProbe(ToolStatus.INCOMPATIBLE, output)
    return ToolProbe(ToolStatus.AVAILABLE, output.splitlines()[0] if output else "")


class LinterInvoker:
    """Classify candidates for one driver, invoking its tool when required.

    The invoker owns the per-run state: the tool availability probe happens at
    most once, and so does the warning issued when the tool is unusable.
    """

    def __init__(
        self,
        spec: DriverSpec,
        config: RunConfig,
        *,
        cache: ResultCache | None = None,
        runner: ToolRunner = run_command,
        on_warning: WarningSink | None = None,
    ) -> None:
        """Create an invoker for ``spec``.

        Args:
            spec: Driver specification describing the tool and directives.
            config: Run-wide configuration.
            cache: Result cache consulted and updated when ``spec.use_cache``.
            runner: Command runner compatible with :func:`run_command`.
            on_warning: Sink for environment warnings, defaults to stderr.
        """

        self._spec = spec
        self._config = config
        self._cache = cache if spec.use_cache else None
        self._runner = runner
        self._on_warning = on_warning or self._default_warning
        self._probe: ToolProbe | None = None

    def invoke(self, candidate: Candidate) -> LintResult:
        """Return the classification of ``candidate`` for this run.

        Args:
            candidate: File selected by the candidate classifier.

        Returns:
            LintResult: Exactly one classification for the candidate.
        """

        path = candidate.path
        try:
            directive = scan_file(path, self._spec)
        except OSError as exc:
            self._on_warning(f"{self._spec.name}: cannot read {path}: {exc}")
            return LintResult(candidate=candidate, classification=Classification.FAILED, returncode=1)
        if not (directive.enabled or self._config.force_all):
            return LintResult(candidate=candidate, classification=Classification.SKIPPED)
        candidate = self._with_directive(candidate, directive)

        if self._cache is not None and self._cache.is_valid(path):
            return LintResult(candidate=candidate, classification=Classification.CACHED)

        if not self._tool_probe().usable:
            return self._missing_tool_result(candidate)

        command = self.build_command(candidate)
        LOGGER.debug("invoke tool=%s command=%s", self._spec.tool, command)
        try:
            completed = self._runner(command, options=CommandOptions(cwd=self._config.root, check=False))
        except FileNotFoundError as exc:
            self._probe = ToolProbe(ToolStatus.MISSING, str(exc))
            self._warn_unusable(self._probe)
            return self._missing_tool_result(candidate)
        if completed.returncode == 0:
            if self._cache is not None:
                self._cache.record(path)
            return LintResult(candidate=candidate, classification=Classification.PASSED, returncode=0)
        return LintResult(candidate=candidate, classification=Classification.FAILED, returncode=completed.returncode)

    def build_command(self, candidate: Candidate) -> list[str]:
        """Return the tool command line for ``candidate``.

        Args:
            candidate: Enabled candidate, including inline options.

        Returns:
            list[str]: Tool, rc-file override, inline options, then the path.
        """

        return [
            self._spec.tool,
            *self._spec.rc_arguments(self._config.environ),
            *candidate.options,
            str(candidate.path),
        ]

    @staticmethod
    def _with_directive(candidate: Candidate, directive: Directive) -> Candidate:
        if not directive.options:
            return candidate
        return candidate.with_options(directive.options)

    def _tool_probe(self) -> ToolProbe:
        if self._probe is None:
            self._probe = probe_tool(self._spec.tool, runner=self._runner)
            LOGGER.debug("probe tool=%s status=%s", self._spec.tool, self._probe.status.value)
            if not self._probe.usable:
                self._warn_unusable(self._probe)
        return self._probe

    def _warn_unusable(self, probe: ToolProbe) -> None:
        tool = self._spec.tool
        if probe.status is ToolStatus.MISSING:
            message = f"{tool} is not installed; every file opted into {self._spec.name} linting will fail"
        else:
            detail = f": {probe.detail}" if probe.detail else ""
            message = f"{tool} {VERSION_FLAG} failed, the installed {tool} is unusable{detail}"
        self._on_warning(message)

    def _missing_tool_result(self, candidate: Candidate) -> LintResult:
        if self._spec.missing_tool_policy is not MissingToolPolicy.WARN_AND_FAIL:  # pragma: no cover
            raise ValueError(f"Unsupported missing tool policy: {self._spec.missing_tool_policy}")
        return LintResult(candidate=candidate, classification=Classification.FAILED, returncode=EXIT_TOOL_MISSING)

    def _default_warning(self, message: str) -> None:
        core_warn(message, use_emoji=self._config.emoji, use_color=self._config.color, stderr=True)


__all__ = ["LinterInvoker", "ToolProbe", "ToolRunner", "ToolStatus", "probe_tool"]
