# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and helpers for the optlint harness."""

from __future__ import annotations

import fnmatch
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from re import Pattern

from pydantic import BaseModel, ConfigDict, Field

from .constants import CACHE_DIR_ENV, DEFAULT_CACHE_DIR
from .models import LinterKind


class OptlintError(RuntimeError):
    """Base class for harness-level failures."""


class ConfigError(OptlintError):
    """Raised when configuration input is invalid."""


class MissingToolPolicy(str, Enum):
    """Behaviour applied when a driver's lint tool cannot be used."""

    WARN_AND_FAIL = "warn-and-fail"


@dataclass(frozen=True, slots=True)
class DriverSpec:
    """Parameters that turn the generic selective runner into one driver.

    Attributes:
        name: Driver identifier used on the command line and for the cache namespace.
        kind: File family produced by the driver's candidate classifier.
        tool: Executable name of the underlying lint tool.
        directive: Anchored pattern whose match enables linting of a file.
        suffixes: Exact file suffixes accepted by the classifier.
        suffix_patterns: ``fnmatch`` patterns matched against file names.
        sniff_kind: Kind reported by content sniffing that also qualifies a file.
        options_pattern: Pattern whose first group captures inline tool options.
        use_cache: Whether successful results are recorded in the result cache.
        rc_env: Environment variable naming a tool-specific config file.
        rc_flag: Flag used to hand the config file to the tool.
        missing_tool_policy: Behaviour applied when the tool is unusable.
    """

    name: str
    kind: LinterKind
    tool: str
    directive: Pattern[str]
    suffixes: frozenset[str] = frozenset()
    suffix_patterns: tuple[str, ...] = ()
    sniff_kind: LinterKind | None = None
    options_pattern: Pattern[str] | None = None
    use_cache: bool = False
    rc_env: str | None = None
    rc_flag: str | None = None
    missing_tool_policy: MissingToolPolicy = MissingToolPolicy.WARN_AND_FAIL

    def matches(self, path: Path) -> bool:
        """Return whether ``path`` qualifies for this driver by name alone.

        Args:
            path: Candidate file path.

        Returns:
            bool: ``True`` when the suffix or name pattern matches.
        """

        if path.suffix in self.suffixes:
            return True
        return any(fnmatch.fnmatchcase(path.name, pattern) for pattern in self.suffix_patterns)

    def rc_arguments(self, environ: Mapping[str, str]) -> list[str]:
        """Return the tool arguments pointing at an overridden config file.

        Args:
            environ: Environment mapping consulted for ``rc_env``.

        Returns:
            list[str]: Extra arguments, empty when no override applies.
        """

        if not self.rc_env or not self.rc_flag:
            return []
        value = environ.get(self.rc_env, "").strip()
        if not value:
            return []
        if self.rc_flag.endswith("="):
            return [f"{self.rc_flag}{value}"]
        return [self.rc_flag, value]


def compile_directive(pattern: str) -> Pattern[str]:
    """Compile a directive ``pattern`` anchored to the start of a line.

    Args:
        pattern: Regular expression describing the marker.

    Returns:
        Pattern[str]: Compiled expression.

    Raises:
        ConfigError: If the pattern is invalid or not anchored.
    """

    if not pattern.startswith("^"):
        raise ConfigError(f"Directive pattern '{pattern}' must be anchored with '^'")
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ConfigError(f"Invalid directive pattern '{pattern}': {exc}") from exc


class RunConfig(BaseModel):
    """Immutable settings shared by every component of a run."""

    model_config = ConfigDict(frozen=True)

    root: Path = Field(default_factory=Path.cwd)
    cache_root: Path = DEFAULT_CACHE_DIR
    color: bool = True
    emoji: bool = True
    force_all: bool = False
    require_candidates: bool = True
    environ: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: object,
    ) -> RunConfig:
        """Build a configuration honouring environment overrides.

        Args:
            environ: Environment mapping, defaults to :data:`os.environ`.
            **overrides: Field values taking precedence over defaults.

        Returns:
            RunConfig: Resolved configuration.
        """

        env = dict(os.environ if environ is None else environ)
        root = Path(str(overrides.pop("root", Path.cwd()))).resolve()
        raw_cache = env.get(CACHE_DIR_ENV, "").strip()
        cache_root = Path(raw_cache).expanduser() if raw_cache else DEFAULT_CACHE_DIR
        if not cache_root.is_absolute():
            cache_root = root / cache_root
        values: dict[str, object] = {"root": root, "cache_root": cache_root, "environ": env}
        values.update(overrides)
        return cls.model_validate(values)

    def cache_dir_for(self, spec: DriverSpec) -> Path:
        """Return the cache namespace directory for ``spec``."""

        return self.cache_root / spec.name


__all__ = [
    "ConfigError",
    "DriverSpec",
    "MissingToolPolicy",
    "OptlintError",
    "RunConfig",
    "compile_directive",
]
