# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in driver definitions for pylint, shellcheck, and yamllint."""

from __future__ import annotations

import re

from ..config import DriverSpec, compile_directive
from ..models import LinterKind

PYTHON_DRIVER = DriverSpec(
    name="python",
    kind=LinterKind.PYTHON,
    tool="pylint",
    suffixes=frozenset({".py"}),
    sniff_kind=LinterKind.PYTHON,
    directive=compile_directive(r"^#\s*pylint:"),
    options_pattern=re.compile(r"^#\s*pylint-options:\s*(.*)$"),
    use_cache=True,
    rc_env="PYLINTRC",
    rc_flag="--rcfile=",
)

SHELL_DRIVER = DriverSpec(
    name="shell",
    kind=LinterKind.SHELL,
    tool="shellcheck",
    suffixes=frozenset({".sh", ".bash"}),
    directive=compile_directive(r"^#\s*shellcheck(?:\s|$)"),
    rc_env="SHELLCHECK_RC",
    rc_flag="--rcfile=",
)

YAML_DRIVER = DriverSpec(
    name="yaml",
    kind=LinterKind.YAML,
    tool="yamllint",
    suffix_patterns=("*.y*ml",),
    directive=compile_directive(r"^#\s*yamllint(?:\s|$)"),
    rc_env="YAMLLINT_CONFIG_FILE",
    rc_flag="-c",
)

BUILTIN_DRIVERS: tuple[DriverSpec, ...] = (PYTHON_DRIVER, SHELL_DRIVER, YAML_DRIVER)

__all__ = ["BUILTIN_DRIVERS", "PYTHON_DRIVER", "SHELL_DRIVER", "YAML_DRIVER"]
