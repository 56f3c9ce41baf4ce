# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Selective lint execution: invocation of tools and the per-driver pipeline."""

from .invoker import LinterInvoker, ToolProbe, ToolStatus, probe_tool
from .runner import DriverOutcome, SelectiveLintRunner

__all__ = [
    "DriverOutcome",
    "LinterInvoker",
    "SelectiveLintRunner",
    "ToolProbe",
    "ToolStatus",
    "probe_tool",
]
