# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Linter drivers built on the selective runner."""

from .builtin import BUILTIN_DRIVERS, PYTHON_DRIVER, SHELL_DRIVER, YAML_DRIVER
from .registry import DriverRegistry, default_registry

__all__ = [
    "BUILTIN_DRIVERS",
    "DriverRegistry",
    "PYTHON_DRIVER",
    "SHELL_DRIVER",
    "YAML_DRIVER",
    "default_registry",
]
