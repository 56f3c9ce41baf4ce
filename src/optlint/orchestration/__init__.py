# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Multi-driver orchestration."""

from .multi_runner import MultiRunner, MultiRunResult

__all__ = ["MultiRunResult", "MultiRunner"]
