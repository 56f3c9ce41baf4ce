# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rendering of per-run classification summaries."""

from .summary import RunAggregator, display_relative_path

__all__ = ["RunAggregator", "display_relative_path"]
