# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Persistent record of files that passed their last lint check."""

from .result_store import ResultCache, cache_key

__all__ = ["ResultCache", "cache_key"]
