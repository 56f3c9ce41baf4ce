# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers."""

from .public import emoji, fail, info, ok, section, warn

__all__ = ["emoji", "fail", "info", "ok", "section", "warn"]
