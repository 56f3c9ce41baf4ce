# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Candidate discovery: file-listing sources, sniffing, and classification."""

from __future__ import annotations

from .classifier import CandidateClassifier
from .sniffing import FileKindDetector, ShebangDetector
from .sources import FileSource, GitFileSource, StaticFileSource, StreamFileSource

__all__ = [
    "CandidateClassifier",
    "FileKindDetector",
    "FileSource",
    "GitFileSource",
    "ShebangDetector",
    "StaticFileSource",
    "StreamFileSource",
]
