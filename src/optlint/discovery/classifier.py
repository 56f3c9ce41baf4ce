# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filter a stream of paths down to the candidates relevant to one driver."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from ..config import DriverSpec
from ..models import Candidate
from .sniffing import FileKindDetector, ShebangDetector


class CandidateClassifier:
    """Decide which paths a driver should consider.

    Paths are accepted by suffix or name pattern first. Drivers that declare a
    ``sniff_kind`` additionally accept files whose content the injected
    detector maps to that kind, which catches extension-less scripts.
    """

    def __init__(self, spec: DriverSpec, *, detector: FileKindDetector | None = None) -> None:
        """Create a classifier for ``spec``.

        Args:
            spec: Driver specification supplying the matching rules.
            detector: Content sniffer, defaults to :class:`ShebangDetector`.
        """

        self._spec = spec
        self._detector = detector or ShebangDetector()

    def is_relevant(self, path: Path) -> bool:
        """Return whether ``path`` belongs to this driver.

        Args:
            path: Existing regular file to classify.

        Returns:
            bool: ``True`` when the driver should consider ``path``.
        """

        if self._spec.matches(path):
            return True
        if self._spec.sniff_kind is None:
            return False
        return self._detector.classify(path) is self._spec.sniff_kind

    def classify(self, paths: Iterable[Path]) -> Iterator[Candidate]:
        """Yield candidates from ``paths`` in the order they were received.

        Args:
            paths: Lazy sequence of file paths from a file-listing source.

        Yields:
            Candidate: Relevant, existing files; repeats are dropped.
        """

        seen: set[Path] = set()
        for path in paths:
            if path in seen:
                continue
            seen.add(path)
            if not path.is_file():
                continue
            if self.is_relevant(path):
                yield Candidate(path=path, kind=self._spec.kind)


__all__ = ["CandidateClassifier"]
