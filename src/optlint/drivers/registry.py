# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Driver registry providing lookup by name in registration order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from ..config import ConfigError, DriverSpec
from .builtin import BUILTIN_DRIVERS


class DriverRegistry(Mapping[str, DriverSpec]):
    """Read-only mapping of driver names to specifications.

    Iteration follows registration order, which is also the order the
    multi-runner executes drivers in.
    """

    def __init__(self, drivers: Iterable[DriverSpec] = ()) -> None:
        """Initialise the registry, registering ``drivers`` in order."""

        self._drivers: dict[str, DriverSpec] = {}
        for spec in drivers:
            self.register(spec)

    def register(self, spec: DriverSpec) -> None:
        """Register ``spec`` enforcing uniqueness by name.

        Args:
            spec: Driver specification to add.

        Raises:
            ValueError: If a driver with the same name is already registered.
        """

        if spec.name in self._drivers:
            raise ValueError(f"Driver '{spec.name}' already registered")
        self._drivers[spec.name] = spec

    def require(self, name: str) -> DriverSpec:
        """Return the driver called ``name``.

        Raises:
            ConfigError: If no such driver exists.
        """

        try:
            return self._drivers[name]
        except KeyError as exc:
            known = ", ".join(self._drivers) or "<none>"
            raise ConfigError(f"Unknown driver '{name}' (known drivers: {known})") from exc

    def __getitem__(self, name: str) -> DriverSpec:
        return self._drivers[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._drivers)

    def __len__(self) -> int:
        return len(self._drivers)


def default_registry() -> DriverRegistry:
    """Return a registry holding the built-in python, shell, and yaml drivers."""

    return DriverRegistry(BUILTIN_DRIVERS)


__all__ = ["DriverRegistry", "default_registry"]
