"""
In-memory Probe Registry - Infrastructure Layer

Probes live for the whole process lifetime, so the registry keeps them in
memory. Writers build a new tuple under a lock and swap it in; readers take
the current tuple without locking and therefore always see a complete
snapshot, never a partially updated one.
"""

from __future__ import annotations

import threading
from typing import Optional, Tuple

from src.domain.entities.errors import DuplicateProbeNameError, ProbeNotFoundError
from src.domain.entities.health import ProbeKind
from src.domain.entities.probe import Probe
from src.domain.repositories.probe_registry import IProbeRegistry
from src.shared import get_logger

logger = get_logger(__name__)


class InMemoryProbeRegistry(IProbeRegistry):
    """Thread-safe probe registry backed by an immutable snapshot."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._probes: Tuple[Probe, ...] = ()

    def register(self, probe: Probe) -> None:
        with self._lock:
            if any(existing.name == probe.name for existing in self._probes):
                raise DuplicateProbeNameError(
                    probe.name, details={"kind": probe.kind.value}
                )
            self._probes = (*self._probes, probe)

        logger.info(
            "probe.registered",
            probe=probe.name,
            kind=probe.kind.value,
            timeout=probe.timeout,
            critical=probe.critical,
        )

    def unregister(self, name: str) -> Probe:
        with self._lock:
            for index, existing in enumerate(self._probes):
                if existing.name == name:
                    self._probes = self._probes[:index] + self._probes[index + 1 :]
                    break
            else:
                raise ProbeNotFoundError(name)

        logger.info("probe.unregistered", probe=name)
        return existing

    def list(self, kind: ProbeKind) -> Tuple[Probe, ...]:
        snapshot = self._probes
        return tuple(probe for probe in snapshot if probe.kind is kind)

    def get(self, name: str) -> Optional[Probe]:
        for probe in self._probes:
            if probe.name == name:
                return probe
        return None

    def names(self) -> Tuple[str, ...]:
        return tuple(probe.name for probe in self._probes)

    def __len__(self) -> int:
        return len(self._probes)
