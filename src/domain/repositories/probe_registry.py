"""
Probe Registry Interface

This module defines the contract for the component that owns the set of
registered probes. It holds probes only; running them is the job of the
aggregator.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from src.domain.entities.health import ProbeKind
from src.domain.entities.probe import Probe


class IProbeRegistry(ABC):
    """Interface for probe registry implementations."""

    @abstractmethod
    def register(self, probe: Probe) -> None:
        """
        Add a probe to the registry.

        Args:
            probe: The probe to register

        Raises:
            DuplicateProbeNameError: If a probe with the same name exists,
                whatever its kind
        """
        pass

    @abstractmethod
    def unregister(self, name: str) -> Probe:
        """
        Remove a probe from the registry.

        Args:
            name: Name of the probe to remove

        Returns:
            The removed probe

        Raises:
            ProbeNotFoundError: If no probe with that name exists
        """
        pass

    @abstractmethod
    def list(self, kind: ProbeKind) -> Tuple[Probe, ...]:
        """
        Return a consistent snapshot of the probes of one kind.

        Args:
            kind: Liveness or readiness

        Returns:
            Probes of that kind in registration order
        """
        pass

    @abstractmethod
    def get(self, name: str) -> Optional[Probe]:
        """Return the probe registered under ``name``, if any."""
        pass
