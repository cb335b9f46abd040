"""Domain service abstraction for health checks."""

from __future__ import annotations

from typing import Protocol

from src.domain.entities.health import Decision, ProbeKind


class IHealthCheckService(Protocol):
    """Interface for evaluating liveness or readiness."""

    async def evaluate(self, kind: ProbeKind) -> Decision:
        """Return the current decision for ``kind``, probing if needed."""
        ...
