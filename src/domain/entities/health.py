"""
Health domain entities.

This module defines value objects for representing the outcome of
dependency checks and the aggregated liveness/readiness verdict.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Tuple


class ProbeKind(str, Enum):
    """Class of health check a probe belongs to."""

    LIVENESS = "liveness"
    READINESS = "readiness"


class HealthStatus(str, Enum):
    """Overall verdict for one kind of health check.

    ``DEGRADED`` is only produced when a non-critical probe fails; with every
    probe critical (the default) the verdict is either healthy or unhealthy.
    """

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


@dataclass(frozen=True, slots=True)
class CheckOutcome:
    """Value returned by a probe check function."""

    healthy: bool
    detail: str = ""


@dataclass(frozen=True, slots=True)
class ProbeResult:
    """Result of running one probe once."""

    probe_name: str
    healthy: bool
    detail: str = ""
    error: Optional[BaseException] = None
    duration_ms: float = 0.0
    timed_out: bool = False
    critical: bool = True


@dataclass(frozen=True, slots=True)
class Decision:
    """Aggregated health verdict for a single probe kind."""

    status: HealthStatus
    kind: ProbeKind
    results: Tuple[ProbeResult, ...] = ()
    evaluated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_healthy(self) -> bool:
        return self.status is HealthStatus.HEALTHY


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """A cached decision together with its expiry instant."""

    decision: Decision
    expires_at: datetime

    def is_fresh(self, now: datetime) -> bool:
        return now < self.expires_at
