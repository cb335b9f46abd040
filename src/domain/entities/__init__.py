"""
Domain Entities Package

This package contains the core domain entities of the health-check subsystem.
"""

from .errors import (
    AggregateDeadlineError,
    DomainError,
    DuplicateProbeNameError,
    InvalidProbeNameError,
    InvalidTimeoutError,
    ProbeExecutionError,
    ProbeNotFoundError,
    ProbeTimeoutError,
    ProbeValidationError,
)
from .health import (
    CacheEntry,
    CheckOutcome,
    Decision,
    HealthStatus,
    ProbeKind,
    ProbeResult,
)
from .probe import CheckFunction, Probe

__all__ = [
    "CacheEntry",
    "CheckFunction",
    "CheckOutcome",
    "Decision",
    "HealthStatus",
    "Probe",
    "ProbeKind",
    "ProbeResult",
    "DomainError",
    "ProbeValidationError",
    "InvalidProbeNameError",
    "InvalidTimeoutError",
    "DuplicateProbeNameError",
    "ProbeNotFoundError",
    "ProbeExecutionError",
    "ProbeTimeoutError",
    "AggregateDeadlineError",
]
