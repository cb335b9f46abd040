"""
Domain Errors

This module defines custom error classes for health-check domain exceptions.

Validation errors are raised synchronously while wiring probes at startup.
Execution errors are never raised out of an evaluation: they are stored on a
``ProbeResult`` so the health signal itself reports the failure.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ProbeValidationError(DomainError):
    """Raised when a probe cannot be registered."""


class InvalidProbeNameError(ProbeValidationError):
    """Raised when a probe name is empty."""

    def __init__(self, name: Any, details: Optional[Dict[str, Any]] = None):
        message = f"Probe name must be a non-empty string, got {name!r}"
        super().__init__(message, details)


class InvalidTimeoutError(ProbeValidationError):
    """Raised when a probe timeout is not a positive duration."""

    def __init__(
        self, name: str, timeout: Any, details: Optional[Dict[str, Any]] = None
    ):
        message = f"Probe {name!r} timeout must be greater than 0, got {timeout!r}"
        super().__init__(message, details)


class DuplicateProbeNameError(ProbeValidationError):
    """Raised when a probe with the same name is already registered."""

    def __init__(self, name: str, details: Optional[Dict[str, Any]] = None):
        message = f"Probe with name {name!r} is already registered"
        super().__init__(message, details)


class ProbeNotFoundError(DomainError):
    """Raised when a probe cannot be found in the registry."""

    def __init__(self, name: str, details: Optional[Dict[str, Any]] = None):
        message = f"Probe with name {name!r} not found"
        super().__init__(message, details)


class ProbeExecutionError(DomainError):
    """Base class for failures recorded while running a probe."""


class ProbeTimeoutError(ProbeExecutionError):
    """The probe check did not finish within its own timeout."""

    def __init__(self, name: str, timeout: float):
        self.timeout = timeout
        message = f"Probe {name!r} timed out after {timeout:g}s"
        super().__init__(message, {"timeout_seconds": timeout})


class AggregateDeadlineError(ProbeExecutionError):
    """The probe was still running when the aggregate deadline elapsed."""

    def __init__(self, name: str, deadline: float):
        self.deadline = deadline
        message = f"Probe {name!r} did not finish before the {deadline:g}s deadline"
        super().__init__(message, {"deadline_seconds": deadline})
