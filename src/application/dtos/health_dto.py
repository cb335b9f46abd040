"""DTOs for liveness and readiness responses."""

from __future__ import annotations

import asyncio
import errno
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities.errors import AggregateDeadlineError, ProbeTimeoutError
from src.domain.entities.health import (
    Decision,
    HealthStatus,
    ProbeKind,
    ProbeResult,
)


def sanitize_error(exc: BaseException, *, expose: bool) -> str:
    """Return an error string safe for external consumption.

    With ``expose`` the full exception text is returned. Otherwise the
    message is reduced to a generic category so internal hostnames, ports
    or credentials embedded in driver errors never reach the response.
    """
    if expose:
        return str(exc) or type(exc).__name__

    if isinstance(exc, AggregateDeadlineError):
        return "deadline_exceeded"
    if isinstance(exc, (ProbeTimeoutError, asyncio.TimeoutError, TimeoutError)):
        return "timeout"

    os_err = getattr(exc, "errno", None) or (
        getattr(exc.__cause__, "errno", None) if exc.__cause__ else None
    )
    if os_err == errno.ECONNREFUSED:
        return "connection_refused"

    return "unavailable"


_camel_config = ConfigDict(populate_by_name=True)


class ProbeResultDTO(BaseModel):
    """Serializable representation of one probe result."""

    model_config = _camel_config

    name: str = Field(description="Probe identifier")
    healthy: bool = Field(description="Whether the probe passed")
    detail: str = Field(default="", description="Human readable status note")
    timed_out: bool = Field(
        default=False,
        alias="timedOut",
        description="Whether the probe hit its timeout or the aggregate deadline",
    )
    duration_ms: float = Field(
        default=0.0, alias="durationMs", description="Observed run time"
    )
    critical: bool = Field(
        default=True, description="Whether a failure makes the service unhealthy"
    )
    error: Optional[str] = Field(default=None, description="Failure category")

    @classmethod
    def from_domain(
        cls, result: ProbeResult, *, expose_errors: bool = False
    ) -> "ProbeResultDTO":
        error = None
        detail = result.detail
        if result.error is not None:
            error = sanitize_error(result.error, expose=expose_errors)
            detail = result.detail if expose_errors else error
        return cls(
            name=result.probe_name,
            healthy=result.healthy,
            detail=detail,
            timed_out=result.timed_out,
            duration_ms=round(result.duration_ms, 3),
            critical=result.critical,
            error=error,
        )


class DecisionDTO(BaseModel):
    """DTO representing the /healthz and /readyz response payload."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "status": "unhealthy",
                "kind": "readiness",
                "evaluatedAt": "2024-09-09T12:00:00Z",
                "checks": [
                    {
                        "name": "db",
                        "healthy": True,
                        "detail": "MongoDB ping successful",
                        "timedOut": False,
                        "durationMs": 3.2,
                        "critical": True,
                        "error": None,
                    },
                    {
                        "name": "cache",
                        "healthy": False,
                        "detail": "timeout",
                        "timedOut": True,
                        "durationMs": 100.4,
                        "critical": True,
                        "error": "timeout",
                    },
                ],
            }
        },
    )

    status: HealthStatus = Field(description="Overall verdict")
    kind: ProbeKind = Field(description="Class of check that produced the verdict")
    evaluated_at: datetime = Field(
        alias="evaluatedAt", description="When the probes were run"
    )
    checks: List[ProbeResultDTO] = Field(
        default_factory=list, description="Per-probe results in registration order"
    )

    @classmethod
    def from_domain(
        cls, decision: Decision, *, expose_errors: bool = False
    ) -> "DecisionDTO":
        return cls(
            status=decision.status,
            kind=decision.kind,
            evaluated_at=decision.evaluated_at,
            checks=[
                ProbeResultDTO.from_domain(result, expose_errors=expose_errors)
                for result in decision.results
            ],
        )


class StatusDTO(BaseModel):
    """Constant payload of the legacy /status endpoint."""

    status: str = Field(default="ok", description="Always 'ok' while serving")


class ErrorDTO(BaseModel):
    """Error payload shared by every HTTP error response."""

    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    error: str
    message: str
