"""Readiness check for downstream HTTP services."""

from __future__ import annotations

import httpx

from src.domain.entities.health import CheckOutcome
from src.domain.ports.check import ICheck


class HttpCheck(ICheck):
    """GET a service URL and treat any status below 400 as healthy.

    Transport errors propagate so the probe records them as failures.
    """

    def __init__(self, url: str, *, timeout: float) -> None:
        self._url = url
        self._timeout = timeout

    async def __call__(self) -> CheckOutcome:
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.get(self._url)
        return CheckOutcome(
            healthy=response.status_code < 400,
            detail=f"HTTP {response.status_code}",
        )
