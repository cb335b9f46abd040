"""Liveness check for the running process itself."""

from __future__ import annotations

import os
from time import monotonic

from src.domain.entities.health import CheckOutcome
from src.domain.ports.check import ICheck


class ProcessCheck(ICheck):
    """Report the process as alive.

    Being scheduled at all proves the event loop is responsive, which is
    what a liveness probe asks. No other system is contacted.
    """

    def __init__(self) -> None:
        self._started = monotonic()

    async def __call__(self) -> CheckOutcome:
        uptime = monotonic() - self._started
        return CheckOutcome(
            healthy=True, detail=f"pid {os.getpid()}, up {uptime:.0f}s"
        )
