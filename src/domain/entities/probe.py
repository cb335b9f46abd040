"""
Probe domain entity.

A probe is one named, timeout-bounded check against a single dependency.
Running a probe always yields a ``ProbeResult``: failures raised by the
check, timeouts and unexpected return values are recorded on the result and
never propagated, so a misbehaving probe cannot abort its siblings.
"""

from __future__ import annotations

import asyncio
import math
from dataclasses import dataclass
from time import perf_counter
from typing import Any, Awaitable, Callable, Union

from src.domain.entities.errors import InvalidProbeNameError, InvalidTimeoutError
from src.domain.entities.errors import ProbeTimeoutError
from src.domain.entities.health import CheckOutcome, ProbeKind, ProbeResult

CheckFunction = Callable[[], Awaitable[Union[CheckOutcome, bool]]]


def _consume_abandoned(task: "asyncio.Task[Any]") -> None:
    # Mark the outcome of a check we stopped waiting for as retrieved.
    if not task.cancelled():
        task.exception()


def _coerce_outcome(value: Any) -> CheckOutcome:
    if isinstance(value, CheckOutcome):
        return value
    if isinstance(value, bool):
        return CheckOutcome(healthy=value)
    raise TypeError(
        f"Check must return CheckOutcome or bool, got {type(value).__name__}"
    )


@dataclass(frozen=True, slots=True)
class Probe:
    """A single dependency check.

    Attributes:
        name: Identifier, unique across every registered probe.
        kind: Whether the probe gates liveness or readiness.
        check: Coroutine function returning a ``CheckOutcome`` (or a bool).
            Raising any exception marks the check as failed.
        timeout: Maximum number of seconds the check may run.
        critical: When False, a failure degrades the verdict instead of
            making it unhealthy.
    """

    name: str
    kind: ProbeKind
    check: CheckFunction
    timeout: float
    critical: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidProbeNameError(self.name)
        if isinstance(self.timeout, bool) or not isinstance(
            self.timeout, (int, float)
        ):
            raise InvalidTimeoutError(self.name, self.timeout)
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise InvalidTimeoutError(self.name, self.timeout)

    async def _invoke(self) -> Any:
        return await self.check()

    async def run(self) -> ProbeResult:
        """Run the check once, bounded by ``timeout``.

        On timeout the check task is cancelled but not awaited: a check that
        ignores cancellation keeps running in the background and releasing
        its resources is up to the check implementation.
        """
        start = perf_counter()
        task = asyncio.create_task(self._invoke(), name=f"probe-check:{self.name}")
        try:
            done, _ = await asyncio.wait({task}, timeout=self.timeout)
        finally:
            if not task.done():
                task.cancel()
                task.add_done_callback(_consume_abandoned)

        duration_ms = (perf_counter() - start) * 1000

        if not done:
            error = ProbeTimeoutError(self.name, self.timeout)
            return self._failure(error, duration_ms, timed_out=True)

        if task.cancelled():
            return self._failure(
                asyncio.CancelledError("check was cancelled"), duration_ms
            )

        try:
            outcome = _coerce_outcome(task.result())
        except Exception as exc:
            return self._failure(exc, duration_ms)

        return ProbeResult(
            probe_name=self.name,
            healthy=outcome.healthy,
            detail=outcome.detail,
            duration_ms=duration_ms,
            critical=self.critical,
        )

    def _failure(
        self, error: BaseException, duration_ms: float, *, timed_out: bool = False
    ) -> ProbeResult:
        return ProbeResult(
            probe_name=self.name,
            healthy=False,
            detail=str(error) or type(error).__name__,
            error=error,
            duration_ms=duration_ms,
            timed_out=timed_out,
            critical=self.critical,
        )
