"""Concurrent fan-out of probes into a single health decision."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import List, Sequence

from src.domain.entities.errors import AggregateDeadlineError
from src.domain.entities.health import Decision, HealthStatus, ProbeKind, ProbeResult
from src.domain.entities.probe import Probe
from src.domain.ports.clock import IClock
from src.domain.services.health_policy import reduce_status
from src.shared import get_logger

logger = get_logger(__name__)


class ProbeAggregator:
    """Run probes concurrently and reduce their results."""

    def __init__(self, clock: IClock) -> None:
        self._clock = clock

    async def run(
        self, kind: ProbeKind, probes: Sequence[Probe], deadline: float
    ) -> Decision:
        """Run every probe once and return the aggregated decision.

        Each probe is bounded by its own timeout and all of them together by
        ``deadline`` seconds. Probes still running at the deadline are
        cancelled and reported as timed out. Results keep the order of
        ``probes``, whatever the completion order.
        """
        evaluated_at = self._clock.now()

        if not probes:
            return Decision(
                status=HealthStatus.HEALTHY,
                kind=kind,
                results=(),
                evaluated_at=evaluated_at,
            )

        start = perf_counter()
        tasks = [
            asyncio.create_task(probe.run(), name=f"probe:{probe.name}")
            for probe in probes
        ]

        try:
            _, pending = await asyncio.wait(tasks, timeout=deadline)
        except asyncio.CancelledError:
            for task in tasks:
                task.cancel()
            raise

        if pending:
            for task in pending:
                task.cancel()
            # Probe.run does not wait on its check when cancelled, so reaping
            # the cancelled runs returns promptly.
            await asyncio.gather(*pending, return_exceptions=True)

        elapsed_ms = (perf_counter() - start) * 1000
        results: List[ProbeResult] = []

        for probe, task in zip(probes, tasks):
            if task in pending:
                logger.warning(
                    "probe.deadline_exceeded",
                    probe=probe.name,
                    kind=kind.value,
                    deadline=deadline,
                )
                error = AggregateDeadlineError(probe.name, deadline)
                results.append(
                    ProbeResult(
                        probe_name=probe.name,
                        healthy=False,
                        detail=str(error),
                        error=error,
                        duration_ms=elapsed_ms,
                        timed_out=True,
                        critical=probe.critical,
                    )
                )
                continue

            try:
                result = task.result()
            except Exception as exc:  # pragma: no cover
                result = ProbeResult(
                    probe_name=probe.name,
                    healthy=False,
                    detail=str(exc) or type(exc).__name__,
                    error=exc,
                    duration_ms=elapsed_ms,
                    critical=probe.critical,
                )

            if not result.healthy:
                logger.warning(
                    "probe.unhealthy",
                    probe=probe.name,
                    kind=kind.value,
                    timed_out=result.timed_out,
                    detail=result.detail,
                )
            results.append(result)

        status = reduce_status(results)
        logger.debug(
            "health.aggregated",
            kind=kind.value,
            status=status.value,
            probes=len(results),
            elapsed_ms=round(elapsed_ms, 2),
        )
        return Decision(
            status=status,
            kind=kind,
            results=tuple(results),
            evaluated_at=evaluated_at,
        )
