"""Infrastructure implementation for system health checks."""

from __future__ import annotations

import asyncio
import math
from typing import Dict, Optional, Sequence

from src.domain.entities.health import Decision, ProbeKind
from src.domain.entities.probe import Probe
from src.domain.ports.health_check import IHealthCheckService
from src.domain.ports.result_cache import IResultCache
from src.domain.repositories.probe_registry import IProbeRegistry
from src.infrastructure.services.probe_aggregator import ProbeAggregator
from src.shared import get_logger

logger = get_logger(__name__)

# Added to the slowest probe timeout when no aggregate deadline is configured.
DEFAULT_DEADLINE_MARGIN: float = 0.5


class HealthCheckService(IHealthCheckService):
    """Evaluate liveness and readiness on top of the cache and aggregator.

    At most one aggregation runs per probe kind. Callers that miss the cache
    while a run is in flight await that same run instead of starting another.
    """

    def __init__(
        self,
        registry: IProbeRegistry,
        cache: IResultCache,
        aggregator: ProbeAggregator,
        *,
        cache_ttl: float = 2.0,
        aggregate_deadline: Optional[float] = None,
    ) -> None:
        if not math.isfinite(cache_ttl) or cache_ttl < 0:
            raise ValueError(
                f"cache_ttl must be a finite number >= 0, got {cache_ttl!r}"
            )
        if aggregate_deadline is not None and not (
            math.isfinite(aggregate_deadline) and aggregate_deadline > 0
        ):
            raise ValueError(
                "aggregate_deadline must be a finite number > 0, "
                f"got {aggregate_deadline!r}"
            )
        self._registry = registry
        self._cache = cache
        self._aggregator = aggregator
        self._cache_ttl = cache_ttl
        self._aggregate_deadline = aggregate_deadline
        self._inflight: Dict[ProbeKind, asyncio.Task[Decision]] = {}

    @property
    def cache_ttl(self) -> float:
        return self._cache_ttl

    def is_running(self, kind: ProbeKind) -> bool:
        task = self._inflight.get(kind)
        return task is not None and not task.done()

    def deadline_for(self, probes: Sequence[Probe]) -> float:
        if self._aggregate_deadline is not None:
            return self._aggregate_deadline
        if not probes:
            return DEFAULT_DEADLINE_MARGIN
        return max(probe.timeout for probe in probes) + DEFAULT_DEADLINE_MARGIN

    async def evaluate(self, kind: ProbeKind) -> Decision:
        """Return the cached decision or the result of a shared fresh run."""

        cached = self._cache.get(kind)
        if cached is not None:
            logger.debug("health.evaluate.cache_hit", kind=kind.value)
            return cached

        task = self._inflight.get(kind)
        if (
            task is None
            or task.done()
            or task.get_loop() is not asyncio.get_running_loop()
        ):
            logger.debug("health.evaluate.run_started", kind=kind.value)
            task = asyncio.create_task(self._refresh(kind), name=f"health:{kind.value}")
            self._inflight[kind] = task
            task.add_done_callback(lambda done: self._release(kind, done))
        else:
            logger.debug("health.evaluate.joined_run", kind=kind.value)

        # A waiter being cancelled must not cancel the run other waiters share.
        return await asyncio.shield(task)

    async def _refresh(self, kind: ProbeKind) -> Decision:
        probes = self._registry.list(kind)
        decision = await self._aggregator.run(
            kind, probes, deadline=self.deadline_for(probes)
        )
        self._cache.put(kind, decision, self._cache_ttl)
        logger.info(
            "health.evaluate.completed",
            kind=kind.value,
            status=decision.status.value,
            probes=len(decision.results),
        )
        return decision

    def _release(self, kind: ProbeKind, task: "asyncio.Task[Decision]") -> None:
        if self._inflight.get(kind) is task:
            del self._inflight[kind]
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:  # pragma: no cover
            logger.error(
                "health.evaluate.failure",
                kind=kind.value,
                error=str(exc),
                exc_info=exc,
            )
