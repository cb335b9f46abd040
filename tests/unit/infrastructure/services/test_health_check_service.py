from __future__ import annotations

import asyncio
import time

import pytest

from src.domain.entities.errors import DuplicateProbeNameError
from src.domain.entities.health import HealthStatus, ProbeKind
from src.infrastructure.repositories.probe_registry import InMemoryProbeRegistry
from src.infrastructure.services.health_check_service import HealthCheckService
from src.infrastructure.services.probe_aggregator import ProbeAggregator
from src.infrastructure.services.result_cache import InMemoryResultCache
from tests.conftest import CountingCheck


def _make_service(
    clock,
    registry: InMemoryProbeRegistry | None = None,
    *,
    cache_ttl: float = 2.0,
    aggregate_deadline: float | None = None,
) -> HealthCheckService:
    return HealthCheckService(
        registry=registry or InMemoryProbeRegistry(),
        cache=InMemoryResultCache(clock),
        aggregator=ProbeAggregator(clock),
        cache_ttl=cache_ttl,
        aggregate_deadline=aggregate_deadline,
    )


@pytest.mark.asyncio
async def test_empty_registry_is_healthy(fake_clock) -> None:
    service = _make_service(fake_clock)

    decision = await service.evaluate(ProbeKind.READINESS)

    assert decision.status is HealthStatus.HEALTHY
    assert decision.results == ()


@pytest.mark.asyncio
async def test_all_healthy_probes_are_reported(fake_clock, make_probe) -> None:
    registry = InMemoryProbeRegistry()
    for name in ("db", "cache", "api"):
        registry.register(make_probe(name))
    service = _make_service(fake_clock, registry)

    decision = await service.evaluate(ProbeKind.READINESS)

    assert decision.status is HealthStatus.HEALTHY
    assert [r.probe_name for r in decision.results] == ["db", "cache", "api"]


@pytest.mark.asyncio
async def test_cached_decision_is_reused_within_ttl(fake_clock, make_probe) -> None:
    check = CountingCheck()
    registry = InMemoryProbeRegistry()
    registry.register(make_probe("live", check, kind=ProbeKind.LIVENESS, timeout=1))
    service = _make_service(fake_clock, registry, cache_ttl=2)

    first = await service.evaluate(ProbeKind.LIVENESS)
    fake_clock.advance(0.5)
    second = await service.evaluate(ProbeKind.LIVENESS)
    fake_clock.advance(0.4)
    third = await service.evaluate(ProbeKind.LIVENESS)

    assert check.calls == 1
    assert first is second is third


@pytest.mark.asyncio
async def test_expired_decision_triggers_fresh_run(fake_clock, make_probe) -> None:
    check = CountingCheck()
    registry = InMemoryProbeRegistry()
    registry.register(make_probe("db", check))
    service = _make_service(fake_clock, registry, cache_ttl=2)

    first = await service.evaluate(ProbeKind.READINESS)
    fake_clock.advance(2)
    second = await service.evaluate(ProbeKind.READINESS)

    assert check.calls == 2
    assert second is not first
    assert second.evaluated_at > first.evaluated_at


@pytest.mark.asyncio
async def test_concurrent_callers_share_one_run(fake_clock, make_probe) -> None:
    checks = [CountingCheck(delay=0.05) for _ in range(3)]
    registry = InMemoryProbeRegistry()
    for index, check in enumerate(checks):
        registry.register(make_probe(f"p{index}", check))
    service = _make_service(fake_clock, registry)

    first, second = await asyncio.gather(
        service.evaluate(ProbeKind.READINESS),
        service.evaluate(ProbeKind.READINESS),
    )

    assert first is second
    assert sum(check.calls for check in checks) == len(checks)


@pytest.mark.asyncio
async def test_is_running_reflects_in_flight_run(fake_clock, make_probe) -> None:
    registry = InMemoryProbeRegistry()
    registry.register(make_probe("db", CountingCheck(delay=0.05)))
    service = _make_service(fake_clock, registry)

    assert service.is_running(ProbeKind.READINESS) is False
    task = asyncio.create_task(service.evaluate(ProbeKind.READINESS))
    await asyncio.sleep(0.01)
    assert service.is_running(ProbeKind.READINESS) is True
    assert service.is_running(ProbeKind.LIVENESS) is False

    await task
    await asyncio.sleep(0)
    assert service.is_running(ProbeKind.READINESS) is False


@pytest.mark.asyncio
async def test_cancelled_waiter_does_not_cancel_shared_run(
    fake_clock, make_probe
) -> None:
    check = CountingCheck(delay=0.05)
    registry = InMemoryProbeRegistry()
    registry.register(make_probe("db", check))
    cache = InMemoryResultCache(fake_clock)
    service = HealthCheckService(
        registry=registry, cache=cache, aggregator=ProbeAggregator(fake_clock)
    )

    impatient = asyncio.create_task(service.evaluate(ProbeKind.READINESS))
    patient = asyncio.create_task(service.evaluate(ProbeKind.READINESS))
    await asyncio.sleep(0.01)
    impatient.cancel()

    decision = await patient
    with pytest.raises(asyncio.CancelledError):
        await impatient

    assert decision.status is HealthStatus.HEALTHY
    assert check.calls == 1
    assert cache.get(ProbeKind.READINESS) is decision


@pytest.mark.asyncio
async def test_liveness_and_readiness_are_independent(
    fake_clock, make_probe
) -> None:
    registry = InMemoryProbeRegistry()
    registry.register(
        make_probe(
            "live", CountingCheck(healthy=False), kind=ProbeKind.LIVENESS
        )
    )
    service = _make_service(fake_clock, registry)

    liveness = await service.evaluate(ProbeKind.LIVENESS)
    readiness = await service.evaluate(ProbeKind.READINESS)

    assert liveness.status is HealthStatus.UNHEALTHY
    assert liveness.kind is ProbeKind.LIVENESS
    assert readiness.status is HealthStatus.HEALTHY
    assert readiness.kind is ProbeKind.READINESS
    assert readiness.results == ()


@pytest.mark.asyncio
async def test_duplicate_registration_keeps_original_runnable(
    fake_clock, make_probe
) -> None:
    original = CountingCheck(detail="original")
    registry = InMemoryProbeRegistry()
    registry.register(make_probe("db", original))
    with pytest.raises(DuplicateProbeNameError):
        registry.register(make_probe("db", CountingCheck(detail="impostor")))
    service = _make_service(fake_clock, registry)

    decision = await service.evaluate(ProbeKind.READINESS)

    assert [r.detail for r in decision.results] == ["original"]
    assert original.calls == 1


@pytest.mark.asyncio
async def test_evaluate_honours_aggregate_deadline(fake_clock, make_probe) -> None:
    registry = InMemoryProbeRegistry()
    registry.register(make_probe("db", CountingCheck(), timeout=0.1))
    registry.register(make_probe("cache", CountingCheck(delay=0.5), timeout=0.1))
    service = _make_service(fake_clock, registry, aggregate_deadline=0.15)

    start = time.perf_counter()
    decision = await service.evaluate(ProbeKind.READINESS)
    elapsed = time.perf_counter() - start

    assert elapsed < 0.4
    assert decision.status is HealthStatus.UNHEALTHY
    assert [(r.probe_name, r.healthy, r.timed_out) for r in decision.results] == [
        ("db", True, False),
        ("cache", False, True),
    ]


def test_default_deadline_is_slowest_timeout_plus_margin(
    fake_clock, make_probe
) -> None:
    service = _make_service(fake_clock)
    probes = [make_probe("a", timeout=0.2), make_probe("b", timeout=1.5)]

    assert service.deadline_for(probes) == pytest.approx(2.0)
    assert service.deadline_for([]) == pytest.approx(0.5)


def test_configured_deadline_takes_precedence(fake_clock, make_probe) -> None:
    service = _make_service(fake_clock, aggregate_deadline=0.3)
    assert service.deadline_for([make_probe("a", timeout=5)]) == pytest.approx(0.3)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"cache_ttl": -1},
        {"cache_ttl": float("inf")},
        {"cache_ttl": float("nan")},
        {"aggregate_deadline": 0},
        {"aggregate_deadline": -2},
        {"aggregate_deadline": float("inf")},
        {"aggregate_deadline": float("nan")},
    ],
)
def test_invalid_configuration_is_rejected(fake_clock, kwargs) -> None:
    with pytest.raises(ValueError):
        _make_service(fake_clock, **kwargs)
