from __future__ import annotations

import asyncio
import time

import pytest

from src.domain.entities.errors import (
    InvalidProbeNameError,
    InvalidTimeoutError,
    ProbeTimeoutError,
)
from src.domain.entities.health import CheckOutcome, ProbeKind
from src.domain.entities.probe import Probe
from tests.conftest import CountingCheck, never_returns


@pytest.mark.parametrize("name", ["", "   ", None])
def test_probe_rejects_empty_name(name) -> None:
    with pytest.raises(InvalidProbeNameError):
        Probe(name=name, kind=ProbeKind.LIVENESS, check=CountingCheck(), timeout=1)


@pytest.mark.parametrize(
    "timeout", [0, -1, "1", True, float("inf"), float("-inf"), float("nan")]
)
def test_probe_rejects_invalid_timeout(timeout) -> None:
    with pytest.raises(InvalidTimeoutError):
        Probe(name="db", kind=ProbeKind.LIVENESS, check=CountingCheck(), timeout=timeout)


@pytest.mark.asyncio
async def test_run_returns_check_outcome(make_probe) -> None:
    probe = make_probe("db", CountingCheck(healthy=True, detail="pong"))

    result = await probe.run()

    assert result.probe_name == "db"
    assert result.healthy is True
    assert result.detail == "pong"
    assert result.error is None
    assert result.timed_out is False
    assert result.duration_ms >= 0


@pytest.mark.asyncio
async def test_run_accepts_bare_bool(make_probe) -> None:
    async def _check() -> bool:
        return False

    result = await make_probe("flag", _check).run()

    assert result.healthy is False
    assert result.error is None


@pytest.mark.asyncio
async def test_run_captures_check_exception(make_probe) -> None:
    probe = make_probe("db", CountingCheck(error=ConnectionError("refused")))

    result = await probe.run()

    assert result.healthy is False
    assert isinstance(result.error, ConnectionError)
    assert result.detail == "refused"
    assert result.timed_out is False


@pytest.mark.asyncio
async def test_run_captures_invalid_return_value(make_probe) -> None:
    async def _check():
        return "yes"

    result = await make_probe("odd", _check).run()

    assert result.healthy is False
    assert isinstance(result.error, TypeError)


@pytest.mark.asyncio
async def test_run_captures_non_coroutine_check(make_probe) -> None:
    def _check() -> CheckOutcome:
        return CheckOutcome(healthy=True)

    result = await make_probe("sync", _check).run()

    assert result.healthy is False
    assert isinstance(result.error, TypeError)


@pytest.mark.asyncio
async def test_run_times_out_check_that_never_returns(make_probe) -> None:
    probe = make_probe("stuck", never_returns, timeout=0.05)

    start = time.perf_counter()
    result = await probe.run()
    elapsed = time.perf_counter() - start

    assert result.healthy is False
    assert result.timed_out is True
    assert isinstance(result.error, ProbeTimeoutError)
    assert 0.04 <= elapsed < 0.5


@pytest.mark.asyncio
async def test_run_does_not_wait_for_check_ignoring_cancellation(make_probe) -> None:
    release = asyncio.Event()

    async def _stubborn() -> CheckOutcome:
        while not release.is_set():
            try:
                await asyncio.sleep(0.01)
            except asyncio.CancelledError:
                continue
        return CheckOutcome(healthy=True)

    probe = make_probe("stubborn", _stubborn, timeout=0.05)

    start = time.perf_counter()
    result = await probe.run()
    elapsed = time.perf_counter() - start
    release.set()
    await asyncio.sleep(0.05)

    assert result.timed_out is True
    assert elapsed < 0.5


@pytest.mark.asyncio
async def test_run_cancellation_cancels_check(make_probe) -> None:
    cancelled = asyncio.Event()

    async def _check() -> CheckOutcome:
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            cancelled.set()
            raise
        return CheckOutcome(healthy=True)  # pragma: no cover - unreachable

    task = asyncio.create_task(make_probe("slow", _check, timeout=5).run())
    await asyncio.sleep(0.01)
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task
    await asyncio.wait_for(cancelled.wait(), timeout=1)
