from __future__ import annotations

import asyncio
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, List, Optional

import pytest

from src.domain.entities.health import CheckOutcome, ProbeKind
from src.domain.entities.probe import Probe

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class FakeClock:
    """Clock whose time only moves when a test advances it."""

    def __init__(self, start: Optional[datetime] = None) -> None:
        self.current = start or datetime(2024, 9, 9, 12, 0, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += timedelta(seconds=seconds)


class CountingCheck:
    """Check returning a fixed outcome and counting its invocations."""

    def __init__(
        self,
        healthy: bool = True,
        detail: str = "",
        *,
        delay: float = 0.0,
        error: Optional[Exception] = None,
    ) -> None:
        self.healthy = healthy
        self.detail = detail
        self.delay = delay
        self.error = error
        self.calls = 0

    async def __call__(self) -> CheckOutcome:
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return CheckOutcome(healthy=self.healthy, detail=self.detail)


async def never_returns() -> CheckOutcome:
    await asyncio.Event().wait()
    return CheckOutcome(healthy=True)  # pragma: no cover - unreachable


@pytest.fixture()
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def make_probe() -> Callable[..., Probe]:
    def _make(
        name: str,
        check=None,
        *,
        kind: ProbeKind = ProbeKind.READINESS,
        timeout: float = 1.0,
        critical: bool = True,
    ) -> Probe:
        return Probe(
            name=name,
            kind=kind,
            check=check or CountingCheck(),
            timeout=timeout,
            critical=critical,
        )

    return _make


@pytest.fixture()
def counting_checks() -> List[CountingCheck]:
    return [CountingCheck(detail=f"check {index}") for index in range(3)]
