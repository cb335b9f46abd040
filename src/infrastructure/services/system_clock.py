"""Wall clock implementation of the domain clock port."""

from __future__ import annotations

from datetime import datetime, timezone

from src.domain.ports.clock import IClock


class SystemClock(IClock):
    """Return the current UTC time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
