"""In-memory result cache for aggregated health decisions."""

from __future__ import annotations

import math
import threading
from datetime import timedelta
from typing import Dict, Optional

from src.domain.entities.health import CacheEntry, Decision, ProbeKind
from src.domain.ports.clock import IClock
from src.domain.ports.result_cache import IResultCache


class InMemoryResultCache(IResultCache):
    """Keep the latest decision per probe kind for a bounded time window.

    The TTL trades accuracy for cost: within the window repeated requests
    reuse the decision, so a state change can go unnoticed for at most
    ``ttl`` seconds.
    """

    def __init__(self, clock: IClock) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: Dict[ProbeKind, CacheEntry] = {}

    def get(self, kind: ProbeKind) -> Optional[Decision]:
        now = self._clock.now()
        with self._lock:
            entry = self._entries.get(kind)
            if entry is None:
                return None
            if not entry.is_fresh(now):
                del self._entries[kind]
                return None
            return entry.decision

    def put(self, kind: ProbeKind, decision: Decision, ttl: float) -> None:
        if not math.isfinite(ttl) or ttl < 0:
            raise ValueError(f"Cache TTL must be a finite number >= 0, got {ttl!r}")
        expires_at = self._clock.now() + timedelta(seconds=ttl)
        with self._lock:
            self._entries[kind] = CacheEntry(decision=decision, expires_at=expires_at)

    def invalidate(self, kind: Optional[ProbeKind] = None) -> None:
        with self._lock:
            if kind is None:
                self._entries.clear()
            else:
                self._entries.pop(kind, None)
