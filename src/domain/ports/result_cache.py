"""Domain port for memoizing aggregated decisions."""

from __future__ import annotations

from typing import Optional, Protocol

from src.domain.entities.health import Decision, ProbeKind


class IResultCache(Protocol):
    """Short-lived cache of the latest decision per probe kind."""

    def get(self, kind: ProbeKind) -> Optional[Decision]:
        """Return the cached decision while it has not expired."""
        ...

    def put(self, kind: ProbeKind, decision: Decision, ttl: float) -> None:
        """Store ``decision`` for ``ttl`` seconds, replacing any entry."""
        ...

    def invalidate(self, kind: Optional[ProbeKind] = None) -> None:
        """Drop the entry for ``kind``, or every entry when omitted."""
        ...
