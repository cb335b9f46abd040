"""Domain port for reading the current time."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class IClock(Protocol):
    """Source of timezone-aware timestamps."""

    def now(self) -> datetime: ...
