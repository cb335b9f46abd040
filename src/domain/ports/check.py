"""Domain port implemented by dependency-specific checks."""

from __future__ import annotations

from typing import Protocol, Union

from src.domain.entities.health import CheckOutcome


class ICheck(Protocol):
    """A single dependency check, invoked once per probe run.

    Implementations may block on I/O but must honour task cancellation.
    Raising any exception reports the dependency as unhealthy.
    """

    async def __call__(self) -> Union[CheckOutcome, bool]: ...
