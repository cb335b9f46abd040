"""Helpers shared by dependency checks."""

from __future__ import annotations

import asyncio
import functools
from typing import Callable, Union

from src.domain.entities.health import CheckOutcome
from src.domain.entities.probe import CheckFunction


def blocking_check(func: Callable[[], Union[CheckOutcome, bool]]) -> CheckFunction:
    """Adapt a synchronous check so it runs in a worker thread.

    Threads cannot be interrupted: when the probe times out the thread keeps
    running until ``func`` returns, so ``func`` should apply its own socket
    timeouts.
    """

    @functools.wraps(func)
    async def _run() -> Union[CheckOutcome, bool]:
        return await asyncio.to_thread(func)

    return _run
