"""Readiness check for Redis."""

from __future__ import annotations

import redis.asyncio as aioredis

from src.domain.entities.health import CheckOutcome
from src.domain.ports.check import ICheck


class RedisCheck(ICheck):
    """Send ``PING`` to Redis."""

    def __init__(self, redis_url: str, *, timeout: float) -> None:
        self._redis_url = redis_url
        self._timeout = timeout

    async def __call__(self) -> CheckOutcome:
        client = aioredis.from_url(
            self._redis_url,
            socket_connect_timeout=self._timeout,
            socket_timeout=self._timeout,
        )
        try:
            pong = await client.ping()
        finally:
            await client.aclose()

        if not pong:
            return CheckOutcome(healthy=False, detail="Redis did not answer PING")
        return CheckOutcome(healthy=True, detail="Redis ping successful")
