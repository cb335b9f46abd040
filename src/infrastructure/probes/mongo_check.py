"""Readiness check for MongoDB."""

from __future__ import annotations

from pymongo import MongoClient

from src.domain.entities.health import CheckOutcome
from src.domain.ports.check import ICheck

from .base import blocking_check


class MongoCheck(ICheck):
    """Run the ``ping`` admin command against MongoDB."""

    def __init__(self, mongo_uri: str, *, timeout: float) -> None:
        self._mongo_uri = mongo_uri
        self._timeout_ms = max(int(timeout * 1000), 1)

    async def __call__(self) -> CheckOutcome:
        return await blocking_check(self._ping)()

    def _ping(self) -> CheckOutcome:
        client: MongoClient = MongoClient(
            self._mongo_uri,
            serverSelectionTimeoutMS=self._timeout_ms,
            connectTimeoutMS=self._timeout_ms,
            socketTimeoutMS=self._timeout_ms,
        )
        try:
            client.admin.command("ping")
        finally:
            client.close()
        return CheckOutcome(healthy=True, detail="MongoDB ping successful")
