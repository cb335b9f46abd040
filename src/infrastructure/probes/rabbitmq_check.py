"""Readiness check for RabbitMQ."""

from __future__ import annotations

import pika

from src.domain.entities.health import CheckOutcome
from src.domain.ports.check import ICheck

from .base import blocking_check


class RabbitMQCheck(ICheck):
    """Open and close an AMQP connection to the broker."""

    def __init__(self, broker_url: str, *, timeout: float) -> None:
        self._broker_url = broker_url
        self._timeout = timeout

    async def __call__(self) -> CheckOutcome:
        return await blocking_check(self._connect)()

    def _connect(self) -> CheckOutcome:
        parameters = pika.URLParameters(self._broker_url)
        parameters.socket_timeout = self._timeout
        parameters.blocked_connection_timeout = self._timeout
        connection = pika.BlockingConnection(parameters)
        connection.close()
        return CheckOutcome(healthy=True, detail="RabbitMQ connection successful")
