"""
Probes Package - Infrastructure Layer

Concrete dependency checks and the factory wiring them from configuration.
"""

from .base import blocking_check
from .factory import build_default_probes
from .http_check import HttpCheck
from .mongo_check import MongoCheck
from .process_check import ProcessCheck
from .rabbitmq_check import RabbitMQCheck
from .redis_check import RedisCheck

__all__ = [
    "blocking_check",
    "build_default_probes",
    "HttpCheck",
    "MongoCheck",
    "ProcessCheck",
    "RabbitMQCheck",
    "RedisCheck",
]
