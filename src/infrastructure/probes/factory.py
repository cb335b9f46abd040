"""Build the default probe set from configuration."""

from __future__ import annotations

from typing import Collection, List, Mapping, Optional

from src.domain.entities.health import ProbeKind
from src.domain.entities.probe import Probe

from .http_check import HttpCheck
from .mongo_check import MongoCheck
from .process_check import ProcessCheck
from .rabbitmq_check import RabbitMQCheck
from .redis_check import RedisCheck


def build_default_probes(
    *,
    timeout: float,
    mongo_uri: Optional[str] = None,
    redis_url: Optional[str] = None,
    broker_url: Optional[str] = None,
    http_endpoints: Optional[Mapping[str, str]] = None,
    non_critical: Collection[str] = (),
) -> List[Probe]:
    """Return the process liveness probe plus one readiness probe per
    configured dependency. Dependencies without a URL are skipped.
    """

    non_critical = set(non_critical)

    def _readiness(name: str, check) -> Probe:
        return Probe(
            name=name,
            kind=ProbeKind.READINESS,
            check=check,
            timeout=timeout,
            critical=name not in non_critical,
        )

    probes: List[Probe] = [
        Probe(
            name="process",
            kind=ProbeKind.LIVENESS,
            check=ProcessCheck(),
            timeout=timeout,
        )
    ]

    if mongo_uri:
        probes.append(_readiness("mongo", MongoCheck(mongo_uri, timeout=timeout)))
    if redis_url:
        probes.append(_readiness("redis", RedisCheck(redis_url, timeout=timeout)))
    if broker_url:
        probes.append(
            _readiness("rabbitmq", RabbitMQCheck(broker_url, timeout=timeout))
        )
    for name, url in (http_endpoints or {}).items():
        if url:
            probes.append(_readiness(name, HttpCheck(url, timeout=timeout)))

    return probes
