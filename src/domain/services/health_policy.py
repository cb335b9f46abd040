"""Domain policy reducing probe results to a single verdict."""

from typing import Iterable

from src.domain.entities.health import HealthStatus, ProbeResult


def reduce_status(results: Iterable[ProbeResult]) -> HealthStatus:
    """Reduce probe results to an overall status.

    Any failing critical probe makes the verdict unhealthy. Failing
    non-critical probes only degrade it. The result does not depend on the
    order of ``results`` and an empty iterable is vacuously healthy.
    """

    degraded = False
    for result in results:
        if result.healthy:
            continue
        if result.critical:
            return HealthStatus.UNHEALTHY
        degraded = True

    return HealthStatus.DEGRADED if degraded else HealthStatus.HEALTHY
