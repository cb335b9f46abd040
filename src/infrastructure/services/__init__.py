"""Infrastructure services package."""

from .health_check_service import HealthCheckService
from .probe_aggregator import ProbeAggregator
from .result_cache import InMemoryResultCache
from .system_clock import SystemClock

__all__ = [
    "HealthCheckService",
    "InMemoryResultCache",
    "ProbeAggregator",
    "SystemClock",
]
