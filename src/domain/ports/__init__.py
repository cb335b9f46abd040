"""Domain ports package."""

from .check import ICheck
from .clock import IClock
from .health_check import IHealthCheckService
from .result_cache import IResultCache

__all__ = ["ICheck", "IClock", "IHealthCheckService", "IResultCache"]
