"""Domain services package."""

from .health_policy import reduce_status

__all__ = ["reduce_status"]
