"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as dependency
checks, in-memory state and the system clock.
"""

from src.infrastructure import probes, repositories, services

__all__ = ["probes", "repositories", "services"]
