"""
Repositories Package - Infrastructure Layer

This package contains concrete implementations of the repository
interfaces defined in the domain layer.
"""

from .probe_registry import InMemoryProbeRegistry

__all__ = ["InMemoryProbeRegistry"]
