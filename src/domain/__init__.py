"""
Domain Layer Package

This package contains the core rules of the health-check subsystem.
It defines entities, ports, repositories, and policies without
dependencies on external frameworks or infrastructure concerns.
"""

# Re-export submodules
from src.domain import entities, ports, repositories, services

__all__ = ["entities", "repositories", "services", "ports"]
