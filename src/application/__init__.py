"""
Application Layer Package

This package contains the application-specific rules and use cases.
It orchestrates the flow of data to and from the domain services and
maps domain decisions to transport-friendly DTOs.
"""

# Re-export submodules
from src.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
