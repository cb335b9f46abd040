"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .health_dto import (
    DecisionDTO,
    ErrorDTO,
    ProbeResultDTO,
    StatusDTO,
    sanitize_error,
)

__all__ = [
    "DecisionDTO",
    "ErrorDTO",
    "ProbeResultDTO",
    "StatusDTO",
    "sanitize_error",
]
