"""
Use Cases Package - Application Layer

This package contains use cases that orchestrate the flow of data
between the presentation layer and the health domain services.
"""

from .health_use_cases import EvaluateHealthUseCase

__all__ = ["EvaluateHealthUseCase"]
