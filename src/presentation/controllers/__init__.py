"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers map the health use case
results to status codes and response payloads.
"""

from .system_controller import router as system_router

__all__ = ["system_router"]
