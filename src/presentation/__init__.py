"""
Presentation Layer Package

This package contains the presentation layer components,
which are responsible for handling HTTP requests and responses,
including API routes and error handlers.
"""

from src.presentation import controllers
from src.presentation.error_handlers import register_error_handlers

__all__ = ["controllers", "register_error_handlers"]
