#!/usr/bin/env python3
"""
Server Entry Point - Main Layer

This module starts the HTTP server hosting the FastAPI application.
uvicorn handles SIGINT and SIGTERM by draining connections and running the
application lifespan shutdown before the process exits.
"""

import uvicorn

from src.main.config import get_settings
from src.shared import configure_logging, get_logger, update_logging_from_settings

configure_logging()

settings = get_settings()

update_logging_from_settings(settings)

logger = get_logger(__name__)


def main() -> None:
    """Main entry point for the HTTP server."""

    settings = get_settings()

    logger.info(
        "Starting HTTP server",
        host=settings.service.host,
        port=settings.service.port,
        environment=settings.environment.value,
    )

    uvicorn.run(
        "src.main.app:app",
        host=settings.service.host,
        port=settings.service.port,
        reload=settings.service.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
