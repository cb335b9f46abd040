"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager
from typing import List

from dependency_injector import containers, providers

from src.application.use_cases.health_use_cases import EvaluateHealthUseCase
from src.infrastructure.probes import build_default_probes
from src.infrastructure.repositories.probe_registry import InMemoryProbeRegistry
from src.infrastructure.services.health_check_service import HealthCheckService
from src.infrastructure.services.probe_aggregator import ProbeAggregator
from src.infrastructure.services.result_cache import InMemoryResultCache
from src.infrastructure.services.system_clock import SystemClock
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    clock = providers.Singleton(SystemClock)

    probe_registry = providers.Singleton(InMemoryProbeRegistry)

    result_cache = providers.Singleton(InMemoryResultCache, clock=clock)

    probe_aggregator = providers.Singleton(ProbeAggregator, clock=clock)

    health_check_service = providers.Singleton(
        HealthCheckService,
        registry=probe_registry,
        cache=result_cache,
        aggregator=probe_aggregator,
        cache_ttl=config.health.cache_ttl_seconds,
        aggregate_deadline=config.health.aggregate_deadline_seconds,
    )

    default_probes = providers.Callable(
        build_default_probes,
        timeout=config.health.probe_timeout_seconds,
        mongo_uri=config.dependencies.mongo_uri,
        redis_url=config.dependencies.redis_url,
        broker_url=config.dependencies.broker_url,
        http_endpoints=config.dependencies.http_endpoints,
        non_critical=config.health.non_critical,
    )

    # Application (use cases)
    evaluate_health_use_case = providers.Factory(
        EvaluateHealthUseCase,
        health_check_service=health_check_service,
        expose_errors=config.health.expose_errors,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Register the configured probes for the lifetime of the application.

    A probe that fails validation aborts startup. On shutdown the probes
    registered here are removed and cached decisions are dropped, so the
    same container can be started again.
    """
    container = get_container()
    registry = container.probe_registry()
    registered: List[str] = []

    try:
        for probe in container.default_probes():
            registry.register(probe)
            registered.append(probe.name)

        logger.info("container.probes.registered", probes=registered)
        yield container

    finally:
        for name in registered:
            if registry.get(name) is not None:
                registry.unregister(name)
        container.result_cache().invalidate()

        logger.info("container.resources.shutdown")
