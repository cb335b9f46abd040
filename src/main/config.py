"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Annotated, Dict, List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import EnumEnvironment, EnumLogLevel


class ServiceSettings(BaseSettings):
    """HTTP service configuration settings."""

    title: str = Field(default="Status Service", description="Service title")
    description: str = Field(
        default="Liveness and readiness endpoints aggregating dependency probes",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    host: str = Field(default="0.0.0.0", description="Network interface to bind to")
    port: int = Field(
        default=3000,
        description="Port to bind the server",
        validation_alias=AliasChoices("SERVICE_PORT", "PORT"),
    )
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_", case_sensitive=False, extra="ignore"
    )


class HealthSettings(BaseSettings):
    """Health evaluation configuration settings."""

    cache_ttl_seconds: float = Field(
        default=2.0,
        ge=0,
        allow_inf_nan=False,
        description="How long a decision is reused before probes run again",
    )
    aggregate_deadline_seconds: Optional[
        Annotated[float, Field(gt=0, allow_inf_nan=False)]
    ] = Field(
        default=None,
        description="Ceiling for one evaluation; defaults to the slowest "
        "probe timeout plus 0.5s",
    )
    probe_timeout_seconds: float = Field(
        default=2.0,
        gt=0,
        allow_inf_nan=False,
        description="Timeout applied to each dependency probe",
    )
    expose_errors: bool = Field(
        default=False,
        description="Return raw probe error messages instead of categories",
    )
    non_critical: List[str] = Field(
        default_factory=list,
        description="Probe names whose failure degrades instead of failing",
    )

    model_config = SettingsConfigDict(
        env_prefix="HEALTH_", case_sensitive=False, extra="ignore"
    )


class DependencySettings(BaseSettings):
    """Dependencies probed for readiness. Unset entries are not probed."""

    mongo_uri: Optional[str] = Field(default=None, description="MongoDB URI")
    redis_url: Optional[str] = Field(default=None, description="Redis URL")
    broker_url: Optional[str] = Field(default=None, description="AMQP broker URL")
    http_endpoints: Dict[str, str] = Field(
        default_factory=dict,
        description="Downstream HTTP services as a JSON object of name to URL",
    )

    model_config = SettingsConfigDict(
        env_prefix="DEPENDENCY_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    service: ServiceSettings = Field(default_factory=ServiceSettings)
    health: HealthSettings = Field(default_factory=HealthSettings)
    dependencies: DependencySettings = Field(default_factory=DependencySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return AppSettings()
