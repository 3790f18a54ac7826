"""
Client Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from openkarotz.shared import DEFAULT_TIMEOUT_SECONDS, EnumEnvironment, EnumLogLevel


class KarotzSettings(BaseSettings):
    """Connection settings for the rabbit."""

    hostname: str = Field(
        default="localhost",
        description="Karotz hostname or IP address, optionally with :port",
        validation_alias=AliasChoices("KAROTZ_HOSTNAME", "KAROTZ_HOST"),
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Request timeout in seconds",
    )
    trust_self_signed: bool = Field(
        default=True,
        description="Accept self-signed TLS certificates",
    )

    model_config = SettingsConfigDict(
        env_prefix="KAROTZ_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Runtime environment"
    )

    karotz: KarotzSettings = Field(default_factory=KarotzSettings)
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
    Get settings instance Factory.

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return AppSettings()
