"""Configuration package: schemas and the configuration manager."""

from .manager import DEFAULT_CONFIG, ConfigurationManager
from .schemas import (
    AppConfig,
    EventsConfig,
    FailurePolicy,
    LogDestination,
    LoggingConfig,
    LogLevel,
)

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigurationManager",
    "AppConfig",
    "EventsConfig",
    "FailurePolicy",
    "LogDestination",
    "LoggingConfig",
    "LogLevel",
]
