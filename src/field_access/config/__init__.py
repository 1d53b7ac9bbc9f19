"""Configuration module for field-access."""

from .settings import (
    FieldAccessSettings,
    ControllerConfig,
    get_settings,
)

from .logging_config import (
    setup_logging,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    "FieldAccessSettings",
    "ControllerConfig",
    "get_settings",
    "setup_logging",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]
