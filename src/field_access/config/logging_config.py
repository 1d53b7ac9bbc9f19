"""Centralized logging configuration for field-access.

Provides consistent, configurable logging with environment-based control
over verbosity and format.
"""

import logging
import logging.config
from typing import Any, Dict
from enum import Enum

from .settings import get_settings


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Standard logging (warnings and above)
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


class LogFormat(str, Enum):
    """Supported log output formats."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    try:
        return verbosity_map[LogVerbosity(verbosity.upper())]
    except ValueError:
        return LogLevel.WARNING.value


class LoggingConfig:
    """Logging configuration manager for the field_access logger tree."""

    ROOT_LOGGER = "field_access"

    # Third-party modules that should only log errors
    ERROR_ONLY_MODULES = [
        "httpx",
        "httpcore",
    ]

    @classmethod
    def build(cls, verbosity: str, log_format: str) -> Dict[str, Any]:
        """Build a dictConfig mapping for the given verbosity and format."""
        effective_log_level = get_log_level_from_verbosity(verbosity)
        try:
            format_string = FORMAT_STRINGS[LogFormat(log_format.lower())]
        except ValueError:
            format_string = FORMAT_STRINGS[LogFormat.SIMPLE]

        logging_config = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                cls.ROOT_LOGGER: {
                    "level": effective_log_level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

        for module in cls.ERROR_ONLY_MODULES:
            logging_config["loggers"][module] = {
                "level": "ERROR",
                "propagate": True,
            }

        return logging_config

    @classmethod
    def configure(cls) -> None:
        """Configure logging based on environment settings."""
        settings = get_settings()
        logging.config.dictConfig(cls.build(settings.log_verbosity, settings.log_format))

        logger = logging.getLogger(__name__)
        logger.debug(
            f"Logging configured: verbosity={settings.log_verbosity}, format={settings.log_format}"
        )

    @classmethod
    def set_module_level(cls, module_name: str, level: str) -> None:
        """Set log level for a specific module.

        Args:
            module_name: Name of the module
            level: Log level to set
        """
        logging.getLogger(module_name).setLevel(getattr(logging, level.upper()))


_configured = False


def setup_logging(force: bool = False) -> None:
    """Configure the field_access loggers once per process.

    Args:
        force: Reconfigure even if logging was already set up
    """
    global _configured
    if _configured and not force:
        return
    LoggingConfig.configure()
    _configured = True
