"""Configuration for inventory-access."""

from .settings import AccessControlSettings, get_settings
from .logging_config import LoggingConfig, LogFormat, setup_logging, get_logger

__all__ = [
    "AccessControlSettings",
    "get_settings",
    "LoggingConfig",
    "LogFormat",
    "setup_logging",
    "get_logger",
]
