"""Configuration models and loaders."""

from bwcurve.core.config.loader import (
    configure_logging_from_config,
    detect_format,
    load_app_config,
    load_config,
)
from bwcurve.core.config.models import AppConfig, LoggingConfig

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "configure_logging_from_config",
    "detect_format",
    "load_app_config",
    "load_config",
]
