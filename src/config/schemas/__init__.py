"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .drink_schema import DrinkConfig
from .logging_schema import LoggingConfig

__all__ = [
    # Main configuration
    "AppConfig",
    "validate_config",
    # Section configurations
    "DrinkConfig",
    "LoggingConfig",
]
