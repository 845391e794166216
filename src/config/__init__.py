"""Configuration package with clean public API."""

# Main configuration classes
from .schemas import (
    AppConfig, validate_config,
    DrinkConfig, LoggingConfig,
)

# Configuration management
from .manager import ConfigurationManager, get_config_manager, reset_config_manager
from .loader import ConfigurationLoader

__all__ = [
    # Main configuration
    'AppConfig',
    'validate_config',

    # Specific configurations
    'DrinkConfig',
    'LoggingConfig',

    # Configuration management
    'ConfigurationManager',
    'ConfigurationLoader',
    'get_config_manager',
    'reset_config_manager',
]
