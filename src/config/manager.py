"""Unified configuration management for the application."""
from __future__ import annotations
import logging
import threading
from typing import Any, Dict, Optional, Type, TypeVar

from src.config.loader import ConfigurationLoader
from src.config.schemas import AppConfig, DrinkConfig, LoggingConfig, validate_config

T = TypeVar('T')
logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is loaded lazily on first access from, in order:
    schema defaults, the optional configuration file, and PATTERNS_*
    environment variable overrides.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._loader = ConfigurationLoader()

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self._loader.load_from_file(self._config_file)

        config_data = self._loader.apply_environment_overrides(config_data)
        app_config = validate_config(config_data)
        logger.debug("Configuration loaded (file=%s)", self._config_file)
        return app_config

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a typed configuration section."""
        type_mapping = {
            LoggingConfig: 'logging',
            DrinkConfig: 'drinks',
        }
        if config_type not in type_mapping:
            raise ValueError(f"Unknown configuration type: {config_type.__name__}")
        return getattr(self.app_config, type_mapping[config_type])

    def reload(self) -> None:
        """Reload configuration from sources."""
        with self._lock:
            self._app_config = None


_config_manager: Optional[ConfigurationManager] = None
_manager_lock = threading.Lock()


def get_config_manager(config_path: Optional[str] = None) -> ConfigurationManager:
    """
    Get the process-wide configuration manager.

    Passing a config_path replaces the current manager with one reading
    from that file.
    """
    global _config_manager
    with _manager_lock:
        if _config_manager is None or config_path is not None:
            _config_manager = ConfigurationManager(config_path)
        return _config_manager


def reset_config_manager() -> None:
    """
    Drop the process-wide configuration manager.

    This function is primarily for testing purposes.
    """
    global _config_manager
    with _manager_lock:
        _config_manager = None
