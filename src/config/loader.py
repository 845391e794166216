"""Configuration loading from files and environment variables."""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml

from src.domain.core.exceptions import ConfigurationError
from src.config.utils.env_expansion import expand_config_env_vars

logger = logging.getLogger(__name__)

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "PATTERNS_LOG_LEVEL": ("logging", "level"),
    "PATTERNS_LOG_DESTINATION": ("logging", "destination"),
    "PATTERNS_LOG_FILE": ("logging", "file_path"),
    "PATTERNS_DRINK_AMOUNT": ("drinks", "default_amount"),
}


class ConfigurationLoader:
    """Loads raw configuration data from JSON or YAML files and the environment."""

    def load_from_file(self, config_file: str) -> Dict[str, Any]:
        """
        Load configuration from a JSON or YAML file.

        Args:
            config_file: Path to the configuration file

        Returns:
            Raw configuration dictionary with environment variables expanded

        Raises:
            ConfigurationError: If the file is missing or cannot be parsed
        """
        path = Path(config_file)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_file}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix in (".yml", ".yaml"):
                    data = yaml.safe_load(f) or {}
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {config_file}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration file {config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration root must be a mapping: {config_file}")

        logger.debug("Loaded configuration from %s", config_file)
        return expand_config_env_vars(data)

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply PATTERNS_* environment variable overrides on top of file data.

        Raises:
            ConfigurationError: If an overridden section is not a mapping
        """
        result = {k: dict(v) if isinstance(v, dict) else v for k, v in config_data.items()}
        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is None:
                continue
            target = result.setdefault(section, {})
            if not isinstance(target, dict):
                raise ConfigurationError(
                    f"Configuration section '{section}' must be a mapping to apply {env_name}"
                )
            target[key] = value
            logger.debug("Configuration override %s.%s from %s", section, key, env_name)
        return result
