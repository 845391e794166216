"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field, ValidationError

from src.domain.core.exceptions import ConfigurationError

from .drink_schema import DrinkConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    drinks: DrinkConfig = Field(default_factory=lambda: DrinkConfig())


def validate_config(data: Dict[str, Any]) -> AppConfig:
    """
    Validate raw configuration data.

    Args:
        data: Configuration dictionary

    Returns:
        Validated application configuration

    Raises:
        ConfigurationError: If the data does not match the schema
    """
    bad_keys = [key for key in data if not isinstance(key, str)]
    if bad_keys:
        raise ConfigurationError(f"Invalid configuration: section names must be strings, got {bad_keys!r}")
    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        missing = [
            ".".join(str(part) for part in err["loc"])
            for err in e.errors()
            if err["type"] == "missing"
        ]
        raise ConfigurationError(f"Invalid configuration: {e}", missing) from e
