"""Logging configuration schema."""
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Root log level")
    destination: str = Field("stdout", description="Log destination (stdout, file, both)")
    file_path: Optional[str] = Field(None, description="Log file path when logging to a file")
    max_size_mb: int = Field(10, description="Maximum log file size before rotation")
    backup_count: int = Field(5, description="Number of rotated log files to keep")
    format: str = Field(
        "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
        description="Log record format",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Validate log destination."""
        if v not in ("stdout", "file", "both"):
            raise ValueError(f"Invalid log destination: {v}")
        return v

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Value must be at least 1")
        return v
