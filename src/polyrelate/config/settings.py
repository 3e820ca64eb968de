"""Configuration settings for Polyrelate."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from polyrelate.domain import EPSILON

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class GeometryConfig(BaseModel):
    """Configuration for geometric comparisons."""

    epsilon: float = Field(
        default=EPSILON,
        gt=0.0,
        le=1e-2,
        description="Tolerance for every coordinate and determinant comparison",
    )


class OutputConfig(BaseModel):
    """Configuration for console output."""

    show_polygons: bool = Field(
        default=True,
        description="Print both polygons before the relationship",
    )
    json_output: bool = Field(
        default=False,
        description="Emit results as JSON instead of formatted text",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level", mode="before")
    @classmethod
    def normalize_level(cls, value: object) -> object:
        """Accept level names in any case."""
        return value.upper() if isinstance(value, str) else value


class PolyrelateSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PolyrelateSettings:
    """Get default application settings."""
    return PolyrelateSettings()
