"""Configuration management for polyrelate.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Comparison tolerance
- OutputConfig: Console output settings
- LoggingConfig: Logging settings
- PolyrelateSettings: Main application settings
"""

from polyrelate.config.settings import (
    GeometryConfig,
    LoggingConfig,
    OutputConfig,
    PolyrelateSettings,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "LoggingConfig",
    "OutputConfig",
    "PolyrelateSettings",
    "get_default_settings",
]
