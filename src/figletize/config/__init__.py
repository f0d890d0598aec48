"""Configuration management for figletize.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RenderConfig: Default font and smush override
- FontSourceConfig: Font directory or archive, render cache size
- LoggingConfig: Logging settings
- FigletizeSettings: Main application settings
"""

from figletize.config.settings import (
    FigletizeSettings,
    FontSourceConfig,
    LoggingConfig,
    RenderConfig,
    get_default_settings,
)

__all__ = [
    "FigletizeSettings",
    "FontSourceConfig",
    "LoggingConfig",
    "RenderConfig",
    "get_default_settings",
]
