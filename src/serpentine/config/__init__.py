"""Configuration management for serpentine.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- HullConfig: Tangent hull construction settings
- AxisConfig: Constraint axis settings
- LoggingConfig: Logging settings
- SerpentineSettings: Main application settings
"""

from serpentine.config.settings import (
    AxisConfig,
    HullConfig,
    LoggingConfig,
    SerpentineSettings,
    get_default_settings,
)

__all__ = [
    "AxisConfig",
    "HullConfig",
    "LoggingConfig",
    "SerpentineSettings",
    "get_default_settings",
]
