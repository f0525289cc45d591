"""Configuration settings for Serpentine."""

import math
from pathlib import Path

from pydantic import BaseModel, Field


class HullConfig(BaseModel):
    """Configuration for tangent hull construction."""

    max_stretch_angle: float = Field(
        default=math.pi / 4,
        ge=0.0,
        le=math.pi / 2,
        description="Endpoint rotation (radians) applied to a connector at stretch 1.0",
    )
    min_arc_sweep: float = Field(
        default=1e-9,
        gt=0.0,
        le=1e-3,
        description="Arcs sweeping less than this (radians) are omitted",
    )


class AxisConfig(BaseModel):
    """Configuration for symmetry-axis snapping."""

    dedup_tolerance: float = Field(
        default=0.001,
        gt=0.0,
        le=0.1,
        description="Angles closer than this (radians) count as the same axis",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SerpentineSettings(BaseModel):
    """Main application settings."""

    hull: HullConfig = Field(default_factory=HullConfig)
    axis: AxisConfig = Field(default_factory=AxisConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SerpentineSettings:
    """Get default application settings."""
    return SerpentineSettings()
