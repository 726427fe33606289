"""Configuration management for edgebeam.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Bleed, default radii and mask settings
- ScreenConfig: Usable screen size for edge-attached shapes
- BeamConfig: Settings handed to the animation driver
- LoggingConfig: Logging settings
- EdgebeamSettings: Main application settings
"""

from edgebeam.config.settings import (
    BeamConfig,
    EdgebeamSettings,
    GeometryConfig,
    LoggingConfig,
    LoopMode,
    ScreenConfig,
    get_default_settings,
)

__all__ = [
    "BeamConfig",
    "EdgebeamSettings",
    "GeometryConfig",
    "LoggingConfig",
    "LoopMode",
    "ScreenConfig",
    "get_default_settings",
]
