"""Configuration settings for Edgebeam."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from edgebeam.domain.geometry import Viewport


_LEVEL_PATTERN = r"(?i)^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$"


class LoopMode(str, Enum):
    """How the beam animation repeats."""

    RESTART = "restart"
    CONTINUOUS = "continuous"


class GeometryConfig(BaseModel):
    """Configuration for path construction.

    All lengths are in device-independent units, the same units the cutout
    is reported in.
    """

    bleed: float = Field(
        default=20.0,
        ge=0.0,
        le=200.0,
        description="Extra canvas margin so blur and glow are not clipped",
    )
    island_radius: float = Field(
        default=8.0,
        ge=0.0,
        description="Corner radius used for islands that report none",
    )
    notch_radius: float = Field(
        default=4.0,
        ge=0.0,
        description="Corner radius used for notches that report none",
    )
    min_extent: float = Field(
        default=1.0,
        gt=0.0,
        le=10.0,
        description="Smallest traced width, height or diameter",
    )
    directional_mask: bool = Field(
        default=True,
        description="Build the directional glow mask alongside the path",
    )


class ScreenConfig(BaseModel):
    """Usable screen size the bar family spans."""

    width: float = Field(
        default=360.0,
        gt=0.0,
        description="Usable screen width",
    )
    height: float = Field(
        default=800.0,
        gt=0.0,
        description="Usable screen height",
    )

    def to_viewport(self) -> Viewport:
        """Convert to the domain viewport."""
        return Viewport(width=self.width, height=self.height)


class BeamConfig(BaseModel):
    """Configuration handed to the animation driver."""

    beam_length: float = Field(
        default=0.3,
        gt=0.0,
        le=1.0,
        description="Fraction of the perimeter lit at any moment",
    )
    duration_ms: int = Field(
        default=1800,
        gt=0,
        description="Duration of one full traversal in milliseconds",
    )
    loop_mode: LoopMode | None = Field(
        default=None,
        description="Loop mode (None = chosen from the cutout type)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        pattern=_LEVEL_PATTERN,
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        pattern=_LEVEL_PATTERN,
        description="File log level (more verbose)",
    )


class EdgebeamSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    screen: ScreenConfig = Field(default_factory=ScreenConfig)
    beam: BeamConfig = Field(default_factory=BeamConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> EdgebeamSettings:
    """Get default application settings."""
    return EdgebeamSettings()
