"""Unit tests for settings and logging utilities."""

import json
import logging
from pathlib import Path
from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from edgebeam.config import (
    BeamConfig,
    EdgebeamSettings,
    GeometryConfig,
    LoggingConfig,
    LoopMode,
    ScreenConfig,
    get_default_settings,
)
from edgebeam.domain import Viewport
from edgebeam.utils import BuildLogger, BuildStats, configure_logging, get_logger


class TestSettings:
    """Tests for the pydantic settings models."""

    def test_geometry_defaults(self) -> None:
        """Test default geometry values."""
        config = GeometryConfig()
        assert config.bleed == 20.0
        assert config.island_radius == 8.0
        assert config.notch_radius == 4.0
        assert config.min_extent == 1.0
        assert config.directional_mask is True

    def test_bleed_bounds(self) -> None:
        """Test bleed must lie between 0 and 200."""
        with pytest.raises(ValidationError):
            GeometryConfig(bleed=-1.0)
        with pytest.raises(ValidationError):
            GeometryConfig(bleed=500.0)

    def test_min_extent_positive(self) -> None:
        """Test min_extent cannot be zero."""
        with pytest.raises(ValidationError):
            GeometryConfig(min_extent=0.0)

    def test_screen_viewport(self) -> None:
        """Test the screen config converts to a viewport."""
        assert ScreenConfig(width=412.0).to_viewport() == Viewport(412.0, 800.0)

    def test_beam_config(self) -> None:
        """Test beam settings and loop mode parsing."""
        beam = BeamConfig(loop_mode="continuous")
        assert beam.loop_mode is LoopMode.CONTINUOUS
        assert beam.beam_length == 0.3
        with pytest.raises(ValidationError):
            BeamConfig(beam_length=1.5)

    def test_log_levels(self) -> None:
        """Test log levels are checked case-insensitively."""
        assert LoggingConfig(log_level="debug").log_level == "debug"
        with pytest.raises(ValidationError):
            LoggingConfig(log_level="LOUD")

    def test_default_settings(self) -> None:
        """Test the nested default settings."""
        settings = get_default_settings()
        assert isinstance(settings, EdgebeamSettings)
        assert settings.screen.width == 360.0
        assert settings.logging.log_file is None
        assert settings.beam.loop_mode is None


class TestStructuredLogging:
    """Tests for the structlog setup."""

    def test_get_logger_emits_json(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test module loggers render JSON through stdlib logging."""
        caplog.set_level(logging.DEBUG, logger="edgebeam.tests")
        logger = get_logger("edgebeam.tests")
        logger.info("Path built", perimeter=360.0)

        payload = json.loads(caplog.records[-1].getMessage())
        assert payload["event"] == "Path built"
        assert payload["perimeter"] == 360.0
        assert payload["level"] == "info"
        assert payload["logger"] == "edgebeam.tests"

    def test_silent_below_level(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test debug events are dropped when the logger is not enabled for them."""
        caplog.set_level(logging.WARNING, logger="edgebeam.quiet")
        get_logger("edgebeam.quiet").debug("Path spec built")
        assert not [r for r in caplog.records if r.name == "edgebeam.quiet"]

    def test_configure_logging_file(self, tmp_path: Path, restore_root_logger: None) -> None:
        """Test the log file receives the initialization event."""
        log_file = tmp_path / "edgebeam.log"
        configure_logging(log_file=log_file, quiet=True)

        content = log_file.read_text(encoding="utf-8")
        assert "Logging initialized" in content

    def test_configure_logging_quiet(self, restore_root_logger: None) -> None:
        """Test quiet mode adds no console handler."""
        before = len(logging.getLogger().handlers)
        configure_logging(quiet=True)
        assert len(logging.getLogger().handlers) == before

    def test_configure_logging_replaces_handlers(self, restore_root_logger: None) -> None:
        """Test a second call swaps the console handler instead of adding one."""
        before = len(logging.getLogger().handlers)
        configure_logging(console_level="INFO")
        configure_logging(console_level="DEBUG")

        handlers = logging.getLogger().handlers
        assert len(handlers) == before + 1
        assert handlers[-1].level == logging.DEBUG


class TestBuildLogger:
    """Tests for BuildLogger statistics."""

    def test_counts(self) -> None:
        """Test each outcome is counted and forwarded."""
        inner = Mock()
        build_logger = BuildLogger(inner)

        build_logger.log_built("iPhone15,2", "island", 402.831)
        build_logger.log_no_result("unknown", "waterfall")
        build_logger.log_error("bad", ValueError("width missing"))

        stats = build_logger.stats
        assert stats.built_count == 1
        assert stats.no_result_count == 1
        assert stats.error_count == 1
        assert stats.total == 3
        assert stats.errors == [("bad", "width missing")]
        assert inner.info.call_count == 2
        inner.error.assert_called_once()

    def test_empty_stats(self) -> None:
        """Test fresh statistics are zero."""
        assert BuildStats().total == 0
