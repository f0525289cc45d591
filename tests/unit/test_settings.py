"""Unit tests for settings and logging setup."""

import logging
import math

import pytest
from pydantic import ValidationError

from serpentine.config import AxisConfig, HullConfig, get_default_settings
from serpentine.utils import configure_logging


class TestSettings:
    """Tests for pydantic settings."""

    def test_defaults(self):
        """Test default settings values."""
        settings = get_default_settings()
        assert settings.hull.max_stretch_angle == pytest.approx(math.pi / 4)
        assert settings.axis.dedup_tolerance == 0.001
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"

    def test_stretch_angle_range(self):
        """Test the stretch angle may not exceed a quarter turn."""
        with pytest.raises(ValidationError):
            HullConfig(max_stretch_angle=2.0)

    def test_tolerance_positive(self):
        """Test a zero dedup tolerance is rejected."""
        with pytest.raises(ValidationError):
            AxisConfig(dedup_tolerance=0.0)


class TestConfigureLogging:
    """Tests for logging setup."""

    def test_file_logging(self, tmp_path):
        """Test debug records from core modules reach the log file."""
        log_file = tmp_path / "serpentine.log"
        configure_logging(log_file=log_file, quiet=True)

        logging.getLogger("serpentine.core.hull").debug("hull check %d", 7)
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "hull check 7" in log_file.read_text(encoding="utf-8")

    def test_repeated_calls_do_not_stack_handlers(self, tmp_path):
        """Test configuring twice keeps a single set of handlers."""
        configure_logging(log_file=tmp_path / "one.log")
        configure_logging(log_file=tmp_path / "two.log")

        names = [h.get_name() for h in logging.getLogger().handlers]
        assert names.count("serpentine-file") == 1
        assert names.count("serpentine-console") == 1

        configure_logging(quiet=True)
        names = [h.get_name() for h in logging.getLogger().handlers]
        assert "serpentine-file" not in names
        assert "serpentine-console" not in names
