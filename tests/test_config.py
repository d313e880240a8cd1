"""Tests for settings validation."""

import pytest
from pydantic import ValidationError

from py_navgrid.config import Settings
from py_navgrid.core.path_search import SearchStrategy


class TestSettings:
    """Test navigation settings."""

    def test_defaults(self, monkeypatch):
        for name in ("GRID_STEP", "HEIGHT_OFFSET", "PROBE_RADIUS", "DEFAULT_STRATEGY"):
            monkeypatch.delenv(f"NAVGRID_{name}", raising=False)
        settings = Settings()
        assert settings.grid_step == 100.0
        assert settings.height_offset == 25.0
        assert settings.probe_radius == 1.0
        assert settings.strategy == SearchStrategy.ASTAR
        assert settings.update_interval_frames == 300

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("NAVGRID_GRID_STEP", "25")
        monkeypatch.setenv("NAVGRID_DEFAULT_STRATEGY", "Dijkstra")
        settings = Settings()
        assert settings.grid_step == 25.0
        assert settings.default_strategy == "dijkstra"
        assert settings.strategy == SearchStrategy.DIJKSTRA

    def test_invalid_step(self):
        with pytest.raises(ValidationError):
            Settings(grid_step=0)

    def test_invalid_strategy(self):
        with pytest.raises(ValidationError):
            Settings(default_strategy="greedy")

    def test_log_settings_normalized(self):
        settings = Settings(log_level="debug", log_format="CONSOLE")
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "console"

    def test_invalid_log_format(self):
        with pytest.raises(ValidationError):
            Settings(log_format="xml")
