"""Unit tests for AppSettings validation and ConfigManager persistence."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from fleetscope.models.state.app_settings import AppSettings
from fleetscope.models.state.config_manager import (
    ConfigLoadError,
    ConfigManager,
    ConfigSaveError,
)


class TestAppSettings:
    """Test settings defaults and validation."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_defaults(self) -> None:
        settings = AppSettings()
        assert settings.api_base_url == "http://localhost:8080/api"
        assert settings.bulk_tasks_refresh_interval == 15
        assert settings.dashboard_refresh_interval == 30
        assert settings.jobs_refresh_interval == 30
        assert settings.queue_refresh_interval == 60
        assert settings.load_normal_max == 50
        assert settings.load_elevated_max == 100
        assert settings.job_followup_delay_seconds == 2.0
        assert settings.queue_chart_points == 40

    @pytest.mark.unit
    @pytest.mark.fast
    def test_interval_minimum(self) -> None:
        with pytest.raises(ValidationError):
            AppSettings(bulk_tasks_refresh_interval=1)

    @pytest.mark.unit
    @pytest.mark.fast
    def test_log_level_normalized(self) -> None:
        assert AppSettings(log_level="debug").log_level == "DEBUG"
        with pytest.raises(ValidationError):
            AppSettings(log_level="chatty")

    @pytest.mark.unit
    @pytest.mark.fast
    def test_trailing_slash_stripped(self) -> None:
        assert AppSettings(api_base_url="http://x/api/").api_base_url == "http://x/api"

    @pytest.mark.unit
    @pytest.mark.fast
    def test_load_bands_must_be_ordered(self) -> None:
        with pytest.raises(ValidationError):
            AppSettings(load_normal_max=80, load_elevated_max=60)


class TestConfigManager:
    """Test YAML load/save and environment overrides."""

    @pytest.mark.unit
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        settings = ConfigManager.load(tmp_path / "absent.yaml", environ={})
        assert settings == AppSettings()

    @pytest.mark.unit
    def test_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "settings.yaml"
        original = AppSettings(api_base_url="http://collector:9000/api", queue_refresh_interval=90)

        written = ConfigManager.save(original, path)
        loaded = ConfigManager.load(written, environ={})

        assert written == path
        assert loaded == original

    @pytest.mark.unit
    def test_partial_file(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("bulk_tasks_refresh_interval: 20\n", encoding="utf-8")
        settings = ConfigManager.load(path, environ={})
        assert settings.bulk_tasks_refresh_interval == 20
        assert settings.jobs_refresh_interval == 30

    @pytest.mark.unit
    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("", encoding="utf-8")
        assert ConfigManager.load(path, environ={}) == AppSettings()

    @pytest.mark.unit
    def test_environment_overrides_file(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("api_base_url: http://from-file/api\n", encoding="utf-8")
        settings = ConfigManager.load(
            path,
            environ={"FLEETSCOPE_API_URL": "http://from-env/api", "FLEETSCOPE_LOG_LEVEL": "warning"},
        )
        assert settings.api_base_url == "http://from-env/api"
        assert settings.log_level == "WARNING"

    @pytest.mark.unit
    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("api_base_url: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError):
            ConfigManager.load(path, environ={})

    @pytest.mark.unit
    def test_non_mapping_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="mapping"):
            ConfigManager.load(path, environ={})

    @pytest.mark.unit
    def test_invalid_values(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("nodes_refresh_interval: 0\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError):
            ConfigManager.load(path, environ={})

    @pytest.mark.unit
    def test_save_failure(self, tmp_path: Path) -> None:
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(ConfigSaveError):
            ConfigManager.save(AppSettings(), blocker / "settings.yaml")
