"""Unit tests for the error taxonomy and the command-line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from fleetscope.__main__ import build_parser, resolve_settings
from fleetscope.errors import MalformedSnapshot, TelemetryError, TransportFailure


class TestErrors:
    """Test error messages and hierarchy."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_transport_failure_with_status(self) -> None:
        error = TransportFailure("get_jobs", "Service Unavailable", status_code=503)
        assert isinstance(error, TelemetryError)
        assert str(error) == "get_jobs failed (HTTP 503): Service Unavailable"

    @pytest.mark.unit
    @pytest.mark.fast
    def test_transport_failure_without_status(self) -> None:
        assert str(TransportFailure("get_jobs", "refused")) == "get_jobs failed: refused"

    @pytest.mark.unit
    @pytest.mark.fast
    def test_malformed_snapshot_field(self) -> None:
        error = MalformedSnapshot("expected a list", field="clusters")
        assert isinstance(error, TelemetryError)
        assert error.field == "clusters"
        assert str(error) == "Malformed snapshot at 'clusters': expected a list"
        assert str(MalformedSnapshot("bad")) == "Malformed snapshot: bad"


class TestCommandLine:
    """Test argument parsing and settings resolution."""

    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("FLEETSCOPE_API_URL", raising=False)
        monkeypatch.delenv("FLEETSCOPE_LOG_LEVEL", raising=False)

    @pytest.mark.unit
    def test_defaults(self, tmp_path: Path) -> None:
        args = build_parser().parse_args(["--config", str(tmp_path / "absent.yaml")])
        settings, load_error = resolve_settings(args)
        assert args.view == "bulk-tasks"
        assert load_error is None
        assert settings.api_base_url == "http://localhost:8080/api"

    @pytest.mark.unit
    def test_overrides_are_validated(self, tmp_path: Path) -> None:
        args = build_parser().parse_args(
            [
                "--config",
                str(tmp_path / "absent.yaml"),
                "--api-url",
                "http://collector:9000/api/",
                "--log-level",
                "debug",
                "--log-file",
                str(tmp_path / "fleetscope.log"),
                "--view",
                "jobs",
            ]
        )
        settings, _ = resolve_settings(args)
        assert settings.api_base_url == "http://collector:9000/api"
        assert settings.log_level == "DEBUG"
        assert settings.log_file.endswith("fleetscope.log")
        assert args.view == "jobs"

    @pytest.mark.unit
    def test_unreadable_config_falls_back_to_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("queue_refresh_interval: 1\n", encoding="utf-8")
        args = build_parser().parse_args(["--config", str(path)])
        settings, load_error = resolve_settings(args)
        assert load_error is not None
        assert settings.queue_refresh_interval == 60

    @pytest.mark.unit
    @pytest.mark.fast
    def test_unknown_view_rejected(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--view", "stale-indices"])
