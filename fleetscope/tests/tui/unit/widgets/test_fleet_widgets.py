"""Unit tests for FleetScope widgets that do not need a running app."""

from __future__ import annotations

from datetime import datetime

import pytest

from fleetscope.models.telemetry import HostQueueSeries, QueueDepthPoint
from fleetscope.widgets import StatusBanner, StatusCard, TelemetryTable
from fleetscope.widgets.display import QueueDepthChart


class TestQueueDepthChart:
    """Test the chart caption."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_caption_without_points(self) -> None:
        series = HostQueueSeries(host_name="es-1", total_points_requested=40)
        assert QueueDepthChart.caption(series) == "Data points: 0 / 40"

    @pytest.mark.unit
    @pytest.mark.fast
    def test_caption_with_points(self) -> None:
        series = HostQueueSeries(
            host_name="es-1",
            data_points=(
                QueueDepthPoint(timestamp=datetime(2024, 5, 1, 10, 0, 0), queue_depth=4),
                QueueDepthPoint(timestamp=datetime(2024, 5, 1, 10, 5, 0), queue_depth=2),
            ),
            total_points_retained=2,
            total_points_requested=40,
        )
        caption = QueueDepthChart.caption(series)
        assert caption.startswith("Data points: 2 / 40")
        assert "10:00:00 - 10:05:00" in caption
        assert "latest 2, peak 4" in caption

    @pytest.mark.unit
    @pytest.mark.fast
    def test_keeps_series(self) -> None:
        series = HostQueueSeries(host_name="es-1")
        assert QueueDepthChart(series).series is series


class TestWidgetConstruction:
    """Test widgets before they are mounted."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_status_card(self) -> None:
        card = StatusCard("Active Tasks", "12", status="warning", id="card")
        assert card.title == "Active Tasks"
        assert card.has_class("warning")
        assert card.has_class("widget-status-card")

    @pytest.mark.unit
    @pytest.mark.fast
    def test_table_before_compose(self) -> None:
        table = TelemetryTable([("Host", 20)], id="hosts")
        assert table.row_count == 0
        assert table.cursor_row_key is None
        table.set_rows([("a", ("a",))])
        assert table.row_count == 0

    @pytest.mark.unit
    @pytest.mark.fast
    def test_banner_starts_empty(self) -> None:
        banner = StatusBanner(id="error-banner")
        assert banner.level == ""
