"""QueueDepthChart widget - per-host write-queue depth plot."""

from __future__ import annotations

from contextlib import suppress

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.widgets import Static
from textual_plotext import PlotextPlot

from fleetscope.models.telemetry.cluster_info import HostQueueSeries
from fleetscope.utils.formatters import format_timestamp

# Most x-axis labels drawn under a plot.
_MAX_TICKS = 6


class QueueDepthChart(Vertical):
    """Line plot of one host's recent queue depth with a caption."""

    DEFAULT_CSS = """
    QueueDepthChart {
        height: auto;
        border: round $surface-lighten-1;
        padding: 0 1;
        margin-bottom: 1;
    }
    QueueDepthChart > .chart-title {
        text-style: bold;
    }
    QueueDepthChart > PlotextPlot {
        height: 12;
    }
    QueueDepthChart > .chart-caption {
        color: $text-muted;
    }
    """

    def __init__(self, series: HostQueueSeries, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self._series = series

    @property
    def series(self) -> HostQueueSeries:
        return self._series

    def compose(self) -> ComposeResult:
        yield Static(self._series.host_name, classes="chart-title")
        yield PlotextPlot()
        yield Static(self.caption(self._series), classes="chart-caption")

    def on_mount(self) -> None:
        self._draw()

    @staticmethod
    def caption(series: HostQueueSeries) -> str:
        """Counts and time range shown beneath the plot."""
        parts = [
            f"Data points: {series.total_points_retained} / {series.total_points_requested}"
        ]
        if series.data_points:
            first = format_timestamp(series.data_points[0].timestamp)
            last = format_timestamp(series.data_points[-1].timestamp)
            parts.append(f"{first} - {last}")
            parts.append(f"latest {series.latest_depth}, peak {series.peak_depth}")
        return "  |  ".join(parts)

    def update_series(self, series: HostQueueSeries) -> None:
        self._series = series
        self._draw()
        with suppress(NoMatches):
            self.query(".chart-caption").first(Static).update(self.caption(series))

    def _draw(self) -> None:
        with suppress(NoMatches):
            plot = self.query_one(PlotextPlot)
            plt = plot.plt
            plt.clear_data()
            plt.ylabel("queue")
            points = self._series.data_points
            if points:
                x_values = [point.timestamp.timestamp() for point in points]
                y_values = [float(point.queue_depth) for point in points]
                tick_count = min(_MAX_TICKS, len(points))
                if tick_count > 1:
                    indexes = sorted(
                        {round(i * (len(points) - 1) / (tick_count - 1)) for i in range(tick_count)}
                    )
                else:
                    indexes = [0]
                plt.xticks(
                    [x_values[i] for i in indexes],
                    [format_timestamp(points[i].timestamp) for i in indexes],
                )
                plt.plot(x_values, y_values, color="cyan", marker="dot")
            plot.refresh()


__all__ = ["QueueDepthChart"]
