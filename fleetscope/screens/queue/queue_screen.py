"""Write-queue screen - one sparkline per host."""

from __future__ import annotations

from contextlib import suppress

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.css.query import NoMatches, WrongType
from textual.widgets import Static

from fleetscope.screens.base_screen import ClusterScreen
from fleetscope.screens.queue.presenter import QueuePresenter
from fleetscope.widgets import QueueDepthChart

CHARTS_CONTAINER_ID = "queue-charts"
EMPTY_MESSAGE_ID = "queue-empty"


class QueueScreen(ClusterScreen):
    """Queue depth over time for every host of the selected cluster."""

    DEFAULT_CSS = """
    QueueScreen #queue-charts {
        height: 1fr;
    }
    QueueScreen #queue-empty {
        color: $text-muted;
        padding: 1 2;
    }
    """

    presenter: QueuePresenter

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        # Host names are not valid widget ids, so charts are tracked here.
        self._charts: dict[str, QueueDepthChart] = {}

    @property
    def screen_title(self) -> str:
        return "Write Queue"

    def create_presenter(self) -> QueuePresenter:
        return QueuePresenter(self, self.controller, self.settings.queue_refresh_interval)

    def compose_body(self) -> ComposeResult:
        yield Static("", id=EMPTY_MESSAGE_ID)
        yield VerticalScroll(id=CHARTS_CONTAINER_ID)

    def render_data(self) -> None:
        with suppress(NoMatches, WrongType):
            container = self.query_one(f"#{CHARTS_CONTAINER_ID}", VerticalScroll)
            empty = self.query_one(f"#{EMPTY_MESSAGE_ID}", Static)
            series = self.presenter.get_host_series()

            if not series:
                empty.update(self.presenter.get_empty_message())
                empty.display = True
                container.remove_children()
                self._charts = {}
                return

            empty.display = False
            hosts = [item.host_name for item in series]
            if hosts == list(self._charts):
                for item in series:
                    self._charts[item.host_name].update_series(item)
                return

            container.remove_children()
            self._charts = {item.host_name: QueueDepthChart(item) for item in series}
            container.mount_all(self._charts.values())
