"""Dashboard screen - fleet-wide status at a glance."""

from __future__ import annotations

from contextlib import suppress

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.css.query import NoMatches, WrongType
from textual.widgets import Static

from fleetscope.screens.base_screen import BaseScreen
from fleetscope.screens.dashboard.presenter import DashboardPresenter
from fleetscope.widgets import TelemetryTable

RECENT_JOBS_COLUMNS: list[tuple[str, int]] = [
    ("Job", 36),
    ("Status", 12),
    ("Runs", 8),
    ("Last Run", 22),
]


class DashboardScreen(BaseScreen):
    """Application status, clusters and jobs summary."""

    DEFAULT_CSS = """
    DashboardScreen #dashboard-panels {
        height: auto;
    }
    DashboardScreen .dashboard-panel {
        width: 1fr;
        height: auto;
        min-height: 5;
        border: round $surface-lighten-1;
        padding: 0 1;
    }
    """

    presenter: DashboardPresenter

    @property
    def screen_title(self) -> str:
        return "Dashboard"

    def create_presenter(self) -> DashboardPresenter:
        return DashboardPresenter(
            self, self.controller, self.settings.dashboard_refresh_interval
        )

    def compose_body(self) -> ComposeResult:
        with Horizontal(id="dashboard-panels"):
            yield Static("", id="status-panel", classes="dashboard-panel")
            yield Static("", id="clusters-panel", classes="dashboard-panel")
            yield Static("", id="jobs-panel", classes="dashboard-panel")
        yield Static("Recent jobs", classes="section-title")
        yield TelemetryTable(RECENT_JOBS_COLUMNS, id="recent-jobs-table")

    def render_data(self) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one("#status-panel", Static).update(self.presenter.get_status_text())
            self.query_one("#clusters-panel", Static).update(
                self.presenter.get_clusters_text()
            )
            self.query_one("#jobs-panel", Static).update(self.presenter.get_jobs_text())
            self.query_one("#recent-jobs-table", TelemetryTable).set_rows(
                self.presenter.get_recent_job_rows()
            )
