"""Indexing-rate screen."""

from __future__ import annotations

from contextlib import suppress

from textual.app import ComposeResult
from textual.css.query import NoMatches, WrongType

from fleetscope.screens.base_screen import ClusterScreen
from fleetscope.screens.indexing_rate.presenter import IndexingRatePresenter
from fleetscope.widgets import TelemetryTable

RATES_TABLE_ID = "indexing-rate-table"
RATES_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Index", 40),
    ("Shards", 8),
    ("Since Creation", 16),
    ("Last 3m", 12),
    ("Last 15m", 12),
    ("Last 60m", 12),
]


class IndexingRateScreen(ClusterScreen):
    """Indexing rate per index of the selected cluster."""

    presenter: IndexingRatePresenter

    @property
    def screen_title(self) -> str:
        return "Indexing Rate"

    def create_presenter(self) -> IndexingRatePresenter:
        return IndexingRatePresenter(
            self, self.controller, self.settings.indexing_rate_refresh_interval
        )

    def compose_body(self) -> ComposeResult:
        yield TelemetryTable(RATES_TABLE_COLUMNS, id=RATES_TABLE_ID)

    def render_data(self) -> None:
        with suppress(NoMatches, WrongType):
            table = self.query_one(f"#{RATES_TABLE_ID}", TelemetryTable)
            rows = self.presenter.get_rate_rows()
            if rows:
                table.set_rows(rows)
            else:
                table.show_message(self.presenter.get_empty_message())
