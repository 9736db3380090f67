"""Nodes screen."""

from __future__ import annotations

from contextlib import suppress

from textual.app import ComposeResult
from textual.css.query import NoMatches, WrongType

from fleetscope.screens.base_screen import ClusterScreen
from fleetscope.screens.nodes.presenter import NodesPresenter
from fleetscope.widgets import TelemetryTable

NODES_TABLE_ID = "nodes-table"
NODES_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Host", 32),
    ("IP Address", 16),
    ("Port", 8),
    ("Roles", 24),
    ("Zone", 14),
    ("Tier", 10),
]


class NodesScreen(ClusterScreen):
    """Nodes of the selected cluster."""

    presenter: NodesPresenter

    @property
    def screen_title(self) -> str:
        return "Nodes"

    def create_presenter(self) -> NodesPresenter:
        return NodesPresenter(self, self.controller, self.settings.nodes_refresh_interval)

    def compose_body(self) -> ComposeResult:
        yield TelemetryTable(NODES_TABLE_COLUMNS, id=NODES_TABLE_ID)

    def render_data(self) -> None:
        with suppress(NoMatches, WrongType):
            table = self.query_one(f"#{NODES_TABLE_ID}", TelemetryTable)
            rows = self.presenter.get_node_rows()
            if rows:
                table.set_rows(rows)
            else:
                table.show_message(self.presenter.get_empty_message())
