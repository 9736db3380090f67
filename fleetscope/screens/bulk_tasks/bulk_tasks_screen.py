"""Bulk write-tasks screen - per-host and per-index task load of one cluster."""

from __future__ import annotations

from contextlib import suppress

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.css.query import NoMatches, WrongType
from textual.widgets import DataTable, Static, TabbedContent, TabPane

from fleetscope.keyboard import BULK_TASKS_SCREEN_BINDINGS
from fleetscope.screens.base_screen import ClusterScreen
from fleetscope.screens.bulk_tasks.config import (
    BULK_TAB_FOR_TAB,
    HOSTS_TABLE_COLUMNS,
    HOSTS_TABLE_ID,
    INDICES_TABLE_COLUMNS,
    INDICES_TABLE_ID,
    SHARDS_TABLE_COLUMNS,
    SHARDS_TABLE_ID,
    SHARDS_TITLE_ID,
    SUMMARY_CARDS,
    TAB_HOSTS,
    TAB_INDICES,
)
from fleetscope.screens.bulk_tasks.presenter import BulkTasksPresenter
from fleetscope.screens.mixins import TabbedViewMixin
from fleetscope.utils.bulk_summary import LoadThresholds
from fleetscope.widgets import StatusCard, TelemetryTable


class BulkTasksScreen(TabbedViewMixin, ClusterScreen):
    """Bulk write-task monitor with host drill-down."""

    BINDINGS = BULK_TASKS_SCREEN_BINDINGS
    TAB_ORDER = (TAB_HOSTS, TAB_INDICES)

    DEFAULT_CSS = """
    BulkTasksScreen #summary-cards {
        height: auto;
        padding: 0 1;
    }
    BulkTasksScreen #shards-title {
        padding: 0 1;
        color: $text-muted;
    }
    BulkTasksScreen #shards-table {
        height: 14;
    }
    """

    presenter: BulkTasksPresenter

    @property
    def screen_title(self) -> str:
        return "Bulk Write Tasks"

    def create_presenter(self) -> BulkTasksPresenter:
        return BulkTasksPresenter(
            self,
            self.controller,
            self.settings.bulk_tasks_refresh_interval,
            thresholds=LoadThresholds(
                normal_max=self.settings.load_normal_max,
                elevated_max=self.settings.load_elevated_max,
            ),
        )

    def compose_body(self) -> ComposeResult:
        with Horizontal(id="summary-cards"):
            for card_id, title in SUMMARY_CARDS:
                yield StatusCard(title, id=card_id)
        with TabbedContent(id="tabbed-content", initial=TAB_HOSTS):
            with TabPane("Hosts", id=TAB_HOSTS):
                yield TelemetryTable(HOSTS_TABLE_COLUMNS, id=HOSTS_TABLE_ID)
                yield Static("", id=SHARDS_TITLE_ID)
                yield TelemetryTable(SHARDS_TABLE_COLUMNS, id=SHARDS_TABLE_ID)
            with TabPane("Indices", id=TAB_INDICES):
                yield TelemetryTable(INDICES_TABLE_COLUMNS, id=INDICES_TABLE_ID)

    # =========================================================================
    # Rendering
    # =========================================================================

    def render_data(self) -> None:
        with suppress(NoMatches, WrongType):
            for card_id, (value, status) in self.presenter.get_summary_cards().items():
                card = self.query_one(f"#{card_id}", StatusCard)
                card.set_value(value)
                card.set_status(status)

            hosts = self.query_one(f"#{HOSTS_TABLE_ID}", TelemetryTable)
            indices = self.query_one(f"#{INDICES_TABLE_ID}", TelemetryTable)
            if self.presenter.snapshot is None:
                message = self.presenter.get_empty_message()
                hosts.show_message(message)
                indices.show_message(message)
            else:
                hosts.set_rows(self.presenter.get_host_rows())
                indices.set_rows(self.presenter.get_index_rows())
            self._render_shards()

    def _render_shards(self) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{SHARDS_TITLE_ID}", Static).update(
                self.presenter.get_shard_title()
            )
            self.query_one(f"#{SHARDS_TABLE_ID}", TelemetryTable).set_rows(
                self.presenter.get_shard_rows(), keep_cursor=False
            )

    # =========================================================================
    # Interaction
    # =========================================================================

    def _toggle_host(self, host_name: str | None) -> None:
        snapshot = self.presenter.snapshot
        if host_name is None or snapshot is None or host_name not in snapshot.by_host:
            return
        self.presenter.toggle_expand(host_name)
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{HOSTS_TABLE_ID}", TelemetryTable).set_rows(
                self.presenter.get_host_rows()
            )
        self._render_shards()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        parent = event.data_table.parent
        if parent is None or parent.id != HOSTS_TABLE_ID:
            return
        self._toggle_host(event.row_key.value)

    def action_toggle_expand(self) -> None:
        with suppress(NoMatches, WrongType):
            table = self.query_one(f"#{HOSTS_TABLE_ID}", TelemetryTable)
            self._toggle_host(table.cursor_row_key)

    def on_tabbed_content_tab_activated(self, event: TabbedContent.TabActivated) -> None:
        tab = BULK_TAB_FOR_TAB.get(event.pane.id or "")
        if tab is not None:
            self.presenter.select_tab(tab)
