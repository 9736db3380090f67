"""Bulk tasks presenter - snapshot polling, interaction state and row formatting."""

from __future__ import annotations

import logging
from typing import Any

from rich.text import Text

from fleetscope.constants.enums import BulkTab
from fleetscope.constants.limits import TOP_SHARDS_LIMIT
from fleetscope.constants.values import NO_DATA_MESSAGE, NOT_AVAILABLE
from fleetscope.models.telemetry.bulk_tasks import ClusterSnapshot
from fleetscope.screens.base_presenter import ClusterViewPresenter
from fleetscope.screens.bulk_tasks.config import (
    CARD_ACTIVE_TASKS,
    CARD_HOSTS,
    CARD_INDICES,
    CARD_TOTAL_REQUESTS,
    CARD_TOTAL_TIME,
    COLLAPSED_MARKER,
    EXPANDED_MARKER,
    LOAD_STATUS,
    LOAD_STYLE,
    SUMMARY_CARDS,
    SUSPECT_MARKER,
)
from fleetscope.utils.bulk_summary import (
    DEFAULT_LOAD_THRESHOLDS,
    LoadThresholds,
    classify_load,
    find_inconsistencies,
    ranked_host_totals,
    summarize,
    top_shards,
)
from fleetscope.utils.formatters import format_duration, format_magnitude

logger = logging.getLogger(__name__)

Row = tuple[str, tuple[Any, ...]]


class BulkTasksPresenter(ClusterViewPresenter[ClusterSnapshot]):
    """Presenter for BulkTasksScreen - handles polling, state, and formatting."""

    def __init__(
        self,
        screen: Any,
        controller: Any,
        interval: float,
        *,
        thresholds: LoadThresholds = DEFAULT_LOAD_THRESHOLDS,
        shard_limit: int = TOP_SHARDS_LIMIT,
    ) -> None:
        super().__init__(screen, controller, interval, name="bulk-tasks")
        self._thresholds = thresholds
        self._shard_limit = shard_limit

    @property
    def snapshot(self) -> ClusterSnapshot | None:
        return self._data

    @property
    def thresholds(self) -> LoadThresholds:
        return self._thresholds

    @property
    def expanded_host(self) -> str | None:
        return self.store.expanded_host

    @property
    def active_tab(self) -> BulkTab:
        return self.store.active_tab

    # =========================================================================
    # Commands
    # =========================================================================

    def toggle_expand(self, host_name: str) -> str | None:
        return self.store.toggle_expand(host_name)

    def select_tab(self, tab: BulkTab) -> None:
        self.store.select_tab(tab)

    # =========================================================================
    # Data loading
    # =========================================================================

    async def _list_clusters(self) -> list[str]:
        entries = await self._controller.list_bulk_task_clusters()
        return [entry.cluster_name for entry in entries]

    async def _fetch(self, target: str) -> ClusterSnapshot:
        return await self._controller.get_bulk_task_snapshot(target)

    def _after_apply(self, payload: ClusterSnapshot) -> None:
        self.store.reconcile(payload.by_host)
        for issue in find_inconsistencies(payload):
            logger.warning(f"{payload.cluster_name}: {issue.message}")

    # =========================================================================
    # Formatting
    # =========================================================================

    def _styled_tasks(self, task_count: int) -> Text:
        level = classify_load(task_count, self._thresholds)
        return Text(format_magnitude(task_count), style=LOAD_STYLE[level])

    def get_summary_cards(self) -> dict[str, tuple[str, str]]:
        """Card id -> (value, status) for the summary row."""
        snapshot = self._data
        if snapshot is None:
            return {card: ("-", "info") for card, _ in SUMMARY_CARDS}
        summary = summarize(snapshot)
        load = classify_load(summary.total_tasks, self._thresholds)
        return {
            CARD_ACTIVE_TASKS: (format_magnitude(summary.total_tasks), LOAD_STATUS[load]),
            CARD_TOTAL_REQUESTS: (format_magnitude(summary.total_requests), "info"),
            CARD_TOTAL_TIME: (format_duration(summary.total_time_taken_ms), "info"),
            CARD_HOSTS: (str(summary.host_count), "info"),
            CARD_INDICES: (str(summary.index_count), "info"),
        }

    def get_host_rows(self) -> list[Row]:
        snapshot = self._data
        if snapshot is None:
            return []
        rows: list[Row] = []
        for host_name, totals in ranked_host_totals(snapshot):
            host = snapshot.by_host[host_name]
            marker = EXPANDED_MARKER if host_name == self.expanded_host else COLLAPSED_MARKER
            check = Text(SUSPECT_MARKER, style="yellow") if totals.suspect else Text("")
            rows.append(
                (
                    host_name,
                    (
                        marker,
                        host_name,
                        host.zone or NOT_AVAILABLE,
                        self._styled_tasks(totals.task_count),
                        format_magnitude(totals.request_count),
                        format_duration(totals.time_taken_ms),
                        str(host.shard_count),
                        check,
                    ),
                )
            )
        return rows

    def get_shard_rows(self) -> list[Row]:
        """Top shards of the expanded host, or nothing when no host is expanded."""
        snapshot = self._data
        host_name = self.expanded_host
        if snapshot is None or host_name is None or host_name not in snapshot.by_host:
            return []
        host = snapshot.by_host[host_name]
        rows: list[Row] = []
        for shard_id in top_shards(host, self._shard_limit):
            shard = host.by_shard[shard_id]
            rows.append(
                (
                    shard_id,
                    (
                        shard_id,
                        self._styled_tasks(shard.task_count),
                        format_magnitude(shard.request_count),
                        format_duration(shard.time_taken_ms),
                    ),
                )
            )
        return rows

    def get_shard_title(self) -> str:
        snapshot = self._data
        host_name = self.expanded_host
        if snapshot is None or host_name is None or host_name not in snapshot.by_host:
            return "Select a host to show its busiest shards"
        shown = min(snapshot.by_host[host_name].shard_count, self._shard_limit)
        return f"Top {shown} of {snapshot.by_host[host_name].shard_count} shards on {host_name}"

    def get_index_rows(self) -> list[Row]:
        snapshot = self._data
        if snapshot is None:
            return []
        rows: list[Row] = []
        for index_name in snapshot.indices_sorted_by_task_count:
            index = snapshot.by_index[index_name]
            rows.append(
                (
                    index_name,
                    (
                        index_name,
                        self._styled_tasks(index.task_count),
                        format_magnitude(index.request_count),
                        format_duration(index.time_taken_ms),
                        format_duration(index.average_time_per_task_ms),
                    ),
                )
            )
        return rows

    def get_empty_message(self) -> str:
        if self._no_data_reason:
            return f"{NO_DATA_MESSAGE}: {self._no_data_reason}"
        if self.cluster_list_error and not self._clusters:
            return self.cluster_list_error
        return NO_DATA_MESSAGE
