"""Indexing-rate presenter - per-index write throughput for one cluster."""

from __future__ import annotations

from typing import Any

from fleetscope.constants.values import NO_DATA_MESSAGE
from fleetscope.models.telemetry.cluster_info import IndexingRate
from fleetscope.screens.base_presenter import ClusterViewPresenter
from fleetscope.utils.formatters import format_rate


class IndexingRatePresenter(ClusterViewPresenter[list[IndexingRate]]):
    """Presenter for IndexingRateScreen."""

    def __init__(self, screen: Any, controller: Any, interval: float) -> None:
        super().__init__(screen, controller, interval, name="indexing-rate")

    @property
    def rates(self) -> list[IndexingRate]:
        return list(self._data or [])

    async def _list_clusters(self) -> list[str]:
        entries = await self._controller.list_clusters()
        return [entry.cluster_name for entry in entries]

    async def _fetch(self, target: str) -> list[IndexingRate]:
        return await self._controller.get_indexing_rate(target)

    def get_rate_rows(self) -> list[tuple[str, tuple[str, ...]]]:
        """Rows sorted by index name; rates use three decimals."""
        return [
            (
                rate.index_name,
                (
                    rate.index_name,
                    str(rate.shard_count),
                    format_rate(rate.from_creation),
                    format_rate(rate.last_3m),
                    format_rate(rate.last_15m),
                    format_rate(rate.last_60m),
                ),
            )
            for rate in sorted(self._data or [], key=lambda item: item.index_name)
        ]

    def get_empty_message(self) -> str:
        if self._no_data_reason:
            return f"{NO_DATA_MESSAGE}: {self._no_data_reason}"
        return NO_DATA_MESSAGE
