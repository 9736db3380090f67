"""Write-queue presenter - per-host queue depth series for one cluster."""

from __future__ import annotations

from typing import Any

from fleetscope.constants.values import NO_DATA_MESSAGE
from fleetscope.models.telemetry.cluster_info import HostQueueSeries, QueueDepthSeries
from fleetscope.screens.base_presenter import ClusterViewPresenter


class QueuePresenter(ClusterViewPresenter[QueueDepthSeries]):
    """Presenter for QueueScreen."""

    def __init__(self, screen: Any, controller: Any, interval: float) -> None:
        super().__init__(screen, controller, interval, name="queue")

    @property
    def series(self) -> QueueDepthSeries | None:
        return self._data

    async def _list_clusters(self) -> list[str]:
        entries = await self._controller.list_clusters()
        return [entry.cluster_name for entry in entries]

    async def _fetch(self, target: str) -> QueueDepthSeries:
        return await self._controller.get_queue_depth_series(target)

    def get_host_series(self) -> list[HostQueueSeries]:
        """Host series in the order the data source listed them."""
        if self._data is None:
            return []
        return list(self._data.hosts.values())

    def get_empty_message(self) -> str:
        if self._no_data_reason:
            return f"{NO_DATA_MESSAGE}: {self._no_data_reason}"
        if self._data is not None and not self._data.hosts:
            return "No queue depth samples reported for this cluster"
        return NO_DATA_MESSAGE
