"""Nodes presenter - node inventory for one cluster."""

from __future__ import annotations

from typing import Any

from fleetscope.constants.values import NO_DATA_MESSAGE, NOT_AVAILABLE
from fleetscope.models.telemetry.cluster_info import NodeInfo
from fleetscope.screens.base_presenter import ClusterViewPresenter


class NodesPresenter(ClusterViewPresenter[list[NodeInfo]]):
    """Presenter for NodesScreen."""

    def __init__(self, screen: Any, controller: Any, interval: float) -> None:
        super().__init__(screen, controller, interval, name="nodes")

    @property
    def nodes(self) -> list[NodeInfo]:
        return list(self._data or [])

    async def _list_clusters(self) -> list[str]:
        entries = await self._controller.list_clusters()
        return [entry.cluster_name for entry in entries]

    async def _fetch(self, target: str) -> list[NodeInfo]:
        return await self._controller.get_cluster_nodes(target)

    def get_node_rows(self) -> list[tuple[str, tuple[str, ...]]]:
        rows: list[tuple[str, tuple[str, ...]]] = []
        seen: dict[str, int] = {}
        for node in self._data or []:
            # A host can run several node processes on different ports.
            key = node.host_name
            count = seen.get(key, 0)
            seen[key] = count + 1
            if count:
                key = f"{key}#{count}"
            rows.append(
                (
                    key,
                    (
                        node.host_name,
                        node.ip_address or NOT_AVAILABLE,
                        str(node.port) if node.port is not None else NOT_AVAILABLE,
                        ", ".join(node.roles) or NOT_AVAILABLE,
                        node.zone or NOT_AVAILABLE,
                        node.tier or NOT_AVAILABLE,
                    ),
                )
            )
        return rows

    def get_empty_message(self) -> str:
        if self._no_data_reason:
            return f"{NO_DATA_MESSAGE}: {self._no_data_reason}"
        return NO_DATA_MESSAGE
