"""Cluster parser - parses node, indexing-rate and queue-depth payloads."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from fleetscope.constants.limits import QUEUE_CHART_POINTS
from fleetscope.controllers.telemetry.parsers._common import (
    build_model,
    first_present,
    optional_list,
    optional_mapping,
    require_mapping,
)
from fleetscope.errors import MalformedSnapshot
from fleetscope.models.telemetry.cluster_info import (
    HostQueueSeries,
    IndexingRate,
    NodeInfo,
    QueueDepthPoint,
    QueueDepthSeries,
)

logger = logging.getLogger(__name__)


def parse_timestamp(value: Any, path: str) -> datetime:
    """Parse epoch milliseconds or an ISO-8601 string into a local aware datetime."""
    if isinstance(value, bool):
        raise MalformedSnapshot("expected a timestamp, got bool", field=path)
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc).astimezone()
        except (OverflowError, OSError, ValueError) as exc:
            raise MalformedSnapshot(f"timestamp out of range: {value!r}", field=path) from exc
    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as exc:
            raise MalformedSnapshot(f"invalid timestamp {value!r}", field=path) from exc
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone()
    raise MalformedSnapshot(
        f"expected a timestamp, got {type(value).__name__}", field=path
    )


class ClusterParser:
    """Parses per-cluster topology and throughput payloads."""

    def __init__(self, max_queue_points: int = QUEUE_CHART_POINTS) -> None:
        """Initialize cluster parser.

        Args:
            max_queue_points: Most recent queue samples kept per host.
        """
        self.max_queue_points = max_queue_points

    def parse_nodes(self, payload: Any) -> list[NodeInfo]:
        """Parse ``{"nodes": [...]}`` into NodeInfo models."""
        body = require_mapping(payload, "$")
        nodes: list[NodeInfo] = []
        for position, raw in enumerate(optional_list(body.get("nodes"), "nodes")):
            path = f"nodes.{position}"
            node = require_mapping(raw, path)
            roles = first_present(node, "type", "roles", default=[])
            if isinstance(roles, str):
                roles = [roles]
            nodes.append(
                build_model(
                    NodeInfo,
                    path,
                    host_name=node.get("hostName"),
                    ip_address=node.get("ipAddress"),
                    port=node.get("port"),
                    roles=tuple(str(role) for role in optional_list(roles, f"{path}.type")),
                    zone=node.get("zone") or None,
                    tier=first_present(node, "nodeTier", "tier") or None,
                )
            )
        return nodes

    def parse_indexing_rates(self, payload: Any) -> list[IndexingRate]:
        """Parse ``{"indices": {name: {...}}}`` into IndexingRate models."""
        body = require_mapping(payload, "$")
        indices = optional_mapping(body.get("indices"), "indices")
        rates: list[IndexingRate] = []
        for index_name, raw in indices.items():
            path = f"indices.{index_name}"
            rate = require_mapping(raw, path)
            rates.append(
                build_model(
                    IndexingRate,
                    path,
                    index_name=str(index_name),
                    shard_count=first_present(rate, "numberOfShards", "shardCount", default=0),
                    from_creation=rate.get("fromCreation"),
                    last_3m=first_present(rate, "last3Minutes", "last3m"),
                    last_15m=first_present(rate, "last15Minutes", "last15m"),
                    last_60m=first_present(rate, "last60Minutes", "last60m"),
                )
            )
        return rates

    def parse_queue_series(self, payload: Any, cluster_name: str) -> QueueDepthSeries:
        """Parse a write-queue payload, keeping the newest points per host, oldest first."""
        body = require_mapping(payload, "$")
        hosts_raw = optional_mapping(body.get("hosts"), "hosts")
        order = [str(name) for name in optional_list(body.get("hostnames"), "hostnames")]
        order += sorted(str(name) for name in hosts_raw if str(name) not in order)

        hosts: dict[str, HostQueueSeries] = {}
        for host_name in order:
            if host_name not in hosts_raw:
                logger.debug(f"Queue payload lists {host_name} without a series")
                continue
            hosts[host_name] = self._parse_host_series(host_name, hosts_raw[host_name])
        return build_model(QueueDepthSeries, "$", cluster_name=cluster_name, hosts=hosts)

    def _parse_host_series(self, host_name: str, raw: Any) -> HostQueueSeries:
        path = f"hosts.{host_name}"
        series = require_mapping(raw, path)
        points: list[QueueDepthPoint] = []
        for position, point_raw in enumerate(
            optional_list(series.get("dataPoints"), f"{path}.dataPoints")
        ):
            point_path = f"{path}.dataPoints.{position}"
            point = require_mapping(point_raw, point_path)
            points.append(
                build_model(
                    QueueDepthPoint,
                    point_path,
                    timestamp=parse_timestamp(point.get("timestamp"), f"{point_path}.timestamp"),
                    queue_depth=first_present(point, "queue", "queueDepth"),
                )
            )
        points.sort(key=lambda point: point.timestamp)
        if self.max_queue_points > 0:
            points = points[-self.max_queue_points:]
        return build_model(
            HostQueueSeries,
            path,
            host_name=host_name,
            data_points=tuple(points),
            total_points_retained=first_present(
                series, "dataPointCount", "totalPointsRetained", default=len(points)
            ),
            total_points_requested=first_present(
                series, "numberOfDataPoints", "totalPointsRequested", default=len(points)
            ),
        )
