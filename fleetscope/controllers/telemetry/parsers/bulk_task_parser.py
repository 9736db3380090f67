"""Bulk task parser - validates snapshot payloads into ClusterSnapshot models."""

from __future__ import annotations

import logging
from typing import Any

from fleetscope.controllers.telemetry.parsers._common import (
    build_model,
    optional_list,
    optional_mapping,
    require_mapping,
)
from fleetscope.errors import MalformedSnapshot
from fleetscope.models.telemetry.bulk_tasks import (
    ClusterListEntry,
    ClusterSnapshot,
    HostTaskSummary,
    IndexTaskSummary,
    ShardTaskSummary,
)
from fleetscope.utils.bulk_summary import rank_by_task_count

logger = logging.getLogger(__name__)


class BulkTaskParser:
    """Parses bulk write-task payloads into validated snapshot models.

    Ordering fields on the wire are treated as hints: every name they carry
    must exist in the matching mapping, but the stored order is always
    recomputed from the task counts.
    """

    # Wire keys
    _BY_HOST = "dataWriteBulkSTasksByNode"
    _BY_INDEX = "dataWriteBulkSTasksByIndex"
    _BY_SHARD = "dataWriteBulkSByShard"
    _HOST_ORDER = "sortedHostsOnTasks"
    _INDEX_ORDER = "indicesSortedonTasks"
    _SHARD_ORDER = "sortedShardsOnTasks"

    def parse_snapshot(self, payload: Any, cluster_name: str) -> ClusterSnapshot:
        """Parse a snapshot response for ``cluster_name``.

        Accepts ``{"clusterName": ..., "snapshot": {...}}`` or the bare
        snapshot object.

        Raises:
            MalformedSnapshot: If the payload violates the snapshot schema.
        """
        body = require_mapping(payload, "$")
        name = body.get("clusterName") or cluster_name
        snapshot = require_mapping(body.get("snapshot", body), "snapshot")

        hosts_raw = optional_mapping(snapshot.get(self._BY_HOST), self._BY_HOST)
        by_host = {
            str(host_name): self._parse_host(str(host_name), raw)
            for host_name, raw in hosts_raw.items()
        }

        indices_raw = optional_mapping(snapshot.get(self._BY_INDEX), self._BY_INDEX)
        by_index = {
            str(index_name): self._parse_counters(
                IndexTaskSummary, raw, f"{self._BY_INDEX}.{index_name}"
            )
            for index_name, raw in indices_raw.items()
        }

        return build_model(
            ClusterSnapshot,
            "snapshot",
            cluster_name=name,
            by_host=by_host,
            by_index=by_index,
            hosts_sorted_by_task_count=self._resolve_order(
                by_host, snapshot.get(self._HOST_ORDER), self._HOST_ORDER
            ),
            indices_sorted_by_task_count=self._resolve_order(
                by_index, snapshot.get(self._INDEX_ORDER), self._INDEX_ORDER
            ),
        )

    def parse_cluster_list(self, payload: Any) -> list[ClusterListEntry]:
        """Parse ``{"clusters": [...]}`` where entries are names or ``{clusterName}``."""
        body = require_mapping(payload, "$")
        entries: list[ClusterListEntry] = []
        seen: set[str] = set()
        for position, raw in enumerate(optional_list(body.get("clusters"), "clusters")):
            name = raw.get("clusterName") if isinstance(raw, dict) else raw
            entry = build_model(
                ClusterListEntry, f"clusters.{position}", cluster_name=name
            )
            if entry.cluster_name in seen:
                logger.debug(f"Ignoring duplicate cluster entry {entry.cluster_name}")
                continue
            seen.add(entry.cluster_name)
            entries.append(entry)
        return entries

    # ========================================================================
    # Helpers
    # ========================================================================

    def _parse_host(self, host_name: str, raw: Any) -> HostTaskSummary:
        path = f"{self._BY_HOST}.{host_name}"
        host = require_mapping(raw, path)
        shards_raw = optional_mapping(host.get(self._BY_SHARD), f"{path}.{self._BY_SHARD}")
        by_shard = {
            str(shard_id): self._parse_counters(
                ShardTaskSummary, shard, f"{path}.{self._BY_SHARD}.{shard_id}"
            )
            for shard_id, shard in shards_raw.items()
        }
        return build_model(
            HostTaskSummary,
            path,
            zone=host.get("zone") or None,
            task_count=host.get("totalWriteBulkSTasks"),
            request_count=host.get("totalWriteBulkSRequests"),
            time_taken_ms=host.get("totalWriteBulkSTimeTakenMs"),
            by_shard=by_shard,
            shards_sorted_by_task_count=self._resolve_order(
                by_shard, host.get(self._SHARD_ORDER), f"{path}.{self._SHARD_ORDER}"
            ),
        )

    def _parse_counters(
        self,
        model_cls: type[ShardTaskSummary] | type[IndexTaskSummary],
        raw: Any,
        path: str,
    ) -> Any:
        counters = require_mapping(raw, path)
        return build_model(
            model_cls,
            path,
            task_count=counters.get("numberOfTasks"),
            request_count=counters.get("totalRequests"),
            time_taken_ms=counters.get("totalTimeTakenMs"),
        )

    def _resolve_order(
        self, entries: dict[str, Any], hint: Any, path: str
    ) -> tuple[str, ...]:
        canonical = rank_by_task_count(entries)
        if hint is None:
            return canonical
        names = [str(name) for name in optional_list(hint, path)]
        unknown = [name for name in names if name not in entries]
        if unknown:
            raise MalformedSnapshot(
                f"ordering references unknown keys: {', '.join(unknown)}", field=path
            )
        if tuple(names) != canonical:
            logger.debug(f"Recomputed ordering for {path}; upstream hint was stale")
        return canonical
