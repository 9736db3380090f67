"""Bulk write-task snapshot models.

One ``ClusterSnapshot`` captures a cluster's in-flight bulk write tasks at a
point in time, grouped by host (with per-shard breakdown) and by index.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fleetscope.utils.formatters import round_half_up

Counter = Annotated[int, Field(ge=0, strict=True)]


def _check_bijection(order: tuple[str, ...], keys: dict, label: str) -> None:
    if len(set(order)) != len(order):
        raise ValueError(f"{label} contains duplicate entries")
    unknown = [name for name in order if name not in keys]
    if unknown:
        raise ValueError(f"{label} references unknown keys: {', '.join(unknown)}")
    ordered = set(order)
    missing = [name for name in keys if name not in ordered]
    if missing:
        raise ValueError(f"{label} is missing keys: {', '.join(missing)}")


class ShardTaskSummary(BaseModel):
    """Write-task counters for one shard on one host."""

    model_config = ConfigDict(frozen=True)

    task_count: Counter
    request_count: Counter
    time_taken_ms: Counter


class HostTaskSummary(BaseModel):
    """Write-task counters for one host, with per-shard breakdown."""

    model_config = ConfigDict(frozen=True)

    zone: str | None = None
    task_count: Counter
    request_count: Counter
    time_taken_ms: Counter
    by_shard: dict[str, ShardTaskSummary] = Field(default_factory=dict)
    shards_sorted_by_task_count: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _shard_order_matches_keys(self) -> HostTaskSummary:
        _check_bijection(
            self.shards_sorted_by_task_count, self.by_shard, "shards_sorted_by_task_count"
        )
        return self

    @property
    def shard_count(self) -> int:
        return len(self.by_shard)


class IndexTaskSummary(BaseModel):
    """Write-task counters for one index across all hosts."""

    model_config = ConfigDict(frozen=True)

    task_count: Counter
    request_count: Counter
    time_taken_ms: Counter

    @property
    def average_time_per_task_ms(self) -> int:
        """Mean time per task in milliseconds, rounded half-up; 0 when idle."""
        if self.task_count == 0:
            return 0
        return round_half_up(self.time_taken_ms / self.task_count)


class ClusterSnapshot(BaseModel):
    """Bulk write-task state of one cluster at one point in time."""

    model_config = ConfigDict(frozen=True)

    cluster_name: str = Field(min_length=1)
    by_host: dict[str, HostTaskSummary] = Field(default_factory=dict)
    by_index: dict[str, IndexTaskSummary] = Field(default_factory=dict)
    hosts_sorted_by_task_count: tuple[str, ...] = ()
    indices_sorted_by_task_count: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _orders_match_keys(self) -> ClusterSnapshot:
        _check_bijection(
            self.hosts_sorted_by_task_count, self.by_host, "hosts_sorted_by_task_count"
        )
        _check_bijection(
            self.indices_sorted_by_task_count, self.by_index, "indices_sorted_by_task_count"
        )
        return self


class ClusterListEntry(BaseModel):
    """A selectable cluster."""

    model_config = ConfigDict(frozen=True)

    cluster_name: str = Field(min_length=1)


class DataInconsistency(BaseModel):
    """A host-level total that disagrees with the sum over its shards.

    Non-fatal: the shard sum is rendered and the host total is flagged.
    """

    model_config = ConfigDict(frozen=True)

    host: str
    field_name: str
    reported: int
    shard_sum: int

    @property
    def message(self) -> str:
        return (
            f"host {self.host}: {self.field_name} reported {self.reported}, "
            f"shards sum to {self.shard_sum}"
        )


__all__ = [
    "ClusterListEntry",
    "ClusterSnapshot",
    "DataInconsistency",
    "HostTaskSummary",
    "IndexTaskSummary",
    "ShardTaskSummary",
]
