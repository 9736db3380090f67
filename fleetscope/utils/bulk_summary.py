"""Bulk write-task aggregation.

Pure functions deriving summary statistics, load classification and display
orderings from a ``ClusterSnapshot``. Nothing here performs I/O or mutates
its input.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from fleetscope.constants.defaults import (
    LOAD_ELEVATED_MAX_DEFAULT,
    LOAD_NORMAL_MAX_DEFAULT,
)
from fleetscope.constants.enums import LoadLevel
from fleetscope.constants.limits import TOP_SHARDS_LIMIT
from fleetscope.models.telemetry.bulk_tasks import (
    ClusterSnapshot,
    DataInconsistency,
    HostTaskSummary,
)

# Host-level counters checked against the sum over the host's shards.
_CHECKED_FIELDS = ("task_count", "request_count", "time_taken_ms")


class _HasTaskCount(Protocol):
    @property
    def task_count(self) -> int: ...


@dataclass(frozen=True)
class LoadThresholds:
    """Upper bounds of the Normal and Elevated load bands."""

    normal_max: int = LOAD_NORMAL_MAX_DEFAULT
    elevated_max: int = LOAD_ELEVATED_MAX_DEFAULT

    def __post_init__(self) -> None:
        if self.normal_max < 0 or self.elevated_max < self.normal_max:
            raise ValueError(
                "load thresholds must satisfy 0 <= normal_max <= elevated_max "
                f"(got {self.normal_max}, {self.elevated_max})"
            )


DEFAULT_LOAD_THRESHOLDS = LoadThresholds()


@dataclass(frozen=True)
class HostTotals:
    """Counters to render for one host."""

    task_count: int
    request_count: int
    time_taken_ms: int
    suspect: bool = False


@dataclass(frozen=True)
class SnapshotSummary:
    """Cluster-wide totals for the summary cards."""

    host_count: int
    index_count: int
    total_tasks: int
    total_requests: int
    total_time_taken_ms: int
    suspect_hosts: tuple[str, ...] = ()


# ============================================================================
# Ordering
# ============================================================================


def rank_by_task_count(entries: Mapping[str, _HasTaskCount]) -> tuple[str, ...]:
    """Return keys ordered by task count descending, name ascending on ties."""
    return tuple(sorted(entries, key=lambda name: (-entries[name].task_count, name)))


def top_shards(host: HostTaskSummary, limit: int = TOP_SHARDS_LIMIT) -> tuple[str, ...]:
    """First ``limit`` shard ids of the host's ordering; truncation is silent."""
    if limit <= 0:
        return ()
    return host.shards_sorted_by_task_count[:limit]


# ============================================================================
# Load classification
# ============================================================================


def classify_load(
    task_count: int,
    thresholds: LoadThresholds = DEFAULT_LOAD_THRESHOLDS,
) -> LoadLevel:
    """Map a task count onto a load band."""
    if task_count <= 0:
        return LoadLevel.IDLE
    if task_count <= thresholds.normal_max:
        return LoadLevel.NORMAL
    if task_count <= thresholds.elevated_max:
        return LoadLevel.ELEVATED
    return LoadLevel.CRITICAL


# ============================================================================
# Consistency
# ============================================================================


def _host_inconsistencies(host_name: str, host: HostTaskSummary) -> list[DataInconsistency]:
    found: list[DataInconsistency] = []
    for field_name in _CHECKED_FIELDS:
        reported = getattr(host, field_name)
        shard_sum = sum(getattr(shard, field_name) for shard in host.by_shard.values())
        if reported != shard_sum:
            found.append(
                DataInconsistency(
                    host=host_name,
                    field_name=field_name,
                    reported=reported,
                    shard_sum=shard_sum,
                )
            )
    return found


def find_inconsistencies(snapshot: ClusterSnapshot) -> list[DataInconsistency]:
    """Every (host, counter) whose host total differs from its shard sum."""
    found: list[DataInconsistency] = []
    for host_name in snapshot.hosts_sorted_by_task_count:
        found.extend(_host_inconsistencies(host_name, snapshot.by_host[host_name]))
    return found


def resolve_host_totals(host: HostTaskSummary, host_name: str = "") -> HostTotals:
    """Values to display for a host.

    Shard sums are the ground truth when the host totals disagree with them;
    the result is then marked suspect.
    """
    issues = _host_inconsistencies(host_name, host)
    if not issues:
        return HostTotals(
            task_count=host.task_count,
            request_count=host.request_count,
            time_taken_ms=host.time_taken_ms,
        )
    shards = host.by_shard.values()
    return HostTotals(
        task_count=sum(shard.task_count for shard in shards),
        request_count=sum(shard.request_count for shard in shards),
        time_taken_ms=sum(shard.time_taken_ms for shard in shards),
        suspect=True,
    )


def ranked_host_totals(snapshot: ClusterSnapshot) -> list[tuple[str, HostTotals]]:
    """Hosts with their display totals, ordered by the resolved task count."""
    totals = {
        host_name: resolve_host_totals(host, host_name)
        for host_name, host in snapshot.by_host.items()
    }
    return [(host_name, totals[host_name]) for host_name in rank_by_task_count(totals)]


# ============================================================================
# Summary
# ============================================================================


def summarize(snapshot: ClusterSnapshot) -> SnapshotSummary:
    """Cluster-wide totals summed over hosts (not indices, which re-project the same tasks)."""
    total_tasks = 0
    total_requests = 0
    total_time = 0
    suspect: list[str] = []
    for host_name in snapshot.hosts_sorted_by_task_count:
        totals = resolve_host_totals(snapshot.by_host[host_name], host_name)
        total_tasks += totals.task_count
        total_requests += totals.request_count
        total_time += totals.time_taken_ms
        if totals.suspect:
            suspect.append(host_name)
    return SnapshotSummary(
        host_count=len(snapshot.by_host),
        index_count=len(snapshot.by_index),
        total_tasks=total_tasks,
        total_requests=total_requests,
        total_time_taken_ms=total_time,
        suspect_hosts=tuple(suspect),
    )


__all__ = [
    "DEFAULT_LOAD_THRESHOLDS",
    "HostTotals",
    "LoadThresholds",
    "SnapshotSummary",
    "classify_load",
    "find_inconsistencies",
    "rank_by_task_count",
    "ranked_host_totals",
    "resolve_host_totals",
    "summarize",
    "top_shards",
]
