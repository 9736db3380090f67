"""Unit tests for the bulk write-task snapshot models.

This module tests:
- Counter validation (strict non-negative integers)
- Ordering/mapping bijection checks on hosts, shards and indices
- Derived values (shard_count, average_time_per_task_ms)
- Immutability of accepted snapshots
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fleetscope.models.telemetry import (
    ClusterSnapshot,
    DataInconsistency,
    HostTaskSummary,
    IndexTaskSummary,
    ShardTaskSummary,
)


def _shard(tasks: int = 1) -> ShardTaskSummary:
    return ShardTaskSummary(task_count=tasks, request_count=tasks, time_taken_ms=tasks * 10)


def _host(shards: dict[str, ShardTaskSummary], order: tuple[str, ...] | None = None) -> HostTaskSummary:
    return HostTaskSummary(
        task_count=sum(s.task_count for s in shards.values()),
        request_count=sum(s.request_count for s in shards.values()),
        time_taken_ms=sum(s.time_taken_ms for s in shards.values()),
        by_shard=shards,
        shards_sorted_by_task_count=tuple(shards) if order is None else order,
    )


class TestCounters:
    """Test counter validation on the leaf models."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_zero_counters_are_valid(self) -> None:
        shard = ShardTaskSummary(task_count=0, request_count=0, time_taken_ms=0)
        assert shard.task_count == 0

    @pytest.mark.unit
    @pytest.mark.fast
    @pytest.mark.parametrize("value", [-1, 1.5, "3", True, None])
    def test_invalid_counter_rejected(self, value: object) -> None:
        with pytest.raises(ValidationError):
            ShardTaskSummary(task_count=value, request_count=0, time_taken_ms=0)

    @pytest.mark.unit
    @pytest.mark.fast
    def test_models_are_frozen(self) -> None:
        shard = _shard()
        with pytest.raises(ValidationError):
            shard.task_count = 5  # type: ignore[misc]


class TestOrderingBijection:
    """Test that ordering sequences match their mappings exactly."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_host_shard_order_must_cover_all_shards(self) -> None:
        with pytest.raises(ValidationError, match="missing keys"):
            _host({"s0": _shard(2), "s1": _shard(1)}, order=("s0",))

    @pytest.mark.unit
    @pytest.mark.fast
    def test_host_shard_order_rejects_unknown_shard(self) -> None:
        with pytest.raises(ValidationError, match="unknown keys"):
            _host({"s0": _shard()}, order=("s0", "ghost"))

    @pytest.mark.unit
    @pytest.mark.fast
    def test_order_rejects_duplicates(self) -> None:
        with pytest.raises(ValidationError, match="duplicate"):
            _host({"s0": _shard()}, order=("s0", "s0"))

    @pytest.mark.unit
    @pytest.mark.fast
    def test_snapshot_host_order_must_match_hosts(self) -> None:
        with pytest.raises(ValidationError):
            ClusterSnapshot(
                cluster_name="c1",
                by_host={"h1": _host({"s0": _shard()})},
                hosts_sorted_by_task_count=(),
            )

    @pytest.mark.unit
    @pytest.mark.fast
    def test_empty_snapshot_is_valid(self) -> None:
        snapshot = ClusterSnapshot(cluster_name="c1")
        assert snapshot.by_host == {}
        assert snapshot.indices_sorted_by_task_count == ()

    @pytest.mark.unit
    @pytest.mark.fast
    def test_cluster_name_required(self) -> None:
        with pytest.raises(ValidationError):
            ClusterSnapshot(cluster_name="")


class TestDerivedValues:
    """Test computed properties."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_shard_count(self) -> None:
        host = _host({"s0": _shard(3), "s1": _shard(1)})
        assert host.shard_count == 2

    @pytest.mark.unit
    @pytest.mark.fast
    def test_average_time_rounds_half_up(self) -> None:
        index = IndexTaskSummary(task_count=10, request_count=10, time_taken_ms=25)
        assert index.average_time_per_task_ms == 3

    @pytest.mark.unit
    @pytest.mark.fast
    def test_average_time_zero_tasks(self) -> None:
        index = IndexTaskSummary(task_count=0, request_count=0, time_taken_ms=0)
        assert index.average_time_per_task_ms == 0

    @pytest.mark.unit
    @pytest.mark.fast
    def test_inconsistency_message(self) -> None:
        issue = DataInconsistency(host="h1", field_name="task_count", reported=12, shard_sum=10)
        assert issue.message == "host h1: task_count reported 12, shards sum to 10"
