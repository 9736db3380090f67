"""Unit tests for ClusterParser and JobParser."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from fleetscope.controllers.telemetry.parsers import ClusterParser, JobParser, parse_timestamp
from fleetscope.errors import MalformedSnapshot

EPOCH_MS = 1_700_000_000_000


class TestParseTimestamp:
    """Test timestamp parsing."""

    @pytest.mark.unit
    @pytest.mark.fast
    def test_epoch_millis(self) -> None:
        parsed = parse_timestamp(EPOCH_MS, "ts")
        assert parsed == datetime.fromtimestamp(EPOCH_MS / 1000, tz=timezone.utc)
        assert parsed.tzinfo is not None

    @pytest.mark.unit
    @pytest.mark.fast
    def test_iso_string_with_z(self) -> None:
        parsed = parse_timestamp("2024-05-01T12:00:00Z", "ts")
        assert parsed == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    @pytest.mark.unit
    @pytest.mark.fast
    @pytest.mark.parametrize("value", ["yesterday", True, None, [1]])
    def test_invalid_values(self, value: object) -> None:
        with pytest.raises(MalformedSnapshot):
            parse_timestamp(value, "ts")

    @pytest.mark.unit
    @pytest.mark.fast
    @pytest.mark.parametrize("value", [10**20, -(10**20), float("nan"), float("inf")])
    def test_out_of_range_epoch(self, value: float) -> None:
        with pytest.raises(MalformedSnapshot) as excinfo:
            parse_timestamp(value, "ts")
        assert excinfo.value.field == "ts"


class TestClusterParser:
    """Test node, indexing rate and queue series parsing."""

    @pytest.mark.unit
    def test_parse_nodes(self) -> None:
        nodes = ClusterParser().parse_nodes(
            {
                "nodes": [
                    {
                        "hostName": "es-data-1",
                        "ipAddress": "10.0.0.1",
                        "port": 9300,
                        "type": ["data", "ingest"],
                        "zone": "us-east-1a",
                        "nodeTier": "hot",
                    },
                    {"hostName": "es-master-1", "type": "master"},
                ]
            }
        )
        assert nodes[0].roles == ("data", "ingest")
        assert nodes[0].tier == "hot"
        assert nodes[1].roles == ("master",)
        assert nodes[1].zone is None

    @pytest.mark.unit
    def test_parse_nodes_requires_host_name(self) -> None:
        with pytest.raises(MalformedSnapshot) as exc_info:
            ClusterParser().parse_nodes({"nodes": [{"ipAddress": "10.0.0.1"}]})
        assert exc_info.value.field.startswith("nodes.0")

    @pytest.mark.unit
    def test_parse_indexing_rates(self) -> None:
        rates = ClusterParser().parse_indexing_rates(
            {
                "indices": {
                    "logs-1": {
                        "numberOfShards": 3,
                        "fromCreation": 12.5,
                        "last3Minutes": 1.25,
                        "last15Minutes": None,
                        "last60Minutes": 0.5,
                    }
                }
            }
        )
        assert len(rates) == 1
        assert rates[0].shard_count == 3
        assert rates[0].last_3m == 1.25
        assert rates[0].last_15m is None

    @pytest.mark.unit
    def test_queue_series_keeps_newest_points_in_order(self) -> None:
        parser = ClusterParser(max_queue_points=2)
        series = parser.parse_queue_series(
            {
                "hostnames": ["host-b", "host-a"],
                "hosts": {
                    "host-a": {
                        "dataPoints": [
                            {"timestamp": EPOCH_MS + 2000, "queue": 7},
                            {"timestamp": EPOCH_MS, "queue": 5},
                            {"timestamp": EPOCH_MS + 1000, "queue": 9},
                        ],
                        "dataPointCount": 3,
                        "numberOfDataPoints": 40,
                    },
                    "host-b": {"dataPoints": []},
                },
            },
            "prod-east",
        )
        assert list(series.hosts) == ["host-b", "host-a"]
        host_a = series.hosts["host-a"]
        assert [point.queue_depth for point in host_a.data_points] == [9, 7]
        assert host_a.total_points_retained == 3
        assert host_a.total_points_requested == 40
        assert host_a.latest_depth == 7
        assert host_a.peak_depth == 9
        assert series.hosts["host-b"].latest_depth is None

    @pytest.mark.unit
    def test_queue_series_skips_listed_host_without_data(self) -> None:
        series = ClusterParser().parse_queue_series(
            {"hostnames": ["host-a"], "hosts": {}}, "prod-east"
        )
        assert series.hosts == {}

    @pytest.mark.unit
    def test_queue_series_out_of_range_timestamp_is_malformed(self) -> None:
        payload = {"hosts": {"h": {"dataPoints": [{"timestamp": 10**20, "queue": 1}]}}}
        with pytest.raises(MalformedSnapshot) as excinfo:
            ClusterParser().parse_queue_series(payload, "prod-east")
        assert excinfo.value.field == "hosts.h.dataPoints.0.timestamp"


class TestJobParser:
    """Test status, job and trigger parsing."""

    @pytest.mark.unit
    def test_parse_status_with_cluster_list(self) -> None:
        status = JobParser().parse_status(
            {"status": "UP", "clusters": ["a", "b"], "ratesTracked": 12}
        )
        assert status.status == "UP"
        assert status.cluster_count == 2
        assert status.rates_tracked == 12

    @pytest.mark.unit
    def test_parse_status_defaults(self) -> None:
        status = JobParser().parse_status({})
        assert status.status == "unknown"
        assert status.cluster_count == 0

    @pytest.mark.unit
    def test_parse_jobs(self) -> None:
        jobs = JobParser().parse_jobs(
            {
                "jobs": [
                    {
                        "name": "collect-bulk-tasks",
                        "type": "collector",
                        "enabled": True,
                        "lastStatus": "success",
                        "runCount": 42,
                        "lastRun": EPOCH_MS,
                    },
                    {"name": "prune", "enabled": False},
                ]
            }
        )
        assert jobs[0].job_type == "collector"
        assert jobs[0].run_count == 42
        assert jobs[0].last_run is not None
        assert jobs[1].last_run is None
        assert jobs[1].run_count == 0

    @pytest.mark.unit
    def test_trigger_ack_empty_body(self) -> None:
        ack = JobParser().parse_trigger_ack(None, "prune")
        assert ack.job_name == "prune"
        assert ack.message is None

    @pytest.mark.unit
    def test_trigger_ack_message(self) -> None:
        ack = JobParser().parse_trigger_ack({"message": "queued"}, "prune")
        assert ack.message == "queued"
