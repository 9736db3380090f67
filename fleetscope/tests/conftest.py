"""Shared fixtures for FleetScope tests.

Payload fixtures use the collector's wire format so the same data can be fed
to parsers, the controller (through ``httpx.MockTransport``) and presenters.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

from fleetscope.controllers.telemetry.parsers import BulkTaskParser
from fleetscope.models.state.app_settings import AppSettings
from fleetscope.models.telemetry import (
    AppStatus,
    ClusterListEntry,
    ClusterSnapshot,
    DashboardOverview,
    JobInfo,
    JobTriggerAck,
    QueueDepthSeries,
)

# =============================================================================
# Wire payloads
# =============================================================================

SNAPSHOT_PAYLOAD: dict[str, Any] = {
    "clusterName": "prod-east",
    "snapshot": {
        "dataWriteBulkSTasksByNode": {
            "host-a": {
                "zone": "us-east-1a",
                "totalWriteBulkSTasks": 10,
                "totalWriteBulkSRequests": 20,
                "totalWriteBulkSTimeTakenMs": 1000,
                "dataWriteBulkSByShard": {
                    "logs-1[0]": {"numberOfTasks": 6, "totalRequests": 12, "totalTimeTakenMs": 600},
                    "logs-1[1]": {"numberOfTasks": 4, "totalRequests": 8, "totalTimeTakenMs": 400},
                },
                "sortedShardsOnTasks": ["logs-1[0]", "logs-1[1]"],
            },
            "host-b": {
                "totalWriteBulkSTasks": 30,
                "totalWriteBulkSRequests": 45,
                "totalWriteBulkSTimeTakenMs": 3000,
                "dataWriteBulkSByShard": {
                    "logs-1[2]": {"numberOfTasks": 30, "totalRequests": 45, "totalTimeTakenMs": 3000},
                },
            },
            "host-c": {
                "zone": "us-east-1c",
                "totalWriteBulkSTasks": 20,
                "totalWriteBulkSRequests": 30,
                "totalWriteBulkSTimeTakenMs": 2000,
                "dataWriteBulkSByShard": {
                    "metrics-1[0]": {"numberOfTasks": 20, "totalRequests": 30, "totalTimeTakenMs": 2000},
                },
            },
        },
        "dataWriteBulkSTasksByIndex": {
            "logs-1": {"numberOfTasks": 40, "totalRequests": 65, "totalTimeTakenMs": 4000},
            "metrics-1": {"numberOfTasks": 20, "totalRequests": 30, "totalTimeTakenMs": 2000},
        },
        "sortedHostsOnTasks": ["host-a", "host-b", "host-c"],
        "indicesSortedonTasks": ["logs-1", "metrics-1"],
    },
}


@pytest.fixture
def snapshot_payload() -> dict[str, Any]:
    """A consistent snapshot whose canonical host order is [host-b, host-c, host-a]."""
    return copy.deepcopy(SNAPSHOT_PAYLOAD)


@pytest.fixture
def inconsistent_payload(snapshot_payload: dict[str, Any]) -> dict[str, Any]:
    """host-a reports 12 tasks while its shards sum to 10."""
    snapshot_payload["snapshot"]["dataWriteBulkSTasksByNode"]["host-a"][
        "totalWriteBulkSTasks"
    ] = 12
    return snapshot_payload


@pytest.fixture
def bulk_snapshot(snapshot_payload: dict[str, Any]) -> ClusterSnapshot:
    return BulkTaskParser().parse_snapshot(snapshot_payload, "prod-east")


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(api_base_url="http://collector.test/api")


# =============================================================================
# Fake controller
# =============================================================================


class FakeTelemetryController:
    """In-memory stand-in for TelemetryController used by screen smoke tests."""

    def __init__(self, snapshot: ClusterSnapshot) -> None:
        self.snapshot = snapshot
        self.triggered: list[str] = []
        self.closed = False
        self.reachable = True

    async def check_connection(self) -> bool:
        return self.reachable

    async def list_clusters(self) -> list[ClusterListEntry]:
        return [ClusterListEntry(cluster_name="prod-east")]

    async def list_bulk_task_clusters(self) -> list[ClusterListEntry]:
        return [ClusterListEntry(cluster_name="prod-east")]

    async def get_bulk_task_snapshot(self, cluster_name: str) -> ClusterSnapshot:
        return self.snapshot

    async def get_cluster_nodes(self, cluster_name: str) -> list:
        return []

    async def get_indexing_rate(self, cluster_name: str) -> list:
        return []

    async def get_queue_depth_series(self, cluster_name: str) -> QueueDepthSeries:
        return QueueDepthSeries(cluster_name=cluster_name)

    async def get_jobs(self) -> list[JobInfo]:
        return [JobInfo(name="collect-bulk-tasks", job_type="collector", enabled=True)]

    async def fetch_all(self) -> DashboardOverview:
        return DashboardOverview(
            status=AppStatus(status="UP", cluster_count=1),
            clusters=("prod-east",),
            jobs=tuple(await self.get_jobs()),
        )

    async def trigger_job(self, job_name: str) -> JobTriggerAck:
        self.triggered.append(job_name)
        return JobTriggerAck(job_name=job_name)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_controller(bulk_snapshot: ClusterSnapshot) -> FakeTelemetryController:
    return FakeTelemetryController(bulk_snapshot)
