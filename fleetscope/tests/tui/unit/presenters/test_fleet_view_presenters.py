"""Unit tests for the dashboard, jobs, queue, indexing-rate and nodes presenters."""

from __future__ import annotations

import asyncio
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from fleetscope.errors import TransportFailure
from fleetscope.models.telemetry import (
    AppStatus,
    ClusterListEntry,
    DashboardOverview,
    HostQueueSeries,
    IndexingRate,
    JobInfo,
    JobTriggerAck,
    NodeInfo,
    QueueDepthSeries,
)
from fleetscope.screens.base_presenter import FLEET_TARGET, TelemetryLoaded
from fleetscope.screens.dashboard.presenter import DashboardPresenter
from fleetscope.screens.indexing_rate.presenter import IndexingRatePresenter
from fleetscope.screens.jobs.presenter import JobsPresenter
from fleetscope.screens.nodes.presenter import NodesPresenter
from fleetscope.screens.queue.presenter import QueuePresenter

# =============================================================================
# Test Fixtures
# =============================================================================


class MockScreen:
    """Mock screen recording posted messages."""

    def __init__(self) -> None:
        self.app = MagicMock()
        self._messages: list = []

    def post_message(self, message: object) -> None:
        self._messages.append(message)


async def settle() -> None:
    for _ in range(5):
        await asyncio.sleep(0)


def _jobs(count: int) -> tuple[JobInfo, ...]:
    return tuple(
        JobInfo(
            name=f"job-{i}",
            job_type="collector",
            enabled=i % 2 == 0,
            last_status="success" if i < 3 else "failed",
            run_count=i,
            last_run=datetime(2024, 5, 1, 12, 0, i) if i else None,
        )
        for i in range(count)
    )


def _cluster_controller(**methods: object) -> MagicMock:
    controller = MagicMock()
    controller.list_clusters = AsyncMock(
        return_value=[ClusterListEntry(cluster_name="prod-east")]
    )
    for name, value in methods.items():
        setattr(controller, name, AsyncMock(return_value=value))
    return controller


# =============================================================================
# Dashboard
# =============================================================================


class TestDashboardPresenter:
    """Test dashboard formatting."""

    @pytest.mark.asyncio
    async def test_loads_overview(self) -> None:
        overview = DashboardOverview(
            status=AppStatus(status="UP", cluster_count=7, rates_tracked=4),
            clusters=tuple(f"cluster-{i}" for i in range(7)),
            jobs=_jobs(6),
        )
        controller = MagicMock()
        controller.fetch_all = AsyncMock(return_value=overview)
        screen = MockScreen()
        presenter = DashboardPresenter(screen, controller, 30)

        await presenter.start()
        await settle()

        assert presenter.overview is overview
        assert presenter.poller.target == FLEET_TARGET
        assert any(isinstance(m, TelemetryLoaded) for m in screen._messages)
        assert "Status: UP" in presenter.get_status_text()

        clusters_text = presenter.get_clusters_text().splitlines()
        assert clusters_text[0] == "Total clusters: 7"
        assert clusters_text[1:6] == [f"- cluster-{i}" for i in range(5)]
        assert clusters_text[-1] == "... and 2 more"

        assert presenter.get_job_counts() == (6, 3, 3)
        rows = presenter.get_recent_job_rows()
        assert len(rows) == 5
        assert rows[0][1][3] == "Never"
        assert rows[1][1][3] == "2024-05-01 12:00:01"
        presenter.close()

    @pytest.mark.unit
    @pytest.mark.fast
    def test_empty_state(self) -> None:
        presenter = DashboardPresenter(MockScreen(), MagicMock(), 30)
        assert presenter.get_status_text() == "Status: Unknown"
        assert presenter.get_clusters_text() == "Total clusters: 0"
        assert presenter.get_job_counts() == (0, 0, 0)
        assert presenter.get_recent_job_rows() == []

    @pytest.mark.unit
    @pytest.mark.fast
    def test_no_more_line_for_five_clusters(self) -> None:
        presenter = DashboardPresenter(MockScreen(), MagicMock(), 30)
        presenter._handle_result(
            FLEET_TARGET,
            DashboardOverview(
                status=AppStatus(status="UP"), clusters=tuple("abcde")
            ),
        )
        assert "more" not in presenter.get_clusters_text()


# =============================================================================
# Jobs
# =============================================================================


class TestJobsPresenter:
    """Test job rows and triggering."""

    @pytest.mark.asyncio
    async def test_job_rows(self) -> None:
        controller = MagicMock()
        controller.get_jobs = AsyncMock(return_value=list(_jobs(2)))
        presenter = JobsPresenter(MockScreen(), controller, 30)

        await presenter.start()
        await settle()

        rows = presenter.get_job_rows()
        assert [key for key, _ in rows] == ["job-0", "job-1"]
        assert rows[0][1] == ("job-0", "collector", "Yes", "success", "0", "Never")
        assert rows[1][1][2] == "No"
        presenter.close()

    @pytest.mark.asyncio
    async def test_trigger_schedules_follow_up_refresh(self) -> None:
        controller = MagicMock()
        controller.get_jobs = AsyncMock(return_value=list(_jobs(1)))
        controller.trigger_job = AsyncMock(return_value=JobTriggerAck(job_name="job-0"))
        presenter = JobsPresenter(MockScreen(), controller, 30, followup_delay=0.01)
        await presenter.start()
        await settle()
        assert controller.get_jobs.await_count == 1

        ack = await presenter.trigger_job("job-0")
        await asyncio.sleep(0.05)

        assert ack.job_name == "job-0"
        controller.trigger_job.assert_awaited_once_with("job-0")
        assert controller.get_jobs.await_count == 2
        presenter.close()

    @pytest.mark.asyncio
    async def test_trigger_failure_propagates(self) -> None:
        controller = MagicMock()
        controller.get_jobs = AsyncMock(return_value=[])
        controller.trigger_job = AsyncMock(side_effect=TransportFailure("trigger_job", "boom"))
        presenter = JobsPresenter(MockScreen(), controller, 30, followup_delay=0.01)
        await presenter.start()
        await settle()

        with pytest.raises(TransportFailure):
            await presenter.trigger_job("job-0")
        await asyncio.sleep(0.05)

        assert controller.get_jobs.await_count == 1
        presenter.close()


# =============================================================================
# Cluster-scoped views
# =============================================================================


class TestQueuePresenter:
    """Test queue series access."""

    @pytest.mark.asyncio
    async def test_host_series_order(self) -> None:
        series = QueueDepthSeries(
            cluster_name="prod-east",
            hosts={
                "host-b": HostQueueSeries(host_name="host-b"),
                "host-a": HostQueueSeries(host_name="host-a"),
            },
        )
        controller = _cluster_controller(get_queue_depth_series=series)
        presenter = QueuePresenter(MockScreen(), controller, 60)

        await presenter.start()
        await settle()

        assert [s.host_name for s in presenter.get_host_series()] == ["host-b", "host-a"]
        controller.get_queue_depth_series.assert_awaited_with("prod-east")
        presenter.close()

    @pytest.mark.asyncio
    async def test_empty_series_message(self) -> None:
        controller = _cluster_controller(
            get_queue_depth_series=QueueDepthSeries(cluster_name="prod-east")
        )
        presenter = QueuePresenter(MockScreen(), controller, 60)
        await presenter.start()
        await settle()

        assert presenter.get_host_series() == []
        assert "No queue depth samples" in presenter.get_empty_message()
        presenter.close()


class TestIndexingRatePresenter:
    """Test indexing rate rows."""

    @pytest.mark.asyncio
    async def test_rows_sorted_by_name(self) -> None:
        rates = [
            IndexingRate(index_name="metrics-1", shard_count=1, last_3m=0.5),
            IndexingRate(index_name="logs-1", shard_count=3, from_creation=12.3456),
        ]
        controller = _cluster_controller(get_indexing_rate=rates)
        presenter = IndexingRatePresenter(MockScreen(), controller, 60)

        await presenter.start()
        await settle()
        rows = presenter.get_rate_rows()

        assert [key for key, _ in rows] == ["logs-1", "metrics-1"]
        assert rows[0][1] == ("logs-1", "3", "12.346", "N/A", "N/A", "N/A")
        assert rows[1][1][3] == "0.500"
        presenter.close()


class TestNodesPresenter:
    """Test node rows."""

    @pytest.mark.asyncio
    async def test_rows(self) -> None:
        nodes = [
            NodeInfo(
                host_name="es-1",
                ip_address="10.0.0.1",
                port=9300,
                roles=("data", "ingest"),
                zone="us-east-1a",
                tier="hot",
            ),
            NodeInfo(host_name="es-1", port=9301),
        ]
        controller = _cluster_controller(get_cluster_nodes=nodes)
        presenter = NodesPresenter(MockScreen(), controller, 60)

        await presenter.start()
        await settle()
        rows = presenter.get_node_rows()

        assert [key for key, _ in rows] == ["es-1", "es-1#1"]
        assert rows[0][1] == ("es-1", "10.0.0.1", "9300", "data, ingest", "us-east-1a", "hot")
        assert rows[1][1] == ("es-1", "N/A", "9301", "N/A", "N/A", "N/A")
        presenter.close()
